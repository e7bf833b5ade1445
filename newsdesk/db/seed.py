"""Sample content loaded into a fresh storage."""

from typing import List

from ..models import ArticleCreate, ArticleStatus, Category


def create_sample_articles() -> List[ArticleCreate]:
    """Create the default front-page articles."""
    return [
        ArticleCreate(
            title="Parliament Passes Historic Education Reform Bill",
            slug="parliament-passes-education-reform-bill",
            excerpt=(
                "The National Assembly unanimously approves comprehensive education reforms "
                "that will transform Kenya's learning landscape for generations to come."
            ),
            content=(
                "# Parliament Passes Historic Education Reform Bill\n\n"
                "In a historic vote that marks a significant milestone for Kenya's education "
                "sector, the National Assembly unanimously approved comprehensive education "
                "reforms that promise to transform the country's learning landscape for "
                "generations to come.\n\n"
                "The landmark legislation, which has been in development for over two years, "
                "introduces sweeping changes to curriculum delivery, teacher training standards, "
                "and infrastructure development across all levels of education from primary to "
                "tertiary institutions.\n\n"
                "## Key Provisions of the Reform\n\n"
                "Among the most significant changes introduced by the bill is the mandatory "
                "integration of digital literacy programs starting from primary school level. "
                "This initiative aims to bridge the digital divide and ensure that all Kenyan "
                "students are equipped with essential technology skills needed for the modern "
                "workforce.\n\n"
                "The reforms also establish new minimum standards for teacher qualification and "
                "introduce continuous professional development requirements that will see "
                "educators receive regular training updates to keep pace with evolving "
                "educational methodologies and technologies."
            ),
            category=Category.POLITICS,
            author="Sarah Kimani",
            featured_image=(
                "https://images.unsplash.com/photo-1580902394724-b08ff9ba7e8a"
                "?ixlib=rb-4.0.3&auto=format&fit=crop&w=1200&h=600"
            ),
            tags=["education", "politics", "parliament", "reform"],
            status=ArticleStatus.PUBLISHED,
            read_time=5,
        ),
        ArticleCreate(
            title="Harambee Stars Qualify for AFCON 2024 After Dramatic Victory",
            slug="harambee-stars-qualify-afcon-2024",
            excerpt=(
                "Kenya's national football team secured their spot in the Africa Cup of "
                "Nations with a thrilling 2-1 victory over their rivals in Nairobi."
            ),
            content=(
                "# Harambee Stars Qualify for AFCON 2024\n\n"
                "Kenya's national football team, Harambee Stars, has officially qualified for "
                "the 2024 Africa Cup of Nations following a dramatic 2-1 victory at Kasarani "
                "Stadium in Nairobi.\n\n"
                "The match was a nail-biting affair that kept fans on the edge of their seats "
                "until the final whistle. Goals from Michael Olunga and Masoud Juma secured the "
                "crucial victory that Kenya needed to book their place in the continental "
                "showpiece.\n\n"
                "## Match Highlights\n\n"
                "The first half saw both teams create numerous chances, but it was Kenya who "
                "broke the deadlock in the 38th minute through a well-worked team move finished "
                "by Olunga.\n\n"
                "The visitors equalized just before halftime, setting up a tense second half "
                "where both teams pushed for the winning goal that would determine their AFCON "
                "fate."
            ),
            category=Category.FOOTBALL,
            author="Peter Otieno",
            featured_image=(
                "https://images.unsplash.com/photo-1553778263-73a83bab9b0c"
                "?ixlib=rb-4.0.3&auto=format&fit=crop&w=1200&h=600"
            ),
            tags=["football", "harambee stars", "afcon", "sports"],
            status=ArticleStatus.PUBLISHED,
            read_time=4,
        ),
        ArticleCreate(
            title="Kenya's Tech Hubs Leading Africa's Digital Revolution",
            slug="kenya-tech-hubs-digital-revolution",
            excerpt=(
                "From Silicon Savannah to iHub, Kenya's technology ecosystem continues to "
                "foster innovation and entrepreneurship across the continent."
            ),
            content=(
                "# Kenya's Tech Hubs Leading Africa's Digital Revolution\n\n"
                "Kenya has emerged as a leading technology hub in Africa, with innovations "
                "emanating from Nairobi's Silicon Savannah reaching global audiences and "
                "transforming lives across the continent.\n\n"
                "## The Rise of Silicon Savannah\n\n"
                "Nairobi's technology ecosystem has grown exponentially over the past decade, "
                "with numerous tech hubs, incubators, and accelerators supporting startups and "
                "established companies alike.\n\n"
                "iHub, one of the pioneering tech hubs in Africa, has been instrumental in "
                "nurturing local talent and providing a platform for innovation. The hub has "
                "supported over 400 startups and created thousands of jobs in the technology "
                "sector.\n\n"
                "## Innovation Across Sectors\n\n"
                "Kenyan tech companies are making significant impacts across various sectors:\n\n"
                "- **Fintech**: M-Pesa revolutionized mobile money globally\n"
                "- **Agritech**: Solutions helping farmers optimize crop yields\n"
                "- **Healthtech**: Digital health platforms improving access to healthcare\n"
                "- **Edtech**: Educational technologies transforming learning experiences"
            ),
            category=Category.EDUCATION,
            author="James Mwangi",
            featured_image=(
                "https://images.unsplash.com/photo-1556761175-b413da4baf72"
                "?ixlib=rb-4.0.3&auto=format&fit=crop&w=1200&h=600"
            ),
            tags=["technology", "startups", "innovation", "silicon savannah"],
            status=ArticleStatus.PUBLISHED,
            read_time=7,
        ),
    ]
