from newsdesk.content import estimate_read_time, extract_excerpt, slugify, truncate_text


def test_slugify():
    assert slugify("Hello World!!") == "hello-world"
    assert slugify("  --Kenya's Tech Hubs--  ") == "kenya-s-tech-hubs"
    assert slugify("AFCON 2024: Stars qualify") == "afcon-2024-stars-qualify"
    assert slugify("!!!") == ""


def test_estimate_read_time():
    assert estimate_read_time("") == 1
    assert estimate_read_time("word " * 200) == 1
    assert estimate_read_time("word " * 201) == 2
    assert estimate_read_time("word " * 1000, words_per_minute=250) == 4


def test_extract_excerpt_strips_markdown():
    content = "# Heading\n\nSome **bold** and *italic* with a [link](http://x.y).\n\n- item"
    assert extract_excerpt(content) == "Heading Some bold and italic with a link. item"


def test_truncate_text_cuts_on_word_boundary():
    assert truncate_text("short", 10) == "short"
    assert truncate_text("the quick brown fox", 12) == "the quick..."
