from blog_seo.outline import extract_outline, heading_anchor


def test_extracts_h2_to_h4_in_order():
    html = (
        "<h1>Title</h1>"
        "<h2>Getting Started</h2><p>text</p>"
        "<h3>Install &amp; Setup</h3>"
        "<h4>Step 1</h4>"
        "<h5>Ignored</h5>"
    )
    outline = extract_outline(html)

    assert [(h.id, h.text, h.level) for h in outline] == [
        ("heading-0-getting-started", "Getting Started", 2),
        ("heading-1-install-setup", "Install & Setup", 3),
        ("heading-2-step-1", "Step 1", 4),
    ]


def test_empty_content():
    assert extract_outline("") == []
    assert extract_outline("<p>No headings here</p>") == []


def test_heading_anchor():
    assert heading_anchor(3, "What's Next?") == "heading-3-what-s-next-"


def test_to_dict():
    heading = extract_outline("<h2>Intro</h2>")[0]
    assert heading.to_dict() == {"id": "heading-0-intro", "text": "Intro", "level": 2}


def test_anchor_uses_raw_text_of_nested_markup():
    heading = extract_outline("<h2>A<b>B</b></h2>")[0]
    assert heading.id == "heading-0-ab"
    assert heading.text == "AB"


def test_display_text_is_stripped_but_anchor_is_not():
    heading = extract_outline("<h3>  Setup </h3>")[0]
    assert heading.text == "Setup"
    assert heading.id == "heading-0--setup-"
