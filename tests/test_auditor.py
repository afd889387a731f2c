import httpx

from blog_seo.auditor import audit_url, extract_post_fields, normalize_url, slug_from_url
from blog_seo.config import Settings

POST_URL = "https://blog.example.com/post/react-hooks-guide"

PAGE = """<html>
<head>
  <title>React Hooks Guide | My Blog</title>
  <meta name="description" content="  Learn hooks.  ">
</head>
<body>
  <nav>Menu</nav>
  <article>
    <h1>React Hooks Guide</h1>
    <h2>Intro</h2>
    <p>React hooks are great.</p>
    <script>var tracking = 1;</script>
  </article>
</body>
</html>"""


def test_normalize_url():
    assert normalize_url("example.com") == "https://example.com"
    assert normalize_url("http://example.com") == "http://example.com"


def test_slug_from_url():
    assert slug_from_url(POST_URL) == "react-hooks-guide"
    assert slug_from_url("https://example.com/post/abc/") == "abc"
    assert slug_from_url("https://example.com/") == ""


def test_extract_post_fields():
    fields = extract_post_fields(PAGE, POST_URL, "react hooks")

    assert fields.title == "React Hooks Guide"
    assert fields.seo_title == "React Hooks Guide | My Blog"
    assert fields.seo_description == "Learn hooks."
    assert fields.focus_keyword == "react hooks"
    assert fields.slug == "react-hooks-guide"
    assert "<h2>Intro</h2>" in fields.content
    assert "tracking" not in fields.content
    assert "Menu" not in fields.content


def test_extract_falls_back_to_title_tag():
    fields = extract_post_fields("<html><head><title>Only Title</title></head><body><p>x</p></body></html>", POST_URL)
    assert fields.title == "Only Title"
    assert fields.seo_description == ""
    assert "<p>x</p>" in fields.content


def test_audit_url():
    settings = Settings(timeout=5.0, user_agent="TestAgent/1.0")

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["user-agent"] == "TestAgent/1.0"
        return httpx.Response(200, text=PAGE)

    result = audit_url(POST_URL, "react hooks", settings, transport=httpx.MockTransport(handler))

    assert result.error is None
    assert result.final_url == POST_URL
    assert result.fields.slug == "react-hooks-guide"
    assert result.report.get_check("keyword-in-title").score == 10
    assert result.report.max_score == 100


def test_audit_url_http_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(404))
    result = audit_url(POST_URL, settings=Settings(), transport=transport)

    assert result.error == "HTTP 404"
    assert result.report is None


def test_audit_url_timeout():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    result = audit_url(POST_URL, settings=Settings(timeout=5.0), transport=httpx.MockTransport(handler))
    assert result.error == "Timeout after 5.0s"


def test_audit_url_connection_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    result = audit_url(POST_URL, settings=Settings(), transport=httpx.MockTransport(handler))
    assert result.error == "Request failed: connection refused"
