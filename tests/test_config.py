import pytest

from blog_seo.config import Settings


def test_defaults(monkeypatch):
    for name in ("BLOG_SEO_SITE_URL", "BLOG_SEO_SITE_NAME", "BLOG_SEO_TIMEOUT", "BLOG_SEO_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.site_url == "https://myawesomeblog.com"
    assert settings.timeout == 30.0


def test_from_env(monkeypatch):
    monkeypatch.setenv("BLOG_SEO_SITE_URL", "https://blog.example.com")
    monkeypatch.setenv("BLOG_SEO_SITE_NAME", "Example")
    monkeypatch.setenv("BLOG_SEO_TIMEOUT", "5")
    monkeypatch.setenv("BLOG_SEO_USER_AGENT", "TestAgent/1.0")

    settings = Settings.from_env()
    assert settings.site_url == "https://blog.example.com"
    assert settings.site_name == "Example"
    assert settings.timeout == 5.0
    assert settings.user_agent == "TestAgent/1.0"


def test_invalid_timeout_names_the_variable(monkeypatch):
    monkeypatch.setenv("BLOG_SEO_TIMEOUT", "abc")

    with pytest.raises(ValueError, match="BLOG_SEO_TIMEOUT"):
        Settings.from_env()
