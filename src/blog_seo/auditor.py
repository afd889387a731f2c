"""Audit a published post page over HTTP."""

import logging
import time
from typing import Optional
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup

from .analyzer import analyze_seo
from .config import Settings
from .models import PageAudit, PostFields

logger = logging.getLogger(__name__)

CONTENT_CONTAINERS = ["article", "main", "body"]


def normalize_url(url: str) -> str:
    """Ensure URL has a scheme."""
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


def request_headers(settings: Settings) -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }


def slug_from_url(url: str) -> str:
    """Last non-empty path segment of ``url``."""
    segments = [s for s in urlparse(url).path.split("/") if s]
    return segments[-1] if segments else ""


def extract_post_fields(html: str, url: str, focus_keyword: str = "") -> PostFields:
    """Map a rendered post page onto the analyzer's input fields.

    The visible headline (first ``<h1>``) is the post title and the
    ``<title>`` tag is the SEO title; the post body is taken from the first
    ``<article>``, ``<main>`` or ``<body>`` element found.
    """
    soup = BeautifulSoup(html, "lxml")

    title_tag = soup.find("title")
    seo_title = title_tag.get_text(strip=True) if title_tag else ""

    h1 = soup.find("h1")
    title = h1.get_text(" ", strip=True) if h1 else seo_title

    desc_tag = soup.find("meta", attrs={"name": "description"})
    description = desc_tag.get("content", "").strip() if desc_tag else ""

    content = ""
    for name in CONTENT_CONTAINERS:
        container = soup.find(name)
        if container:
            for tag in container.find_all(["script", "style"]):
                tag.decompose()
            content = container.decode_contents()
            break

    return PostFields(
        title=title,
        content=content,
        seo_title=seo_title,
        seo_description=description,
        focus_keyword=focus_keyword,
        slug=slug_from_url(url),
    )


def audit_url(
    url: str,
    focus_keyword: str = "",
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> PageAudit:
    """Fetch a post page and run the SEO analysis on it.

    Args:
        url: The post URL to audit
        focus_keyword: Optional keyword the post should rank for
        settings: Timeout and user agent; read from the environment if omitted
        transport: Custom httpx transport

    Returns:
        PageAudit with the extracted fields and report, or an error
    """
    settings = settings or Settings.from_env()
    url = normalize_url(url)
    start_time = time.time()

    result = PageAudit(url=url, final_url=url)

    try:
        with httpx.Client(
            headers=request_headers(settings),
            timeout=settings.timeout,
            follow_redirects=True,
            transport=transport,
        ) as client:
            logger.debug(f"Fetching {url}")
            response = client.get(url)
            response.raise_for_status()

            result.final_url = str(response.url)
            result.fetch_time_ms = int((time.time() - start_time) * 1000)

            result.fields = extract_post_fields(
                response.text, result.final_url, focus_keyword
            )
            result.report = analyze_seo(result.fields)

    except httpx.TimeoutException:
        result.error = f"Timeout after {settings.timeout}s"
    except httpx.HTTPStatusError as e:
        result.error = f"HTTP {e.response.status_code}"
    except httpx.RequestError as e:
        result.error = f"Request failed: {e}"

    if result.error:
        logger.warning(f"Audit of {url} failed: {result.error}")

    return result
