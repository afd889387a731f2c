"""Social media link previews."""

from urllib.parse import urlparse

from .models import SocialPreview

# (title, description) character limits per platform
PREVIEW_LIMITS = {
    "facebook": (100, 160),
    "twitter": (70, 200),
    "linkedin": (100, None),
}

ELLIPSIS = "..."


def truncate_text(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters, ending in an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[:max(0, max_length - len(ELLIPSIS))] + ELLIPSIS


def build_previews(
    title: str,
    description: str,
    url: str,
    site_name: str,
) -> list[SocialPreview]:
    """Render the facebook, twitter and linkedin cards for a post."""
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    hostname = urlparse(url).hostname or ""

    previews = []
    for platform, (title_limit, description_limit) in PREVIEW_LIMITS.items():
        previews.append(SocialPreview(
            platform=platform,
            title=truncate_text(title, title_limit),
            description=(
                truncate_text(description, description_limit)
                if description_limit else None
            ),
            hostname=hostname,
            site_name=site_name if platform == "linkedin" else None,
        ))
    return previews
