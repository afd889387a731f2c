"""URL structure check for the post slug."""

import re

from ..models import PostFields, SEOCheckResult, Status
from ..rubric import RUBRIC, make_result
from ..text import ContentStats

SLUG_CHARS_RE = re.compile(r"^[a-z0-9-]+$")


def check_url_structure(fields: PostFields, stats: ContentStats) -> SEOCheckResult:
    slug = fields.slug
    max_length = RUBRIC["url-structure"].thresholds["max_length"]

    if len(slug) <= max_length and SLUG_CHARS_RE.match(slug) and "--" not in slug:
        return make_result(
            "url-structure", Status.GOOD, "URL structure is SEO-friendly"
        )
    return make_result(
        "url-structure",
        Status.WARNING,
        f"URL could be more SEO-friendly (use lowercase, hyphens, keep under {max_length} chars)",
    )
