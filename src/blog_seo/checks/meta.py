"""Length checks for the post title, SEO title and meta description."""

from ..models import PostFields, SEOCheckResult, Status
from ..rubric import RUBRIC, make_result
from ..text import ContentStats


def _check_length(check_id: str, label: str, value: str) -> SEOCheckResult:
    bounds = RUBRIC[check_id].thresholds
    low, high = bounds["min"], bounds["max"]
    length = len(value)

    if low <= length <= high:
        return make_result(
            check_id,
            Status.GOOD,
            f"{label} length is optimal ({length} characters)",
        )
    if length > 0:
        return make_result(
            check_id,
            Status.WARNING,
            f"{label} should be {low}-{high} characters (currently {length})",
        )
    return make_result(check_id, Status.ERROR, f"{label} is required")


def check_title_length(fields: PostFields, stats: ContentStats) -> SEOCheckResult:
    return _check_length("title-length", "Title", fields.title)


def check_seo_title(fields: PostFields, stats: ContentStats) -> SEOCheckResult:
    return _check_length("seo-title", "SEO title", fields.seo_title)


def check_meta_description(fields: PostFields, stats: ContentStats) -> SEOCheckResult:
    return _check_length("meta-description", "Meta description", fields.seo_description)
