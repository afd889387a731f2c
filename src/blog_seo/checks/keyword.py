"""Focus keyword checks. Only run when the post has a focus keyword."""

from ..models import PostFields, SEOCheckResult, Status
from ..rubric import RUBRIC, make_result
from ..text import ContentStats


def check_keyword_in_title(fields: PostFields, stats: ContentStats) -> SEOCheckResult:
    keyword = fields.focus_keyword.strip().lower()
    if keyword and keyword in fields.title.lower():
        return make_result(
            "keyword-in-title", Status.GOOD, "Focus keyword appears in title"
        )
    return make_result(
        "keyword-in-title", Status.WARNING, "Focus keyword should appear in title"
    )


def check_keyword_density(fields: PostFields, stats: ContentStats) -> SEOCheckResult:
    bounds = RUBRIC["keyword-density"].thresholds
    density = stats.keyword_density

    if bounds["min"] <= density <= bounds["max"]:
        return make_result(
            "keyword-density",
            Status.GOOD,
            f"Keyword density is optimal ({density:.1f}%)",
        )
    if density > 0:
        return make_result(
            "keyword-density",
            Status.WARNING,
            f"Keyword density should be {bounds['min']}-{bounds['max']}% "
            f"(currently {density:.1f}%)",
        )
    return make_result(
        "keyword-density", Status.ERROR, "Focus keyword not found in content"
    )
