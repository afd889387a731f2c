"""Checks on the post body: length, readability, headings and images."""

from ..models import PostFields, SEOCheckResult, Status
from ..rubric import RUBRIC, make_result
from ..text import ContentStats


def check_content_length(fields: PostFields, stats: ContentStats) -> SEOCheckResult:
    thresholds = RUBRIC["content-length"].thresholds
    words = stats.word_count

    if words >= thresholds["good"]:
        return make_result(
            "content-length",
            Status.GOOD,
            f"Content has sufficient length ({words} words)",
        )
    if words >= thresholds["warning"]:
        return make_result(
            "content-length",
            Status.WARNING,
            f"Content could be longer for better SEO ({words} words)",
        )
    return make_result(
        "content-length",
        Status.ERROR,
        f"Content is too short ({words} words). "
        f"Aim for at least {thresholds['good']} words.",
    )


def check_readability(fields: PostFields, stats: ContentStats) -> SEOCheckResult:
    """Grade the simplified Flesch Reading Ease score."""
    thresholds = RUBRIC["readability"].thresholds
    score = stats.flesch_score

    if score >= thresholds["good"]:
        return make_result("readability", Status.GOOD, "Content is easy to read")
    if score >= thresholds["warning"]:
        return make_result(
            "readability", Status.WARNING, "Content readability could be improved"
        )
    return make_result("readability", Status.ERROR, "Content is difficult to read")


def check_headings(fields: PostFields, stats: ContentStats) -> SEOCheckResult:
    thresholds = RUBRIC["headings"].thresholds
    count = stats.heading_count

    if count >= thresholds["good"]:
        return make_result(
            "headings", Status.GOOD, f"Good use of headings ({count} found)"
        )
    if count >= thresholds["warning"]:
        return make_result(
            "headings",
            Status.WARNING,
            "Consider adding more headings to structure content",
        )
    return make_result(
        "headings",
        Status.ERROR,
        "No headings found. Add headings to structure content.",
    )


def check_images(fields: PostFields, stats: ContentStats) -> SEOCheckResult:
    total = stats.image_count
    missing = total - stats.images_with_alt

    if total == 0:
        return make_result(
            "images",
            Status.WARNING,
            "No images found. Consider adding relevant images.",
        )
    if missing == 0:
        return make_result(
            "images", Status.GOOD, f"All images have alt text ({total} images)"
        )
    return make_result(
        "images",
        Status.WARNING,
        f"{missing} image{'s' if missing > 1 else ''} missing alt text",
    )
