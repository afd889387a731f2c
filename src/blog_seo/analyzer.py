"""Post analyzer that runs all rubric checks."""

import logging

from .checks import CHECKS
from .models import PostFields, SEOAnalysisReport
from .rubric import RUBRIC
from .text import ContentStats

logger = logging.getLogger(__name__)


def analyze_seo(fields: PostFields) -> SEOAnalysisReport:
    """Score a post against the SEO rubric.

    Keyword checks are left out entirely when the post has no focus
    keyword, so they count toward neither the earned points nor the
    maximum.

    Args:
        fields: The post's title, HTML content, SEO title, SEO description,
            focus keyword and slug

    Returns:
        SEOAnalysisReport with checks in rubric order
    """
    keyword = fields.focus_keyword.strip()
    stats = ContentStats.from_html(fields.content, keyword)

    checks = [
        CHECKS[check_id](fields, stats)
        for check_id, rule in RUBRIC.items()
        if keyword or not rule.requires_keyword
    ]

    report = SEOAnalysisReport(
        checks=checks,
        readability_score=stats.readability_score,
        keyword_density=stats.keyword_density,
    )
    logger.debug(
        f"Analyzed post ({stats.word_count} words): "
        f"{report.overall_score}/100 over {report.max_score} points"
    )
    return report
