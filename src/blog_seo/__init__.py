"""SEO scoring and URL slug tools for blog posts."""

__version__ = "0.1.0"

from .analyzer import analyze_seo
from .models import (
    IssueType,
    PostFields,
    SEOAnalysisReport,
    SEOCheckResult,
    Status,
    URLValidationIssue,
    URLValidationResult,
)
from .slug import SlugEditor, generate_slug, validate_slug

__all__ = [
    "__version__",
    "analyze_seo",
    "generate_slug",
    "validate_slug",
    "SlugEditor",
    "IssueType",
    "PostFields",
    "SEOAnalysisReport",
    "SEOCheckResult",
    "Status",
    "URLValidationIssue",
    "URLValidationResult",
]
