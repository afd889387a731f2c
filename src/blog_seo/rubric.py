"""Scoring rubric for post analysis and slug validation.

Thresholds and points are plain data so they can be inspected and tested
without running any check. Evaluation code in ``checks`` and ``slug`` only
reads these tables.
"""

from dataclasses import dataclass, field
from typing import Any

from .models import IssueType, SEOCheckResult, Status


@dataclass(frozen=True)
class CheckRule:
    """Points and thresholds for one analyzer check."""
    name: str
    good: int = 10
    warning: int = 5
    error: int = 0
    requires_keyword: bool = False
    thresholds: dict[str, Any] = field(default_factory=dict)

    @property
    def max_score(self) -> int:
        return max(self.good, self.warning, self.error)

    def points(self, status: Status) -> int:
        return {
            Status.GOOD: self.good,
            Status.WARNING: self.warning,
            Status.ERROR: self.error,
        }[status]


# Evaluation order of the analyzer follows the insertion order here.
RUBRIC: dict[str, CheckRule] = {
    "title-length": CheckRule(
        name="Title Length",
        thresholds={"min": 30, "max": 60},
    ),
    "seo-title": CheckRule(
        name="SEO Title",
        thresholds={"min": 50, "max": 60},
    ),
    "meta-description": CheckRule(
        name="Meta Description",
        thresholds={"min": 150, "max": 160},
    ),
    "content-length": CheckRule(
        name="Content Length",
        thresholds={"good": 300, "warning": 150},
    ),
    "keyword-in-title": CheckRule(
        name="Focus Keyword in Title",
        warning=0,
        requires_keyword=True,
    ),
    "keyword-density": CheckRule(
        name="Keyword Density",
        requires_keyword=True,
        thresholds={"min": 0.5, "max": 2.5},
    ),
    "url-structure": CheckRule(
        name="URL Structure",
        thresholds={"max_length": 75},
    ),
    "readability": CheckRule(
        name="Readability",
        thresholds={"good": 60, "warning": 30},
    ),
    "headings": CheckRule(
        name="Heading Structure",
        thresholds={"good": 2, "warning": 1},
    ),
    "images": CheckRule(name="Images"),
}

# Simplified Flesch Reading Ease
FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6
AVG_SYLLABLES_PER_WORD = 1.5


def make_result(check_id: str, status: Status, message: str) -> SEOCheckResult:
    """Build a check result with the points the rubric awards for ``status``."""
    rule = RUBRIC[check_id]
    return SEOCheckResult(
        id=check_id,
        name=rule.name,
        status=status,
        message=message,
        score=rule.points(status),
        max_score=rule.max_score,
    )


def max_possible_score(with_keyword: bool) -> int:
    """Denominator of the overall score."""
    return sum(
        rule.max_score
        for rule in RUBRIC.values()
        if with_keyword or not rule.requires_keyword
    )


@dataclass(frozen=True)
class SlugRule:
    """Penalty applied when a slug rule fires."""
    penalty: int
    issue_type: IssueType


MAX_SLUG_LENGTH = 75
LONG_SLUG_LENGTH = 50
MAX_STOP_WORDS = 2
MAX_SLUG_WORDS = 8
MAX_SUGGESTIONS = 3
SHORTENED_WORDS = 6
KEY_WORDS = 4
KEY_WORD_MIN_LENGTH = 4

SLUG_RULES: dict[str, SlugRule] = {
    "required": SlugRule(50, IssueType.ERROR),
    "too-long": SlugRule(20, IssueType.WARNING),
    "getting-long": SlugRule(10, IssueType.SUGGESTION),
    "invalid-characters": SlugRule(30, IssueType.ERROR),
    "uppercase": SlugRule(15, IssueType.WARNING),
    "double-hyphen": SlugRule(10, IssueType.WARNING),
    "edge-hyphen": SlugRule(10, IssueType.WARNING),
    "stop-words": SlugRule(5, IssueType.SUGGESTION),
    "leading-digit": SlugRule(5, IssueType.SUGGESTION),
    "too-many-words": SlugRule(5, IssueType.SUGGESTION),
}

STOP_WORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "is", "are", "was", "were", "be", "been", "have",
    "has", "had", "do", "does", "did", "will", "would", "could", "should",
])
