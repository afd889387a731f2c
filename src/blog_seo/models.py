"""Data models for SEO analysis and slug validation results."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Status(Enum):
    """Outcome of a single SEO check."""
    GOOD = "good"
    WARNING = "warning"
    ERROR = "error"


class IssueType(Enum):
    """Severity of a URL slug issue."""
    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class PostFields:
    """The SEO-relevant fields of a post being edited."""
    title: str = ""
    content: str = ""
    seo_title: str = ""
    seo_description: str = ""
    focus_keyword: str = ""
    slug: str = ""


@dataclass(frozen=True)
class SEOCheckResult:
    """Result of a single rubric check."""
    id: str
    name: str
    status: Status
    message: str
    score: int
    max_score: int = 10

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
            "score": self.score,
        }


@dataclass(frozen=True)
class SEOAnalysisReport:
    """Complete analysis of a post."""
    checks: list[SEOCheckResult] = field(default_factory=list)
    readability_score: float = 0.0
    keyword_density: float = 0.0

    @property
    def max_score(self) -> int:
        return sum(c.max_score for c in self.checks)

    @property
    def overall_score(self) -> int:
        max_total = self.max_score
        if max_total <= 0:
            return 0
        total = sum(c.score for c in self.checks)
        # Halves round up
        return math.floor(100 * total / max_total + 0.5)

    def get_check(self, check_id: str) -> Optional[SEOCheckResult]:
        for check in self.checks:
            if check.id == check_id:
                return check
        return None

    def to_dict(self) -> dict:
        return {
            "overallScore": self.overall_score,
            "checks": [c.to_dict() for c in self.checks],
            "readabilityScore": self.readability_score,
            "keywordDensity": self.keyword_density,
        }


@dataclass(frozen=True)
class URLValidationIssue:
    """A single problem found in a URL slug."""
    type: IssueType
    message: str
    fix: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"type": self.type.value, "message": self.message}
        if self.fix is not None:
            data["fix"] = self.fix
        return data


@dataclass(frozen=True)
class URLValidationResult:
    """Validation outcome for a URL slug."""
    score: int
    issues: list[URLValidationIssue] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(i.type == IssueType.ERROR for i in self.issues)

    def to_dict(self) -> dict:
        return {
            "isValid": self.is_valid,
            "score": self.score,
            "issues": [i.to_dict() for i in self.issues],
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class OutlineHeading:
    """A heading entry in a post's table of contents."""
    id: str
    text: str
    level: int

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "level": self.level}


@dataclass(frozen=True)
class SocialPreview:
    """How a post link renders on one social platform."""
    platform: str
    title: str
    hostname: str
    description: Optional[str] = None
    site_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "platform": self.platform,
            "title": self.title,
            "description": self.description,
            "hostname": self.hostname,
            "siteName": self.site_name,
        }


@dataclass
class PageAudit:
    """Analysis of a published post page."""
    url: str
    final_url: str
    fields: Optional[PostFields] = None
    report: Optional[SEOAnalysisReport] = None
    fetch_time_ms: int = 0
    error: Optional[str] = None
