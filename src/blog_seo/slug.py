"""URL slug generation and validation."""

import logging
import re
from typing import Callable, Optional

from .models import IssueType, URLValidationIssue, URLValidationResult
from .rubric import (
    KEY_WORD_MIN_LENGTH,
    KEY_WORDS,
    LONG_SLUG_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_SLUG_WORDS,
    MAX_STOP_WORDS,
    MAX_SUGGESTIONS,
    SHORTENED_WORDS,
    SLUG_RULES,
    STOP_WORDS,
)

logger = logging.getLogger(__name__)

TITLE_CHARS_RE = re.compile(r"[^a-z0-9\s-]")
SLUG_INVALID_RE = re.compile(r"[^a-z0-9-]")
WHITESPACE_RE = re.compile(r"\s+")
HYPHEN_RUN_RE = re.compile(r"-+")
DOUBLE_HYPHEN_RE = re.compile(r"--+")
UPPERCASE_RE = re.compile(r"[A-Z]")
LEADING_DIGIT_RE = re.compile(r"^[0-9]")

DEFAULT_SITE_URL = "https://myawesomeblog.com"


def generate_slug(title: str) -> str:
    """Derive a URL-safe slug from a post title."""
    slug = title.lower().strip()
    slug = TITLE_CHARS_RE.sub("", slug)
    slug = WHITESPACE_RE.sub("-", slug)
    slug = HYPHEN_RUN_RE.sub("-", slug)
    slug = slug.strip("-")
    # Truncation can expose a hyphen at the cut point
    return slug[:MAX_SLUG_LENGTH].rstrip("-")


def _clean(slug: str) -> str:
    slug = SLUG_INVALID_RE.sub("", slug.lower())
    return HYPHEN_RUN_RE.sub("-", slug).strip("-")


def _suggestions(slug: str, words: list[str]) -> list[str]:
    candidates = [
        _clean(slug),
        "-".join([w for w in words if w and w not in STOP_WORDS][:SHORTENED_WORDS]),
        "-".join([
            w for w in words
            if len(w) >= KEY_WORD_MIN_LENGTH and w not in STOP_WORDS
        ][:KEY_WORDS]),
    ]

    suggestions: list[str] = []
    for candidate in candidates:
        if candidate and candidate != slug and candidate not in suggestions:
            suggestions.append(candidate)
    return suggestions[:MAX_SUGGESTIONS]


def validate_slug(slug: str) -> URLValidationResult:
    """Score a slug against URL best practices.

    Every rule is applied independently and its penalty subtracted from
    100; the score never drops below 0. The slug is valid when no
    error-level rule fired.
    """
    issues: list[URLValidationIssue] = []
    score = 100

    def flag(rule: str, message: str, fix: Optional[str] = None) -> None:
        nonlocal score
        slug_rule = SLUG_RULES[rule]
        issues.append(URLValidationIssue(type=slug_rule.issue_type, message=message, fix=fix))
        score -= slug_rule.penalty

    length = len(slug)
    if length == 0:
        flag("required", "URL slug is required", "Generate from title or enter manually")
    elif length > MAX_SLUG_LENGTH:
        flag(
            "too-long",
            f"URL is too long ({length} characters). Keep under {MAX_SLUG_LENGTH} characters.",
            "Shorten the URL slug",
        )
    elif length > LONG_SLUG_LENGTH:
        flag(
            "getting-long",
            f"URL is getting long ({length} characters). Consider shortening for better SEO.",
            "Remove unnecessary words",
        )

    invalid = list(dict.fromkeys(SLUG_INVALID_RE.findall(slug)))
    if invalid:
        flag(
            "invalid-characters",
            f"Invalid characters found: {', '.join(invalid)}",
            "Use only lowercase letters, numbers, and hyphens",
        )

    if UPPERCASE_RE.search(slug):
        flag("uppercase", "URL contains uppercase letters", "Convert to lowercase")

    if DOUBLE_HYPHEN_RE.search(slug):
        flag(
            "double-hyphen",
            "URL contains multiple consecutive hyphens",
            "Replace with single hyphens",
        )

    if slug.startswith("-") or slug.endswith("-"):
        flag(
            "edge-hyphen",
            "URL starts or ends with hyphen",
            "Remove leading/trailing hyphens",
        )

    words = slug.split("-")
    stop_words = [w for w in words if w in STOP_WORDS]
    if len(stop_words) > MAX_STOP_WORDS:
        flag(
            "stop-words",
            f"URL contains many stop words: {', '.join(stop_words)}",
            "Remove unnecessary stop words for cleaner URL",
        )

    if LEADING_DIGIT_RE.match(slug):
        flag(
            "leading-digit",
            "URL starts with a number",
            "Consider starting with a descriptive word",
        )

    if len(words) > MAX_SLUG_WORDS:
        flag(
            "too-many-words",
            f"URL has many words ({len(words)}). Consider simplifying.",
            "Focus on 3-6 key words",
        )

    suggestions = _suggestions(slug, words) if slug else []

    return URLValidationResult(
        score=max(0, score),
        issues=issues,
        suggestions=suggestions,
    )


class SlugEditor:
    """Slug state for one post editing session.

    The slug follows the title until the author edits it by hand. After
    the first manual edit (or applied suggestion) title changes no longer
    touch the slug for the rest of the session.
    """

    def __init__(
        self,
        slug: str = "",
        on_change: Optional[Callable[[str], None]] = None,
        site_url: str = DEFAULT_SITE_URL,
    ):
        self.slug = slug
        self.on_change = on_change
        self.site_url = site_url.rstrip("/")
        self.manually_edited = False

    def _set(self, slug: str) -> None:
        self.slug = slug
        if self.on_change:
            self.on_change(slug)

    def title_changed(self, title: str) -> None:
        if self.manually_edited or not title:
            return
        self._set(generate_slug(title))

    def edit(self, slug: str) -> None:
        self.manually_edited = True
        self._set(slug)

    def apply_suggestion(self, suggestion: str) -> None:
        self.edit(suggestion)

    def auto_fix(self) -> None:
        """Rewrite the current slug into a clean one."""
        fixed = generate_slug(self.slug)
        logger.debug(f"Auto-fixed slug {self.slug!r} -> {fixed!r}")
        self._set(fixed)

    @property
    def validation(self) -> Optional[URLValidationResult]:
        if not self.slug:
            return None
        return validate_slug(self.slug)

    @property
    def preview_url(self) -> str:
        return f"{self.site_url}/post/{self.slug or 'your-slug-here'}"
