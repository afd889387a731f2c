"""Text statistics over post HTML.

Everything here works on raw strings with permissive regular expressions, so
malformed markup degrades to plain text instead of failing.
"""

import re
from dataclasses import dataclass

from .rubric import (
    AVG_SYLLABLES_PER_WORD,
    FLESCH_BASE,
    FLESCH_SENTENCE_WEIGHT,
    FLESCH_SYLLABLE_WEIGHT,
)

TAG_RE = re.compile(r"<[^>]*>")
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
HEADING_RE = re.compile(r"<h[1-6][^>]*>", re.IGNORECASE)
IMG_RE = re.compile(r"<img[^>]*>", re.IGNORECASE)
ALT_RE = re.compile(
    r"""\salt\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""",
    re.IGNORECASE,
)


def strip_html(html: str) -> str:
    """Remove tags and surrounding whitespace."""
    return TAG_RE.sub("", html).strip()


def words(html: str) -> list[str]:
    return strip_html(html).split()


def count_words(html: str) -> int:
    return len(words(html))


def count_sentences(html: str) -> int:
    segments = SENTENCE_SPLIT_RE.split(strip_html(html))
    return sum(1 for s in segments if s.strip())


def keyword_density(html: str, keyword: str) -> float:
    """Percentage of words taken up by exact occurrences of ``keyword``.

    The keyword phrase is matched over sliding windows of its own token
    length after lower-casing both sides. Punctuation is not normalized, so
    ``"hooks,"`` does not match ``"hooks"``.
    """
    keyword_words = keyword.lower().split()
    content_words = strip_html(html).lower().split()
    if not keyword_words or not content_words:
        return 0.0

    size = len(keyword_words)
    matches = sum(
        1
        for i in range(len(content_words) - size + 1)
        if content_words[i:i + size] == keyword_words
    )
    return matches * 100 / len(content_words)


def average_words_per_sentence(html: str) -> float:
    sentences = count_sentences(html)
    if sentences == 0:
        return 0.0
    return count_words(html) / sentences


def flesch_reading_ease(html: str) -> float:
    """Simplified Flesch Reading Ease with a fixed syllables-per-word."""
    return (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * average_words_per_sentence(html)
        - FLESCH_SYLLABLE_WEIGHT * AVG_SYLLABLES_PER_WORD
    )


def count_headings(html: str) -> int:
    return len(HEADING_RE.findall(html))


def _has_alt(img_tag: str) -> bool:
    match = ALT_RE.search(img_tag)
    if not match:
        return False
    value = next((g for g in match.groups() if g is not None), "")
    return bool(value.strip())


def count_images(html: str) -> tuple[int, int]:
    """Return ``(total images, images with non-empty alt text)``."""
    tags = IMG_RE.findall(html)
    return len(tags), sum(1 for tag in tags if _has_alt(tag))


@dataclass(frozen=True)
class ContentStats:
    """Statistics computed once per analysis and shared by all checks."""
    word_count: int
    sentence_count: int
    heading_count: int
    image_count: int
    images_with_alt: int
    keyword_density: float
    flesch_score: float

    @classmethod
    def from_html(cls, html: str, keyword: str = "") -> "ContentStats":
        image_count, images_with_alt = count_images(html)
        return cls(
            word_count=count_words(html),
            sentence_count=count_sentences(html),
            heading_count=count_headings(html),
            image_count=image_count,
            images_with_alt=images_with_alt,
            keyword_density=keyword_density(html, keyword),
            flesch_score=flesch_reading_ease(html),
        )

    @property
    def readability_score(self) -> float:
        return max(0.0, min(100.0, self.flesch_score))
