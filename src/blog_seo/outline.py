"""Table of contents extraction for post HTML."""

import re

from bs4 import BeautifulSoup

from .models import OutlineHeading

OUTLINE_TAGS = ["h2", "h3", "h4"]
ANCHOR_CHARS_RE = re.compile(r"[^a-z0-9]+")


def heading_anchor(index: int, text: str) -> str:
    """Anchor id for the ``index``-th outline heading."""
    return f"heading-{index}-{ANCHOR_CHARS_RE.sub('-', text.lower())}"


def extract_outline(html: str) -> list[OutlineHeading]:
    """Collect h2-h4 headings in document order."""
    if not html.strip():
        return []

    soup = BeautifulSoup(html, "lxml")
    outline = []
    for index, tag in enumerate(soup.find_all(OUTLINE_TAGS)):
        raw = tag.get_text()
        outline.append(OutlineHeading(
            id=heading_anchor(index, raw),
            text=raw.strip(),
            level=int(tag.name[1]),
        ))
    return outline
