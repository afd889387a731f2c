"""Checks run by the post analyzer, keyed by rubric check id."""

from .meta import check_title_length, check_seo_title, check_meta_description
from .content import (
    check_content_length,
    check_readability,
    check_headings,
    check_images,
)
from .keyword import check_keyword_in_title, check_keyword_density
from .url import check_url_structure

CHECKS = {
    "title-length": check_title_length,
    "seo-title": check_seo_title,
    "meta-description": check_meta_description,
    "content-length": check_content_length,
    "keyword-in-title": check_keyword_in_title,
    "keyword-density": check_keyword_density,
    "url-structure": check_url_structure,
    "readability": check_readability,
    "headings": check_headings,
    "images": check_images,
}

__all__ = [
    "CHECKS",
    "check_title_length",
    "check_seo_title",
    "check_meta_description",
    "check_content_length",
    "check_keyword_in_title",
    "check_keyword_density",
    "check_url_structure",
    "check_readability",
    "check_headings",
    "check_images",
]
