"""Text feature extraction from scraped Markdown."""

from __future__ import annotations

import re

from .models import ContentFeatures

_PARAGRAPH_BREAK = re.compile(r"\n{2,}")
_HEADER_LINE = re.compile(r"^#{1,6} ", re.MULTILINE)
_INLINE_LINK = re.compile(r"(?<!!)\[[^\]]*\]\([^)]+\)")
_INLINE_IMAGE = re.compile(r"!\[[^\]]*\]\([^)]+\)")

META_DESCRIPTION_MIN_LENGTH = 160


def extract_features(content: str) -> ContentFeatures:
    """Count the structural features of *content* used by every scorer.

    Empty content yields the all-zero feature set.
    """
    if not content:
        return ContentFeatures()

    return ContentFeatures(
        word_count=len(content.split()),
        paragraphs=len(_PARAGRAPH_BREAK.findall(content)) + 1,
        headers=len(_HEADER_LINE.findall(content)),
        links=len(_INLINE_LINK.findall(content)),
        images=len(_INLINE_IMAGE.findall(content)),
        has_title=content.startswith("# "),
        has_meta_description=(
            "description" in content or len(content) > META_DESCRIPTION_MIN_LENGTH
        ),
        content_length=len(content),
    )
