"""Tag normalization and matching."""

from __future__ import annotations

from typing import Iterable

from mdpick.core.types import Document


def normalize_tag(tag: str) -> str:
    """Normalize a tag to lowercase form.

    Args:
        tag: Raw tag string.

    Returns:
        Lowercase, trimmed tag without leading #.
    """
    return tag.strip().lstrip("#").lower().strip()


def has_tags(document: Document, required: Iterable[str]) -> bool:
    """Check whether ``document`` carries every tag in ``required``."""
    wanted = {normalize_tag(t) for t in required}
    wanted.discard("")
    if not wanted:
        return True
    present = {normalize_tag(t) for t in document.tags}
    return wanted <= present


def filter_by_tags(documents: Iterable[Document], required: Iterable[str]) -> list[Document]:
    """Keep documents that carry every tag in ``required``, preserving order."""
    required = list(required)
    return [doc for doc in documents if has_tags(doc, required)]
