"""Metadata handling for mdpick.

Subpackages
-----------
extraction
    Front matter detection and decoding (YAML and TOML)

Modules
-------
tags
    Tag normalization and document filtering
"""

from mdpick.metadata.extraction import (
    decode_front_matter,
    detect_format,
    extract_front_matter,
    find_block,
)
from mdpick.metadata.tags import filter_by_tags, has_tags, normalize_tag

__all__ = [
    "decode_front_matter",
    "detect_format",
    "extract_front_matter",
    "find_block",
    "filter_by_tags",
    "has_tags",
    "normalize_tag",
]
