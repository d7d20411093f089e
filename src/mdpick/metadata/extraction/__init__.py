"""Front matter extraction.

Parsing utilities:
- detect_format: Decide YAML, TOML or none from the first four bytes
- find_block: Locate the text between opening and closing markers
- extract_front_matter: Bytes to FrontMatter
- decode_front_matter: Block text to FrontMatter
"""

from mdpick.metadata.extraction.frontmatter import (
    decode_front_matter,
    detect_format,
    extract_front_matter,
    find_block,
)

__all__ = [
    "decode_front_matter",
    "detect_format",
    "extract_front_matter",
    "find_block",
]
