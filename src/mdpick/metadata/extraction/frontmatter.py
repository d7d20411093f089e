"""Front matter detection and decoding.

A document carries front matter when its first four bytes are ``---\\n``
(YAML) or ``+++\\n`` (TOML). The block ends at the next newline followed by
the same three byte marker. The format is decided once from the prefix;
a YAML opener without a YAML closer is never retried as TOML.

Example:
    >>> extract_front_matter(b"---\\ntags:\\n- a\\n- b\\n---\\nbody")
    FrontMatter(tags=('a', 'b'))
"""

from __future__ import annotations

import tomllib
from typing import Any

import yaml

from mdpick.core.exceptions import FrontMatterNotFoundError, FrontMatterParseError
from mdpick.core.types import FrontMatter, FrontMatterFormat

_PREFIX_LENGTH = 4
_MARKER_LENGTH = 3


def detect_format(content: bytes) -> FrontMatterFormat | None:
    """Return the front matter format selected by the first four bytes.

    Args:
        content: Raw document bytes.

    Returns:
        The matching format, or None when neither opener is present.
    """
    prefix = content[:_PREFIX_LENGTH]
    for fmt in FrontMatterFormat:
        if prefix == fmt.marker + b"\n":
            return fmt
    return None


def find_block(content: bytes, marker: bytes) -> bytes | None:
    """Locate the text enclosed by an opening and closing ``marker``.

    The closing search starts right after the three byte opener, so the
    opener's own newline can serve as the closer's leading newline.

    Args:
        content: Raw document bytes, already known to start with the opener.
        marker: Three byte delimiter.

    Returns:
        Enclosed bytes without either delimiter, or None if unclosed.
    """
    end = content.find(b"\n" + marker, _MARKER_LENGTH)
    if end == -1:
        return None
    # content[3] is the opener's newline
    return content[_PREFIX_LENGTH:end] if end >= _PREFIX_LENGTH else b""


def extract_front_matter(content: bytes) -> FrontMatter:
    """Extract and decode the front matter at the start of ``content``.

    Args:
        content: Raw document bytes.

    Returns:
        Decoded FrontMatter.

    Raises:
        FrontMatterNotFoundError: No opener, or an opener without a closer.
        FrontMatterParseError: Enclosed text is malformed for its format.
    """
    fmt = detect_format(content)
    if fmt is None:
        raise FrontMatterNotFoundError()

    block = find_block(content, fmt.marker)
    if block is None:
        raise FrontMatterNotFoundError(
            f"no closing {fmt.marker.decode()} for {fmt.value.upper()} front matter"
        )

    try:
        text = block.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FrontMatterParseError(fmt, f"not valid UTF-8: {e}") from e

    return decode_front_matter(text, fmt)


def decode_front_matter(text: str, fmt: FrontMatterFormat) -> FrontMatter:
    """Deserialize block text in ``fmt`` into a FrontMatter.

    Raises:
        FrontMatterParseError: Syntax error, or a ``tags`` value of the wrong shape.
    """
    data = _load(text, fmt)
    if data is None:
        return FrontMatter()
    if not isinstance(data, dict):
        raise FrontMatterParseError(
            fmt, f"expected a mapping, got {type(data).__name__}"
        )

    tags = _tags_from_field(data.get("tags"), fmt)
    if tags and fmt is FrontMatterFormat.YAML:
        # YAML scalars keep the text as written ("no", "007", "1.10")
        tags = tuple(yaml.load(text, Loader=yaml.BaseLoader)["tags"])
    return FrontMatter(tags=tags)


def _load(text: str, fmt: FrontMatterFormat) -> Any:
    if fmt is FrontMatterFormat.YAML:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise FrontMatterParseError(fmt, str(e)) from e

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise FrontMatterParseError(fmt, str(e)) from e


def _tags_from_field(value: Any, fmt: FrontMatterFormat) -> tuple[str, ...]:
    """Convert a decoded ``tags`` value to a tuple of strings.

    Anything nested or null is rejected.
    """
    if value is None:
        return ()
    if not isinstance(value, list):
        raise FrontMatterParseError(
            fmt, f"tags must be a list, got {type(value).__name__}"
        )

    tags = []
    for item in value:
        if isinstance(item, (list, dict)) or item is None:
            raise FrontMatterParseError(
                fmt, f"tags must contain only scalar values, got {item!r}"
            )
        tags.append(str(item))
    return tuple(tags)
