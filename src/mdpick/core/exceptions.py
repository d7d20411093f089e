"""Custom exceptions for mdpick."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import FrontMatterFormat


class MdPickError(Exception):
    """Base exception for all mdpick errors."""

    pass


class ConfigError(MdPickError):
    """Configuration file could not be read or parsed."""

    pass


class FrontMatterError(MdPickError):
    """Front matter could not be extracted from a document."""

    pass


class FrontMatterNotFoundError(FrontMatterError):
    """Document has no usable front matter block."""

    def __init__(self, reason: str = "no valid front matter found"):
        self.reason = reason
        super().__init__(reason)


class FrontMatterParseError(FrontMatterError):
    """Front matter block is malformed for its declared format."""

    def __init__(self, fmt: "FrontMatterFormat", reason: str):
        """Initialize exception with format and reason.

        Args:
            fmt: Format implied by the block's delimiter.
            reason: Human readable description of the problem.
        """
        self.format = fmt
        self.reason = reason
        super().__init__(f"error parsing {fmt.value.upper()} front matter: {reason}")


class SourceError(MdPickError):
    """Base exception for document source operations."""

    pass


class SourceListError(SourceError):
    """Failed to list documents in a folder."""

    def __init__(self, folder: str, reason: str):
        self.folder = folder
        self.reason = reason
        super().__init__(f"Failed to list documents in {folder}: {reason}")


class DocumentReadError(SourceError):
    """Failed to read a document from disk."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class SampleSizeError(MdPickError):
    """Requested more documents than are available."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot select {requested} documents from {available} available"
        )
