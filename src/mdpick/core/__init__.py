"""Core configuration, types and exceptions for mdpick."""

from .config import Config
from .exceptions import (
    ConfigError,
    DocumentReadError,
    FrontMatterError,
    FrontMatterNotFoundError,
    FrontMatterParseError,
    MdPickError,
    SampleSizeError,
    SourceError,
    SourceListError,
)
from .types import Document, FailurePolicy, FrontMatter, FrontMatterFormat

__all__ = [
    "Config",
    "FailurePolicy",
    "ConfigError",
    "DocumentReadError",
    "FrontMatterError",
    "FrontMatterNotFoundError",
    "FrontMatterParseError",
    "MdPickError",
    "SampleSizeError",
    "SourceError",
    "SourceListError",
    "Document",
    "FrontMatter",
    "FrontMatterFormat",
]
