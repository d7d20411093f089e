"""Filesystem document source.

Lists documents directly inside a folder (no recursion) and loads each one
into a Document by reading its bytes and extracting front matter.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from mdpick.core.exceptions import DocumentReadError, SourceListError
from mdpick.core.types import Document
from mdpick.metadata.extraction import extract_front_matter


def list_documents(folder: Path | str, extension: str = ".md") -> list[Path]:
    """List regular files in ``folder`` whose name ends with ``extension``.

    Subdirectories are neither returned nor descended into.

    Args:
        folder: Directory to scan.
        extension: Required file suffix, including the dot.

    Returns:
        Matching file paths sorted by name.

    Raises:
        SourceListError: If the folder doesn't exist or can't be read.
    """
    folder = Path(folder)
    if not folder.exists():
        raise SourceListError(str(folder), f"Directory does not exist: {folder}")
    if not folder.is_dir():
        raise SourceListError(str(folder), f"Path is not a directory: {folder}")

    logger.debug(f"Listing documents: folder={folder}, extension={extension}")

    try:
        entries = sorted(folder.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SourceListError(str(folder), str(e)) from e

    return [p for p in entries if p.is_file() and p.name.endswith(extension)]


def document_name(path: Path | str) -> str:
    """Derive a display name from a file path by stripping its extension.

    Example:
        >>> document_name("recipes/Pad Thai.md")
        'Pad Thai'
    """
    return Path(path).stem


def read_content(path: Path | str) -> bytes:
    """Read a document's raw bytes.

    Raises:
        DocumentReadError: If the file can't be read.
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise DocumentReadError(str(path), str(e)) from e


def document_from_content(path: Path | str, content: bytes) -> Document:
    """Build a Document for ``path`` from bytes already read.

    Raises:
        FrontMatterNotFoundError: If the content has no usable front matter.
        FrontMatterParseError: If the front matter is malformed.
    """
    path = Path(path)
    return Document(
        name=document_name(path),
        path=path,
        front_matter=extract_front_matter(content),
    )


def load_document(path: Path | str) -> Document:
    """Read a file and extract its front matter.

    Args:
        path: File to load.

    Returns:
        Document named after the file.

    Raises:
        DocumentReadError: If the file can't be read.
        FrontMatterNotFoundError: If the file has no usable front matter.
        FrontMatterParseError: If the front matter is malformed.
    """
    logger.debug(f"Processing file: {document_name(path)}")
    return document_from_content(path, read_content(path))
