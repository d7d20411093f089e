"""Document sources for mdpick."""

from .filesystem import (
    document_from_content,
    document_name,
    list_documents,
    load_document,
    read_content,
)

__all__ = [
    "document_from_content",
    "document_name",
    "list_documents",
    "load_document",
    "read_content",
]
