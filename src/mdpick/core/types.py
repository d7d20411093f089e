"""Type definitions for mdpick."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FrontMatterFormat(Enum):
    """Serialization format of a front matter block."""

    YAML = "yaml"
    TOML = "toml"

    @property
    def marker(self) -> bytes:
        """Three byte delimiter that opens and closes the block."""
        return _MARKERS[self]


_MARKERS = {
    FrontMatterFormat.YAML: b"---",
    FrontMatterFormat.TOML: b"+++",
}


class FailurePolicy(Enum):
    """What a batch load does when a single document fails."""

    SKIP = "skip"
    ABORT = "abort"


@dataclass(frozen=True)
class FrontMatter:
    """Metadata decoded from a document's front matter.

    Only ``tags`` is recognized; every other key is ignored.
    """

    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class Document:
    """A processed document: its display name and front matter."""

    name: str
    path: Path
    front_matter: FrontMatter = field(default_factory=FrontMatter)

    @property
    def tags(self) -> tuple[str, ...]:
        """Tags declared in the document's front matter."""
        return self.front_matter.tags
