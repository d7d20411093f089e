"""Loading service for turning a folder into Documents.

Files are processed one at a time in listing order. Under
``FailurePolicy.SKIP`` a file that can't be loaded is recorded as a
LoadFailure and the batch continues; under ``FailurePolicy.ABORT`` the
first error propagates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from mdpick.core.config import Config
from mdpick.core.exceptions import (
    FrontMatterNotFoundError,
    FrontMatterParseError,
    MdPickError,
)
from mdpick.core.types import Document, FailurePolicy
from mdpick.sources.filesystem import list_documents, load_document


# =============================================================================
# Result Types
# =============================================================================


@dataclass(frozen=True)
class LoadFailure:
    """A document that could not be loaded.

    Attributes:
        path: File that failed.
        kind: "not_found", "parse_error" or "read_error".
        message: Error message.
    """

    path: Path
    kind: str
    message: str


@dataclass
class LoadResult:
    """Result of loading a folder.

    Attributes:
        documents: Successfully loaded documents, in listing order.
        failures: Documents skipped under the skip policy.
    """

    documents: list[Document] = field(default_factory=list)
    failures: list[LoadFailure] = field(default_factory=list)

    @property
    def scanned(self) -> int:
        """Number of files looked at."""
        return len(self.documents) + len(self.failures)


def _failure_kind(error: MdPickError) -> str:
    if isinstance(error, FrontMatterNotFoundError):
        return "not_found"
    if isinstance(error, FrontMatterParseError):
        return "parse_error"
    return "read_error"


# =============================================================================
# Loading Service
# =============================================================================


class LoadingService:
    """Service for loading every document in a folder.

    Example:
        service = LoadingService(Config.from_env())
        result = service.load()
        print(f"{len(result.documents)} loaded, {len(result.failures)} skipped")
    """

    def __init__(self, config: Config):
        """Initialize LoadingService.

        Args:
            config: Application configuration.
        """
        self._config = config

    def load(
        self,
        folder: Path | str | None = None,
        policy: FailurePolicy | None = None,
    ) -> LoadResult:
        """Load all documents in ``folder``.

        Args:
            folder: Directory to scan (default: ``config.folder``).
            policy: Failure policy (default: ``config.failure_policy``).

        Returns:
            LoadResult with documents and per-file failures.

        Raises:
            SourceListError: If the folder can't be listed.
            MdPickError: First per-file error, under the abort policy.
        """
        folder = Path(folder) if folder is not None else self._config.folder
        policy = policy or self._config.failure_policy

        result = LoadResult()
        for path in list_documents(folder, self._config.extension):
            try:
                result.documents.append(load_document(path))
            except MdPickError as e:
                if policy is FailurePolicy.ABORT:
                    logger.error(f"Aborting load at {path.name}: {e}")
                    raise
                logger.warning(f"Skipping {path.name}: {e}")
                result.failures.append(
                    LoadFailure(path=path, kind=_failure_kind(e), message=str(e))
                )

        logger.debug(
            f"Loaded folder {folder}: documents={len(result.documents)}, "
            f"failures={len(result.failures)}"
        )
        return result
