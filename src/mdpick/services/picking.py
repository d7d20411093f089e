"""Pick service: load a folder, filter by tag, choose at random."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from loguru import logger

from mdpick.core.config import Config
from mdpick.core.exceptions import SampleSizeError
from mdpick.core.types import Document, FailurePolicy
from mdpick.metadata.tags import filter_by_tags
from mdpick.services.loading import LoadingService, LoadResult
from mdpick.services.sampling import select_random


@dataclass
class PickResult:
    """Outcome of a pick.

    Attributes:
        selected: Chosen documents, in selection order.
        candidates: Number of documents eligible after tag filtering.
        load: The load the candidates came from.
    """

    selected: list[Document] = field(default_factory=list)
    candidates: int = 0
    load: LoadResult = field(default_factory=LoadResult)


class PickService:
    """Service for choosing a random set of documents from a folder.

    Example:
        service = PickService(config, random.Random(42))
        result = service.pick(count=7, tags=["dinner"])
        for i, doc in enumerate(result.selected, 1):
            print(f"{i}: {doc.name}")
    """

    def __init__(self, config: Config, rng: random.Random | None = None):
        """Initialize PickService.

        Args:
            config: Application configuration.
            rng: Random source (default: seeded from ``config.seed``).
        """
        self._config = config
        self._rng = rng if rng is not None else random.Random(config.seed)
        self._loading = LoadingService(config)

    def pick(
        self,
        folder: Path | str | None = None,
        count: int | None = None,
        tags: Iterable[str] = (),
        policy: FailurePolicy | None = None,
    ) -> PickResult:
        """Load ``folder`` and pick ``count`` documents carrying all ``tags``.

        Raises:
            SourceListError: If the folder can't be listed.
            SampleSizeError: If fewer than ``count`` candidates remain and
                ``config.clamp_count`` is off.
        """
        count = self._config.count if count is None else count
        load = self._loading.load(folder, policy)

        tags = list(tags)
        candidates = filter_by_tags(load.documents, tags) if tags else load.documents
        if tags:
            logger.debug(f"Tag filter {tags}: {len(candidates)} of {len(load.documents)}")

        if count > len(candidates):
            if not self._config.clamp_count:
                raise SampleSizeError(count, len(candidates))
            logger.info(f"Only {len(candidates)} candidates, picking all of them")
            count = len(candidates)

        selected = select_random(candidates, count, self._rng)
        return PickResult(selected=selected, candidates=len(candidates), load=load)
