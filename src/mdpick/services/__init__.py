"""Service layer for mdpick."""

from .loading import LoadFailure, LoadingService, LoadResult
from .picking import PickResult, PickService
from .sampling import select_random

__all__ = [
    "LoadFailure",
    "LoadingService",
    "LoadResult",
    "PickResult",
    "PickService",
    "select_random",
]
