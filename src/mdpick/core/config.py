"""Configuration management for mdpick."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from .exceptions import ConfigError
from .types import FailurePolicy


@dataclass
class Config:
    """Main application configuration.

    Attributes:
        folder: Directory scanned for documents.
        extension: File suffix a document must have.
        count: Number of documents to pick.
        seed: Seed for the random source (None for a fresh one each run).
        failure_policy: Skip failing documents or abort the whole batch.
        clamp_count: Pick fewer than ``count`` when not enough documents match.
        log_level: Level of the stderr log sink.
    """

    folder: Path = field(default_factory=lambda: Path("./example_files"))
    extension: str = ".md"
    count: int = 7
    seed: int | None = None
    failure_policy: FailurePolicy = FailurePolicy.SKIP
    clamp_count: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML config file.

        Raises:
            ConfigError: If the file can't be read, isn't valid TOML, or holds
                an invalid value.
        """
        path = Path(path)
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        config = cls()
        config._apply_mapping(data)
        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from ``path`` or ``MDPICK_CONFIG`` if set, else from env only."""
        path = path or os.environ.get("MDPICK_CONFIG")
        if path:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_mapping(self, data: dict[str, Any]) -> None:
        if "folder" in data:
            self.folder = Path(data["folder"])
        if "extension" in data:
            self.extension = str(data["extension"])
        if "count" in data:
            self.count = _as_int("count", data["count"])
        if "seed" in data:
            self.seed = _as_int("seed", data["seed"])
        if "failure_policy" in data:
            self.failure_policy = _as_policy(data["failure_policy"])
        if "clamp_count" in data:
            self.clamp_count = bool(data["clamp_count"])
        if "log_level" in data:
            self.log_level = _as_level(data["log_level"])

    def _apply_env(self) -> None:
        if folder := os.environ.get("MDPICK_FOLDER"):
            self.folder = Path(folder)
        if extension := os.environ.get("MDPICK_EXTENSION"):
            self.extension = extension
        if count := os.environ.get("MDPICK_COUNT"):
            self.count = _as_int("MDPICK_COUNT", count)
        if seed := os.environ.get("MDPICK_SEED"):
            self.seed = _as_int("MDPICK_SEED", seed)
        if policy := os.environ.get("MDPICK_FAILURE_POLICY"):
            self.failure_policy = _as_policy(policy)
        if level := os.environ.get("MDPICK_LOG_LEVEL"):
            self.log_level = _as_level(level)


def _as_int(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def _as_policy(value: Any) -> FailurePolicy:
    try:
        return FailurePolicy(str(value).lower())
    except ValueError as e:
        choices = ", ".join(p.value for p in FailurePolicy)
        raise ConfigError(
            f"failure_policy must be one of {choices}, got {value!r}"
        ) from e


def _as_level(value: Any) -> str:
    level = str(value).upper()
    try:
        logger.level(level)
    except ValueError as e:
        raise ConfigError(f"log_level {value!r} is not a known logging level") from e
    return level
