"""Pytest configuration and fixtures."""

import random
from pathlib import Path

import pytest
from loguru import logger

from mdpick.core.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MDPICK_* variables from the outer environment out of tests."""
    for name in (
        "MDPICK_CONFIG",
        "MDPICK_FOLDER",
        "MDPICK_EXTENSION",
        "MDPICK_COUNT",
        "MDPICK_SEED",
        "MDPICK_FAILURE_POLICY",
        "MDPICK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Provide an empty folder for documents."""
    folder = tmp_path / "docs"
    folder.mkdir()
    return folder


@pytest.fixture
def write_doc(docs_dir: Path):
    """Write a document into ``docs_dir`` and return its path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = docs_dir / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def recipes_dir(docs_dir: Path, write_doc) -> Path:
    """Provide a folder with ten tagged recipes."""
    for i in range(10):
        tags = ["dinner"] if i % 2 == 0 else ["lunch"]
        if i < 3:
            tags.append("vegetarian")
        body = "".join(f"- {t}\n" for t in tags)
        write_doc(f"recipe{i}.md", f"---\ntags:\n{body}---\n# Recipe {i}\n")
    return docs_dir


@pytest.fixture
def config(docs_dir: Path) -> Config:
    """Provide a Config pointing at ``docs_dir``."""
    return Config(folder=docs_dir)


@pytest.fixture
def rng() -> random.Random:
    """Provide a seeded random source."""
    return random.Random(1234)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru sinks added by the CLI so they don't outlive capsys."""
    yield
    logger.remove()
