"""Tests for LoadingService."""

from pathlib import Path

import pytest

from mdpick.core.config import Config
from mdpick.core.exceptions import FrontMatterParseError, SourceListError
from mdpick.core.types import FailurePolicy
from mdpick.services import LoadingService


@pytest.fixture
def mixed_dir(docs_dir: Path, write_doc) -> Path:
    """Folder with two good documents and three broken ones."""
    write_doc("a.md", "---\ntags: [one]\n---\n")
    write_doc("b.md", '+++\ntags = ["two"]\n+++\n')
    write_doc("c.md", "---\ntags: 5\n---\n")
    write_doc("d.md", "# no front matter\n")
    write_doc("e.md", b"---\ntags: [\xff]\n---\n")
    return docs_dir


class TestLoadingService:
    """Tests for LoadingService.load."""

    def test_loads_all_documents(self, recipes_dir: Path, config: Config):
        result = LoadingService(config).load()

        assert len(result.documents) == 10
        assert result.failures == []
        assert result.scanned == 10

    def test_skip_records_failures(self, mixed_dir: Path, config: Config):
        result = LoadingService(config).load(mixed_dir)

        assert [d.name for d in result.documents] == ["a", "b"]
        assert [(f.path.name, f.kind) for f in result.failures] == [
            ("c.md", "parse_error"),
            ("d.md", "not_found"),
            ("e.md", "parse_error"),
        ]
        assert result.scanned == 5

    def test_abort_raises_first_error(self, mixed_dir: Path, config: Config):
        with pytest.raises(FrontMatterParseError):
            LoadingService(config).load(mixed_dir, FailurePolicy.ABORT)

    def test_policy_from_config(self, mixed_dir: Path):
        config = Config(folder=mixed_dir, failure_policy=FailurePolicy.ABORT)
        with pytest.raises(FrontMatterParseError):
            LoadingService(config).load()

    def test_missing_folder(self, tmp_path: Path, config: Config):
        with pytest.raises(SourceListError):
            LoadingService(config).load(tmp_path / "missing")

    def test_extension_from_config(self, docs_dir: Path, write_doc):
        write_doc("a.txt", "---\ntags: [x]\n---\n")
        write_doc("b.md", "---\ntags: [y]\n---\n")

        result = LoadingService(Config(folder=docs_dir, extension=".txt")).load()

        assert [d.name for d in result.documents] == ["a"]
