"""Tests for tag normalization and filtering."""

from pathlib import Path

import pytest

from mdpick.core.types import Document, FrontMatter
from mdpick.metadata import filter_by_tags, has_tags, normalize_tag


def _doc(name: str, *tags: str) -> Document:
    return Document(name=name, path=Path(f"{name}.md"), front_matter=FrontMatter(tags=tags))


class TestNormalizeTag:
    """Tests for normalize_tag."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Dinner", "dinner"),
            ("#dinner", "dinner"),
            ("  Quick Meals ", "quick meals"),
            ("#", ""),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_tag(raw) == expected


class TestHasTags:
    """Tests for has_tags."""

    def test_all_required_present(self):
        assert has_tags(_doc("a", "Dinner", "vegetarian"), ["dinner", "#Vegetarian"])

    def test_one_missing(self):
        assert not has_tags(_doc("a", "dinner"), ["dinner", "vegetarian"])

    def test_no_requirements(self):
        assert has_tags(_doc("a"), [])

    def test_blank_requirements_ignored(self):
        assert has_tags(_doc("a"), ["", "  "])


class TestFilterByTags:
    """Tests for filter_by_tags."""

    def test_preserves_order(self):
        docs = [_doc("a", "x"), _doc("b"), _doc("c", "x", "y")]
        assert [d.name for d in filter_by_tags(docs, ["x"])] == ["a", "c"]

    def test_accepts_generator(self):
        docs = [_doc("a", "x"), _doc("b", "x")]
        assert len(filter_by_tags(docs, (t for t in ["x"]))) == 2
