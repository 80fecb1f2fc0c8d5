"""Unit tests for the file store and key normalization."""

import pytest

from src.loader.store import FileStore, normalize_key


class TestNormalizeKey:
    """Tests for normalize_key."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("main.tf", "main.tf"),
            ("envs/prod/main.tf", "envs/prod/main.tf"),
            ("envs\\prod\\main.tf", "envs/prod/main.tf"),
            ("C:\\project\\main.tf", "C:/project/main.tf"),
            ("mixed\\dir/main.tf", "mixed/dir/main.tf"),
        ],
    )
    def test_uses_forward_slashes(self, path: str, expected: str) -> None:
        """Test that every backslash becomes a forward slash."""
        assert normalize_key(path) == expected


class TestFileStore:
    """Tests for FileStore."""

    @pytest.mark.unit
    def test_starts_empty(self) -> None:
        """Test that a new store has no entries."""
        store = FileStore()
        assert len(store) == 0
        assert store.templates == {}
        assert store.files == {}

    @pytest.mark.unit
    def test_put_stores_document_and_content(self) -> None:
        """Test that put stores both maps under one key."""
        store = FileStore()
        store.put("main.tf", {"a": 1}, b"a = 1\n")

        assert "main.tf" in store.templates
        assert store.templates["main.tf"] == {"a": 1}
        assert store.files["main.tf"] == b"a = 1\n"

    @pytest.mark.unit
    def test_put_overwrites_same_key(self) -> None:
        """Test that a later put with the same key replaces the entry."""
        store = FileStore()
        store.put("main.tf", {"a": 1}, b"a = 1\n")
        store.put("main.tf", {"a": 2}, b"a = 2\n")

        assert len(store) == 1
        assert store.templates["main.tf"] == {"a": 2}
        assert store.files["main.tf"] == b"a = 2\n"

    @pytest.mark.unit
    def test_keys_sorted(self) -> None:
        """Test that keys are returned in sorted order."""
        store = FileStore()
        store.put("b.tf", {}, b"")
        store.put("a.tf", {}, b"")

        assert store.keys() == ["a.tf", "b.tf"]
