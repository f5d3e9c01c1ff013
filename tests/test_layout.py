"""Tests for perch.templating.layout — nearest-ancestor layout search."""

from pathlib import Path

import pytest

from perch.templating.layout import find_layout, layout_name


@pytest.fixture
def root(tmp_path: Path) -> Path:
    site = (tmp_path / "site").resolve()
    (site / "blog" / "2024").mkdir(parents=True)
    return site


class TestFindLayout:
    def test_same_directory(self, root: Path) -> None:
        (root / "blog" / "_layout.kida").write_text("{{ content }}")
        page = root / "blog" / "post.kida"
        assert find_layout(root, page, "kida") == root / "blog" / "_layout.kida"

    def test_nearest_ancestor_wins(self, root: Path) -> None:
        (root / "_layout.kida").write_text("root")
        (root / "blog" / "_layout.kida").write_text("blog")
        page = root / "blog" / "2024" / "post.kida"
        assert find_layout(root, page, "kida") == root / "blog" / "_layout.kida"

    def test_content_root_is_checked(self, root: Path) -> None:
        (root / "_layout.kida").write_text("root")
        page = root / "blog" / "2024" / "post.kida"
        assert find_layout(root, page, "kida") == root / "_layout.kida"

    def test_never_above_root(self, root: Path) -> None:
        (root.parent / "_layout.kida").write_text("outside")
        page = root / "blog" / "post.kida"
        assert find_layout(root, page, "kida") is None

    def test_no_layout(self, root: Path) -> None:
        assert find_layout(root, root / "index.kida", "kida") is None

    def test_other_extension_ignored(self, root: Path) -> None:
        (root / "_layout.html").write_text("html")
        assert find_layout(root, root / "index.kida", "kida") is None

    def test_file_outside_root(self, root: Path) -> None:
        (root.parent / "_layout.kida").write_text("outside")
        assert find_layout(root, root.parent / "page.kida", "kida") is None

    def test_directory_named_like_layout_ignored(self, root: Path) -> None:
        (root / "blog" / "_layout.kida").mkdir()
        (root / "_layout.kida").write_text("root")
        page = root / "blog" / "post.kida"
        assert find_layout(root, page, "kida") == root / "_layout.kida"

    def test_layout_appearing_later_is_found(self, root: Path) -> None:
        page = root / "index.kida"
        assert find_layout(root, page, "kida") is None
        (root / "_layout.kida").write_text("late")
        assert find_layout(root, page, "kida") == root / "_layout.kida"


class TestLayoutName:
    def test_layout_name(self) -> None:
        assert layout_name("kida") == "_layout.kida"
