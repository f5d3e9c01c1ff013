"""Tests for perch.templating.context — layouts and partials."""

import os
from pathlib import Path

import pytest
from kida import Environment

from perch.config import PreviewConfig
from perch.errors import ConfigurationError, RenderError
from perch.templating.context import RenderContext
from perch.templating.environment import create_environment


@pytest.fixture
def root(tmp_path: Path) -> Path:
    site = (tmp_path / "site").resolve()
    site.mkdir()
    return site


@pytest.fixture
def env(root: Path) -> Environment:
    return create_environment(PreviewConfig(root=root), root)


def _context(root: Path, env: Environment, relative: str) -> RenderContext:
    return RenderContext(root=root, current_file=root / relative, env=env, extension="kida")


class TestRenderPage:
    def test_without_layout_matches_plain_render(self, root: Path, env: Environment) -> None:
        (root / "page.kida").write_text("<p>{{ 1 + 2 }}</p>")
        context = _context(root, env, "page.kida")
        assert context.render_page() == "<p>3</p>"
        assert context.render_page() == context.render_file(root / "page.kida")

    def test_layout_receives_content(self, root: Path, env: Environment) -> None:
        (root / "_layout.kida").write_text("<main>{{ content }}</main>")
        (root / "page.kida").write_text("<p>Hi</p>")
        assert _context(root, env, "page.kida").render_page() == "<main><p>Hi</p></main>"

    def test_layout_from_ancestor(self, root: Path, env: Environment) -> None:
        (root / "docs").mkdir()
        (root / "_layout.kida").write_text("[{{ content }}]")
        (root / "docs" / "intro.kida").write_text("intro")
        assert _context(root, env, "docs/intro.kida").render_page() == "[intro]"

    def test_edit_between_renders_is_picked_up(self, root: Path, env: Environment) -> None:
        page = root / "page.kida"
        page.write_text("first")
        context = _context(root, env, "page.kida")
        assert context.render_page() == "first"
        page.write_text("second, and longer")
        bumped = page.stat().st_mtime + 10
        os.utime(page, (bumped, bumped))
        assert context.render_page() == "second, and longer"


class TestPartials:
    def test_sibling_partial(self, root: Path, env: Environment) -> None:
        (root / "_nav.kida").write_text("<nav/>")
        (root / "page.kida").write_text('{{ render(partial="nav") }}<p/>')
        assert _context(root, env, "page.kida").render_page() == "<nav/><p/>"

    def test_subdirectory_partial(self, root: Path, env: Environment) -> None:
        (root / "shared").mkdir()
        (root / "shared" / "_nav.kida").write_text("shared-nav")
        (root / "page.kida").write_text('{{ render(partial="shared/nav") }}')
        assert _context(root, env, "page.kida").render_page() == "shared-nav"

    def test_root_relative_partial(self, root: Path, env: Environment) -> None:
        (root / "docs").mkdir()
        (root / "_footer.kida").write_text("footer")
        (root / "docs" / "page.kida").write_text('{{ render(partial="/footer") }}')
        assert _context(root, env, "docs/page.kida").render_page() == "footer"

    def test_nested_partial_resolves_from_its_own_directory(
        self, root: Path, env: Environment
    ) -> None:
        (root / "shared").mkdir()
        (root / "shared" / "_nav.kida").write_text('<nav>{{ render(partial="item") }}</nav>')
        (root / "shared" / "_item.kida").write_text("<a/>")
        (root / "page.kida").write_text('{{ render(partial="shared/nav") }}')
        assert _context(root, env, "page.kida").render_page() == "<nav><a/></nav>"

    def test_partial_from_layout_resolves_from_layout_directory(
        self, root: Path, env: Environment
    ) -> None:
        (root / "docs").mkdir()
        (root / "_layout.kida").write_text('{{ render(partial="header") }}{{ content }}')
        (root / "_header.kida").write_text("<h1/>")
        (root / "docs" / "page.kida").write_text("body")
        assert _context(root, env, "docs/page.kida").render_page() == "<h1/>body"

    def test_missing_partial_raises_render_error(self, root: Path, env: Environment) -> None:
        (root / "page.kida").write_text('{{ render(partial="missing") }}')
        with pytest.raises(RenderError, match="missing") as exc_info:
            _context(root, env, "page.kida").render_page()
        assert exc_info.value.path == str(root / "_missing.kida")

    def test_partial_cannot_escape_root(self, root: Path, env: Environment) -> None:
        (root.parent / "_secret.kida").write_text("secret")
        context = _context(root, env, "page.kida")
        with pytest.raises(RenderError):
            context.resolve_partial("../secret")


class TestRenderOptions:
    def test_unsupported_option(self, root: Path, env: Environment) -> None:
        context = _context(root, env, "page.kida")
        with pytest.raises(ConfigurationError, match="not supported"):
            context.render(template="other")

    def test_extra_option_with_partial(self, root: Path, env: Environment) -> None:
        (root / "_nav.kida").write_text("nav")
        context = _context(root, env, "page.kida")
        with pytest.raises(ConfigurationError):
            context.render(partial="nav", locals={"a": 1})

    def test_direct_render_call(self, root: Path, env: Environment) -> None:
        (root / "_nav.kida").write_text("nav")
        assert str(_context(root, env, "page.kida").render(partial="nav")) == "nav"


class TestResolvePartial:
    def test_relative(self, root: Path, env: Environment) -> None:
        (root / "docs").mkdir()
        (root / "docs" / "_toc.kida").write_text("")
        context = _context(root, env, "docs/page.kida")
        assert context.resolve_partial("toc") == root / "docs" / "_toc.kida"

    def test_template_name(self, root: Path, env: Environment) -> None:
        context = _context(root, env, "docs/page.kida")
        assert context.template_name(root / "docs" / "page.kida") == "docs/page.kida"
