"""Tests for perch.templating.environment — kida setup and filters."""

from pathlib import Path

from kida.utils.html import Markup

from perch.config import PreviewConfig
from perch.templating.environment import create_environment, markdown_filter
from perch.transforms.markup import create_markdown


class TestMarkdownFilter:
    def test_returns_markup(self) -> None:
        result = markdown_filter("Some *words*")
        assert isinstance(result, Markup)
        assert "<em>words</em>" in result

    def test_empty_input(self) -> None:
        assert markdown_filter(None) == ""
        assert markdown_filter("") == ""


class TestEnvironment:
    def test_filter_available_in_templates(self, tmp_path: Path) -> None:
        root = tmp_path.resolve()
        (root / "page.kida").write_text('{{ "**bold**" | markdown }}')
        env = create_environment(PreviewConfig(root=root), root)
        assert "<strong>bold</strong>" in env.get_template("page.kida").render({})

    def test_loads_by_relative_name(self, tmp_path: Path) -> None:
        root = tmp_path.resolve()
        (root / "docs").mkdir()
        (root / "docs" / "a.kida").write_text("{{ name }}")
        env = create_environment(PreviewConfig(root=root), root)
        assert env.get_template("docs/a.kida").render({"name": "perch"}) == "perch"


class TestCreateMarkdown:
    def test_shared_converter(self) -> None:
        md = create_markdown(plugins=["all"], highlight=False)
        assert "<em>x</em>" in md("*x*")
