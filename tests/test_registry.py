"""Tests for perch.transforms.registry — extension bindings."""

from functools import partial
from pathlib import Path

import pytest

from perch.config import PreviewConfig
from perch.templating.transformer import TemplateTransformer
from perch.transforms.email import EmailTransformer
from perch.transforms.markup import MarkdownTransformer, TextileTransformer
from perch.transforms.redirect import RedirectTransformer
from perch.transforms.registry import ExtensionRegistry, default_registry
from perch.transforms.style import SassTransformer


class TestRegister:
    def test_resolve_registered(self) -> None:
        registry = ExtensionRegistry()
        registry.register("email", EmailTransformer)
        assert registry.resolve("email") is EmailTransformer

    def test_miss_returns_none(self) -> None:
        registry = ExtensionRegistry()
        assert registry.resolve("png") is None

    def test_last_write_wins(self) -> None:
        registry = ExtensionRegistry()
        registry.register("txt", EmailTransformer)
        registry.register("txt", RedirectTransformer)
        assert registry.resolve("txt") is RedirectTransformer
        assert len(registry) == 1

    def test_rebinding_keeps_order(self) -> None:
        registry = ExtensionRegistry()
        registry.register("a", EmailTransformer)
        registry.register("b", EmailTransformer)
        registry.register("a", RedirectTransformer)
        assert registry.extensions() == ("a", "b")

    def test_extensions_are_normalized(self) -> None:
        registry = ExtensionRegistry()
        registry.register(".Email", EmailTransformer)
        assert registry.resolve("email") is EmailTransformer
        assert registry.resolve(".EMAIL") is EmailTransformer
        assert "email" in registry
        assert ".email" in registry

    def test_contains_rejects_non_strings(self) -> None:
        registry = ExtensionRegistry()
        registry.register("email", EmailTransformer)
        assert 42 not in registry


class TestFreeze:
    def test_register_after_freeze_raises(self) -> None:
        registry = ExtensionRegistry()
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RuntimeError, match="frozen"):
            registry.register("email", EmailTransformer)

    def test_resolve_after_freeze(self) -> None:
        registry = ExtensionRegistry()
        registry.register("email", EmailTransformer)
        registry.freeze()
        assert registry.resolve("email") is EmailTransformer


class TestDefaultRegistry:
    @pytest.fixture
    def registry(self, tmp_path: Path) -> ExtensionRegistry:
        return default_registry(PreviewConfig(root=tmp_path))

    def test_builtin_extensions(self, registry: ExtensionRegistry) -> None:
        assert registry.extensions() == (
            "textile",
            "markdown",
            "md",
            "sass",
            "kida",
            "email",
            "redirect",
        )

    def test_simple_bindings(self, registry: ExtensionRegistry) -> None:
        assert registry.resolve("textile") is TextileTransformer
        assert registry.resolve("email") is EmailTransformer
        assert registry.resolve("redirect") is RedirectTransformer

    def test_markdown_aliases_share_factory(self, registry: ExtensionRegistry) -> None:
        factory = registry.resolve("md")
        assert isinstance(factory, partial)
        assert factory.func is MarkdownTransformer
        assert registry.resolve("markdown") is factory

    def test_sass_uses_configured_style(self, tmp_path: Path) -> None:
        registry = default_registry(PreviewConfig(root=tmp_path, sass_output_style="compressed"))
        factory = registry.resolve("sass")
        assert isinstance(factory, partial)
        assert factory.func is SassTransformer
        assert factory.keywords == {"output_style": "compressed"}

    def test_template_extension_follows_config(self, tmp_path: Path) -> None:
        registry = default_registry(PreviewConfig(root=tmp_path, template_extension="tmpl"))
        factory = registry.resolve("tmpl")
        assert isinstance(factory, partial)
        assert factory.func is TemplateTransformer
        assert registry.resolve("kida") is None

    def test_not_frozen(self, registry: ExtensionRegistry) -> None:
        registry.register("txt", EmailTransformer)
        assert registry.resolve("txt") is EmailTransformer
