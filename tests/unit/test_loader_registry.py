"""Tests for the card loader registry."""

import pytest

from democards.config.settings import Settings
from democards.exceptions import UnsupportedCardError
from democards.loading.loader_registry import (
    CardLoaderRegistry,
    create_default_registry,
    load_card,
)
from democards.loading.markdown_card import MarkdownCardLoader


def test_default_registry_markdown():
    registry = create_default_registry()
    assert registry.supported_types() == [".md"]
    assert isinstance(registry.get_loader("demo.md"), MarkdownCardLoader)


def test_extension_lookup_is_case_insensitive():
    registry = create_default_registry()
    assert isinstance(registry.get_loader("DEMO.MD"), MarkdownCardLoader)


def test_unsupported_extension():
    registry = create_default_registry()
    with pytest.raises(UnsupportedCardError, match=".jl"):
        registry.get_loader("demo.jl")


def test_registry_from_settings():
    registry = create_default_registry(Settings(markdown_exts=[".md", ".markdown"]))
    assert set(registry.supported_types()) == {".md", ".markdown"}


def test_empty_registry():
    with pytest.raises(UnsupportedCardError):
        CardLoaderRegistry().get_loader("demo.md")


def test_load_card(write_card):
    path = write_card("hello_world.md", "---\ndescription: hi\n---\n")
    card = load_card(path)
    assert card.title == "Hello world"
    assert card.description == "hi"
