"""Registry mapping file extensions to card loaders."""

from __future__ import annotations

from pathlib import Path

from democards.config.settings import Settings
from democards.exceptions import UnsupportedCardError
from democards.loading.markdown_card import MarkdownCardLoader
from democards.models.domain import DemoCard
from democards.protocols.loader import CardLoader


class CardLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: dict[str, CardLoader] = {}

    def register(self, extension: str, loader: CardLoader) -> None:
        self._loaders[extension.lower()] = loader

    def get_loader(self, filename: str | Path) -> CardLoader:
        ext = Path(filename).suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise UnsupportedCardError(
                f"No card loader registered for extension '{ext}'. "
                f"Supported: {list(self._loaders.keys())}"
            )
        return loader

    def supported_types(self) -> list[str]:
        return list(self._loaders.keys())

    def load_card(self, path: str | Path) -> DemoCard:
        return self.get_loader(path).load(path)


def create_default_registry(settings: Settings | None = None) -> CardLoaderRegistry:
    """Create a registry with all built-in card loaders."""
    registry = CardLoaderRegistry()
    loaders: list[CardLoader] = [MarkdownCardLoader(settings)]
    for loader in loaders:
        for ext in loader.supported_extensions:
            registry.register(ext, loader)
    return registry


def load_card(path: str | Path) -> DemoCard:
    return create_default_registry().load_card(path)
