"""Protocol for card loaders."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from democards.models.domain import DemoCard


class CardLoader(Protocol):
    def load(self, path: str | Path) -> DemoCard:
        """Returns a fully resolved card for the source file."""
        ...

    @property
    def supported_extensions(self) -> list[str]: ...
