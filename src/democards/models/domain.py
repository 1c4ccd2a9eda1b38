"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DemoCard:
    """Display metadata of one demo file in a documentation gallery.

    * ``path``: path to the source file
    * ``cover``: path to the cover image, ``None`` when no image is available
    * ``id``: cross-reference id
    * ``title``: one-line title shown under the cover
    * ``description``: multi-line description shown on hover
    """

    path: Path
    cover: Path | None
    id: str
    title: str
    description: str
