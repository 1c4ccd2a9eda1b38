"""Markdown demo card loader: front matter -> cover -> id -> title -> description."""

from __future__ import annotations

from pathlib import Path

from democards.config.settings import Settings
from democards.exceptions import CardNotFoundError
from democards.loading.frontmatter import parse_front_matter, split_front_matter
from democards.loading.resolvers import (
    resolve_cover,
    resolve_description,
    resolve_id,
    resolve_title,
)
from democards.models.domain import DemoCard
from democards.observability.logger import get_logger

logger = get_logger("markdown_card")


class MarkdownCardLoader:
    """Builds a ``DemoCard`` from a markdown file.

    The file may start with a YAML front matter block overriding any of
    ``cover``, ``id``, ``title`` and ``description``::

        ---
        title: passing extra information
        cover: cover.png
        id: non_ambiguious_id
        description: this demo shows how you can pass extra demo information.
        ---

    Missing keys fall back to: the first existing image linked in the file
    (or no cover), the documentation anchor id of the file name, the
    humanized file name, and the title respectively.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()

    @property
    def supported_extensions(self) -> list[str]:
        return list(self._settings.markdown_exts)

    def read(self, path: str | Path) -> str:
        path = Path(path)
        if not path.is_file():
            raise CardNotFoundError(f"Demo card source {path} does not exist")
        try:
            return path.read_text(encoding=self._settings.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise CardNotFoundError(f"Demo card source {path} is not readable: {e}") from e

    def load(self, path: str | Path) -> DemoCard:
        path = Path(path)
        contents = self.read(path)

        front_matter = split_front_matter(contents)
        config = parse_front_matter(front_matter, source=path)
        logger.debug("front_matter_parsed", path=str(path), keys=sorted(config))

        cover = resolve_cover(config, path, contents, self._settings.encoding)
        card_id = resolve_id(config, path, self._settings.default_id_suffix)
        title = resolve_title(config, path)
        description = resolve_description(config, title)

        card = DemoCard(
            path=path,
            cover=cover,
            id=card_id,
            title=title,
            description=description,
        )
        logger.debug("card_loaded", path=str(path), id=card_id, has_cover=cover is not None)
        return card


def load(path: str | Path) -> DemoCard:
    """Load a markdown demo card with default settings."""
    return MarkdownCardLoader().load(path)
