"""Per-field resolution of demo card metadata.

Each resolver takes the parsed front matter mapping and the card source path
and falls back to a default derived from the file when the key is absent.
"""

from __future__ import annotations

import re
from pathlib import Path

from democards.exceptions import (
    AmbiguousIdError,
    ConfigParseError,
    InvalidCoverError,
    UnsupportedKeyError,
)

DEFAULT_ID_SUFFIX = "-1"

# ![alt](link) and ![alt](link "title"); only the link is captured
MD_IMAGE_PATTERN = re.compile(r'!\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+"[^"]*")?\s*\)')


def find_image_links(contents: str) -> list[str]:
    """Markdown image links in document order."""
    return [m.group(1) for m in MD_IMAGE_PATTERN.finditer(contents)]


def resolve_cover(
    config: dict,
    path: str | Path,
    contents: str | None = None,
    encoding: str = "utf-8",
) -> Path | None:
    path = Path(path)
    root = path.parent

    if "cover" in config:
        cover_path = root / config["cover"]
        if not cover_path.is_file():
            raise InvalidCoverError(f"{cover_path} isn't a valid image file for cover of {path}")
        return cover_path

    if contents is None:
        contents = path.read_text(encoding=encoding)
    for link in find_image_links(contents):
        candidate = root / link
        if candidate.is_file():
            return candidate
    return None


def default_id(path: str | Path, suffix: str = DEFAULT_ID_SUFFIX) -> str:
    """Anchor id the documentation tool generates for the card's file name."""
    return Path(path).stem.replace(" ", "-") + suffix


def validate_id(card_id: str, path: str | Path, suffix: str = DEFAULT_ID_SUFFIX) -> None:
    path = Path(path)
    if not card_id or re.search(r"\s", card_id):
        raise AmbiguousIdError(f"invalid id {card_id!r} in {path}: must be non-empty without spaces")

    if card_id.endswith(suffix) and card_id != default_id(path, suffix):
        raise AmbiguousIdError(
            f"id {card_id!r} in {path} looks like an auto-generated id of another file; "
            f"use {default_id(path, suffix)!r} or an id not ending in {suffix!r}"
        )


def resolve_id(config: dict, path: str | Path, suffix: str = DEFAULT_ID_SUFFIX) -> str:
    if "id" not in config:
        return default_id(path, suffix)

    card_id = config["id"]
    validate_id(card_id, path, suffix)
    return card_id


def default_title(path: str | Path) -> str:
    name = Path(path).stem
    return (name[:1].upper() + name[1:]).replace("_", " ").strip()


def resolve_title(config: dict, path: str | Path) -> str:
    if "title" in config:
        title = config["title"]
        if not title.strip() or "\n" in title.strip():
            raise ConfigParseError(f"title {title!r} in {path} must be a non-empty single line")
        return title
    return default_title(path)


def resolve_description(config: dict, title: str) -> str:
    return config.get("description", title)


def load_config(
    key: str,
    config: dict,
    path: str | Path,
    contents: str | None = None,
    title: str | None = None,
    suffix: str = DEFAULT_ID_SUFFIX,
):
    """Resolve a single card field by key name."""
    if key == "cover":
        return resolve_cover(config, path, contents)
    elif key == "id":
        return resolve_id(config, path, suffix)
    elif key == "title":
        return resolve_title(config, path)
    elif key == "description":
        if title is None:
            title = resolve_title(config, path)
        return resolve_description(config, title)
    else:
        raise UnsupportedKeyError(f"Unrecognized key '{key}' for markdown demo card")
