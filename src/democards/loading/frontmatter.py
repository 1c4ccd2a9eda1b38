"""YAML front matter splitting and parsing for markdown cards."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import yaml

from democards.exceptions import ConfigParseError

FRONT_MATTER_DELIMITER = "---\n"

# Keys the card loader reads; their values must be scalars.
CARD_KEYS = ("cover", "id", "title", "description")

_SCALAR_TYPES = (str, int, float, bool, date)


def split_front_matter(contents: str) -> str | None:
    """Return the text between the first two delimiters, or None if there is none.

    Only the leading block is considered; a missing closing delimiter makes the
    remainder of the file the front matter.
    """
    parts = contents.split(FRONT_MATTER_DELIMITER)
    if len(parts) == 1:
        return None
    return parts[1].strip()


def parse_front_matter(text: str | None, source: str | Path = "<string>") -> dict:
    """Decode a front matter block into a mapping.

    Values of the card keys are converted to strings. Keys with an empty value
    are dropped so they fall back to their defaults.
    """
    if text is None:
        return {}

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML front matter in {source}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Front matter in {source} must be a mapping, got {type(data).__name__}"
        )

    config = {}
    for key, value in data.items():
        key = str(key)
        if value is None:
            continue
        if key in CARD_KEYS:
            if not isinstance(value, _SCALAR_TYPES):
                raise ConfigParseError(
                    f"Front matter key '{key}' in {source} must be a string, "
                    f"got {type(value).__name__}"
                )
            value = str(value)
        config[key] = value
    return config
