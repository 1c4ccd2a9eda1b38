"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Card sources
    markdown_exts: list[str] = [".md"]
    encoding: str = "utf-8"

    # Cross-reference ids (anchor generation appends this to duplicate headings)
    default_id_suffix: str = "-1"

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    model_config = {"env_file": ".env", "env_prefix": "DEMOCARDS_"}
