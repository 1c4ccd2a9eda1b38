"""Entrypoint: print the resolved metadata of demo card files as JSON."""

from __future__ import annotations

import argparse
import json
import sys

from democards.config.settings import Settings
from democards.exceptions import DemoCardsError
from democards.loading.loader_registry import create_default_registry
from democards.models.schemas import DemoCardSchema
from democards.observability.logger import configure_logging, get_logger

logger = get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="democards",
        description="Resolve cover, id, title and description of demo card files.",
    )
    parser.add_argument("paths", nargs="+", help="Demo card source files")
    parser.add_argument("--log-level", default=None, help="Override DEMOCARDS_LOG_LEVEL")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(args.log_level or settings.log_level, settings.log_json)

    registry = create_default_registry(settings)
    cards = []
    for path in args.paths:
        try:
            card = registry.load_card(path)
        except DemoCardsError as e:
            logger.error("card_load_failed", path=path, error=type(e).__name__)
            print(f"{type(e).__name__}: {e}", file=sys.stderr)
            return 1
        cards.append(DemoCardSchema.from_card(card).model_dump())

    print(json.dumps(cards, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
