"""Command-line lookup against the default registry.

    python -m translatica.main welcome.user Carlos --locale pt_BR
    python -m translatica.main welcome.user Carlos --style indexed
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from translatica.config import get_settings
from translatica.defaults import get_registry
from translatica.exceptions import TranslaticaError
from translatica.formatting import MessageArgument
from translatica.logging import configure_logging, logger


def _parse_argument(raw: str) -> MessageArgument:
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="translatica", description="Resolve a translated message.")
    parser.add_argument("key", help="Fully qualified message key, e.g. welcome.user")
    parser.add_argument("args", nargs="*", help="Placeholder arguments; numeric values are passed as numbers")
    parser.add_argument("--locale", default=None, help="Locale such as pt_BR; defaults to the environment locale")
    parser.add_argument(
        "--style",
        choices=("printf", "indexed"),
        default="printf",
        help="Placeholder grammar of the template (%%s or {0})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    options = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValueError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)
    args = [_parse_argument(raw) for raw in options.args]

    try:
        registry = get_registry()
        if options.style == "indexed":
            text = registry.resolve_formatted(options.key, *args, locale=options.locale)
        else:
            text = registry.get_message(options.key, *args, locale=options.locale)
    except (TranslaticaError, ValueError) as exc:
        # ValueError covers unreadable bundle files found while building the registry
        logger.warning("message_lookup_failed", key=options.key, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
