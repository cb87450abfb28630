from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from byterate import __version__
from byterate.domain.exceptions import RateParseError
from byterate.infrastructure.config import load_config
from byterate.infrastructure.logging.setup import configure_logging
from byterate.interfaces.cli.presenter import render_lines, render_usage
from byterate.interfaces.composition import build_use_case

PROG = "byterate"

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=render_usage(PROG),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="Rate expression, e.g. 1.25 MB / s (arguments are joined with spaces).",
    )

    # Config wiring flags (no business logic)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )
    parser.add_argument(
        "--strict-units",
        action="store_true",
        default=None,
        help="Reject expressions without a unit instead of assuming bytes.",
    )

    return parser.parse_intermixed_args(list(argv))


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint.

    Returns the exit status: 0 on success, 1 on a malformed expression,
    2 on a configuration problem.
    """

    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    if not args.expression:
        print(render_usage(PROG))
        return EXIT_OK

    cli_overrides: dict[str, Any] = {}
    if args.log_level:
        cli_overrides["log_level"] = args.log_level
    if args.log_format:
        cli_overrides["log_format"] = args.log_format
    if args.strict_units:
        cli_overrides["strict_units"] = True

    try:
        config = load_config(
            config_path=Path(args.config) if args.config else None,
            dotenv_path=Path(args.dotenv) if args.dotenv else None,
            cli_overrides=cli_overrides,
        )
    except FileNotFoundError as e:
        print(f"{PROG}: config file not found: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except OSError as e:
        print(f"{PROG}: cannot read config: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except (ValueError, yaml.YAMLError) as e:
        print(f"{PROG}: invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(config)

    expression = " ".join(args.expression)
    try:
        report = build_use_case(config).execute(expression)
    except RateParseError as e:
        print(f"{config.app_name}: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    for line in render_lines(
        report,
        precision=config.display_precision,
        value_width=config.display_value_width,
        unit_width=config.display_unit_width,
    ):
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(start())
