from __future__ import annotations

import argparse
import dataclasses
import sys

from pyrunner.config import LOG_LEVELS, ConfigError, load_config
from pyrunner.logger import get_logger, setup_logging


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pyrunner", description="Side-scrolling obstacle runner.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible obstacle sequences.")
    parser.add_argument("--mute", action="store_true", help="Disable sound effects.")
    parser.add_argument("--log-level", default=None, type=str.lower, choices=LOG_LEVELS, help="Logging verbosity.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        config = load_config()
    except ConfigError as e:
        print(f"pyrunner: {e}", file=sys.stderr)
        return 2

    overrides: dict = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.mute:
        overrides["mute"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level
    config = dataclasses.replace(config, **overrides)

    setup_logging(config.log_level)
    log = get_logger("main")

    # Imported late so --help works without a display.
    from pyrunner.app.game_app import GameApp

    try:
        GameApp(config).run()
    except KeyboardInterrupt:
        log.info("interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
