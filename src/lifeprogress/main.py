"""
Application Initialization
==========================
This module parses the command line, builds the life parameters and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Resolves the LifeParameters (CLI options, then QSettings, then the example).
3. Instantiates the Main Window (View), passing the parameters in.
"""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import Optional, Sequence

from lifeprogress import __version__, config
from lifeprogress.logging_config import install_qt_message_handler, setup_logging
from lifeprogress.model.layout import DisplayMode
from lifeprogress.model.life import InvalidLifeParameters, LifeParameters

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lifeprogress",
        description="Show your life as a calendar of weeks.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--birthday", type=date.fromisoformat, metavar="YYYY-MM-DD",
        help="Date of birth; age and week of year are derived from it.",
    )
    parser.add_argument(
        "--life-expectancy", type=int, metavar="YEARS",
        help=f"Number of rows in the grid (default: settings or {config.DEFAULT_LIFE_EXPECTANCY}).",
    )
    parser.add_argument("--age", type=int, help="Year of life in progress (1 = first year).")
    parser.add_argument("--week", type=int, help="Completed weeks of the current year (0-51).")
    parser.add_argument(
        "--mode", choices=[m.value for m in DisplayMode], default=DisplayMode.LIFE.value,
        help="Initial view.",
    )
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser


def resolve_life(args: argparse.Namespace, defaults: Optional[config.LifeDefaults] = None) -> LifeParameters:
    """
    Build LifeParameters from parsed arguments.

    Explicit --age/--week win over --birthday; missing values come from
    ``defaults`` (stored settings) and finally from the example life.
    """
    defaults = defaults or config.LifeDefaults()
    expectancy = args.life_expectancy if args.life_expectancy is not None else defaults.life_expectancy

    if args.age is not None or args.week is not None:
        return LifeParameters(
            life_expectancy_years=expectancy,
            current_age=args.age if args.age is not None else config.DEFAULT_AGE,
            current_week_of_year=args.week if args.week is not None else 0,
        )

    birthday = args.birthday or defaults.birthday
    if birthday is not None:
        return LifeParameters.from_birthday(birthday, life_expectancy_years=expectancy)

    if expectancy == config.DEFAULT_LIFE_EXPECTANCY:
        return LifeParameters.example()
    return LifeParameters(
        life_expectancy_years=expectancy,
        current_age=min(config.DEFAULT_AGE, expectancy),
        current_week_of_year=config.DEFAULT_WEEK_OF_YEAR,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(level=args.log_level, log_file=args.log_file)
    except ValueError as e:
        parser.error(str(e))

    # Qt is imported lazily so --help and --version work without a display
    from lifeprogress.app.application import create_app
    from lifeprogress.view.main_window import MainWindow

    app = create_app(sys.argv[:1])
    install_qt_message_handler()

    try:
        life = resolve_life(args, config.read_life_defaults())
    except InvalidLifeParameters as e:
        parser.error(str(e))

    logger.info(
        f"Life: year {life.current_age} of {life.life_expectancy_years}, "
        f"week {life.current_week_of_year} ({life.progress:.1%} lived)"
    )

    window = MainWindow(life, mode=DisplayMode(args.mode))
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
