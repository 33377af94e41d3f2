from datetime import date
import logging

import pytest

from lifeprogress import config
from lifeprogress.logging_config import resolve_level, setup_logging
from lifeprogress.main import build_parser, resolve_life
from lifeprogress.model.life import InvalidLifeParameters, LifeParameters


def parse(*argv):
    return build_parser().parse_args(list(argv))


def test_defaults_to_example_life():
    assert resolve_life(parse()) == LifeParameters.example()


def test_explicit_age_and_week():
    life = resolve_life(parse("--age", "40", "--week", "3", "--life-expectancy", "80"))
    assert life == LifeParameters(life_expectancy_years=80, current_age=40, current_week_of_year=3)


def test_birthday_option_is_parsed_as_date():
    args = parse("--birthday", "1995-04-12")
    assert args.birthday == date(1995, 4, 12)
    life = resolve_life(args)
    assert life.life_expectancy_years == config.DEFAULT_LIFE_EXPECTANCY


def test_settings_defaults_are_used_when_options_are_missing():
    defaults = config.LifeDefaults(life_expectancy=70, birthday=None)
    life = resolve_life(parse(), defaults)
    assert life.life_expectancy_years == 70
    assert life.current_age == config.DEFAULT_AGE


def test_short_life_expectancy_keeps_age_in_range():
    life = resolve_life(parse("--life-expectancy", "20"))
    assert life.current_age == 20


def test_invalid_options_raise():
    with pytest.raises(InvalidLifeParameters):
        resolve_life(parse("--age", "95"))


def test_unknown_mode_is_rejected_by_parser():
    with pytest.raises(SystemExit):
        parse("--mode", "decade")


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "lifeprogress.log"
    setup_logging("DEBUG", log_file=str(log_file))
    logger = logging.getLogger("lifeprogress")
    try:
        logging.getLogger("lifeprogress.model").debug("grid ready")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized (DEBUG)." in content
        assert "lifeprogress.model - DEBUG - grid ready" in content
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
