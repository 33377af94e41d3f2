from datetime import date

import pytest

from lifeprogress.model.life import InvalidLifeParameters, LifeParameters


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(life_expectancy_years=0, current_age=1, current_week_of_year=0),
        dict(life_expectancy_years=90, current_age=0, current_week_of_year=0),
        dict(life_expectancy_years=90, current_age=91, current_week_of_year=0),
        dict(life_expectancy_years=90, current_age=30, current_week_of_year=-1),
        dict(life_expectancy_years=90, current_age=30, current_week_of_year=52),
        dict(life_expectancy_years=90, current_age=30, current_week_of_year=0, total_weeks_per_year=0),
    ],
)
def test_invalid_parameters_are_rejected_at_construction(kwargs):
    with pytest.raises(InvalidLifeParameters):
        LifeParameters(**kwargs)


def test_invalid_parameters_is_a_value_error():
    assert issubclass(InvalidLifeParameters, ValueError)


def test_boundary_values_are_accepted():
    life = LifeParameters(life_expectancy_years=1, current_age=1, current_week_of_year=51)
    assert life.total_weeks == 52
    assert life.weeks_lived == 51


def test_example_life_counts(life):
    assert life.total_weeks == 90 * 52
    assert life.weeks_lived == 29 * 52 + 10
    assert life.progress == pytest.approx((29 * 52 + 10) / (90 * 52))


def test_from_birthday_on_birthday():
    life = LifeParameters.from_birthday(date(1995, 4, 12), 90, today=date(2025, 4, 12))
    assert life.current_age == 31
    assert life.current_week_of_year == 0


def test_from_birthday_counts_completed_weeks():
    life = LifeParameters.from_birthday(date(1995, 4, 12), 90, today=date(2025, 4, 26))
    assert life.current_age == 31
    assert life.current_week_of_year == 2


def test_from_birthday_day_before_birthday_clamps_to_last_week():
    life = LifeParameters.from_birthday(date(1995, 4, 12), 90, today=date(2025, 4, 11))
    assert life.current_age == 30
    assert life.current_week_of_year == 51


def test_from_birthday_leap_day():
    life = LifeParameters.from_birthday(date(2000, 2, 29), 90, today=date(2001, 3, 1))
    assert life.current_age == 2
    assert life.current_week_of_year == 0


def test_from_birthday_newborn():
    life = LifeParameters.from_birthday(date(2025, 1, 1), 90, today=date(2025, 1, 1))
    assert life.current_age == 1
    assert life.weeks_lived == 0


def test_from_birthday_in_future_is_rejected():
    with pytest.raises(InvalidLifeParameters, match="future"):
        LifeParameters.from_birthday(date(2030, 1, 1), 90, today=date(2025, 1, 1))


def test_from_birthday_older_than_expectancy_is_rejected():
    with pytest.raises(InvalidLifeParameters, match="current_age"):
        LifeParameters.from_birthday(date(1900, 1, 1), 90, today=date(2025, 1, 1))
