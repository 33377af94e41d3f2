import re

import pytest

from lifeprogress.model.age_groups import (
    AGE_BANDS,
    AGE_GROUP_COLORS,
    EMPTY_COLOR,
    AgeGroup,
    age_group_color,
)


@pytest.mark.parametrize(
    "year_number, group",
    [
        (1, AgeGroup.BABY),
        (2, AgeGroup.TODDLER),
        (3, AgeGroup.TODDLER),
        (12, AgeGroup.CHILD),
        (13, AgeGroup.TEENAGER),
        (30, AgeGroup.ADULT),
        (31, AgeGroup.ADULT),
        (64, AgeGroup.MIDDLE_AGE),
        (65, AgeGroup.SENIOR),
        (150, AgeGroup.SENIOR),
    ],
)
def test_from_age(year_number, group):
    assert AgeGroup.from_age(year_number) is group


@pytest.mark.parametrize("year_number", [0, -1])
def test_non_positive_year_numbers_are_rejected(year_number):
    with pytest.raises(ValueError):
        age_group_color(year_number)


def test_bands_are_ordered_and_open_ended():
    bounds = [band.max_inclusive for band in AGE_BANDS]
    assert bounds[-1] is None
    assert bounds[:-1] == sorted(bounds[:-1])
    assert {band.group for band in AGE_BANDS} == set(AgeGroup)


def test_every_group_has_a_hex_color():
    for group in AgeGroup:
        assert re.fullmatch(r"#[0-9A-F]{6}", group.color)
    assert len(set(AGE_GROUP_COLORS.values())) == len(AgeGroup)
    assert EMPTY_COLOR not in AGE_GROUP_COLORS.values()


def test_color_is_total_up_to_expectancy_plus_one():
    for year_number in range(1, 92):
        assert age_group_color(year_number) in AGE_GROUP_COLORS.values()
