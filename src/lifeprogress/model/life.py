"""
Life Parameters (Data Model)
============================
This module defines the read-only input the whole visualization is derived
from: how long the life is expected to last, which year of it is in progress
and how many weeks of that year have passed.

Why is this file needed?
------------------------
1. Validation: Malformed parameters are rejected once, at construction, so
   the layout code never has to guard against them.
2. Derivation: It turns a birthday into the (age, week) pair the grid uses.

Classes:
    InvalidLifeParameters: Raised for any configuration outside the grid.
    LifeParameters: The validated, frozen parameter set.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import logging
from typing import Optional

from lifeprogress import config

logger = logging.getLogger(__name__)


class InvalidLifeParameters(ValueError):
    """The life configuration cannot be laid out as a grid."""


def _anniversary(birthday: date, year: int) -> date:
    """Birthday in the given year; Feb 29 falls back to Feb 28."""
    try:
        return birthday.replace(year=year)
    except ValueError:
        return birthday.replace(year=year, day=28)


@dataclass(frozen=True)
class LifeParameters:
    """
    Life as seen by the grid.

    ``current_age`` is the 1-indexed year of life in progress, so a newborn
    has age 1 and its row is row 0.
    """
    life_expectancy_years: int
    current_age: int
    current_week_of_year: int
    total_weeks_per_year: int = config.WEEKS_PER_YEAR

    def __post_init__(self) -> None:
        if self.total_weeks_per_year < 1:
            raise InvalidLifeParameters(
                f"total_weeks_per_year must be >= 1, got {self.total_weeks_per_year}"
            )
        if self.life_expectancy_years < 1:
            raise InvalidLifeParameters(
                f"life_expectancy_years must be >= 1, got {self.life_expectancy_years}"
            )
        if not 1 <= self.current_age <= self.life_expectancy_years:
            raise InvalidLifeParameters(
                f"current_age must be in [1, {self.life_expectancy_years}], got {self.current_age}"
            )
        if not 0 <= self.current_week_of_year < self.total_weeks_per_year:
            raise InvalidLifeParameters(
                f"current_week_of_year must be in [0, {self.total_weeks_per_year}), "
                f"got {self.current_week_of_year}"
            )

    @classmethod
    def from_birthday(
        cls,
        birthday: date,
        life_expectancy_years: int = config.DEFAULT_LIFE_EXPECTANCY,
        today: Optional[date] = None,
        total_weeks_per_year: int = config.WEEKS_PER_YEAR,
    ) -> LifeParameters:
        """
        Derive the parameters from a date of birth.

        The week of year counts completed weeks since the last birthday and is
        clamped to the last column (a year has 52 weeks and one or two days).
        """
        today = today or date.today()
        if birthday > today:
            raise InvalidLifeParameters(f"birthday {birthday} is in the future (today is {today})")

        completed_years = today.year - birthday.year
        last_birthday = _anniversary(birthday, today.year)
        if last_birthday > today:
            completed_years -= 1
            last_birthday = _anniversary(birthday, today.year - 1)

        week_of_year = min((today - last_birthday).days // 7, total_weeks_per_year - 1)
        logger.debug(f"Birthday {birthday}: {completed_years} completed years, week {week_of_year}")

        return cls(
            life_expectancy_years=life_expectancy_years,
            current_age=completed_years + 1,
            current_week_of_year=week_of_year,
            total_weeks_per_year=total_weeks_per_year,
        )

    @classmethod
    def example(cls) -> LifeParameters:
        return cls(
            life_expectancy_years=config.DEFAULT_LIFE_EXPECTANCY,
            current_age=config.DEFAULT_AGE,
            current_week_of_year=config.DEFAULT_WEEK_OF_YEAR,
        )

    @property
    def total_weeks(self) -> int:
        return self.life_expectancy_years * self.total_weeks_per_year

    @property
    def weeks_lived(self) -> int:
        return (self.current_age - 1) * self.total_weeks_per_year + self.current_week_of_year

    @property
    def progress(self) -> float:
        """Fraction of the expected life already lived (0..1)."""
        return self.weeks_lived / self.total_weeks
