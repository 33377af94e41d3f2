"""Age groups and their colours."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class AgeGroup(StrEnum):
    BABY = "baby"
    TODDLER = "toddler"
    CHILD = "child"
    TEENAGER = "teenager"
    YOUNG_ADULT = "young adult"
    ADULT = "adult"
    MIDDLE_AGE = "middle age"
    SENIOR = "senior"

    @classmethod
    def from_age(cls, year_number: int) -> AgeGroup:
        """
        Group for a 1-indexed year of life (1 = first year).

        Total over all positive integers, the last group has no upper bound.
        """
        if year_number < 1:
            raise ValueError(f"year_number must be >= 1, got {year_number}")
        for band in AGE_BANDS:
            if band.max_inclusive is None or year_number <= band.max_inclusive:
                return band.group
        raise AssertionError("AGE_BANDS must end with an open-ended band")

    @property
    def color(self) -> str:
        return AGE_GROUP_COLORS[self]


@dataclass(frozen=True)
class AgeBand:
    """Inclusive upper bound of a group; None means open-ended."""
    group: AgeGroup
    max_inclusive: Optional[int]


# Ordered, each band starts right after the previous one ends
AGE_BANDS: list[AgeBand] = [
    AgeBand(AgeGroup.BABY, 1),
    AgeBand(AgeGroup.TODDLER, 3),
    AgeBand(AgeGroup.CHILD, 12),
    AgeBand(AgeGroup.TEENAGER, 19),
    AgeBand(AgeGroup.YOUNG_ADULT, 29),
    AgeBand(AgeGroup.ADULT, 49),
    AgeBand(AgeGroup.MIDDLE_AGE, 64),
    AgeBand(AgeGroup.SENIOR, None),
]

AGE_GROUP_COLORS: dict[AgeGroup, str] = {
    AgeGroup.BABY: "#FF6B6B",
    AgeGroup.TODDLER: "#FF9F43",
    AgeGroup.CHILD: "#FECA57",
    AgeGroup.TEENAGER: "#1DD1A1",
    AgeGroup.YOUNG_ADULT: "#48DBFB",
    AgeGroup.ADULT: "#2E86DE",
    AgeGroup.MIDDLE_AGE: "#5F27CD",
    AgeGroup.SENIOR: "#8395A7",
}

# Neutral fill for weeks that have not happened yet
EMPTY_COLOR: str = "#D9D9DE"


def age_group_color(year_number: int) -> str:
    return AgeGroup.from_age(year_number).color
