"""
Grid Layout Engine
==================
Pure mapping from (display mode, week index, life parameters) to the cell
rectangles of the life calendar, plus the fill state of every cell.

Why is this file needed?
------------------------
Most of the calendar is a fixed 52-column grid that never moves. The row of
the current year is the exception: it is laid out either as one row of the
life grid or as a zoomed 6-column grid, and the transition between the two
interpolates between the rectangles computed here.

All coordinates are layout-local: the origin is the top-left corner of the
grid and the container width is given by the caller. The background grid and
the current-year row share this space, so in LIFE mode they align exactly.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
import math
from typing import TYPE_CHECKING, Iterator, Optional

import numpy as np

from lifeprogress import config
from lifeprogress.model.age_groups import EMPTY_COLOR, age_group_color
from lifeprogress.model.life import InvalidLifeParameters, LifeParameters

if TYPE_CHECKING:
    import numpy.typing as npt
    from lifeprogress.model.transition import AnimationSpec


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class DisplayMode(StrEnum):
    LIFE = "life"
    CURRENT_YEAR = "currentYear"

    def toggled(self) -> DisplayMode:
        return DisplayMode.CURRENT_YEAR if self is DisplayMode.LIFE else DisplayMode.LIFE


class FillKind(IntEnum):
    PAST = 0
    CURRENT_PARTIAL = 1
    FUTURE = 2


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class CellRect:
    x: float
    y: float
    width: float
    height: float

    def inset(self, padding: float) -> CellRect:
        """Shrink by ``padding`` on every side."""
        return CellRect(
            x=self.x + padding,
            y=self.y + padding,
            width=self.width - 2 * padding,
            height=self.height - 2 * padding,
        )

    def lerp(self, other: CellRect, t: float) -> CellRect:
        """Linear interpolation towards ``other`` (t=0 is self, t=1 is other)."""
        return CellRect(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
            width=self.width + (other.width - self.width) * t,
            height=self.height + (other.height - self.height) * t,
        )

    def scaled(self, factor: float) -> CellRect:
        return CellRect(self.x * factor, self.y * factor, self.width * factor, self.height * factor)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.x, self.y, self.width, self.height

    @classmethod
    def from_array(cls, values: npt.NDArray[np.float64]) -> CellRect:
        x, y, w, h = (float(v) for v in values)
        return cls(x, y, w, h)


@dataclass(frozen=True)
class DrawCommand:
    """Fill ``rect`` with ``color``; ``animation`` is set while a transition is scheduled."""
    rect: CellRect
    color: str
    opacity: float = 1.0
    animation: Optional[AnimationSpec] = None


@dataclass(frozen=True)
class CellState:
    """Visual state of one week; recomputed on every render."""
    year_index: int
    week_index: int
    fill_kind: FillKind
    color: str


# ------------------------------------------------------------------------------
# Engine
# ------------------------------------------------------------------------------
class GridLayoutEngine:
    """
    Stateless layout of the life grid for a given set of life parameters.

    Args:
        life: Validated life parameters.
        column_count: Columns of the CURRENT_YEAR grid.
    """
    def __init__(self, life: LifeParameters, column_count: int = config.CURRENT_YEAR_COLUMN_COUNT) -> None:
        if column_count < 1:
            raise InvalidLifeParameters(f"column_count must be >= 1, got {column_count}")
        self.life = life
        self.column_count = column_count

    @property
    def weeks(self) -> int:
        return self.life.total_weeks_per_year

    @property
    def years(self) -> int:
        return self.life.life_expectancy_years

    @property
    def current_row(self) -> int:
        """Row of the current year in LIFE mode."""
        return self.life.current_age - 1

    @property
    def current_year_row_count(self) -> int:
        return math.ceil(self.weeks / self.column_count)

    # ---- geometry ----

    def cell_size(self, mode: DisplayMode, container_width: float) -> float:
        if mode is DisplayMode.CURRENT_YEAR:
            return container_width / self.column_count
        return container_width / self.weeks

    @staticmethod
    def cell_padding(cell_size: float) -> float:
        return cell_size / config.CELL_PADDING_DIVISOR

    def content_height(self, mode: DisplayMode, container_width: float) -> float:
        rows = self.current_year_row_count if mode is DisplayMode.CURRENT_YEAR else self.years
        return rows * self.cell_size(mode, container_width)

    def grid_position(self, week_index: int, mode: DisplayMode) -> tuple[int, int]:
        """(row, column) of a week of the current year."""
        self._check_week(week_index)
        if mode is DisplayMode.CURRENT_YEAR:
            return divmod(week_index, self.column_count)
        return self.current_row, week_index

    def stagger_row(self, week_index: int) -> int:
        """Row used for the animation stagger; always the CURRENT_YEAR row."""
        self._check_week(week_index)
        return week_index // self.column_count

    def current_year_rect(self, week_index: int, mode: DisplayMode, container_width: float) -> CellRect:
        row, column = self.grid_position(week_index, mode)
        size = self.cell_size(mode, container_width)
        cell = CellRect(x=column * size, y=row * size, width=size, height=size)
        return cell.inset(self.cell_padding(size))

    def current_year_rects(self, mode: DisplayMode, container_width: float) -> npt.NDArray[np.float64]:
        """Padded rectangles of every week of the current year, shape (weeks, 4)."""
        size = self.cell_size(mode, container_width)
        padding = self.cell_padding(size)
        weeks = np.arange(self.weeks)

        if mode is DisplayMode.CURRENT_YEAR:
            rows, columns = np.divmod(weeks, self.column_count)
        else:
            rows = np.full(self.weeks, self.current_row)
            columns = weeks

        rects = np.empty((self.weeks, 4), dtype=np.float64)
        rects[:, 0] = columns * size + padding
        rects[:, 1] = rows * size + padding
        rects[:, 2] = size - 2 * padding
        rects[:, 3] = size - 2 * padding
        return rects

    def background_rect(self, year_index: int, week_index: int, container_width: float) -> CellRect:
        self._check_cell(year_index, week_index)
        size = self.cell_size(DisplayMode.LIFE, container_width)
        cell = CellRect(x=week_index * size, y=year_index * size, width=size, height=size)
        return cell.inset(self.cell_padding(size))

    def background_cells(self, container_width: float) -> Iterator[tuple[CellRect, str]]:
        """Rectangles and colours of the static grid (every year but the current one)."""
        for year_index in range(self.years):
            if year_index == self.current_row:
                continue
            color = self.cell_color(year_index, 0)
            for week_index in range(self.weeks):
                yield self.background_rect(year_index, week_index, container_width), color

    # ---- fill state ----

    def fill_kind(self, year_index: int, week_index: int) -> FillKind:
        self._check_cell(year_index, week_index)
        if year_index < self.current_row:
            return FillKind.PAST
        if year_index > self.current_row:
            return FillKind.FUTURE
        if week_index < self.life.current_week_of_year:
            return FillKind.CURRENT_PARTIAL
        return FillKind.FUTURE

    def cell_color(self, year_index: int, week_index: int) -> str:
        kind = self.fill_kind(year_index, week_index)
        if kind is FillKind.PAST:
            # Year numbers are 1-indexed
            return age_group_color(year_index + 1)
        if kind is FillKind.CURRENT_PARTIAL:
            # The year in progress takes the colour of the age it leads to
            return age_group_color(self.life.current_age + 1)
        return EMPTY_COLOR

    def cell_state(self, year_index: int, week_index: int) -> CellState:
        return CellState(
            year_index=year_index,
            week_index=week_index,
            fill_kind=self.fill_kind(year_index, week_index),
            color=self.cell_color(year_index, week_index),
        )

    def current_year_colors(self) -> list[str]:
        return [self.cell_color(self.current_row, week) for week in range(self.weeks)]

    def fill_grid(self) -> npt.NDArray[np.int8]:
        """FillKind of every cell, shape (years, weeks)."""
        grid = np.full((self.years, self.weeks), FillKind.FUTURE, dtype=np.int8)
        grid[:self.current_row, :] = FillKind.PAST
        grid[self.current_row, :self.life.current_week_of_year] = FillKind.CURRENT_PARTIAL
        return grid

    # ---- draw commands ----

    def draw_commands(self, mode: DisplayMode, container_width: float) -> list[DrawCommand]:
        """
        Settled (un-animated) draw commands for ``mode``.

        The background layer is fully transparent in CURRENT_YEAR mode; it is
        still listed so both modes produce the same command sequence.
        """
        background_opacity = 1.0 if mode is DisplayMode.LIFE else 0.0
        commands = [
            DrawCommand(rect=rect, color=color, opacity=background_opacity)
            for rect, color in self.background_cells(container_width)
        ]
        rects = self.current_year_rects(mode, container_width)
        commands.extend(
            DrawCommand(rect=CellRect.from_array(rects[week]), color=color)
            for week, color in enumerate(self.current_year_colors())
        )
        return commands

    # ---- validation ----

    def _check_week(self, week_index: int) -> None:
        if not 0 <= week_index < self.weeks:
            raise IndexError(f"week_index {week_index} outside [0, {self.weeks})")

    def _check_cell(self, year_index: int, week_index: int) -> None:
        if not 0 <= year_index < self.years:
            raise IndexError(f"year_index {year_index} outside [0, {self.years})")
        self._check_week(week_index)
