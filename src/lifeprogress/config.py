"""
Configuration & Defaults
========================
This module serves as the central registry for grid geometry, animation
timing and the default life parameters.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (52, 6, 0.4, ...) scattered
   throughout the layout and animation code.
2. Defaults: It resolves the life parameters the app starts with when none
   are given on the command line (QSettings first, then the example life).

Exports:
    WEEKS_PER_YEAR (int): Number of week cells in one row of the life grid.
    CURRENT_YEAR_COLUMN_COUNT (int): Columns of the zoomed current-year grid.
    TRANSITION_DURATION (float): Seconds each cell takes to move.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

logger = logging.getLogger(__name__)

# Grid geometry
WEEKS_PER_YEAR: int = 52
CURRENT_YEAR_COLUMN_COUNT: int = 6
CELL_PADDING_DIVISOR: float = 12.0

# Animation timing (seconds)
TRANSITION_DURATION: float = 0.4
ACTIVE_LAYER_DELAY: float = 0.4
ROW_STAGGER: float = 0.04
FRAME_INTERVAL_MS: int = 16

# Example life used when nothing else is configured
DEFAULT_LIFE_EXPECTANCY: int = 90
DEFAULT_AGE: int = 30
DEFAULT_WEEK_OF_YEAR: int = 10

# QSettings keys (read only)
SETTINGS_BIRTHDAY_KEY: str = "life/birthday"
SETTINGS_EXPECTANCY_KEY: str = "life/expectancy"


@dataclass
class LifeDefaults:
    """Life configuration as read from settings, before validation."""
    life_expectancy: int = DEFAULT_LIFE_EXPECTANCY
    birthday: Optional[date] = None


def read_life_defaults() -> LifeDefaults:
    """
    Read the stored life configuration from QSettings.

    Missing or malformed values fall back to the module defaults.
    """
    from PySide6.QtCore import QSettings

    settings = QSettings()
    defaults = LifeDefaults()

    raw_expectancy = settings.value(SETTINGS_EXPECTANCY_KEY, None)
    if raw_expectancy is not None:
        try:
            defaults.life_expectancy = int(raw_expectancy)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring invalid '{SETTINGS_EXPECTANCY_KEY}' setting: {raw_expectancy!r}")

    raw_birthday = settings.value(SETTINGS_BIRTHDAY_KEY, None)
    if raw_birthday:
        try:
            defaults.birthday = date.fromisoformat(str(raw_birthday))
        except ValueError:
            logger.warning(f"Ignoring invalid '{SETTINGS_BIRTHDAY_KEY}' setting: {raw_birthday!r}")

    return defaults
