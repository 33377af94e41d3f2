import os

# Widgets are rendered without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from lifeprogress.model.layout import GridLayoutEngine
from lifeprogress.model.life import LifeParameters
from lifeprogress.model.transition import TransitionController


class FakeClock:
    """Manually advanced time source for the transition controller."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def life() -> LifeParameters:
    return LifeParameters(life_expectancy_years=90, current_age=30, current_week_of_year=10)


@pytest.fixture
def engine(life) -> GridLayoutEngine:
    return GridLayoutEngine(life)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def controller(engine, clock) -> TransitionController:
    return TransitionController(engine, clock=clock)


@pytest.fixture(scope="session")
def qapp():
    from lifeprogress.app.application import create_app

    return create_app([])
