"""
Transition Controller
=====================
Owns the display mode and turns a mode change into a per-cell animation
schedule that the rendering surface can interpolate frame by frame.

Why is this file needed?
------------------------
1. State: The display mode has exactly one writer (``set_mode``/``toggle``)
   and is read by every render pass.
2. Timing: Every cell of the current year gets its own delay, so the cells
   sweep into place row by row instead of snapping together.
3. Continuity: A toggle that arrives mid-transition starts from wherever the
   cells currently are, never from the settled layout.

Positions are interpolated in a normalised space (container width = 1) and
scaled on output, so a window resize during a transition does not restart it.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
import time
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np

from lifeprogress import config
from lifeprogress.model.easing import Easing
from lifeprogress.model.layout import CellRect, DisplayMode, DrawCommand, GridLayoutEngine

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

_UNIT_WIDTH = 1.0


@dataclass(frozen=True)
class AnimationSpec:
    """Timing of one animated property, in seconds from the mode change."""
    delay: float
    duration: float
    easing: Easing = Easing.EASE_IN_OUT

    @property
    def end(self) -> float:
        return self.delay + self.duration

    def progress(self, elapsed: float) -> float:
        """Eased progress in [0, 1] after ``elapsed`` seconds."""
        if self.duration <= 0:
            return 1.0 if elapsed >= self.delay else 0.0
        return self.easing((elapsed - self.delay) / self.duration)

    def delayed(self, extra: float) -> AnimationSpec:
        return replace(self, delay=self.delay + extra)


@dataclass
class Frame:
    """Everything the surface needs to paint one frame."""
    background_opacity: float
    cells: list[DrawCommand] = field(default_factory=list)
    content_height: float = 0.0
    background_animation: Optional[AnimationSpec] = None


class TransitionController:
    """
    Display mode plus the animation between its two layouts.

    Args:
        engine: Layout of the life being displayed.
        mode: Initial display mode; starts settled (no animation).
        clock: Time source in seconds, used when ``now`` is not given.
    """
    def __init__(
        self,
        engine: GridLayoutEngine,
        mode: DisplayMode = DisplayMode.LIFE,
        clock: Callable[[], float] = time.monotonic,
        duration: float = config.TRANSITION_DURATION,
        row_stagger: float = config.ROW_STAGGER,
        active_delay: float = config.ACTIVE_LAYER_DELAY,
    ) -> None:
        self.engine = engine
        self.clock = clock
        self.duration = duration
        self.row_stagger = row_stagger
        self.active_delay = active_delay

        self._mode = DisplayMode(mode)
        self._started_at: Optional[float] = None
        self._from_rects: npt.NDArray[np.float64] = self._target_rects()
        self._from_opacity: float = self._target_opacity()

    # ------------------------------------------------------------------------------
    # Mode
    # ------------------------------------------------------------------------------

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    def current_mode(self) -> DisplayMode:
        """The target mode; it changes instantly even while cells are moving."""
        return self._mode

    def set_mode(self, mode: DisplayMode | str, now: Optional[float] = None) -> None:
        mode = DisplayMode(mode)
        if mode is self._mode:
            return

        now = self.clock() if now is None else now
        # Capture what is on screen under the old schedule before switching
        self._from_rects = self._interpolated_rects(now)
        self._from_opacity = self._interpolated_opacity(now)

        logger.debug(f"Display mode {self._mode} -> {mode} at t={now:.3f}")
        self._mode = mode
        self._started_at = now

    def toggle(self, now: Optional[float] = None) -> DisplayMode:
        self.set_mode(self._mode.toggled(), now)
        return self._mode

    # ------------------------------------------------------------------------------
    # Schedule
    # ------------------------------------------------------------------------------

    def layer_animation(self, is_active: bool) -> AnimationSpec:
        """
        Base animation of a layer.

        The layer becoming visible waits for the other one to fade out first,
        so the two grids are never half-transparent at the same time.
        """
        return AnimationSpec(
            delay=self.active_delay if is_active else 0.0,
            duration=self.duration,
            easing=Easing.EASE_IN_OUT,
        )

    def background_animation(self) -> AnimationSpec:
        return self.layer_animation(is_active=self._mode is DisplayMode.LIFE)

    def cell_animation(self, week_index: int) -> AnimationSpec:
        base = self.layer_animation(is_active=self._mode is DisplayMode.CURRENT_YEAR)
        return base.delayed(self.engine.stagger_row(week_index) * self.row_stagger)

    def schedule(self) -> list[AnimationSpec]:
        """Animation of every current-year cell, indexed by week."""
        return [self.cell_animation(week) for week in range(self.engine.weeks)]

    def total_duration(self) -> float:
        """Seconds from the mode change until the last property settles."""
        last_cell = max(animation.end for animation in self.schedule())
        return max(last_cell, self.background_animation().end)

    def elapsed(self, now: Optional[float] = None) -> Optional[float]:
        if self._started_at is None:
            return None
        now = self.clock() if now is None else now
        return now - self._started_at

    def is_animating(self, now: Optional[float] = None) -> bool:
        elapsed = self.elapsed(now)
        return elapsed is not None and elapsed < self.total_duration()

    # ------------------------------------------------------------------------------
    # Interpolation
    # ------------------------------------------------------------------------------

    def cell_progress(self, now: Optional[float] = None) -> npt.NDArray[np.float64]:
        """Eased progress of every week's animation, shape (weeks,)."""
        elapsed = self.elapsed(now)
        if elapsed is None:
            return np.ones(self.engine.weeks)

        schedule = self.schedule()
        delays = np.array([animation.delay for animation in schedule])
        raw = (elapsed - delays) / self.duration if self.duration > 0 else (elapsed >= delays).astype(float)
        return np.asarray(schedule[0].easing(np.clip(raw, 0.0, 1.0)), dtype=np.float64)

    def frame(self, container_width: float, now: Optional[float] = None) -> Frame:
        """Interpolated draw state at ``now`` for a container of the given width."""
        now = self.clock() if now is None else now
        animating = self.is_animating(now)

        rects = self._interpolated_rects(now) * container_width
        colors = self.engine.current_year_colors()
        cells = [
            DrawCommand(
                rect=CellRect.from_array(rects[week]),
                color=colors[week],
                animation=self.cell_animation(week) if animating else None,
            )
            for week in range(self.engine.weeks)
        ]

        return Frame(
            background_opacity=self._interpolated_opacity(now),
            cells=cells,
            content_height=self.content_height(container_width),
            background_animation=self.background_animation() if animating else None,
        )

    def content_height(self, container_width: float) -> float:
        """Height that fits both layouts, so the surface does not jump on toggle."""
        return max(self.engine.content_height(mode, container_width) for mode in DisplayMode)

    def _target_rects(self) -> npt.NDArray[np.float64]:
        return self.engine.current_year_rects(self._mode, _UNIT_WIDTH)

    def _target_opacity(self) -> float:
        return 1.0 if self._mode is DisplayMode.LIFE else 0.0

    def _interpolated_rects(self, now: float) -> npt.NDArray[np.float64]:
        target = self._target_rects()
        if self._started_at is None:
            return target
        progress = self.cell_progress(now)[:, np.newaxis]
        return self._from_rects + (target - self._from_rects) * progress

    def _interpolated_opacity(self, now: float) -> float:
        target = self._target_opacity()
        if self._started_at is None:
            return target
        t = self.background_animation().progress(now - self._started_at)
        return self._from_opacity + (target - self._from_opacity) * t
