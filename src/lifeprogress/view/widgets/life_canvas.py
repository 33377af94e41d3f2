"""
Life Canvas
===========
The rendering surface: paints the static life grid and the animated
current-year cells with QPainter.

Why is this file needed?
------------------------
The model only computes rectangles, colours and timing. This widget owns the
frame clock (a QTimer that runs only while a transition is in flight), scales
the layout-local coordinates to fit the widget, and forwards clicks to the
TransitionController as mode toggles.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, QSize, Qt, QTimer, Signal
from PySide6.QtGui import QColor, QPainter, QPixmap
from PySide6.QtWidgets import QSizePolicy, QWidget

from lifeprogress import config
from lifeprogress.model.layout import DisplayMode, GridLayoutEngine
from lifeprogress.model.life import LifeParameters
from lifeprogress.model.transition import Frame, TransitionController

logger = logging.getLogger(__name__)


class LifeCanvas(QWidget):
    # Emitted with the new DisplayMode value ("life" / "currentYear")
    mode_changed = Signal(str)

    MARGIN = 12

    def __init__(
        self,
        life: LifeParameters,
        mode: DisplayMode = DisplayMode.LIFE,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.life = life
        self.engine = GridLayoutEngine(life)
        self.controller = TransitionController(self.engine, mode=mode)

        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip(self.tr("Click to switch between your life and the current year"))

        # Frame clock, only running during a transition
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(config.FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._on_frame)

        # Background grid is static; cache it per (width, device pixel ratio)
        self._background_cache: Optional[QPixmap] = None
        self._background_key: Optional[tuple[float, float]] = None

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def display_mode(self) -> DisplayMode:
        return self.controller.current_mode()

    def set_mode(self, mode: DisplayMode) -> None:
        previous = self.controller.current_mode()
        self.controller.set_mode(mode)
        if self.controller.current_mode() is previous:
            return

        logger.info(f"Switching to {self.controller.current_mode()} view.")
        self._frame_timer.start()
        self.mode_changed.emit(str(self.controller.current_mode()))
        self.update()

    def toggle_mode(self) -> None:
        self.set_mode(self.controller.current_mode().toggled())

    def is_animating(self) -> bool:
        return self._frame_timer.isActive()

    def container_width(self) -> float:
        """Grid width that fits the widget while keeping square cells."""
        available_w = max(self.width() - 2 * self.MARGIN, 0)
        available_h = max(self.height() - 2 * self.MARGIN, 0)
        # Height of the taller layout for a grid one unit wide
        unit_height = self.controller.content_height(1.0)
        return max(min(available_w, available_h / unit_height), 0.0)

    # ------------------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------------------

    def sizeHint(self) -> QSize:
        return QSize(520, 860)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self.toggle_mode()
            event.accept()
            return
        super().mousePressEvent(event)

    def resizeEvent(self, event) -> None:
        self._background_cache = None
        super().resizeEvent(event)

    def paintEvent(self, event) -> None:
        width = self.container_width()
        if width <= 0:
            return

        frame = self.controller.frame(width)
        origin = QPointF(
            (self.width() - width) / 2,
            (self.height() - frame.content_height) / 2,
        )

        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            painter.translate(origin)
            self._paint_background(painter, width, frame)
            self._paint_current_year(painter, frame)
        finally:
            painter.end()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _on_frame(self) -> None:
        if not self.controller.is_animating():
            self._frame_timer.stop()
            logger.debug(f"Transition to {self.controller.current_mode()} settled.")
        self.update()

    def _paint_background(self, painter: QPainter, width: float, frame: Frame) -> None:
        if frame.background_opacity <= 0.0:
            return
        painter.save()
        painter.setOpacity(frame.background_opacity)
        painter.drawPixmap(QPointF(0, 0), self._background_pixmap(width))
        painter.restore()

    def _paint_current_year(self, painter: QPainter, frame: Frame) -> None:
        painter.setPen(Qt.NoPen)
        for command in frame.cells:
            painter.setOpacity(command.opacity)
            painter.fillRect(QRectF(*command.rect.as_tuple()), QColor(command.color))

    def _background_pixmap(self, width: float) -> QPixmap:
        ratio = self.devicePixelRatioF()
        key = (round(width, 3), ratio)
        if self._background_cache is not None and self._background_key == key:
            return self._background_cache

        height = self.engine.content_height(DisplayMode.LIFE, width)
        pixmap = QPixmap(max(int(width * ratio), 1), max(int(height * ratio), 1))
        pixmap.setDevicePixelRatio(ratio)
        pixmap.fill(Qt.transparent)

        painter = QPainter(pixmap)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            for rect, color in self.engine.background_cells(width):
                painter.fillRect(QRectF(*rect.as_tuple()), QColor(color))
        finally:
            painter.end()

        logger.debug(f"Background grid rendered at width {width:.1f} (dpr {ratio}).")
        self._background_cache = pixmap
        self._background_key = key
        return pixmap
