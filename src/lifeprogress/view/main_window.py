"""
Main Application Window
=======================
The primary GUI container: toolbar, the life canvas and a status bar.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the "Toggle view" action to the canvas and keeps the
   title and status bar in sync with the display mode.
"""
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QLabel, QMainWindow, QToolBar

from lifeprogress.model.layout import DisplayMode
from lifeprogress.model.life import LifeParameters
from lifeprogress.view.widgets.life_canvas import LifeCanvas

VISIBLE_APP_NAME = "Life Progress"

MODE_TITLES = {
    DisplayMode.LIFE: "Your life",
    DisplayMode.CURRENT_YEAR: "This year",
}


class MainWindow(QMainWindow):
    def __init__(self, life: LifeParameters, mode: DisplayMode = DisplayMode.LIFE) -> None:
        super().__init__()
        self.life = life
        self.resize(560, 940)

        # --- CENTRAL CANVAS ---
        self.canvas = LifeCanvas(life, mode=mode, parent=self)
        self.setCentralWidget(self.canvas)

        # --- ACTIONS & TOOLBAR ---
        self.act_toggle = QAction(self.tr("Toggle view"), self)
        self.act_toggle.setShortcut(QKeySequence(Qt.Key_Space))
        self.act_toggle.setStatusTip(self.tr("Switch between the whole life and the current year"))
        self.act_toggle.triggered.connect(self.canvas.toggle_mode)

        toolbar = QToolBar(self.tr("View"))
        toolbar.setMovable(False)
        toolbar.addAction(self.act_toggle)
        self.addToolBar(toolbar)

        # --- STATUS BAR ---
        self.lbl_summary = QLabel(self._summary_text())
        self.statusBar().addPermanentWidget(self.lbl_summary)

        # --- SIGNAL CONNECTIONS ---
        self.canvas.mode_changed.connect(self.on_mode_changed)

        self.update_window_title()

    def on_mode_changed(self, _mode: Optional[str] = None) -> None:
        self.update_window_title()

    def update_window_title(self) -> None:
        mode_title = MODE_TITLES[self.canvas.display_mode()]
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - {self.tr(mode_title)}")

    def _summary_text(self) -> str:
        life = self.life
        return self.tr("Year {year} of {years} · week {week} of {weeks} · {percent:.1f}% lived").format(
            year=life.current_age,
            years=life.life_expectancy_years,
            week=life.current_week_of_year + 1,
            weeks=life.total_weeks_per_year,
            percent=life.progress * 100,
        )
