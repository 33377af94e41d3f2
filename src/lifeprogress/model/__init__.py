"""
The MODEL layer contains pure data structures and layout/animation logic.
It has NO knowledge of the GUI (Qt).
It deals with life parameters, grid geometry and transition timing.
"""
from lifeprogress.model.life import InvalidLifeParameters, LifeParameters
from lifeprogress.model.layout import CellRect, CellState, DisplayMode, DrawCommand, FillKind, GridLayoutEngine
from lifeprogress.model.transition import AnimationSpec, Frame, TransitionController

__all__ = [
    "AnimationSpec",
    "CellRect",
    "CellState",
    "DisplayMode",
    "DrawCommand",
    "FillKind",
    "Frame",
    "GridLayoutEngine",
    "InvalidLifeParameters",
    "LifeParameters",
    "TransitionController",
]
