"""Service layer for board state and drag handling."""

from .board_service import BoardService
from .drag_controller import DragSessionController, drag_end, drag_over, drag_start
from .resolver import has_draggable_data, resolve_drag_data

__all__ = [
    "BoardService",
    "DragSessionController",
    "drag_end",
    "drag_over",
    "drag_start",
    "has_draggable_data",
    "resolve_drag_data",
]
