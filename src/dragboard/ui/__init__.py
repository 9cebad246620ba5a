"""UI components."""

from .screens.board import BoardScreen
from .widgets.column import BoardColumn
from .widgets.task_card import TaskCard

__all__ = [
    "BoardColumn",
    "BoardScreen",
    "TaskCard",
]
