"""Widget components."""

from .column import BoardColumn, ColumnHeader, EmptyColumnMessage
from .drag_overlay import DragOverlay
from .task_card import TaskCard
from .text_prompt import TextPromptModal

__all__ = [
    "BoardColumn",
    "ColumnHeader",
    "DragOverlay",
    "EmptyColumnMessage",
    "TaskCard",
    "TextPromptModal",
]
