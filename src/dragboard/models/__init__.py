"""Data models."""

from .board import BoardState
from .column import (
    FIXED_COLUMN_IDS,
    FIXED_LEFT_COLUMN,
    FIXED_LEFT_ID,
    FIXED_RIGHT_COLUMN,
    FIXED_RIGHT_ID,
    Column,
)
from .drag import (
    ActiveDrag,
    ColumnDragData,
    DraggableData,
    DraggingColumn,
    DraggingTask,
    DragEvent,
    DragSubject,
    Idle,
    TaskDragData,
)
from .task import Task

__all__ = [
    "FIXED_COLUMN_IDS",
    "FIXED_LEFT_COLUMN",
    "FIXED_LEFT_ID",
    "FIXED_RIGHT_COLUMN",
    "FIXED_RIGHT_ID",
    "ActiveDrag",
    "BoardState",
    "Column",
    "ColumnDragData",
    "DragEvent",
    "DragSubject",
    "DraggableData",
    "DraggingColumn",
    "DraggingTask",
    "Idle",
    "Task",
    "TaskDragData",
]
