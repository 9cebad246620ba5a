"""Drag metadata and drag session models.

Two discriminated unions live here, both tagged with Literal fields so
isinstance() checks narrow the type:

- `DraggableData` is the typed metadata a drag subject carries, either a
  column or a task.
- `ActiveDrag` is the transient record of what is being dragged right now.
"""

from dataclasses import dataclass
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from .column import Column
from .task import Task


class ColumnDragData(BaseModel):
    """Metadata for a draggable column."""

    type: Literal["Column"] = "Column"
    column: Column


class TaskDragData(BaseModel):
    """Metadata for a draggable task."""

    type: Literal["Task"] = "Task"
    task: Task


# Metadata must carry its "type" tag to resolve
DraggableData = Annotated[ColumnDragData | TaskDragData, Field(discriminator="type")]


class Idle(BaseModel):
    """Nothing is being dragged."""

    state: Literal["idle"] = "idle"

    @property
    def is_dragging(self) -> bool:
        return False


class DraggingColumn(BaseModel):
    """A column is being dragged."""

    state: Literal["column"] = "column"
    column: Column

    @property
    def is_dragging(self) -> bool:
        return True


class DraggingTask(BaseModel):
    """A task is being dragged."""

    state: Literal["task"] = "task"
    task: Task

    @property
    def is_dragging(self) -> bool:
        return True


ActiveDrag = Idle | DraggingColumn | DraggingTask


@dataclass
class DragSubject:
    """The thing under the pointer or focus, as reported by the input layer."""

    id: str
    data: Any = None  # DraggableData, a mapping of the same shape, or anything else


@dataclass
class DragEvent:
    """A drag-start, drag-over or drag-end notification."""

    active: DragSubject
    over: DragSubject | None = None
