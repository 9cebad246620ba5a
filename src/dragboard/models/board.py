"""Board state model."""

from pydantic import BaseModel, Field, field_validator

from .column import FIXED_COLUMN_IDS, FIXED_LEFT_COLUMN, FIXED_RIGHT_COLUMN, Column
from .task import Task


class BoardState(BaseModel):
    """Snapshot of the board.

    `columns` holds only the dynamic columns, in left-to-right render order.
    The fixed columns are always present and never part of this sequence.
    `tasks` order defines the order of tasks sharing a `column_id`.

    Transition functions never mutate a BoardState in place; they return a
    new one built with `model_copy(update=...)`.
    """

    columns: list[Column] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)

    @field_validator("columns")
    @classmethod
    def validate_column_ids(cls, v: list[Column]) -> list[Column]:
        """Dynamic column ids must be unique and must not reuse a fixed id."""
        seen: set[str] = set()
        for col in v:
            if col.id in FIXED_COLUMN_IDS:
                raise ValueError(f"Column ID '{col.id}' is reserved for a fixed column")
            if col.id in seen:
                raise ValueError(f"Duplicate column ID: '{col.id}'")
            seen.add(col.id)
        return v

    @property
    def column_ids(self) -> list[str]:
        """Ids of the dynamic columns in order."""
        return [col.id for col in self.columns]

    @property
    def all_columns(self) -> list[Column]:
        """Every column in render order, fixed columns included."""
        return [FIXED_LEFT_COLUMN, *self.columns, FIXED_RIGHT_COLUMN]

    def has_column(self, column_id: str) -> bool:
        """Whether the id names a fixed or dynamic column."""
        return column_id in FIXED_COLUMN_IDS or column_id in self.column_ids

    def find_column_index(self, column_id: str) -> int:
        """Index of a dynamic column, or -1."""
        for idx, col in enumerate(self.columns):
            if col.id == column_id:
                return idx
        return -1

    def find_task_index(self, task_id: str) -> int:
        """Index of a task in the task sequence, or -1."""
        for idx, task in enumerate(self.tasks):
            if task.id == task_id:
                return idx
        return -1

    def get_task(self, task_id: str) -> Task | None:
        idx = self.find_task_index(task_id)
        return self.tasks[idx] if idx >= 0 else None

    def tasks_for_column(self, column_id: str) -> list[Task]:
        """Tasks in a column, in render order."""
        return [t for t in self.tasks if t.column_id == column_id]
