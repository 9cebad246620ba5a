"""Service for creating columns and tasks and reading board snapshots."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..models import (
    ActiveDrag,
    Column,
    DraggingColumn,
    Task,
)
from ..utils import new_id
from .drag_controller import DragSessionController

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 100


class BoardService:
    """Create/append channel and read accessors for the board composer."""

    def __init__(
        self,
        controller: DragSessionController,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self.controller = controller
        self._id_factory = id_factory

    def append_column(self, title: str) -> Column | None:
        """
        Append a new dynamic column at the right end of the board.

        Args:
            title: Column title, stored as given

        Returns:
            The created column, or None if the title is blank
        """
        if not title.strip():
            logger.debug("append_column: blank title ignored")
            return None

        board = self.controller.board
        column = Column(id=self._fresh_id(), title=title)
        self.controller.commit(board.model_copy(update={"columns": [*board.columns, column]}))
        logger.info("Column appended: %s (%s)", column.id, column.title)
        return column

    def append_task(self, column_id: str, content: str) -> Task | None:
        """
        Append a new task to the end of the task sequence.

        Args:
            column_id: Target column (dynamic or fixed)
            content: Task text, stored stripped

        Returns:
            The created task, or None if the content is blank or the column
            does not exist
        """
        content = content.strip()
        if not content:
            logger.debug("append_task: blank content ignored")
            return None

        board = self.controller.board
        if not board.has_column(column_id):
            logger.debug("append_task: unknown column: %s", column_id)
            return None

        task = Task(id=self._fresh_id(), column_id=column_id, content=content)
        self.controller.commit(board.model_copy(update={"tasks": [*board.tasks, task]}))
        logger.info("Task appended: %s -> %s", task.id, column_id)
        return task

    def seed_columns(self, titles: Iterable[str]) -> list[Column]:
        """Append each title as a column, skipping blank ones."""
        created = []
        for title in titles:
            column = self.append_column(title)
            if column is not None:
                created.append(column)
        return created

    @property
    def columns(self) -> list[Column]:
        """Dynamic columns in render order."""
        return list(self.controller.board.columns)

    @property
    def all_columns(self) -> list[Column]:
        """Fixed left column, dynamic columns, fixed right column."""
        return self.controller.board.all_columns

    def tasks_for_column(self, column_id: str) -> list[Task]:
        """Tasks in a column, in render order."""
        return self.controller.board.tasks_for_column(column_id)

    @property
    def active_drag(self) -> ActiveDrag:
        """Current active drag state."""
        return self.controller.active_drag

    def overlay_tasks(self) -> list[Task]:
        """Tasks shown inside the overlay of a dragged column."""
        active = self.controller.active_drag
        if isinstance(active, DraggingColumn):
            return self.tasks_for_column(active.column.id)
        return []

    def _fresh_id(self) -> str:
        """Generate an id unused by any column or task on the board.

        Raises:
            ValueError: If the id factory keeps returning taken ids
        """
        board = self.controller.board
        taken = {col.id for col in board.all_columns} | {t.id for t in board.tasks}
        for _ in range(MAX_ID_ATTEMPTS):
            new = self._id_factory()
            if new not in taken:
                return new
        raise ValueError(f"No unused id after {MAX_ID_ATTEMPTS} attempts")
