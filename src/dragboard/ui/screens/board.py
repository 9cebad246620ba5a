"""Main board screen with a keyboard drag sensor."""

from __future__ import annotations

from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header

from ...models import (
    Column,
    ColumnDragData,
    DragEvent,
    DraggingColumn,
    DraggingTask,
    DragSubject,
    Task,
    TaskDragData,
)
from ...services import BoardService, DragSessionController
from ..widgets.column import BoardColumn, css_id
from ..widgets.drag_overlay import DragOverlay


class BoardScreen(Screen):
    """Board screen.

    A cursor walks over drop targets: row 0 of a column is its header, row
    N its Nth task. Space picks up the target under the cursor; moving the
    cursor while dragging fires drag-over events, and dropping fires
    drag-end with the target under the cursor.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_row = 0
        self._active_subject: DragSubject | None = None
        self._rebuild_pending = False
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def board_service(self) -> BoardService:
        """Get board service from app."""
        return self.app.board_service  # pyrefly: ignore[missing-attribute]

    @property
    def controller(self) -> DragSessionController:
        return self.board_service.controller

    @property
    def columns(self) -> list[Column]:
        """All columns in render order."""
        return self.board_service.all_columns

    @property
    def is_dragging(self) -> bool:
        return self._active_subject is not None

    def compose(self) -> ComposeResult:
        """Create the board layout."""
        yield Header()
        with Container(id="board-container"), Horizontal(id="columns"):
            for index, column in enumerate(self.columns):
                yield self._build_column(index, column)
        yield DragOverlay(id="drag-overlay")
        yield Footer()

    def on_mount(self) -> None:
        """Re-render whenever the board or drag state changes."""
        self._unsubscribe = self.controller.subscribe(lambda _controller: self.refresh_board())

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _build_column(self, index: int, column: Column) -> BoardColumn:
        dragging_id = self._active_subject.id if self._active_subject else None
        return BoardColumn(
            column,
            self.board_service.tasks_for_column(column.id),
            cursor_row=self._current_row if index == self._current_column else None,
            dragging_id=dragging_id,
            id=f"column-{css_id(column.id)}",
        )

    def refresh_board(self) -> None:
        """Schedule a re-render, coalescing repeated requests."""
        self._clamp_cursor()
        if self._rebuild_pending:
            return
        self._rebuild_pending = True
        self.call_after_refresh(self._rebuild)

    async def _rebuild(self) -> None:
        """Replace the column widgets with fresh ones."""
        self._rebuild_pending = False
        try:
            container = self.query_one("#columns", Horizontal)
            overlay = self.query_one("#drag-overlay", DragOverlay)
        except Exception as e:
            self.log.error(f"Board layout not ready: {e}")
            return

        await container.remove_children()
        await container.mount_all(
            [self._build_column(index, column) for index, column in enumerate(self.columns)]
        )
        overlay.show_drag(self.board_service.active_drag, self.board_service.overlay_tasks())

    # Cursor

    @property
    def current_column(self) -> Column:
        """Column under the cursor."""
        return self.columns[self._current_column]

    @property
    def cursor(self) -> tuple[int, int]:
        """(column index, row) of the cursor."""
        return self._current_column, self._current_row

    def _tasks_at(self, column_index: int) -> list[Task]:
        return self.board_service.tasks_for_column(self.columns[column_index].id)

    def _clamp_cursor(self) -> None:
        self._current_column = max(0, min(self._current_column, len(self.columns) - 1))
        row_count = len(self._tasks_at(self._current_column)) + 1
        self._current_row = max(0, min(self._current_row, row_count - 1))

    def subject_at(self, column_index: int, row: int) -> DragSubject | None:
        """Drag subject for a cursor position, or None off the board."""
        if not 0 <= column_index < len(self.columns):
            return None
        column = self.columns[column_index]
        if row == 0:
            return DragSubject(id=column.id, data=ColumnDragData(column=column))
        tasks = self._tasks_at(column_index)
        if 1 <= row <= len(tasks):
            task = tasks[row - 1]
            return DragSubject(id=task.id, data=TaskDragData(task=task))
        return None

    def _find_task(self, task_id: str) -> tuple[int, int] | None:
        for column_index in range(len(self.columns)):
            for row, task in enumerate(self._tasks_at(column_index), start=1):
                if task.id == task_id:
                    return column_index, row
        return None

    def _find_column(self, column_id: str) -> int | None:
        for column_index, column in enumerate(self.columns):
            if column.id == column_id:
                return column_index
        return None

    def navigate(self, column_delta: int, row_delta: int) -> None:
        """Move the cursor; while dragging, also report the new drop target."""
        active_drag = self.board_service.active_drag
        if isinstance(active_drag, DraggingColumn) and row_delta:
            return

        column_index = max(0, min(self._current_column + column_delta, len(self.columns) - 1))
        row_count = len(self._tasks_at(column_index)) + 1
        if isinstance(active_drag, DraggingColumn):
            row = 0
        else:
            row = max(0, min(self._current_row + row_delta, row_count - 1))

        if (column_index, row) == self.cursor:
            return

        if self._active_subject is None:
            self._current_column, self._current_row = column_index, row
            self.refresh_board()
            return

        board_before = self.controller.board
        self.controller.on_drag_over(
            DragEvent(active=self._active_subject, over=self.subject_at(column_index, row))
        )

        # A relocated task carries the cursor with it
        position = None
        if isinstance(active_drag, DraggingTask) and self.controller.board is not board_before:
            position = self._find_task(self._active_subject.id)
        self._current_column, self._current_row = position or (column_index, row)
        self.refresh_board()

    # Drag gestures

    def pick_up(self) -> None:
        """Start dragging whatever is under the cursor."""
        if self.is_dragging:
            return
        subject = self.subject_at(*self.cursor)
        if subject is None:
            return
        self.controller.on_drag_start(DragEvent(active=subject))
        if self.board_service.active_drag.is_dragging:
            self._active_subject = subject
            self.refresh_board()

    def drop(self) -> None:
        """Drop on the target under the cursor."""
        self._end_drag(self.subject_at(*self.cursor))

    def cancel_drag(self) -> None:
        """Release without a drop target; live task moves are kept."""
        self._end_drag(None)

    def _end_drag(self, over: DragSubject | None) -> None:
        active = self._active_subject
        if active is None:
            return
        self._active_subject = None
        self.controller.on_drag_end(DragEvent(active=active, over=over))

        if isinstance(active.data, ColumnDragData):
            column_index = self._find_column(active.id)
            if column_index is not None:
                self._current_column, self._current_row = column_index, 0
        self.refresh_board()
