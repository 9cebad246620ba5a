"""Drag session state machine and the reorder/reassignment algorithm.

The module-level functions are pure: they take the current state plus a
drag event and return the next state without mutating their inputs.
DragSessionController owns the live board and active drag state and runs
those functions inside the drag-start/drag-over/drag-end callbacks.

Every condition that prevents a move (no drop target, dropping on itself,
subjects without drag metadata, ids missing from the board) is a silent
no-op. Drag gestures routinely pass over regions that accept nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..models import (
    ActiveDrag,
    BoardState,
    ColumnDragData,
    DragEvent,
    DraggingColumn,
    DraggingTask,
    Idle,
    TaskDragData,
)
from ..utils import array_move
from .resolver import resolve_drag_data

logger = logging.getLogger(__name__)

Listener = Callable[["DragSessionController"], None]


def drag_start(active_drag: ActiveDrag, event: DragEvent) -> ActiveDrag:
    """Record what the gesture picked up. Never touches the board."""
    data = resolve_drag_data(event.active)
    if isinstance(data, ColumnDragData):
        return DraggingColumn(column=data.column)
    if isinstance(data, TaskDragData):
        return DraggingTask(task=data.task)
    logger.debug("drag_start: subject %s is not draggable", event.active.id)
    return active_drag


def drag_over(board: BoardState, event: DragEvent) -> BoardState:
    """
    Provisionally relocate a dragged task while hovering.

    Task over task in another column adopts that column; task over task in
    the same column takes its index. Task over column adopts the column.
    Column drags are left for drag_end.
    """
    over = event.over
    if over is None:
        return board

    active_id = event.active.id
    if active_id == over.id:
        return board

    active_data = resolve_drag_data(event.active)
    over_data = resolve_drag_data(over)
    if active_data is None or over_data is None:
        logger.debug("drag_over: missing metadata (active=%s, over=%s)", active_id, over.id)
        return board

    if not isinstance(active_data, TaskDragData):
        return board

    if isinstance(over_data, TaskDragData):
        return _move_task_over_task(board, active_id, over.id)
    if isinstance(over_data, ColumnDragData):
        return _move_task_to_column(board, active_id, over.id)
    return board


def drag_end(board: BoardState, event: DragEvent) -> BoardState:
    """
    Commit a column reorder on drop.

    Task placement is already final from the drag-over events, so only a
    dropped column changes the board here. The caller is responsible for
    resetting the active drag state.
    """
    over = event.over
    if over is None:
        return board

    active_id = event.active.id
    if active_id == over.id:
        return board

    active_data = resolve_drag_data(event.active)
    if not isinstance(active_data, ColumnDragData):
        return board

    from_index = board.find_column_index(active_id)
    to_index = board.find_column_index(over.id)
    if from_index < 0 or to_index < 0:
        logger.debug("drag_end: column move skipped (%s -> %s)", active_id, over.id)
        return board

    logger.info("Column moved: %s (pos %d -> %d)", active_id, from_index, to_index)
    return board.model_copy(update={"columns": array_move(board.columns, from_index, to_index)})


def _move_task_over_task(board: BoardState, active_id: str, over_id: str) -> BoardState:
    """Handle a task hovering over another task."""
    active_index = board.find_task_index(active_id)
    over_index = board.find_task_index(over_id)
    if active_index < 0 or over_index < 0:
        logger.debug("drag_over: task not found (active=%s, over=%s)", active_id, over_id)
        return board

    active_task = board.tasks[active_index]
    over_task = board.tasks[over_index]

    if active_task.column_id != over_task.column_id:
        return _reassign(board, active_index, over_task.column_id)

    return board.model_copy(update={"tasks": array_move(board.tasks, active_index, over_index)})


def _move_task_to_column(board: BoardState, active_id: str, column_id: str) -> BoardState:
    """Handle a task hovering directly over a column."""
    active_index = board.find_task_index(active_id)
    if active_index < 0:
        logger.debug("drag_over: task not found: %s", active_id)
        return board

    if not board.has_column(column_id):
        logger.debug("drag_over: unknown column: %s", column_id)
        return board

    if board.tasks[active_index].column_id == column_id:
        return board

    return _reassign(board, active_index, column_id)


def _reassign(board: BoardState, task_index: int, column_id: str) -> BoardState:
    """Point a task at another column without changing its sequence position."""
    tasks = list(board.tasks)
    task = tasks[task_index]
    tasks[task_index] = task.model_copy(update={"column_id": column_id})
    logger.info("Task reassigned: %s (%s -> %s)", task.id, task.column_id, column_id)
    return board.model_copy(update={"tasks": tasks})


class DragSessionController:
    """Owns the board and the active drag state for one drag surface."""

    def __init__(self, board: BoardState | None = None) -> None:
        self._board = board if board is not None else BoardState()
        self._active_drag: ActiveDrag = Idle()
        self._listeners: list[Listener] = []

    @property
    def board(self) -> BoardState:
        """Current board snapshot."""
        return self._board

    @property
    def active_drag(self) -> ActiveDrag:
        """What is being dragged right now, for overlay rendering."""
        return self._active_drag

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after every state change.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def commit(self, board: BoardState) -> None:
        """Replace the board snapshot."""
        self._board = board
        self._notify()

    def on_drag_start(self, event: DragEvent) -> None:
        active_drag = drag_start(self._active_drag, event)
        if active_drag is self._active_drag:
            return
        self._active_drag = active_drag
        logger.debug("Drag started: %s (%s)", event.active.id, active_drag.state)
        self._notify()

    def on_drag_over(self, event: DragEvent) -> None:
        board = drag_over(self._board, event)
        if board is not self._board:
            self.commit(board)

    def on_drag_end(self, event: DragEvent) -> None:
        # Cleared regardless of outcome
        self._active_drag = Idle()
        self._board = drag_end(self._board, event)
        logger.debug("Drag ended: %s", event.active.id)
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
