"""Tests for BoardService."""

from itertools import count

import pytest

from dragboard.models import (
    BoardState,
    Column,
    ColumnDragData,
    DragEvent,
    DraggingTask,
    DragSubject,
    Idle,
    TaskDragData,
)
from dragboard.services import BoardService, DragSessionController


@pytest.fixture
def controller() -> DragSessionController:
    return DragSessionController(BoardState())


@pytest.fixture
def board_service(controller: DragSessionController) -> BoardService:
    """BoardService with deterministic ids."""
    ids = count(1)
    return BoardService(controller, id_factory=lambda: f"id-{next(ids)}")


class TestAppendColumn:
    """Tests for append_column."""

    def test_appends_to_end(self, board_service: BoardService):
        board_service.append_column("Backlog")
        board_service.append_column("Done")

        assert [c.title for c in board_service.columns] == ["Backlog", "Done"]

    def test_returns_column_with_fresh_id(self, board_service: BoardService):
        first = board_service.append_column("Backlog")
        second = board_service.append_column("Backlog")

        assert first is not None and second is not None
        assert first.id != second.id
        assert [c.id for c in board_service.columns] == [first.id, second.id]

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title_rejected(self, board_service: BoardService, title: str):
        assert board_service.append_column(title) is None
        assert board_service.columns == []

    def test_title_stored_as_given(self, board_service: BoardService):
        column = board_service.append_column("  Backlog ")
        assert column.title == "  Backlog "

    def test_skips_ids_already_on_board(self, controller: DragSessionController):
        """A generated id matching an existing column or task is not reused."""
        ids = iter(["Cards", "taken", "fresh"])
        controller.commit(BoardState(columns=[Column(id="taken", title="T")]))
        service = BoardService(controller, id_factory=lambda: next(ids))

        column = service.append_column("New")

        assert column.id == "fresh"

    def test_exhausted_id_factory_raises(self, controller: DragSessionController):
        """A factory that only repeats a taken id fails instead of looping forever."""
        service = BoardService(controller, id_factory=lambda: "same")
        service.append_column("A")

        with pytest.raises(ValueError, match="No unused id"):
            service.append_column("B")

        assert [c.title for c in service.columns] == ["A"]

    def test_default_ids_are_unique(self, controller: DragSessionController):
        service = BoardService(controller)
        created = [service.append_column(f"Col {i}") for i in range(20)]
        assert len({c.id for c in created}) == 20


class TestAppendTask:
    """Tests for append_task."""

    def test_appends_to_end_of_sequence(self, board_service: BoardService):
        backlog = board_service.append_column("Backlog")
        done = board_service.append_column("Done")

        first = board_service.append_task(backlog.id, "write tests")
        second = board_service.append_task(done.id, "ship")

        assert board_service.controller.board.tasks == [first, second]
        assert first.column_id == backlog.id

    def test_content_stripped(self, board_service: BoardService):
        backlog = board_service.append_column("Backlog")
        task = board_service.append_task(backlog.id, "  write tests  ")
        assert task.content == "write tests"

    @pytest.mark.parametrize("content", ["", "   "])
    def test_blank_content_rejected(self, board_service: BoardService, content: str):
        backlog = board_service.append_column("Backlog")

        assert board_service.append_task(backlog.id, content) is None
        assert board_service.tasks_for_column(backlog.id) == []

    def test_fixed_column_accepted(self, board_service: BoardService):
        task = board_service.append_task("Elements", "widget")
        assert task is not None
        assert board_service.tasks_for_column("Elements") == [task]

    def test_unknown_column_rejected(self, board_service: BoardService):
        assert board_service.append_task("missing", "orphan") is None
        assert board_service.controller.board.tasks == []

    def test_task_and_column_ids_distinct(self, board_service: BoardService):
        backlog = board_service.append_column("Backlog")
        task = board_service.append_task(backlog.id, "a")
        assert task.id != backlog.id


class TestSeedColumns:
    """Tests for seed_columns."""

    def test_seeds_in_order_and_skips_blank(self, board_service: BoardService):
        created = board_service.seed_columns(["Backlog", " ", "Doing", "Done"])

        assert [c.title for c in created] == ["Backlog", "Doing", "Done"]
        assert board_service.columns == created


class TestAccessors:
    """Tests for read accessors."""

    def test_all_columns_in_render_order(self, board_service: BoardService):
        board_service.seed_columns(["A", "B"])
        assert [c.title for c in board_service.all_columns] == ["Cards", "A", "B", "Elements"]

    def test_tasks_for_column_filters(self, board_service: BoardService):
        a, b = board_service.seed_columns(["A", "B"])
        board_service.append_task(a.id, "1")
        board_service.append_task(b.id, "2")
        board_service.append_task(a.id, "3")

        assert [t.content for t in board_service.tasks_for_column(a.id)] == ["1", "3"]

    def test_active_drag_reflects_controller(self, board_service: BoardService):
        a = board_service.seed_columns(["A"])[0]
        task = board_service.append_task(a.id, "1")
        assert board_service.active_drag == Idle()

        board_service.controller.on_drag_start(
            DragEvent(active=DragSubject(id=task.id, data=TaskDragData(task=task)))
        )

        assert board_service.active_drag == DraggingTask(task=task)

    def test_overlay_tasks_for_dragged_column(self, board_service: BoardService):
        a, b = board_service.seed_columns(["A", "B"])
        board_service.append_task(a.id, "1")
        board_service.append_task(b.id, "2")
        assert board_service.overlay_tasks() == []

        board_service.controller.on_drag_start(
            DragEvent(active=DragSubject(id=a.id, data=ColumnDragData(column=a)))
        )

        assert [t.content for t in board_service.overlay_tasks()] == ["1"]

    def test_columns_returns_copy(self, board_service: BoardService):
        board_service.seed_columns(["A"])
        board_service.columns.clear()
        assert len(board_service.columns) == 1


class TestAppendThenDrag:
    """Appended entities take part in drags."""

    def test_reorder_appended_columns(self, board_service: BoardService):
        x, y, z = board_service.seed_columns(["X", "Y", "Z"])
        controller = board_service.controller
        active = DragSubject(id=y.id, data=ColumnDragData(column=y))
        over = DragSubject(id=x.id, data=ColumnDragData(column=x))

        controller.on_drag_start(DragEvent(active=active))
        controller.on_drag_end(DragEvent(active=active, over=over))

        assert board_service.columns == [y, x, z]
