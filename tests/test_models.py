"""Unit tests for board and drag models."""

import pytest
from pydantic import ValidationError

from dragboard.models import (
    FIXED_COLUMN_IDS,
    FIXED_LEFT_COLUMN,
    FIXED_RIGHT_COLUMN,
    BoardState,
    Column,
    ColumnDragData,
    DraggingColumn,
    DraggingTask,
    Idle,
    Task,
    TaskDragData,
)


@pytest.fixture
def board() -> BoardState:
    """Board with two dynamic columns and three tasks."""
    return BoardState(
        columns=[Column(id="x", title="X"), Column(id="y", title="Y")],
        tasks=[
            Task(id="1", column_id="x", content="one"),
            Task(id="2", column_id="y", content="two"),
            Task(id="3", column_id="x", content="three"),
        ],
    )


class TestFixedColumns:
    """Tests for the reserved pseudo-columns."""

    def test_fixed_ids(self):
        assert FIXED_COLUMN_IDS == {"Cards", "Elements"}
        assert FIXED_LEFT_COLUMN.id == "Cards"
        assert FIXED_RIGHT_COLUMN.id == "Elements"

    def test_is_fixed(self):
        assert FIXED_LEFT_COLUMN.is_fixed
        assert FIXED_RIGHT_COLUMN.is_fixed
        assert not Column(id="x", title="X").is_fixed


class TestBoardStateValidation:
    """Tests for column id invariants."""

    def test_empty_board(self):
        board = BoardState()
        assert board.columns == []
        assert board.tasks == []

    def test_duplicate_column_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate column ID"):
            BoardState(columns=[Column(id="x", title="A"), Column(id="x", title="B")])

    @pytest.mark.parametrize("reserved", ["Cards", "Elements"])
    def test_fixed_id_in_dynamic_columns_rejected(self, reserved: str):
        with pytest.raises(ValidationError, match="reserved"):
            BoardState(columns=[Column(id=reserved, title="Mine")])


class TestBoardStateLookups:
    """Tests for BoardState helpers."""

    def test_column_ids_in_order(self, board: BoardState):
        assert board.column_ids == ["x", "y"]

    def test_all_columns_wraps_dynamic_with_fixed(self, board: BoardState):
        assert [c.id for c in board.all_columns] == ["Cards", "x", "y", "Elements"]

    def test_has_column(self, board: BoardState):
        assert board.has_column("x")
        assert board.has_column("Cards")
        assert board.has_column("Elements")
        assert not board.has_column("missing")

    def test_find_column_index(self, board: BoardState):
        assert board.find_column_index("y") == 1
        assert board.find_column_index("Cards") == -1
        assert board.find_column_index("missing") == -1

    def test_find_task_index(self, board: BoardState):
        assert board.find_task_index("3") == 2
        assert board.find_task_index("missing") == -1

    def test_get_task(self, board: BoardState):
        assert board.get_task("2").content == "two"
        assert board.get_task("missing") is None

    def test_tasks_for_column_preserves_sequence_order(self, board: BoardState):
        assert [t.id for t in board.tasks_for_column("x")] == ["1", "3"]
        assert board.tasks_for_column("Cards") == []


class TestDragModels:
    """Tests for the drag tagged unions."""

    def test_drag_data_tags(self):
        column = Column(id="x", title="X")
        task = Task(id="1", column_id="x", content="one")

        assert ColumnDragData(column=column).type == "Column"
        assert TaskDragData(task=task).type == "Task"

    def test_active_drag_variants(self):
        column = Column(id="x", title="X")
        task = Task(id="1", column_id="x", content="one")

        assert Idle().state == "idle"
        assert not Idle().is_dragging
        assert DraggingColumn(column=column).is_dragging
        assert DraggingTask(task=task).state == "task"

    def test_drag_data_tag_cannot_be_changed(self):
        with pytest.raises(ValidationError):
            ColumnDragData(type="Task", column=Column(id="x", title="X"))
