"""Board column widget."""

import re

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Column, Task
from .task_card import TaskCard


def css_id(value: str) -> str:
    """Generate a CSS-safe id fragment from a column or task id."""
    safe_id = re.sub(r"[^a-zA-Z0-9\-]", "-", value)
    safe_id = safe_id.strip("-").lower()
    return safe_id or "item"


class TaskListScroll(VerticalScroll, can_focus=False):
    """Scroll container for task lists.

    Not focusable, so arrow keys reach the board cursor instead of scrolling.
    """


class EmptyColumnMessage(Static):
    """Displayed when a column has no tasks."""

    pass


class ColumnHeader(Static):
    """Column title bar, the drop target for the column itself."""

    pass


class BoardColumn(Widget):
    """A single column in the board.

    Rows are addressed the way the board cursor addresses them: row 0 is the
    header, row N is the Nth task.
    """

    def __init__(
        self,
        column: Column,
        tasks: list[Task],
        cursor_row: int | None = None,
        dragging_id: str | None = None,
        *args,
        **kwargs,
    ) -> None:
        classes = kwargs.pop("classes", None)
        if column.is_fixed:
            classes = f"{classes or ''} -fixed".strip()
        super().__init__(*args, classes=classes, **kwargs)
        self.column = column
        self._tasks = tasks
        self._cursor_row = cursor_row
        self._dragging_id = dragging_id

    @property
    def _header_text(self) -> str:
        """Header text with styled task count."""
        return f"{escape(self.column.title)} [dim]({len(self._tasks)})[/]"

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield ColumnHeader(self._header_text, classes=self._row_classes(0, self.column.id))
        with TaskListScroll(classes="column-content"):
            if not self._tasks:
                yield EmptyColumnMessage("No tasks")
            for row, task in enumerate(self._tasks, start=1):
                yield TaskCard(
                    task,
                    id=f"task-{css_id(task.id)}",
                    classes=self._row_classes(row, task.id),
                )

    def _row_classes(self, row: int, item_id: str) -> str:
        classes = ["column-header"] if row == 0 else ["task-card"]
        if row == self._cursor_row:
            classes.append("-cursor")
        if item_id == self._dragging_id:
            classes.append("-dragging")
        return " ".join(classes)
