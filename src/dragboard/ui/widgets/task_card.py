"""Task card widget."""

from __future__ import annotations

from textual.widgets import Static

from ...models import Task


class TaskCard(Static):
    """A task card displayed in a column."""

    MAX_LEN = 40

    def __init__(self, task_data: Task, *args, **kwargs) -> None:
        super().__init__(
            self._truncate(task_data.content, self.MAX_LEN), *args, markup=False, **kwargs
        )
        self._task_data = task_data

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this card."""
        return self._task_data

    @staticmethod
    def _truncate(text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"
