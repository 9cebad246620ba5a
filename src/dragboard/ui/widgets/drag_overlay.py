"""Overlay showing the entity currently being dragged."""

from rich.markup import escape
from textual.widgets import Static

from ...models import ActiveDrag, DraggingColumn, DraggingTask, Task


class DragOverlay(Static):
    """One-line preview of the dragged column or task."""

    DEFAULT_CSS = """
    DragOverlay {
        height: 1;
        display: none;
        background: $primary;
        color: $text;
        padding: 0 1;
    }

    DragOverlay.-visible {
        display: block;
    }
    """

    def show_drag(self, active: ActiveDrag, column_tasks: list[Task]) -> None:
        """Update the overlay from the active drag state."""
        if isinstance(active, DraggingColumn):
            title = escape(active.column.title)
            self.update(f"Dragging column: [b]{title}[/] [dim]({len(column_tasks)} tasks)[/]")
            self.add_class("-visible")
        elif isinstance(active, DraggingTask):
            self.update(f"Dragging task: [b]{escape(active.task.content)}[/]")
            self.add_class("-visible")
        else:
            self.update("")
            self.remove_class("-visible")

    @property
    def is_visible(self) -> bool:
        """Check if the overlay is shown."""
        return self.has_class("-visible")
