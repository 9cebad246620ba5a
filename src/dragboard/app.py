"""dragboard TUI Application."""

from textual.app import App
from textual.binding import Binding

from .config import Settings
from .models import BoardState
from .services import BoardService, DragSessionController
from .ui.screens import BoardScreen, HelpScreen
from .ui.widgets import TextPromptModal


class DragboardApp(App):
    """dragboard - drag-and-drop kanban board."""

    TITLE = "dragboard"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Row", show=False),
        Binding("k", "nav_up", "↑ Row", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Row", show=False),
        Binding("up", "nav_up", "↑ Row", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        # Drag and drop
        Binding("space", "pick_up_or_drop", "Drag/Drop", show=True),
        Binding("enter", "drop", "Drop", show=False),
        Binding("escape", "cancel_drag", "Cancel", show=False),
        # Board actions
        Binding("c", "new_column", "Column", show=True),
        Binding("n", "new_task", "Task", show=True),
    ]

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(
        self,
        settings: Settings | None = None,
        board_service: BoardService | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services(board_service)

    def _init_services(self, board_service: BoardService | None) -> None:
        """Initialize the drag controller and board service."""
        if board_service is None:
            controller = DragSessionController(BoardState())
            board_service = BoardService(controller)
            board_service.seed_columns(self.settings.initial_columns)
        self.board_service = board_service

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("board")

    def _board_screen(self) -> BoardScreen | None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            return screen
        return None

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    # Navigation actions
    def action_nav_left(self) -> None:
        """Move cursor to previous column."""
        if screen := self._board_screen():
            screen.navigate(-1, 0)

    def action_nav_right(self) -> None:
        """Move cursor to next column."""
        if screen := self._board_screen():
            screen.navigate(1, 0)

    def action_nav_up(self) -> None:
        """Move cursor to previous row."""
        if screen := self._board_screen():
            screen.navigate(0, -1)

    def action_nav_down(self) -> None:
        """Move cursor to next row."""
        if screen := self._board_screen():
            screen.navigate(0, 1)

    # Drag actions
    def action_pick_up_or_drop(self) -> None:
        """Pick up the target under the cursor, or drop the dragged one."""
        screen = self._board_screen()
        if screen is None:
            return
        if screen.is_dragging:
            screen.drop()
        else:
            screen.pick_up()

    def action_drop(self) -> None:
        """Drop the dragged entity on the cursor target."""
        if screen := self._board_screen():
            screen.drop()

    def action_cancel_drag(self) -> None:
        """Release the dragged entity without a drop target."""
        if screen := self._board_screen():
            screen.cancel_drag()

    # Board actions
    def action_new_column(self) -> None:
        """Prompt for a title and append a column."""
        screen = self._board_screen()
        if screen is None or screen.is_dragging:
            return
        self.push_screen(
            TextPromptModal("New column", placeholder="Column title"),
            callback=self._handle_new_column,
        )

    def _handle_new_column(self, title: str | None) -> None:
        if title is None:
            return
        column = self.board_service.append_column(title)
        if column is None:
            self.notify("Column title cannot be empty", severity="warning", timeout=2)
            return
        self.notify(f"Added column {column.title}", timeout=2)

    def action_new_task(self) -> None:
        """Prompt for content and append a task to the current column."""
        screen = self._board_screen()
        if screen is None or screen.is_dragging:
            return
        column = screen.current_column
        self.push_screen(
            TextPromptModal(f"New task in {column.title}", placeholder="Task"),
            callback=lambda content: self._handle_new_task(column.id, content),
        )

    def _handle_new_task(self, column_id: str, content: str | None) -> None:
        if content is None:
            return
        if self.board_service.append_task(column_id, content) is None:
            self.notify("Task content cannot be empty", severity="warning", timeout=2)


def run(settings: Settings | None = None) -> None:
    """Run the dragboard application."""
    app = DragboardApp(settings)
    app.run()
