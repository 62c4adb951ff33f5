"""Directory listing widget with a highlighted selection row."""

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widget import Widget
from textual.widgets import Static

from ..navigation import NavigationState

SELECTED_STYLE = "reverse"
DIRECTORY_STYLE = "bold"


class EntryRows(Widget):
    """The entry rows, windowed so the selected row is always visible."""

    DEFAULT_CSS = """
    EntryRows {
        height: 1fr;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._state: NavigationState | None = None
        self._first_row = 0

    def show(self, state: NavigationState) -> None:
        """Render a new navigation state."""
        if self._state is None or state.current_path != self._state.current_path:
            self._first_row = 0
        self._state = state
        self.refresh()

    def visible_range(self, height: int) -> range:
        """Rows to draw for a viewport of ``height`` rows."""
        state = self._state
        if state is None or not state.entries:
            return range(0)
        height = max(1, height)
        if state.selection < self._first_row:
            self._first_row = state.selection
        elif state.selection >= self._first_row + height:
            self._first_row = state.selection - height + 1
        end = min(len(state.entries), self._first_row + height)
        return range(self._first_row, end)

    def render(self) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        state = self._state
        if state is None:
            return text

        for position, row in enumerate(self.visible_range(self.size.height)):
            entry = state.entries[row]
            style = DIRECTORY_STYLE if entry.is_directory else ""
            if row == state.selection:
                style = f"{style} {SELECTED_STYLE}".strip()
            if position:
                text.append("\n")
            text.append(entry.label, style=style)
        return text


class DirectoryView(Vertical):
    """Widget displaying the current directory and its entries."""

    DEFAULT_CSS = """
    DirectoryView {
        width: 1fr;
        height: 1fr;
    }

    DirectoryView > #directory-header {
        background: $primary-background;
        color: $accent;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    DirectoryView > EntryRows {
        padding: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("Directory:", id="directory-header", markup=False)
        yield EntryRows(id="entry-rows")

    @property
    def rows(self) -> EntryRows:
        return self.query_one("#entry-rows", EntryRows)

    def show(self, state: NavigationState) -> None:
        """Update header and rows from the controller's state."""
        self.query_one("#directory-header", Static).update(
            f"Directory: {state.current_path}"
        )
        self.rows.show(state)
