"""Main Textual application for Pathfinder."""

import logging
from pathlib import Path

from textual import events
from textual.app import App, ComposeResult, SuspendNotSupported
from textual.binding import Binding
from textual.widgets import Footer

from .config import Config
from .lister import DirectoryLister
from .navigation import EnterOutcome, NavigationController
from .opener import ExternalOpener, select_opener
from .pager import Pager
from .widgets import DirectoryView, PagerScreen

logger = logging.getLogger(__name__)

# Actions that belong to the directory view and are disabled during a pager session
BROWSING_ACTIONS = {"cursor_up", "cursor_down", "enter", "go_back", "go_forward", "quit"}


class SuspendingOpener:
    """Releases the terminal while the wrapped opener runs."""

    def __init__(self, app: App, opener: ExternalOpener) -> None:
        self._app = app
        self._opener = opener

    def hand_off(self, file_path: Path) -> None:
        try:
            with self._app.suspend():
                self._opener.hand_off(file_path)
        except SuspendNotSupported:
            self._opener.hand_off(file_path)


class PathfinderApp(App):
    """Pathfinder - Terminal File Browser."""

    TITLE = "Pathfinder"
    SUB_TITLE = "Terminal File Browser"

    CSS = """
    #directory-view {
        width: 100%;
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("up", "cursor_up", "Up", show=False),
        Binding("down", "cursor_down", "Down", show=False),
        Binding("enter", "enter", "Open"),
        Binding("left", "go_back", "Back"),
        Binding("right", "go_forward", "Forward"),
        Binding("escape", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: Config,
        start_path: str,
        lister: DirectoryLister | None = None,
        opener: ExternalOpener | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        self._opener = SuspendingOpener(self, opener or select_opener(command=config.opener))
        self.controller = NavigationController(
            start_path,
            lister=lister,
            view_file=self._view_file,
        )

    def compose(self) -> ComposeResult:
        yield DirectoryView(id="directory-view")
        yield Footer()

    def on_mount(self) -> None:
        """Show the starting directory."""
        self._render_directory()

    def on_resize(self, event: events.Resize) -> None:
        logger.debug("Terminal resized to %dx%d", event.size.width, event.size.height)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Keep browsing keys from reaching the controller while a pager is open."""
        if action in BROWSING_ACTIONS and isinstance(self.screen, PagerScreen):
            return False
        return True

    def _render_directory(self) -> None:
        self.query_one("#directory-view", DirectoryView).show(self.controller.state)

    def action_cursor_up(self) -> None:
        self.controller.move_selection(-1)
        self._render_directory()

    def action_cursor_down(self) -> None:
        self.controller.move_selection(1)
        self._render_directory()

    def action_enter(self) -> None:
        """Open the selected directory, or view the selected file."""
        if self.controller.enter() is EnterOutcome.DIRECTORY:
            self._render_directory()

    def action_go_back(self) -> None:
        if self.controller.go_back():
            self._render_directory()

    def action_go_forward(self) -> None:
        if self.controller.go_forward():
            self._render_directory()

    def pager_viewport_height(self) -> int:
        """Rows available to file content below the pager header."""
        return max(1, self.size.height - PagerScreen.CHROME_ROWS)

    def _view_file(self, file_path: str) -> None:
        """Start a pager session for a regular file chosen in the directory view."""
        pager = Pager.open(file_path, self.pager_viewport_height(), opener=self._opener)
        if not pager.is_viewing:
            self.notify(pager.message or "Nothing to show", severity="warning")
            return
        self.push_screen(PagerScreen(pager), self._on_pager_closed)

    def _on_pager_closed(self, result: None) -> None:
        """Back to browsing with the directory state exactly as it was."""
        self.notify("Returning to directory view...", timeout=2)
        self._render_directory()


def run_app(config: Config, start_path: str) -> None:
    """Run the Pathfinder application."""
    app = PathfinderApp(config, start_path)
    app.run()
