"""Full-screen pager for viewing a text file."""

from rich.text import Text

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widget import Widget
from textual.widgets import Static

from ..pager import Pager

PAGER_HINT = "Use arrow keys to navigate, ESC to exit"


class PagerBody(Widget):
    """The visible slice of the file with the current line highlighted."""

    DEFAULT_CSS = """
    PagerBody {
        height: 1fr;
        padding: 0 1;
    }
    """

    def __init__(self, pager: Pager, **kwargs) -> None:
        super().__init__(**kwargs)
        self.pager = pager

    def on_resize(self, event: events.Resize) -> None:
        self.pager.resize(event.size.height)
        self.refresh()

    def render(self) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        for position, (index, line) in enumerate(self.pager.visible_lines()):
            if position:
                text.append("\n")
            style = "reverse" if index == self.pager.current_line else ""
            text.append(line.expandtabs(), style=style)
        return text


class PagerScreen(Screen[None]):
    """Screen hosting one pager session; dismissed when the pager exits."""

    # Header and hint rows around the body
    CHROME_ROWS = 2

    DEFAULT_CSS = """
    PagerScreen > #pager-header {
        background: $primary-background;
        color: $success;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    PagerScreen > #pager-hint {
        color: $text-muted;
        padding: 0 1;
        height: 1;
    }
    """

    BINDINGS = [
        Binding("up", "pager_key('up')", "Up", show=False),
        Binding("down", "pager_key('down')", "Down", show=False),
        Binding("escape", "pager_key('escape')", "Close", show=False),
    ]

    def __init__(self, pager: Pager) -> None:
        super().__init__()
        self.pager = pager

    def compose(self) -> ComposeResult:
        yield Static(f"File: {self.pager.file_path}", id="pager-header", markup=False)
        yield PagerBody(self.pager, id="pager-body")
        yield Static(PAGER_HINT, id="pager-hint", markup=False)

    @property
    def body(self) -> PagerBody:
        return self.query_one("#pager-body", PagerBody)

    def action_pager_key(self, key: str) -> None:
        """Feed a key to the pager and close the screen once it has exited."""
        self.pager.handle_key(key)
        if not self.pager.is_viewing:
            self.dismiss()
            return
        self.body.refresh()
