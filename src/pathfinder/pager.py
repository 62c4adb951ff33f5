"""Scrollable file pager state machine."""

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .opener import ExternalOpener, OpenerError

logger = logging.getLogger(__name__)

NOT_READABLE_MESSAGE = "File not readable. Opening with default application..."
OPEN_FAILED_MESSAGE = "Error: Unable to open file"
EMPTY_FILE_MESSAGE = "File is empty"


class PagerMode(enum.Enum):
    VIEWING = "viewing"
    EXITED = "exited"


@dataclass
class PagerState:
    """Loaded lines and the scroll/cursor position over them."""

    lines: list[str] = field(default_factory=list)
    top_line: int = 0
    current_line: int = 0
    viewport_height: int = 1


def is_readable(file_path: Path) -> bool:
    """Check that the file can be opened for reading."""
    try:
        with open(file_path, "rb"):
            return True
    except OSError:
        return False


def read_lines(file_path: Path) -> list[str]:
    """Read the whole file as newline-delimited records.

    A trailing newline does not produce an extra empty record.
    """
    content = file_path.read_text(encoding="utf-8", errors="replace")
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class Pager:
    """A single file-view session: VIEWING until cancelled, then EXITED for good."""

    def __init__(
        self,
        file_path: Path,
        lines: list[str],
        viewport_height: int,
        message: str | None = None,
    ) -> None:
        self.file_path = file_path
        self.state = PagerState(lines=lines, viewport_height=max(1, viewport_height))
        self.message = message
        self.mode = PagerMode.VIEWING if lines and message is None else PagerMode.EXITED

    @classmethod
    def open(
        cls,
        file_path: Path | str,
        viewport_height: int,
        opener: ExternalOpener | None = None,
    ) -> "Pager":
        """Start a session on ``file_path``.

        Unreadable files are handed to ``opener`` and the returned pager is
        already EXITED, as is one whose file vanished or became unreadable
        after the check. Check ``message`` for what to tell the user.
        """
        file_path = Path(file_path)

        if not is_readable(file_path):
            logger.info("Handing off unreadable file: %s", file_path)
            message = NOT_READABLE_MESSAGE
            if opener is not None:
                try:
                    opener.hand_off(file_path)
                except OpenerError as e:
                    message = f"{NOT_READABLE_MESSAGE} {e}"
            return cls(file_path, [], viewport_height, message=message)

        try:
            lines = read_lines(file_path)
        except OSError as e:
            logger.warning("Failed to read %s: %s", file_path, e)
            return cls(file_path, [], viewport_height, message=OPEN_FAILED_MESSAGE)

        if not lines:
            return cls(file_path, [], viewport_height, message=EMPTY_FILE_MESSAGE)

        logger.debug("Viewing %s (%d lines)", file_path, len(lines))
        return cls(file_path, lines, viewport_height)

    @property
    def is_viewing(self) -> bool:
        return self.mode is PagerMode.VIEWING

    @property
    def lines(self) -> list[str]:
        return self.state.lines

    @property
    def top_line(self) -> int:
        return self.state.top_line

    @property
    def current_line(self) -> int:
        return self.state.current_line

    @property
    def viewport_height(self) -> int:
        return self.state.viewport_height

    def up(self) -> None:
        if not self.is_viewing:
            return
        state = self.state
        state.current_line = max(0, state.current_line - 1)
        if state.current_line < state.top_line:
            state.top_line = state.current_line

    def down(self) -> None:
        if not self.is_viewing:
            return
        state = self.state
        state.current_line = min(len(state.lines) - 1, state.current_line + 1)
        if state.current_line >= state.top_line + state.viewport_height:
            state.top_line += 1

    def cancel(self) -> None:
        self.mode = PagerMode.EXITED

    def handle_key(self, key: str) -> bool:
        """Apply a key event; returns False for keys the pager does not use."""
        if key == "up":
            self.up()
        elif key == "down":
            self.down()
        elif key == "escape":
            self.cancel()
        else:
            return False
        return True

    def resize(self, viewport_height: int) -> None:
        """Adopt a new viewport height, scrolling just enough to keep the cursor visible."""
        state = self.state
        state.viewport_height = max(1, viewport_height)
        lowest_top = state.current_line - state.viewport_height + 1
        if state.top_line < lowest_top:
            state.top_line = lowest_top

    def visible_lines(self) -> list[tuple[int, str]]:
        """The (line index, text) pairs inside the viewport."""
        state = self.state
        end = min(len(state.lines), state.top_line + state.viewport_height)
        return [(i, state.lines[i]) for i in range(state.top_line, end)]
