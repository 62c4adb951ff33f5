"""Directory navigation state and transitions.

Paths are handled as plain strings split on the configured separator.
A `..` entry strips the last segment, except that a one-segment path
such as `/usr` has no parent. Drive roots keep their separator, so the
parent of `C:\\foo` is `C:\\`.
"""

import enum
import logging
import os
from dataclasses import dataclass
from typing import Callable

from .history import HistoryStacks
from .lister import DirectoryEntry, DirectoryLister

logger = logging.getLogger(__name__)

PARENT = ".."


@dataclass(frozen=True)
class NavigationState:
    """Snapshot of the directory view; replaced wholesale on every transition."""

    current_path: str
    entries: tuple[DirectoryEntry, ...]
    selection: int = 0


class EnterOutcome(enum.Enum):
    """What enter() did with the chosen entry."""

    NONE = "none"
    DIRECTORY = "directory"
    FILE = "file"


class NavigationController:
    """Owns the current directory, its entries, the selection and the history."""

    def __init__(
        self,
        start_path: str,
        lister: DirectoryLister | None = None,
        view_file: Callable[[str], None] | None = None,
        is_regular_file: Callable[[str], bool] = os.path.isfile,
        separator: str = os.sep,
    ) -> None:
        self._lister = lister or DirectoryLister()
        self._view_file = view_file
        self._is_regular_file = is_regular_file
        self._separator = separator
        self._history = HistoryStacks()
        self._state = self._load(start_path)

    def _load(self, path: str) -> NavigationState:
        return NavigationState(current_path=path, entries=tuple(self._lister.list(path)))

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def current_path(self) -> str:
        return self._state.current_path

    @property
    def entries(self) -> tuple[DirectoryEntry, ...]:
        return self._state.entries

    @property
    def selection(self) -> int:
        return self._state.selection

    @property
    def selected_entry(self) -> DirectoryEntry | None:
        if not self._state.entries:
            return None
        return self._state.entries[self._state.selection]

    @property
    def history(self) -> HistoryStacks:
        """A copy of the history stacks; mutating it has no effect."""
        return self._history.copy()

    def move_selection(self, delta: int) -> None:
        """Move the selection by ``delta``, clamped to the entry list."""
        entries = self._state.entries
        if not entries:
            return
        selection = min(max(self._state.selection + delta, 0), len(entries) - 1)
        self._state = NavigationState(self._state.current_path, entries, selection)

    def parent_of(self, path: str) -> str | None:
        """Strip the final separator segment, or None if there is no parent."""
        cut = path.rfind(self._separator)
        if cut <= 0:
            return None
        parent = path[:cut]
        if parent.endswith(":"):
            # Keep drive roots absolute (C:\ rather than drive-relative C:)
            parent += self._separator
        if parent == path:
            return None
        return parent

    def join(self, name: str) -> str:
        current = self._state.current_path
        if current.endswith(self._separator):
            return current + name
        return current + self._separator + name

    def enter(self, index: int | None = None) -> EnterOutcome:
        """Open the entry at ``index`` (the selection by default).

        Directories become the new current path and clear the forward
        history. Regular files are handed to the file viewer and leave the
        navigation state untouched. Anything else is ignored.
        """
        entries = self._state.entries
        if index is None:
            index = self._state.selection
        if not 0 <= index < len(entries):
            return EnterOutcome.NONE

        entry = entries[index]
        if entry.is_directory:
            if entry.name == PARENT:
                target = self.parent_of(self._state.current_path)
                if target is None:
                    return EnterOutcome.NONE
            else:
                target = self.join(entry.name)

            self._history.clear_forward()
            self._history.push_back(self._state.current_path)
            self._change_directory(target)
            return EnterOutcome.DIRECTORY

        file_path = self.join(entry.name)
        if not self._is_regular_file(file_path):
            logger.debug("Ignoring non-regular entry %s", file_path)
            return EnterOutcome.NONE

        if self._view_file is not None:
            self._view_file(file_path)
        return EnterOutcome.FILE

    def go_back(self) -> bool:
        """Return to the previous directory; False if there is none."""
        if not self._history.can_go_back():
            return False
        previous = self._history.pop_back()
        self._history.push_forward(self._state.current_path)
        self._change_directory(previous)
        return True

    def go_forward(self) -> bool:
        """Redo a go_back(); False if there is nothing to go forward to."""
        if not self._history.can_go_forward():
            return False
        following = self._history.pop_forward()
        self._history.push_back(self._state.current_path)
        self._change_directory(following)
        return True

    def _change_directory(self, path: str) -> None:
        logger.debug("Changing directory: %s -> %s", self._state.current_path, path)
        self._state = self._load(path)
