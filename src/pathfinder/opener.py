"""Hand-off of files to the operating system's default application."""

import logging
import os
import shlex
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class OpenerError(Exception):
    """Raised when no launcher could be started for a file."""


class ExternalOpener(Protocol):
    """Capability for presenting a file outside the browser."""

    def hand_off(self, file_path: Path) -> None: ...


def _run_launcher(candidates: list[str], file_path: Path) -> None:
    """Run the first launcher found on PATH and wait for it to return."""
    for launcher in candidates:
        executable = shutil.which(launcher)
        if executable is None:
            continue
        logger.info("Opening %s with %s", file_path, launcher)
        try:
            subprocess.run([executable, str(file_path)], check=False)
        except OSError as e:
            raise OpenerError(f"Could not run {launcher}: {e}") from e
        return
    raise OpenerError(f"No launcher found (tried {', '.join(candidates)})")


class XdgOpener:
    """Linux and BSD desktops: xdg-open, falling back to open."""

    LAUNCHERS = ["xdg-open", "open"]

    def hand_off(self, file_path: Path) -> None:
        _run_launcher(self.LAUNCHERS, file_path)


class MacOpener:
    """macOS: the open command."""

    LAUNCHERS = ["open"]

    def hand_off(self, file_path: Path) -> None:
        _run_launcher(self.LAUNCHERS, file_path)


class WindowsOpener:
    """Windows shell association; returns without waiting for the program."""

    def hand_off(self, file_path: Path) -> None:
        logger.info("Opening %s with the shell association", file_path)
        try:
            os.startfile(str(file_path))  # type: ignore[attr-defined]
        except OSError as e:
            raise OpenerError(f"Could not open {file_path.name}: {e}") from e


class CommandOpener:
    """A user-configured command; the file path is appended as the last argument."""

    def __init__(self, command: str) -> None:
        self.argv = shlex.split(command)
        if not self.argv:
            raise ValueError("opener command is empty")

    def hand_off(self, file_path: Path) -> None:
        logger.info("Opening %s with %s", file_path, self.argv[0])
        try:
            subprocess.run([*self.argv, str(file_path)], check=False)
        except OSError as e:
            raise OpenerError(f"Could not run {self.argv[0]}: {e}") from e


def select_opener(platform: str = sys.platform, command: str = "") -> ExternalOpener:
    """Pick the opener for this platform, or the configured command if set."""
    if command.strip():
        return CommandOpener(command)
    if platform.startswith("win"):
        return WindowsOpener()
    if platform == "darwin":
        return MacOpener()
    return XdgOpener()
