"""Per-platform rendering of entry metadata (permissions, size, timestamps)."""

import os
import stat
import time
from typing import Protocol

# (mask, character) pairs in ls order: user, group, other
_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


class MetadataFormatter(Protocol):
    """Turns a stat result into the presentation-only metadata column."""

    def format(self, st: os.stat_result) -> str: ...


def format_permissions(mode: int) -> str:
    """Format a mode as an ls-style string, e.g. 'drwxr-xr-x'."""
    perms = "d" if stat.S_ISDIR(mode) else "-"
    for mask, char in _PERMISSION_BITS:
        perms += char if mode & mask else "-"
    return perms


class PosixMetadataFormatter:
    """Permissions, size in bytes and local modification time."""

    TIME_FORMAT = "%b %d %H:%M"

    def format(self, st: os.stat_result) -> str:
        mtime = time.strftime(self.TIME_FORMAT, time.localtime(st.st_mtime))
        return f"{format_permissions(st.st_mode)} {st.st_size} {mtime}"


class WindowsMetadataFormatter:
    """Directory flag, last-write date (DD/MM/YYYY) and time (HH:MM)."""

    def format(self, st: os.stat_result) -> str:
        kind = "d" if stat.S_ISDIR(st.st_mode) else "-"
        written = time.localtime(st.st_mtime)
        date = time.strftime("%d/%m/%Y", written)
        clock = time.strftime("%H:%M", written)
        return f"{kind}    {date}    {clock}"


def select_formatter(platform: str = os.name) -> MetadataFormatter:
    """Pick the formatter for the running platform (os.name values)."""
    if platform == "nt":
        return WindowsMetadataFormatter()
    return PosixMetadataFormatter()
