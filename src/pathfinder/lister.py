"""Directory listing for the browser."""

import logging
import os
import stat
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from .formatting import MetadataFormatter, select_formatter

logger = logging.getLogger(__name__)

# Raw listing record: (name, is_directory, rendered metadata)
RawEntry = tuple[str, bool, str]
EnumerateFn = Callable[[str], Iterable[RawEntry]]

SPECIAL_NAMES = (".", "..")


@dataclass(frozen=True)
class DirectoryEntry:
    """One object reported by the listing primitive.

    ``name`` is the identity of the entry. ``rendered_metadata`` is for
    display only and is never parsed back.
    """

    name: str
    is_directory: bool
    rendered_metadata: str = ""

    @property
    def label(self) -> str:
        """Display line: metadata column followed by the name."""
        if self.rendered_metadata:
            return f"{self.rendered_metadata} {self.name}"
        return self.name


def scan_directory(
    path: str, formatter: MetadataFormatter | None = None
) -> Iterator[RawEntry]:
    """Enumerate a directory the way readdir does, including '.' and '..'.

    Entries are stat-ed following symlinks; entries whose stat fails are
    skipped. Raises OSError if the directory itself cannot be opened.
    """
    formatter = formatter or select_formatter()

    # Open the directory first so an unreadable path fails before any output
    with os.scandir(path) as it:
        names = [*SPECIAL_NAMES, *(entry.name for entry in it)]

    for name in names:
        try:
            st = os.stat(os.path.join(path, name))
        except OSError:
            continue
        yield (name, stat.S_ISDIR(st.st_mode), formatter.format(st))


class DirectoryLister:
    """Lists directories, reporting failures as an empty listing."""

    def __init__(self, primitive: EnumerateFn | None = None) -> None:
        self._enumerate = primitive or scan_directory

    def list(self, path: str) -> list[DirectoryEntry]:
        """Return the entries of ``path`` in enumeration order.

        An unreadable or missing directory yields an empty list, which is
        indistinguishable from a truly empty directory.
        """
        try:
            return [
                DirectoryEntry(name=name, is_directory=is_dir, rendered_metadata=meta)
                for name, is_dir, meta in self._enumerate(path)
            ]
        except OSError as e:
            logger.debug("Cannot list %s: %s", path, e)
            return []
