"""Pathfinder widgets."""

from .directory_view import DirectoryView, EntryRows
from .pager_view import PagerBody, PagerScreen

__all__ = [
    "DirectoryView",
    "EntryRows",
    "PagerBody",
    "PagerScreen",
]
