"""Shared fixtures for pathfinder tests."""

from pathlib import Path

import pytest

from pathfinder.lister import DirectoryLister, scan_directory


class RecordingOpener:
    """ExternalOpener that remembers what it was handed."""

    def __init__(self) -> None:
        self.opened: list[Path] = []

    def hand_off(self, file_path: Path) -> None:
        self.opened.append(Path(file_path))


def sorted_scan(path: str):
    """Real listing primitive with a stable order for assertions."""
    return sorted(scan_directory(path))


def make_lister(tree: dict[str, list[tuple[str, bool]]]) -> DirectoryLister:
    """Build a lister over an in-memory tree of {path: [(name, is_dir), ...]}.

    Paths missing from the tree behave like unreadable directories.
    """

    def primitive(path: str):
        if path not in tree:
            raise PermissionError(path)
        return [(name, is_dir, "") for name, is_dir in tree[path]]

    return DirectoryLister(primitive)


@pytest.fixture
def recording_opener():
    return RecordingOpener()


@pytest.fixture
def fake_tree():
    """An in-memory directory tree rooted at /root."""
    return {
        "/root": [("..", True), ("a.txt", False), ("sub", True)],
        "/root/sub": [(".", True), ("..", True), ("deep", True), ("b.txt", False)],
        "/root/sub/deep": [("..", True)],
        "/": [("root", True)],
    }


@pytest.fixture
def docs_tree(tmp_path):
    """Create a small real directory tree in a temp directory."""
    docs = tmp_path / "docs"
    docs.mkdir()

    (docs / "a.txt").write_text("".join(f"line {i}\n" for i in range(40)))
    sub = docs / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("hello\n")

    return docs


@pytest.fixture
def fake_lister(fake_tree):
    return make_lister(fake_tree)


@pytest.fixture
def sorted_lister():
    return DirectoryLister(sorted_scan)
