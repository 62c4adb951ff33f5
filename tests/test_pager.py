"""Tests for pathfinder.pager module."""

import pytest

from pathfinder import pager as pager_module
from pathfinder.opener import OpenerError
from pathfinder.pager import (
    EMPTY_FILE_MESSAGE,
    NOT_READABLE_MESSAGE,
    OPEN_FAILED_MESSAGE,
    Pager,
    PagerMode,
    read_lines,
)


@pytest.fixture
def hundred_lines(tmp_path):
    path = tmp_path / "hundred.txt"
    path.write_text("".join(f"line {i}\n" for i in range(100)))
    return path


def assert_invariant(pager):
    assert 0 <= pager.top_line <= pager.current_line
    assert pager.current_line < pager.top_line + pager.viewport_height
    assert 0 <= pager.current_line < len(pager.lines)


class TestReadLines:
    def test_trailing_newline_adds_no_record(self, tmp_path):
        path = tmp_path / "f.txt"
        path.write_text("a\nb\n")
        assert read_lines(path) == ["a", "b"]

    def test_no_trailing_newline(self, tmp_path):
        path = tmp_path / "f.txt"
        path.write_text("a\nb")
        assert read_lines(path) == ["a", "b"]

    def test_blank_lines_are_kept(self, tmp_path):
        path = tmp_path / "f.txt"
        path.write_text("a\n\n\nb\n")
        assert read_lines(path) == ["a", "", "", "b"]

    def test_undecodable_bytes_are_replaced(self, tmp_path):
        path = tmp_path / "f.bin"
        path.write_bytes(b"ok\n\xff\xfe\n")
        lines = read_lines(path)
        assert lines[0] == "ok"
        assert len(lines) == 2


class TestOpen:
    def test_open_starts_viewing_at_top(self, hundred_lines):
        pager = Pager.open(hundred_lines, 20)
        assert pager.mode is PagerMode.VIEWING
        assert pager.top_line == 0
        assert pager.current_line == 0
        assert len(pager.lines) == 100
        assert pager.message is None

    def test_unreadable_file_is_handed_off(self, tmp_path, recording_opener):
        missing = tmp_path / "missing.txt"
        pager = Pager.open(missing, 20, opener=recording_opener)
        assert pager.mode is PagerMode.EXITED
        assert pager.message == NOT_READABLE_MESSAGE
        assert recording_opener.opened == [missing]

    def test_unreadable_without_opener(self, tmp_path):
        pager = Pager.open(tmp_path / "missing.txt", 20)
        assert not pager.is_viewing
        assert pager.message == NOT_READABLE_MESSAGE

    def test_opener_failure_is_reported(self, tmp_path):
        class FailingOpener:
            def hand_off(self, file_path):
                raise OpenerError("no launcher")

        pager = Pager.open(tmp_path / "missing.txt", 20, opener=FailingOpener())
        assert not pager.is_viewing
        assert "no launcher" in pager.message

    def test_read_failure_after_check(self, hundred_lines, monkeypatch, recording_opener):
        def boom(path):
            raise PermissionError("revoked")

        monkeypatch.setattr(pager_module, "read_lines", boom)
        pager = Pager.open(hundred_lines, 20, opener=recording_opener)
        assert pager.mode is PagerMode.EXITED
        assert pager.message == OPEN_FAILED_MESSAGE
        assert recording_opener.opened == []

    def test_empty_file_never_views(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("")
        pager = Pager.open(path, 20)
        assert pager.mode is PagerMode.EXITED
        assert pager.message == EMPTY_FILE_MESSAGE

    def test_viewport_height_at_least_one(self, hundred_lines):
        pager = Pager.open(hundred_lines, 0)
        assert pager.viewport_height == 1


class TestScrolling:
    def test_twenty_five_downs(self, hundred_lines):
        pager = Pager.open(hundred_lines, 20)
        for _ in range(25):
            pager.down()
        assert pager.current_line == 25
        assert pager.top_line == 6

    def test_down_stops_at_last_line(self, tmp_path):
        path = tmp_path / "short.txt"
        path.write_text("a\nb\nc\n")
        pager = Pager.open(path, 20)
        for _ in range(10):
            pager.down()
        assert pager.current_line == 2
        assert pager.top_line == 0

    def test_up_stops_at_first_line(self, hundred_lines):
        pager = Pager.open(hundred_lines, 20)
        pager.up()
        assert pager.current_line == 0
        assert pager.top_line == 0

    def test_up_scrolls_top_back(self, hundred_lines):
        pager = Pager.open(hundred_lines, 5)
        for _ in range(10):
            pager.down()
        assert pager.top_line == 6
        for _ in range(8):
            pager.up()
        assert pager.current_line == 2
        assert pager.top_line == 2

    def test_invariant_holds_for_any_moves(self, hundred_lines):
        pager = Pager.open(hundred_lines, 7)
        moves = ["down"] * 30 + ["up"] * 12 + ["down"] * 90 + ["up"] * 200 + ["down"] * 3
        for move in moves:
            getattr(pager, move)()
            assert_invariant(pager)

    def test_single_line_file(self, tmp_path):
        path = tmp_path / "one.txt"
        path.write_text("only")
        pager = Pager.open(path, 3)
        for move in ["down", "up", "down", "down"]:
            getattr(pager, move)()
            assert_invariant(pager)
        assert pager.current_line == 0

    def test_visible_lines(self, hundred_lines):
        pager = Pager.open(hundred_lines, 3)
        for _ in range(4):
            pager.down()
        assert pager.visible_lines() == [(2, "line 2"), (3, "line 3"), (4, "line 4")]


class TestKeysAndExit:
    def test_handle_key(self, hundred_lines):
        pager = Pager.open(hundred_lines, 20)
        assert pager.handle_key("down") is True
        assert pager.current_line == 1
        assert pager.handle_key("up") is True
        assert pager.current_line == 0
        assert pager.handle_key("x") is False

    def test_cancel_is_terminal(self, hundred_lines):
        pager = Pager.open(hundred_lines, 20)
        pager.handle_key("escape")
        assert pager.mode is PagerMode.EXITED

        pager.down()
        assert pager.current_line == 0
        assert not pager.is_viewing


class TestResize:
    def test_shrink_keeps_cursor_visible(self, hundred_lines):
        pager = Pager.open(hundred_lines, 20)
        for _ in range(15):
            pager.down()
        pager.resize(5)
        assert pager.top_line == 11
        assert_invariant(pager)

    def test_grow_keeps_top(self, hundred_lines):
        pager = Pager.open(hundred_lines, 5)
        for _ in range(10):
            pager.down()
        pager.resize(30)
        assert pager.top_line == 6
        assert_invariant(pager)
