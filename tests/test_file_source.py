"""Tests for the filesystem line source (infra/file_source.py).

All files live under ``tmp_path``.

Coverage:
* Raw byte lines, terminators preserved, no decoding.
* Missing file, directory and mid-read failures → ``InputReadError``.
* Handle released when the generator is closed early.
"""

from __future__ import annotations

import builtins
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from filemanipulator.exceptions import InputReadError
from filemanipulator.infra import file_source
from filemanipulator.infra.file_source import FileLineSource


class TestIterLines:
    def test_yields_raw_lines(self, write_input: Callable[[bytes], Path]) -> None:
        path = write_input(b"a\tb\nc\td\n")
        assert list(FileLineSource().iter_lines(path)) == [b"a\tb\n", b"c\td\n"]

    def test_last_line_without_terminator(self, write_input: Callable[[bytes], Path]) -> None:
        path = write_input(b"a\nb")
        assert list(FileLineSource().iter_lines(path)) == [b"a\n", b"b"]

    def test_no_newline_translation(self, write_input: Callable[[bytes], Path]) -> None:
        path = write_input(b"a\r\nb\rc\n")
        assert list(FileLineSource().iter_lines(path)) == [b"a\r\n", b"b\rc\n"]

    def test_non_utf8_bytes(self, write_input: Callable[[bytes], Path]) -> None:
        path = write_input(b"\xef\xbb\xbf\xff\t\x80\n")
        assert list(FileLineSource().iter_lines(path)) == [b"\xef\xbb\xbf\xff\t\x80\n"]

    def test_empty_file(self, write_input: Callable[[bytes], Path]) -> None:
        path = write_input(b"")
        assert list(FileLineSource().iter_lines(path)) == []


class TestErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputReadError, match="not found") as exc_info:
            list(FileLineSource().iter_lines(tmp_path / "missing.tsv"))
        assert exc_info.value.hint is not None

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(InputReadError):
            list(FileLineSource().iter_lines(tmp_path))

    def test_permission_denied(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def _deny(*_args: Any, **_kwargs: Any) -> Any:
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(file_source, "open", _deny, raising=False)
        with pytest.raises(InputReadError, match="Permission denied"):
            list(FileLineSource().iter_lines(tmp_path / "secret.tsv"))

    def test_read_failure_midway(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        class _FlakyHandle:
            closed = False

            def __enter__(self) -> _FlakyHandle:
                return self

            def __exit__(self, *_args: object) -> None:
                self.closed = True

            def __iter__(self) -> _FlakyHandle:
                self._served = False
                return self

            def __next__(self) -> bytes:
                if not self._served:
                    self._served = True
                    return b"first\n"
                raise OSError(5, "Input/output error")

        handle = _FlakyHandle()
        monkeypatch.setattr(file_source, "open", lambda *_a, **_k: handle, raising=False)

        lines = FileLineSource().iter_lines(tmp_path / "flaky.tsv")
        assert next(lines) == b"first\n"
        with pytest.raises(InputReadError, match="Input/output error"):
            next(lines)
        assert handle.closed is True


class TestResourceRelease:
    def test_closing_generator_closes_file(
        self,
        write_input: Callable[[bytes], Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        opened: list[Any] = []
        real_open = builtins.open

        def _tracking_open(*args: Any, **kwargs: Any) -> Any:
            handle = real_open(*args, **kwargs)
            opened.append(handle)
            return handle

        path = write_input(b"a\nb\nc\n")
        monkeypatch.setattr(file_source, "open", _tracking_open, raising=False)

        lines = FileLineSource().iter_lines(path)
        assert next(lines) == b"a\n"
        lines.close()

        assert len(opened) == 1
        assert opened[0].closed
