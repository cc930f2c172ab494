"""Colored one-line terminal output."""

from __future__ import annotations

import os
import sys
from typing import TextIO

BLUE = "\033[34m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"


class Console:
    """Writes progress lines to stdout and alerts to stderr.

    Color is dropped when `NO_COLOR` is set or the stream is not a terminal.
    """

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
        color: bool | None = None,
    ) -> None:
        self._out = out
        self._err = err
        self._color = color

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def _paint(self, text: str, color: str, stream: TextIO) -> str:
        enabled = self._color
        if enabled is None:
            enabled = "NO_COLOR" not in os.environ and stream.isatty()
        return f"{color}{text}{RESET}" if enabled else text

    def _write(self, text: str, color: str, stream: TextIO) -> None:
        print(self._paint(text, color, stream), file=stream)

    def info(self, text: str) -> None:
        self._write(text, BLUE, self.out)

    def success(self, text: str) -> None:
        self._write(text, GREEN, self.out)

    def warn(self, text: str) -> None:
        self._write(text, YELLOW, self.out)

    def error(self, text: str) -> None:
        self._write(text, RED, self.out)

    def fatal(self, text: str) -> None:
        self._write(text, RED, self.err)

    def plain(self, text: str = "") -> None:
        print(text, file=self.out)

    def banner(self, version: str) -> None:
        print(
            f"{self._paint('GJIRA', YELLOW, self.out)} {self._paint(f'ver. {version}', BLUE, self.out)}",
            file=self.out,
        )
