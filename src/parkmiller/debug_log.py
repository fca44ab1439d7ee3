from __future__ import annotations

import datetime as dt
import os
from pathlib import Path
from types import TracebackType
from typing import TextIO

__all__ = ["DrawTrace"]


class DrawTrace:
    """Tab-separated record of one CLI run.

    One `#` header line, then one `draw` row per value (index, printed value,
    seed after the draw) and a `save` row when the final seed is written out.
    A trace built with no path records nothing.
    """

    __slots__ = ("_handle", "path")

    def __init__(self, path: Path | None) -> None:
        self.path = path
        self._handle: TextIO | None = None

    @classmethod
    def in_dir(cls, base_dir: Path | None, command: str) -> DrawTrace:
        if base_dir is None:
            return cls(None)
        stamp = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%S.%fZ")
        return cls(base_dir / f"parkmiller-{command}-pid{os.getpid()}-{stamp}.log")

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def __enter__(self) -> DrawTrace:
        if self.path is not None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self.path.open("w", encoding="utf-8")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._handle is not None:
            if exc_type is not None:
                self._handle.write(f"# aborted: {exc_type.__name__}\n")
            self._handle.close()
            self._handle = None

    def header(self, *, command: str, seed: int, kind: str, count: int) -> None:
        started = dt.datetime.now(dt.timezone.utc).isoformat(timespec="milliseconds")
        self._write(f"# command={command} seed={seed} kind={kind} count={count} started={started}")

    def draw(self, index: int, value: str, seed: int) -> None:
        self._write(f"draw\t{index}\t{value}\t{seed}")

    def saved(self, path: Path, seed: int) -> None:
        self._write(f"save\t{path}\t{seed}")

    def _write(self, line: str) -> None:
        if self._handle is None:
            return
        self._handle.write(line + "\n")
