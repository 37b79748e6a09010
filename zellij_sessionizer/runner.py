"""Thin capability layer over external processes.

The picker and the multiplexer are black boxes; everything that spawns them
goes through a ``CommandRunner`` so the pipeline can be driven by a fake in
tests.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from typing import Protocol, Sequence

log = logging.getLogger(__name__)


@dataclass
class CaptureResult:
    """Outcome of a process whose stdout was captured."""
    returncode: int
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    def capture(self, args: Sequence[str], input: str) -> CaptureResult:
        """Run with ``input`` on stdin; stdout captured, tty left to the child."""
        ...

    def interactive(self, args: Sequence[str]) -> int:
        """Run attached to the current terminal, block until it exits."""
        ...


class SubprocessRunner:
    """CommandRunner backed by ``subprocess.run``.

    Launch failures surface as ``OSError`` (``FileNotFoundError`` when the
    executable is missing); callers decide whether that is fatal.
    """

    def capture(self, args: Sequence[str], input: str) -> CaptureResult:
        log.debug("capture: %s (%d bytes on stdin)", " ".join(args), len(input))
        # Paths may hold undecodable bytes (surrogate escapes); round-trip them
        result = subprocess.run(
            list(args), input=input, stdout=subprocess.PIPE,
            encoding=sys.getfilesystemencoding(), errors="surrogateescape",
        )
        return CaptureResult(returncode=result.returncode, stdout=result.stdout or "")

    def interactive(self, args: Sequence[str]) -> int:
        log.debug("interactive: %s", " ".join(args))
        return subprocess.run(list(args)).returncode
