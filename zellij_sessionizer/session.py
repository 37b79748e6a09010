"""Session naming and hand-off to the zellij client."""

from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import Sequence

from zellij_sessionizer.runner import CommandRunner

log = logging.getLogger(__name__)

DEFAULT_MULTIPLEXER = ("zellij",)


def session_name(path: str) -> str:
    """Session name for ``path``: its last segment with the first dot made ``_``.

    >>> session_name("/home/user/a.b.c")
    'a_b.c'
    """
    name = PurePath(path).name or path
    return name.replace(".", "_", 1)


def attach_command(name: str, multiplexer: Sequence[str] = DEFAULT_MULTIPLEXER) -> list[str]:
    # -c creates the session when it does not exist yet
    return [*multiplexer, "attach", name, "-c"]


def launch_session(
    path: str,
    runner: CommandRunner,
    multiplexer: Sequence[str] = DEFAULT_MULTIPLEXER,
) -> int:
    """chdir into ``path`` and attach to (or create) its session.

    Blocks for the lifetime of the session and returns the client's exit
    code. Failing to start the client is not handled here.
    """
    name = session_name(path)
    os.chdir(path)
    log.debug("attaching to session %r in %s", name, path)
    return runner.interactive(attach_command(name, multiplexer))
