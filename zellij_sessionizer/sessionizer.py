"""The whole pipeline: specifiers -> candidates -> pick -> session."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Sequence

from zellij_sessionizer import console
from zellij_sessionizer.candidates import collect_candidates
from zellij_sessionizer.config import Settings
from zellij_sessionizer.picker import pick
from zellij_sessionizer.runner import CommandRunner, SubprocessRunner
from zellij_sessionizer.session import launch_session

log = logging.getLogger(__name__)


def nested_session_active(environ: Optional[Mapping[str, str]] = None) -> bool:
    """zellij exports ZELLIJ inside its sessions."""
    environ = os.environ if environ is None else environ
    return "ZELLIJ" in environ


def run(
    specifiers: Sequence[str],
    settings: Optional[Settings] = None,
    runner: Optional[CommandRunner] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Run once and return the process exit code."""
    settings = settings or Settings()
    runner = runner or SubprocessRunner()

    if settings.forbid_nested and nested_session_active(environ):
        console.say(console.nested_session_banner())
        return 1

    if not specifiers:
        console.say(console.USAGE_MESSAGE)
        return 1

    candidates = collect_candidates(specifiers, strict=settings.strict_glob)
    log.debug("%d candidate(s) from %d specifier(s)", len(candidates), len(specifiers))
    if not candidates:
        console.say(console.NO_VALID_DIRS_MESSAGE)
        return 0

    selected = pick(candidates, settings.picker, runner, settings.picker_command)
    if not selected:
        # Nothing picked: exit quietly
        return 0

    return launch_session(selected, runner, settings.multiplexer_command)
