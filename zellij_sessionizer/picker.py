"""Picker invocation.

``fzf`` is the default picker and is treated as a black box: candidates go in
on stdin, the chosen line comes back on stdout. A small built-in Textual
picker is available for machines without fzf.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from zellij_sessionizer import console
from zellij_sessionizer.runner import CommandRunner

log = logging.getLogger(__name__)

DEFAULT_FZF = ("fzf",)
PICKERS = ("fzf", "builtin")


def pick_with_fzf(
    candidates: Sequence[str],
    runner: CommandRunner,
    command: Sequence[str] = DEFAULT_FZF,
) -> Optional[str]:
    """Return the line fzf printed, or None if nothing was chosen."""
    try:
        result = runner.capture(command, "\n".join(candidates))
    except OSError as exc:
        log.debug("picker launch failed: %s", exc)
        console.error("Failed to execute fzf")
        return None

    # fzf exits 1 on no match and 130 on Ctrl-C/Esc
    if not result.ok:
        log.debug("picker exited with %d", result.returncode)
        return None
    return result.stdout.strip() or None


def fuzzy_filter(candidates: Sequence[str], query: str) -> list[str]:
    """Candidates containing ``query`` as a case-insensitive subsequence."""
    needle = query.lower().replace(" ", "")
    if not needle:
        return list(candidates)

    matches = []
    for candidate in candidates:
        it = iter(candidate.lower())
        if all(ch in it for ch in needle):
            matches.append(candidate)
    return matches


def pick_with_textual(candidates: Sequence[str]) -> Optional[str]:
    from zellij_sessionizer.app import PickerApp

    return PickerApp(candidates).run() or None


def pick(candidates: Sequence[str], picker: str, runner: CommandRunner,
         fzf_command: Sequence[str] = DEFAULT_FZF) -> Optional[str]:
    if picker == "builtin":
        return pick_with_textual(candidates)
    return pick_with_fzf(candidates, runner, fzf_command)
