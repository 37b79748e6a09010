"""Candidate collection: turn path specifiers into a list of directories.

A specifier is either a plain directory path, or ``D/*`` which offers every
immediate subdirectory of ``D``.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

from zellij_sessionizer import console

log = logging.getLogger(__name__)

GLOB_SUFFIX = "/*"


def is_directory(path: str) -> bool:
    """True if ``path`` exists and is a directory right now."""
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def append_path(candidates: list[str], path: str) -> bool:
    """Append ``path`` if it is a directory. Returns whether it was added."""
    if is_directory(path):
        candidates.append(path)
        return True
    return False


def expand_glob(candidates: list[str], base: str, strict: bool = False) -> bool:
    """Append every immediate subdirectory of ``base``.

    A missing ``base`` is warned about here. In the default (non-strict)
    mode the call still reports success, even if nothing was added; with
    ``strict`` it reports failure so the caller warns for the specifier too.
    """
    exists = is_directory(base)
    if not exists:
        console.warn_dir_not_found(base)
        if strict:
            return False

    try:
        entries = os.listdir(base)
    except OSError as exc:
        log.debug("cannot list %s: %s", base, exc)
        if exists:
            console.warn(f"Cannot read directory: {console.printable(base)}")
        return True

    added = 0
    for entry in entries:
        if append_path(candidates, os.path.join(base, entry)):
            added += 1
    log.debug("%s/*: %d of %d entries are directories", base, added, len(entries))
    return True


def expand_specifier(candidates: list[str], specifier: str, strict: bool = False) -> bool:
    """Expand one specifier into ``candidates``. False means "not found"."""
    if not specifier.endswith(GLOB_SUFFIX):
        return append_path(candidates, specifier)
    return expand_glob(candidates, specifier[: -len(GLOB_SUFFIX)], strict=strict)


def collect_candidates(specifiers: Iterable[str], strict: bool = False) -> list[str]:
    """Expand all specifiers in order, warning about the ones not found."""
    candidates: list[str] = []
    for specifier in specifiers:
        if not expand_specifier(candidates, specifier, strict=strict):
            console.warn_dir_not_found(specifier)
    return candidates
