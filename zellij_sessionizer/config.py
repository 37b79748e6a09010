"""Runtime settings: defaults, overridden by environment, overridden by flags."""

from __future__ import annotations

import argparse
import os
import shlex
from dataclasses import dataclass, field
from typing import Mapping, Optional

from zellij_sessionizer.picker import DEFAULT_FZF, PICKERS
from zellij_sessionizer.session import DEFAULT_MULTIPLEXER

ENV_PREFIX = "ZELLIJ_SESSIONIZER_"
TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Resolved options for one run."""
    picker: str = "fzf"
    picker_command: list[str] = field(default_factory=lambda: list(DEFAULT_FZF))
    multiplexer_command: list[str] = field(default_factory=lambda: list(DEFAULT_MULTIPLEXER))
    forbid_nested: bool = False
    strict_glob: bool = False
    verbose: bool = False


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(ENV_PREFIX + name)
    return value if value and value.strip() else None


def load_settings(args: Optional[argparse.Namespace] = None,
                  environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment, then apply any CLI flags."""
    environ = os.environ if environ is None else environ
    settings = Settings()

    picker = _env(environ, "PICKER")
    if picker:
        if picker not in PICKERS:
            raise ValueError(f"{ENV_PREFIX}PICKER must be one of {', '.join(PICKERS)}, got {picker!r}")
        settings.picker = picker
    fzf = _env(environ, "FZF")
    if fzf:
        settings.picker_command = shlex.split(fzf)
    zellij = _env(environ, "ZELLIJ")
    if zellij:
        settings.multiplexer_command = shlex.split(zellij)
    nested = _env(environ, "FORBID_NESTED")
    if nested:
        settings.forbid_nested = nested.strip().lower() in TRUTHY

    if args is not None:
        if getattr(args, "picker", None):
            settings.picker = args.picker
        if getattr(args, "forbid_nested", False):
            settings.forbid_nested = True
        if getattr(args, "strict_glob", False):
            settings.strict_glob = True
        if getattr(args, "verbose", False):
            settings.verbose = True

    return settings
