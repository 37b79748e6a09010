"""Console output and logging setup.

User-facing messages go to stdout through a Rich console. Styling is only
applied to the ``Warning:`` / ``Error:`` labels, and only when stdout is a
terminal, so piped output stays plain text.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)

USAGE_MESSAGE = "No paths were specified, usage: ./zellij-sessionizer path1 path2/* etc..."
NO_VALID_DIRS_MESSAGE = "No valid directories found to choose from."


def say(message: str | Text) -> None:
    """Print one line verbatim (no markup, no wrapping)."""
    console.print(message, markup=False, soft_wrap=True)


def printable(path: str) -> str:
    # undecodable filename bytes arrive as surrogate escapes
    return path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def warn(message: str) -> None:
    text = Text()
    text.append("Warning:", style="yellow")
    text.append(f" {message}")
    say(text)


def warn_dir_not_found(path: str) -> None:
    warn(f"Directory not found: {printable(path)}")


def error(message: str) -> None:
    text = Text()
    text.append("Error:", style="red")
    text.append(f" {message}")
    say(text)


def nested_session_banner() -> Text:
    """Explain why the tool refuses to run inside an active zellij session."""
    text = Text()
    text.append("Zellij environment detected!", style="red")
    text.append(
        "\nScript only works outside of Zellij.\n\n"
        "This is because nested Zellij sessions are not recommended,\n"
        "and it is currently not possible to change Zellij sessions\n"
        "from within a script.\n\n"
        "Exit Zellij and try again,\n"
        "or unset "
    )
    text.append("ZELLIJ", style="green")
    text.append(" env var to force this script to work.")
    return text


def configure_logging(verbose: bool = False) -> None:
    """Route package logs to stderr through Rich."""
    logger = logging.getLogger("zellij_sessionizer")
    if not logger.handlers:
        handler = RichHandler(console=err_console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
