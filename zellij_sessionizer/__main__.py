"""Entry point for zellij-sessionizer."""

import argparse
import sys

from zellij_sessionizer.config import load_settings
from zellij_sessionizer.console import configure_logging
from zellij_sessionizer.picker import PICKERS
from zellij_sessionizer.sessionizer import run

# Only these exact tokens are options; anything else (including "-proj") is a path.
FLAGS = {"-h", "--help", "-v", "--version", "--forbid-nested", "--strict-glob", "--verbose"}
VALUE_OPTIONS = {"--picker"}


def split_argv(argv):
    """Separate option tokens from path specifiers, keeping path order."""
    options, paths = [], []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            paths.extend(tokens)
            break
        if token in FLAGS or ("=" in token and token.split("=", 1)[0] in VALUE_OPTIONS):
            options.append(token)
        elif token in VALUE_OPTIONS:
            options.append(token)
            value = next(tokens, None)
            if value is not None:
                options.append(value)
        else:
            paths.append(token)
    return options, paths


def parse_args(options=None):
    parser = argparse.ArgumentParser(
        prog="zellij-sessionizer",
        usage="%(prog)s [options] path1 [path2/* ...]",
        description="Pick a directory with fzf and attach to a zellij session named after it. "
                    "A path ending in /* offers each of its subdirectories.",
        allow_abbrev=False,
    )
    parser.add_argument("--version", "-v", action="store_true", help="Show version")
    parser.add_argument("--picker", choices=PICKERS, help="Picker to use (default: fzf)")
    parser.add_argument("--forbid-nested", action="store_true",
                        help="Refuse to run inside an active zellij session")
    parser.add_argument("--strict-glob", action="store_true",
                        help="Treat a missing DIR in DIR/* as not found")
    parser.add_argument("--verbose", action="store_true", help="Debug logging on stderr")
    return parser.parse_args(options)


def main(argv=None):
    options, paths = split_argv(sys.argv[1:] if argv is None else argv)
    args = parse_args(options)

    if args.version:
        from zellij_sessionizer import __version__
        print(f"zellij-sessionizer {__version__}")
        return 0

    try:
        settings = load_settings(args)
    except ValueError as exc:
        print(f"zellij-sessionizer: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.verbose)
    return run(paths, settings)


if __name__ == "__main__":
    sys.exit(main())
