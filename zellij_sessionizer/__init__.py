"""zellij-sessionizer — fuzzy-pick a project directory, land in a zellij session."""

__version__ = "0.1.0"
