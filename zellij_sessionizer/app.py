"""Built-in directory picker.

A minimal stand-in for fzf: a filter box over a list of candidates.
Enter picks the highlighted directory, Escape cancels.

Built with Textual (https://textual.textualize.io).
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Input, OptionList

from zellij_sessionizer.picker import fuzzy_filter


class PickerApp(App[Optional[str]]):
    """Pick one directory; ``run()`` returns it, or None when cancelled."""

    TITLE = "zellij-sessionizer"

    CSS = """
    #query {
        dock: top;
    }
    #candidates {
        height: 1fr;
        border: none;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
        ("down", "cursor_down", "Down"),
        ("up", "cursor_up", "Up"),
    ]

    def __init__(self, candidates: Sequence[str]) -> None:
        super().__init__()
        self.candidates = list(candidates)
        self._visible = list(candidates)

    def compose(self) -> ComposeResult:
        yield Input(placeholder="filter directories", id="query")
        yield OptionList(*(Text(c) for c in self._visible), id="candidates")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#query", Input).focus()
        if self._visible:
            self.query_one("#candidates", OptionList).highlighted = 0

    def on_input_changed(self, event: Input.Changed) -> None:
        self._visible = fuzzy_filter(self.candidates, event.value)
        options = self.query_one("#candidates", OptionList)
        options.clear_options()
        options.add_options([Text(c) for c in self._visible])
        if self._visible:
            options.highlighted = 0

    def on_input_submitted(self, event: Input.Submitted) -> None:
        index = self.query_one("#candidates", OptionList).highlighted
        if index is None or not self._visible:
            return
        self.exit(self._visible[index])

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.exit(self._visible[event.option_index])

    # Keybindings
    def action_cancel(self) -> None:
        self.exit(None)

    def action_cursor_down(self) -> None:
        self.query_one("#candidates", OptionList).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one("#candidates", OptionList).action_cursor_up()
