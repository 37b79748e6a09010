"""Tests for the picker layer and the built-in picker app."""

import asyncio

from zellij_sessionizer.picker import fuzzy_filter, pick, pick_with_fzf


# === fzf ===

def test_fzf_gets_newline_joined_candidates(fake_runner):
    runner = fake_runner(picked="/p/beta\n")
    assert pick_with_fzf(["/p/alpha", "/p/beta"], runner) == "/p/beta"
    assert runner.captured == [(["fzf"], "/p/alpha\n/p/beta")]


def test_fzf_custom_command(fake_runner):
    runner = fake_runner(picked="/p/alpha")
    pick_with_fzf(["/p/alpha"], runner, ["fzf", "--height", "40%"])
    assert runner.captured[0][0] == ["fzf", "--height", "40%"]


def test_fzf_empty_output_is_no_selection(fake_runner, capsys):
    assert pick_with_fzf(["/p/alpha"], fake_runner(picked="  \n")) is None
    assert capsys.readouterr().out == ""


def test_fzf_abnormal_exit_is_no_selection(fake_runner, capsys):
    runner = fake_runner(picked="/p/alpha", picker_code=130)
    assert pick_with_fzf(["/p/alpha"], runner) is None
    assert capsys.readouterr().out == ""


def test_fzf_launch_failure(fake_runner, capsys):
    runner = fake_runner(picker_missing=True)
    assert pick_with_fzf(["/p/alpha"], runner) is None
    assert capsys.readouterr().out == "Error: Failed to execute fzf\n"


def test_pick_dispatches_to_fzf(fake_runner):
    runner = fake_runner(picked="/p/alpha")
    assert pick(["/p/alpha"], "fzf", runner) == "/p/alpha"


def test_pick_builtin(monkeypatch, fake_runner):
    monkeypatch.setattr(
        "zellij_sessionizer.picker.pick_with_textual", lambda c: c[-1],
    )
    runner = fake_runner()
    assert pick(["/p/a", "/p/b"], "builtin", runner) == "/p/b"
    assert runner.captured == []


# === fuzzy_filter ===

def test_fuzzy_filter_subsequence():
    cands = ["/src/alpha", "/src/beta", "/work/alphabet"]
    assert fuzzy_filter(cands, "alp") == ["/src/alpha", "/work/alphabet"]
    assert fuzzy_filter(cands, "wab") == ["/work/alphabet"]


def test_fuzzy_filter_case_insensitive():
    assert fuzzy_filter(["/src/Alpha"], "aLPH") == ["/src/Alpha"]


def test_fuzzy_filter_empty_query():
    cands = ["/b", "/a"]
    assert fuzzy_filter(cands, "") == ["/b", "/a"]
    assert fuzzy_filter(cands, "   ") == ["/b", "/a"]


def test_fuzzy_filter_no_match():
    assert fuzzy_filter(["/src/alpha"], "zz") == []


# === PickerApp ===

def _drive(candidates, *keys):
    from zellij_sessionizer.app import PickerApp

    async def go():
        app = PickerApp(candidates)
        async with app.run_test() as pilot:
            await pilot.press(*keys)
        return app.return_value

    return asyncio.run(go())


def test_picker_app_filter_then_enter():
    assert _drive(["/src/alpha", "/src/beta"], "b", "e", "enter") == "/src/beta"


def test_picker_app_enter_picks_first():
    assert _drive(["/src/alpha", "/src/beta"], "enter") == "/src/alpha"


def test_picker_app_escape_cancels():
    assert _drive(["/src/alpha"], "escape") is None
