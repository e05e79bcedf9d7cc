"""Tests for the three-pane navigator."""

import os
from pathlib import Path

from navigator import Navigator
from seldir_config import DisplayOptions


def names(pane) -> list[str]:
    return [e.name for e in pane]


def snapshot(nav: Navigator):
    return (
        nav.current_directory,
        nav.parent_pane.items, nav.parent_pane.index,
        nav.current_pane.items, nav.current_pane.index,
        nav.preview_pane.items, nav.preview_pane.index,
    )


def test_initial_panes(in_tree: Path):
    nav = Navigator()

    assert nav.current_directory == in_tree
    assert names(nav.current_pane) == ["alpha", "beta", "readme.txt"]
    assert nav.current_pane.index == 0
    assert names(nav.preview_pane) == ["inner", "notes.md"]
    assert nav.preview_pane.index is None
    # Parent pane marks where we are
    assert nav.parent_pane.selected().path == in_tree


def test_move_selection_refreshes_preview(tree: Path):
    nav = Navigator(tree, chdir=False)

    nav.move_selection(1)
    assert nav.current_pane.selected().name == "beta"
    assert names(nav.preview_pane) == []

    nav.move_selection(-1)
    assert names(nav.preview_pane) == ["inner", "notes.md"]

    nav.move_selection(5)
    assert nav.current_pane.selected().name == "readme.txt"
    assert names(nav.preview_pane) == []

    nav.move_selection(-5)
    assert nav.current_pane.index == 0


def test_enter_selected_changes_directory(in_tree: Path):
    nav = Navigator()

    assert nav.enter_selected()

    alpha = in_tree / "alpha"
    assert nav.current_directory == alpha
    assert Path(os.getcwd()) == alpha
    assert names(nav.current_pane) == ["inner", "notes.md"]
    assert nav.current_pane.index == 0
    assert names(nav.parent_pane) == ["alpha", "beta", "readme.txt"]
    assert nav.parent_pane.selected().path == alpha
    # Preview follows the new selection ("inner" is empty)
    assert names(nav.preview_pane) == []
    assert nav.preview_pane.index is None


def test_enter_then_leave_round_trip(in_tree: Path):
    nav = Navigator()
    nav.move_selection(1)

    assert nav.enter_selected()
    assert nav.current_directory == in_tree / "beta"
    assert nav.current_pane.index is None  # beta is empty

    assert nav.leave()
    assert nav.current_directory == in_tree
    assert Path(os.getcwd()) == in_tree
    assert nav.current_pane.selected().name == "beta"
    assert nav.parent_pane.selected().path == in_tree


def test_enter_file_is_noop(tree: Path):
    nav = Navigator(tree, chdir=False)
    nav.move_selection(2)
    before = snapshot(nav)

    assert not nav.enter_selected()
    assert snapshot(nav) == before


def test_enter_with_empty_pane_is_noop(tree: Path):
    nav = Navigator(tree / "beta", chdir=False)
    assert nav.current_pane.selected() is None
    assert not nav.enter_selected()
    assert nav.current_directory == tree / "beta"


def test_leave_at_root_is_noop():
    nav = Navigator(Path("/"), chdir=False)
    before = snapshot(nav)

    assert not nav.leave()
    assert snapshot(nav) == before
    assert len(nav.parent_pane) == 0


def test_leave_hidden_directory_falls_back_to_no_selection(tree: Path):
    nav = Navigator(tree / ".secret", chdir=False)

    assert nav.leave()
    assert nav.current_directory == tree
    assert nav.current_pane.index is None
    assert names(nav.preview_pane) == []


def test_leave_deleted_directory_falls_back_to_no_selection(tree: Path):
    nav = Navigator(tree / "beta", chdir=False)
    (tree / "beta").rmdir()

    assert nav.leave()
    assert names(nav.current_pane) == ["alpha", "readme.txt"]
    assert nav.current_pane.index is None


def test_refused_chdir_leaves_state_untouched(in_tree: Path, monkeypatch):
    nav = Navigator()
    before = snapshot(nav)

    def refuse(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(os, "chdir", refuse)

    assert not nav.enter_selected()
    assert not nav.leave()
    assert snapshot(nav) == before


def test_jumps_do_not_refresh_preview(tree: Path):
    nav = Navigator(tree, chdir=False)
    assert names(nav.preview_pane) == ["inner", "notes.md"]

    nav.jump_last()
    assert nav.current_pane.selected().name == "readme.txt"
    assert names(nav.preview_pane) == ["inner", "notes.md"]

    nav.jump_last()
    assert nav.current_pane.index == 2

    nav.refresh_preview()
    assert names(nav.preview_pane) == []

    nav.move_selection(-1)
    nav.jump_first()
    assert nav.current_pane.index == 0
    assert names(nav.preview_pane) == []


def test_select_first_matching(tmp_path: Path):
    for name in ("apple", "banana", "cherry"):
        (tmp_path / name).mkdir()
    (tmp_path / "banana" / "peel").mkdir()
    nav = Navigator(tmp_path, chdir=False)

    assert nav.select_first_matching("b")
    assert nav.current_pane.selected().name == "banana"
    assert names(nav.preview_pane) == ["peel"]

    assert not nav.select_first_matching("z")
    assert nav.current_pane.selected().name == "banana"

    assert nav.select_first_matching("c")
    assert nav.current_pane.selected().name == "cherry"


def test_find_folds_only_the_entry_name(tmp_path: Path):
    for name in ("apple", "Banana", "cherry"):
        (tmp_path / name).mkdir()
    nav = Navigator(tmp_path, chdir=False)
    assert names(nav.current_pane) == ["Banana", "apple", "cherry"]
    nav.jump_last()

    # Uppercase input never matches a case-folded name
    assert not nav.select_first_matching("B")
    assert nav.current_pane.selected().name == "cherry"

    assert nav.select_first_matching("b")
    assert nav.current_pane.selected().name == "Banana"


def test_commit_selection(tree: Path):
    nav = Navigator(tree, chdir=False)
    assert nav.commit_selection() == tree / "alpha"

    nav.jump_last()
    assert nav.commit_selection() is None


def test_hidden_entries_follow_options(tree: Path):
    nav = Navigator(tree, DisplayOptions(show_hidden=True), chdir=False)
    assert names(nav.current_pane) == [".secret", "alpha", "beta", ".env", "readme.txt"]
    nav.move_selection(1)
    assert names(nav.preview_pane) == ["inner", "notes.md"]


def test_header_text(tree: Path):
    nav = Navigator(tree, chdir=False)
    assert nav.header_text() == str(tree / "alpha")

    empty = Navigator(tree / "beta", chdir=False)
    assert empty.header_text() == str(tree / "beta")


def test_start_path_is_normalised(tree: Path):
    nav = Navigator(tree / "alpha" / "..", chdir=False)

    assert nav.current_directory == tree
    assert nav.parent_pane.selected().path == tree
    assert names(nav.current_pane) == ["alpha", "beta", "readme.txt"]


def test_selected_path(tree: Path):
    nav = Navigator(tree, chdir=False)
    assert nav.selected_path() == tree / "alpha"

    nav.jump_last()
    assert nav.selected_path() == tree / "readme.txt"

    empty = Navigator(tree / "beta", chdir=False)
    assert empty.selected_path() is None
