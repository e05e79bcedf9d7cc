"""Three-pane view model: parent, current and preview listings kept in sync."""

import logging
import os
from pathlib import Path
from typing import Optional

from dir_lister import Entry, list_directory
from seldir_config import DisplayOptions
from selectable_list import SelectableList

logger = logging.getLogger("seldir.navigator")


class Navigator:
    """Owns the current directory and the three panes derived from it.

    Every navigation step re-lists the affected panes from scratch; only
    cursors are moved in place. With chdir enabled the process working
    directory follows current_directory on enter/leave.
    """

    def __init__(self, start: Path = None, options: DisplayOptions = None, chdir: bool = True):
        self.options = options or DisplayOptions()
        self.chdir = chdir
        self.current_directory = Path(start).resolve() if start else Path.cwd()
        self.parent_pane: SelectableList[Entry] = SelectableList()
        self.current_pane: SelectableList[Entry] = SelectableList()
        self.preview_pane: SelectableList[Entry] = SelectableList()
        self._relist(self.current_directory)
        self.refresh_preview()

    def _list(self, path: Path) -> list[Entry]:
        return list_directory(path, self.options.show_hidden)

    def _parent_of(self, path: Path) -> Optional[Path]:
        parent = path.parent
        return None if parent == path else parent

    def _relist(self, directory: Path, focus: Path = None):
        """Rebuild parent and current panes for directory.

        The current-pane cursor lands on focus if given and present, else on
        the first entry when there is no focus.
        """
        parent = self._parent_of(directory)
        parent_items = self._list(parent) if parent else []
        parent_index = next(
            (i for i, e in enumerate(parent_items) if e.path == directory), None
        )

        current_items = self._list(directory)
        if focus is not None:
            current_index = next(
                (i for i, e in enumerate(current_items) if e.path == focus), None
            )
        else:
            current_index = 0 if current_items else None

        self.parent_pane.replace(parent_items, parent_index)
        self.current_pane.replace(current_items, current_index)

    def _change_directory(self, target: Path) -> bool:
        if self.chdir:
            try:
                os.chdir(target)
            except OSError as e:
                logger.debug("cannot enter %s: %s", target, e)
                return False
        self.current_directory = target
        return True

    def refresh_preview(self):
        """Re-list the preview pane from the current selection."""
        entry = self.current_pane.selected()
        if entry is None or not entry.is_dir:
            self.preview_pane.replace([])
        else:
            self.preview_pane.replace(self._list(entry.path))

    def move_selection(self, delta: int):
        step = self.current_pane.advance if delta > 0 else self.current_pane.retreat
        for _ in range(abs(delta)):
            step()
        self.refresh_preview()

    def jump_first(self):
        # Preview is left alone until the next move/enter/leave
        self.current_pane.jump_to_start()

    def jump_last(self):
        self.current_pane.jump_to_end()

    def enter_selected(self) -> bool:
        """Descend into the selected directory. Returns True if it moved."""
        entry = self.current_pane.selected()
        if entry is None or not entry.is_dir:
            return False
        if not self._change_directory(entry.path):
            return False
        logger.debug("entered %s", entry.path)
        self._relist(entry.path)
        self.refresh_preview()
        return True

    def leave(self) -> bool:
        """Go up one level, keeping the directory just left selected."""
        parent = self._parent_of(self.current_directory)
        if parent is None:
            return False
        previous = self.current_directory
        if not self._change_directory(parent):
            return False
        logger.debug("left %s for %s", previous, parent)
        self._relist(parent, focus=previous)
        self.refresh_preview()
        return True

    def select_first_matching(self, char: str) -> bool:
        """Move to the first entry whose case-folded name starts with char."""
        index = self.current_pane.index_of(lambda e: e.name.casefold().startswith(char))
        if index is None:
            return False
        self.current_pane.select(index)
        self.refresh_preview()
        return True

    def commit_selection(self) -> Optional[Path]:
        """Path of the selected directory, or None if a file or nothing is selected."""
        entry = self.current_pane.selected()
        if entry is None or not entry.is_dir:
            return None
        return entry.path

    def selected_path(self) -> Optional[Path]:
        """Path of the selected entry, file or directory."""
        entry = self.current_pane.selected()
        return entry.path if entry else None

    def header_text(self) -> str:
        """Current directory joined with the selected name, for the status line."""
        return str(self.selected_path() or self.current_directory)
