"""Key interpretation for seldir: Normal mode and the single-shot Find mode."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from navigator import Navigator

logger = logging.getLogger("seldir.keys")


class Mode(Enum):
    """Input mode."""
    NORMAL = "normal"
    FIND = "find"    # Next key is a first-letter jump, then back to NORMAL


class Signal(Enum):
    """What the host loop should do after a key."""
    CONTINUE = "continue"
    ABORT = "abort"
    COMMIT = "commit"


@dataclass(frozen=True)
class Outcome:
    signal: Signal = Signal.CONTINUE
    path: Optional[Path] = None


CONTINUE = Outcome()
ABORT = Outcome(Signal.ABORT)

BULK_STEP = 5

# Textual key name -> action
NORMAL_KEYS = {
    "escape": "abort",
    "down": "down",
    "j": "down",
    "alt+down": "down_bulk",
    "J": "down_bulk",
    "up": "up",
    "k": "up",
    "alt+up": "up_bulk",
    "K": "up_bulk",
    "g": "first",
    "G": "last",
    "left": "leave",
    "h": "leave",
    "backspace": "leave",
    "right": "enter",
    "l": "enter",
    "f": "find",
    "enter": "commit",
    "q": "commit",
}


class KeyInterpreter:
    """Applies key events to a Navigator."""

    def __init__(self, navigator: Navigator):
        self.navigator = navigator
        self.mode = Mode.NORMAL

    def handle(self, key: str, character: str = None) -> Outcome:
        if self.mode is Mode.FIND:
            return self._handle_find(character)
        action = NORMAL_KEYS.get(key)
        if action is None and character:
            action = NORMAL_KEYS.get(character)
        if action is None:
            return CONTINUE
        return getattr(self, f"_action_{action}")()

    def _handle_find(self, character: Optional[str]) -> Outcome:
        self.mode = Mode.NORMAL
        if character and character.isprintable():
            found = self.navigator.select_first_matching(character)
            logger.debug("find %r: %s", character, "hit" if found else "miss")
        return CONTINUE

    def _action_abort(self) -> Outcome:
        return ABORT

    def _action_down(self) -> Outcome:
        self.navigator.move_selection(1)
        return CONTINUE

    def _action_down_bulk(self) -> Outcome:
        self.navigator.move_selection(BULK_STEP)
        return CONTINUE

    def _action_up(self) -> Outcome:
        self.navigator.move_selection(-1)
        return CONTINUE

    def _action_up_bulk(self) -> Outcome:
        self.navigator.move_selection(-BULK_STEP)
        return CONTINUE

    def _action_first(self) -> Outcome:
        self.navigator.jump_first()
        return CONTINUE

    def _action_last(self) -> Outcome:
        self.navigator.jump_last()
        return CONTINUE

    def _action_leave(self) -> Outcome:
        self.navigator.leave()
        return CONTINUE

    def _action_enter(self) -> Outcome:
        self.navigator.enter_selected()
        return CONTINUE

    def _action_find(self) -> Outcome:
        self.mode = Mode.FIND
        return CONTINUE

    def _action_commit(self) -> Outcome:
        path = self.navigator.commit_selection()
        if path is None:
            return CONTINUE
        return Outcome(Signal.COMMIT, path)
