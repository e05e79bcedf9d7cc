"""Hand-off of the chosen directory to the calling shell."""

import os
from pathlib import Path

# Read by the shell wrapper after seldir exits
HANDOFF_FILE = Path("/tmp/seldir")

SHELL_WRAPPER = """\
sd() {
    command seldir "$@" && cd "$(cat /tmp/seldir)"
}"""


def write_handoff(path: Path, target: Path = None) -> None:
    """Overwrite the hand-off file with path, no trailing newline."""
    target = target or HANDOFF_FILE
    target.write_bytes(os.fsencode(path))
