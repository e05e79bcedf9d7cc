"""Directory listing for the seldir panes."""

import logging
from pathlib import Path
from typing import NamedTuple

logger = logging.getLogger("seldir.lister")


class Entry(NamedTuple):
    """One child of a listed directory."""
    name: str
    path: Path
    is_dir: bool


def sort_key(entry: Entry) -> tuple[bool, str]:
    """Directories first, then plain code-point order on the name."""
    return (not entry.is_dir, entry.name)


def list_directory(path: Path, show_hidden: bool = False) -> list[Entry]:
    """List the direct children of path, skipping symlinks and (optionally) dotfiles.

    Never raises: a directory that cannot be read lists as empty.
    """
    entries = []
    try:
        for item in Path(path).iterdir():
            if not show_hidden and item.name.startswith('.'):
                continue
            try:
                if item.is_symlink():
                    continue
                is_dir = item.is_dir()
            except OSError as e:
                # Vanished or unreadable between iterdir() and stat()
                logger.debug("skipping %s: %s", item, e)
                continue
            entries.append(Entry(name=item.name, path=item, is_dir=is_dir))
    except OSError as e:
        logger.debug("cannot list %s: %s", path, e)
        return []

    entries.sort(key=sort_key)
    return entries
