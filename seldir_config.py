"""Configuration for seldir: display options and the optional config file."""

import json
from dataclasses import dataclass
from pathlib import Path

from rich.color import Color, ColorParseError

CONFIG_PATH = Path.home() / ".config" / "seldir" / "config.json"

DEFAULT_CONFIG = {
    "show_hidden": False,
    "show_icons": False,
    "accent": "red",
    "theme": "gruvbox",
    "inline_height": 12,
}


@dataclass(frozen=True)
class DisplayOptions:
    """Display settings fixed for the lifetime of the process."""
    show_hidden: bool = False
    show_icons: bool = False
    accent: str = "red"


def load_config(path: Path = None) -> dict:
    """Load config from file, falling back to defaults for anything missing."""
    path = path or CONFIG_PATH
    config = dict(DEFAULT_CONFIG)
    try:
        if path.exists():
            data = json.loads(path.read_text())
            if isinstance(data, dict):
                # Wrong-typed values fall back to the default
                config.update({
                    k: v for k, v in data.items()
                    if k in DEFAULT_CONFIG and type(v) is type(DEFAULT_CONFIG[k])
                })
    except (json.JSONDecodeError, UnicodeDecodeError, OSError):
        pass
    return config


def validate_accent(name: str) -> str:
    """Return the colour name unchanged if Rich understands it."""
    try:
        Color.parse(name)
    except ColorParseError:
        raise ValueError(f"Unknown color: {name}") from None
    return name


def display_options_from_config(config: dict) -> DisplayOptions:
    return DisplayOptions(
        show_hidden=bool(config.get("show_hidden", False)),
        show_icons=bool(config.get("show_icons", False)),
        accent=validate_accent(str(config.get("accent", "red"))),
    )
