#!/usr/bin/env python3
"""
seldir - three-pane directory picker

Browse with the keyboard, then hand the chosen directory back to the shell
through /tmp/seldir.
"""

import logging
import sys
from pathlib import Path

from rich.cells import cell_len
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Static

from dir_lister import Entry
from handoff import SHELL_WRAPPER, write_handoff
from key_modes import KeyInterpreter, Mode, Signal
from navigator import Navigator
from seldir_config import DisplayOptions, display_options_from_config, load_config
from seldir_logging import setup_logging
from selectable_list import SelectableList

logger = logging.getLogger("seldir.app")

DIR_ICON = "\uf07b"
FILE_ICON = "\U000f0214"


def entry_label(entry: Entry, show_icons: bool = False) -> str:
    """Display text for one entry."""
    if show_icons:
        icon = DIR_ICON if entry.is_dir else FILE_ICON
        return f" {icon}  {entry.name}"
    return f" {entry.name}/" if entry.is_dir else f" {entry.name}"


def scroll_offset(offset: int, index: int | None, count: int, height: int) -> int:
    """First visible row so that index stays on screen."""
    if index is not None:
        if index < offset:
            offset = index
        elif index >= offset + height:
            offset = index - height + 1
    return max(0, min(offset, max(count - height, 0)))


class PaneView(Widget):
    """Renders one SelectableList, windowed around its cursor."""

    DEFAULT_CSS = """
    PaneView {
        height: 1fr;
        padding: 0 1 0 0;
    }
    """

    def __init__(self, options: DisplayOptions, **kwargs):
        super().__init__(**kwargs)
        self.options = options
        self.pane: SelectableList[Entry] = SelectableList()
        self._offset = 0

    def show(self, pane: SelectableList) -> None:
        self.pane = pane
        self.refresh()

    def render(self) -> Text:
        height = max(self.size.height, 1)
        width = self.size.width
        items = self.pane.items
        index = self.pane.index
        self._offset = scroll_offset(self._offset, index, len(items), height)

        text = Text(no_wrap=True, overflow="ellipsis")
        visible = items[self._offset:self._offset + height]
        for row, entry in enumerate(visible, start=self._offset):
            if row > self._offset:
                text.append("\n")
            label = entry_label(entry, self.options.show_icons)
            style = f"bold {self.options.accent}" if entry.is_dir else ""
            if row == index:
                label += " " * max(0, width - cell_len(label))
                style = f"{style} reverse".strip()
            text.append(label, style=style or None)
        return text


class SeldirApp(App):
    """Three panes: parent, current directory, preview of the selection."""

    CSS = """
    #path-line {
        height: 1;
        padding: 0 1;
    }

    #panes {
        height: 1fr;
    }

    #parent-pane {
        width: 20%;
    }

    #current-pane {
        width: 40%;
    }

    #preview-pane {
        width: 1fr;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    def __init__(self, navigator: Navigator, theme: str = None, inline_height: int = 12):
        super().__init__()
        self.navigator = navigator
        self.interpreter = KeyInterpreter(navigator)
        self.inline_height = inline_height
        if theme and theme in self.available_themes:
            self.theme = theme

    def compose(self) -> ComposeResult:
        options = self.navigator.options
        yield Static(id="path-line")
        with Horizontal(id="panes"):
            yield PaneView(options, id="parent-pane")
            yield PaneView(options, id="current-pane")
            yield PaneView(options, id="preview-pane")

    def on_mount(self) -> None:
        if self.is_inline:
            self.screen.styles.height = self.inline_height
        self.refresh_panes()

    def refresh_panes(self) -> None:
        nav = self.navigator
        self.query_one("#parent-pane", PaneView).show(nav.parent_pane)
        self.query_one("#current-pane", PaneView).show(nav.current_pane)
        self.query_one("#preview-pane", PaneView).show(nav.preview_pane)

        line = Text(nav.header_text(), no_wrap=True, overflow="ellipsis")
        if self.interpreter.mode is Mode.FIND:
            line.append("  find: ", style="dim")
        self.query_one("#path-line", Static).update(line)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        outcome = self.interpreter.handle(event.key, event.character)
        if outcome.signal is Signal.ABORT:
            logger.debug("aborted in %s", self.navigator.current_directory)
            self.exit(None)
        elif outcome.signal is Signal.COMMIT:
            logger.debug("committed %s", outcome.path)
            self.exit(outcome.path)
        else:
            self.refresh_panes()


# ═══════════════════════════════════════════════════════════════════════════════
# Main Entry Point
# ═══════════════════════════════════════════════════════════════════════════════

HELP_TEXT = f"""
seldir - three-pane directory picker

Usage: seldir [OPTIONS]

Options:
  -a, --all           Show hidden files
  -i, --icons         Show icons (needs a Nerd Font)
  -c, --color COLOR   Accent color for directories (default: red)
  --fullscreen        Use the whole terminal instead of an inline view
  --debug             Write debug logs to ~/.cache/seldir/seldir.log
  -h, --help          Show this help message

Keyboard shortcuts:
  j / Down      Next entry            J / Alt+Down   Down 5
  k / Up        Previous entry        K / Alt+Up     Up 5
  l / Right     Enter directory       h / Left       Parent directory
  g             First entry           G              Last entry
  f<char>       Jump to first entry starting with <char>
  Enter / q     Pick selected directory and exit
  Esc           Exit without picking

The picked directory is written to /tmp/seldir. To cd into it, add to your shell rc:

{SHELL_WRAPPER}
"""


def parse_args(args: list[str]) -> dict:
    """Parse command line arguments. Raises ValueError on bad usage."""
    parsed = {}
    queue = []
    for arg in args:
        # Expand bundled short flags: -ai -> -a -i
        if arg.startswith("-") and not arg.startswith("--") and len(arg) > 2 and arg[1] != "c":
            queue.extend(f"-{flag}" for flag in arg[1:])
        else:
            queue.append(arg)

    i = 0
    while i < len(queue):
        arg = queue[i]

        if arg in ("-h", "--help"):
            parsed["help"] = True
        elif arg in ("-a", "--all"):
            parsed["show_hidden"] = True
        elif arg in ("-i", "--icons"):
            parsed["show_icons"] = True
        elif arg in ("-c", "--color"):
            if i + 1 >= len(queue):
                raise ValueError(f"Option {arg} requires a color")
            i += 1
            parsed["accent"] = queue[i]
        elif arg.startswith("--color="):
            parsed["accent"] = arg.split("=", 1)[1]
        elif arg.startswith("-c") and len(arg) > 2:
            parsed["accent"] = arg[2:]
        elif arg == "--fullscreen":
            parsed["fullscreen"] = True
        elif arg == "--debug":
            parsed["debug"] = True
        else:
            raise ValueError(f"Unknown option: {arg}")

        i += 1

    return parsed


def stdout_is_terminal() -> bool:
    return sys.stdout.isatty()


def fail(message: str) -> int:
    print(f"seldir: {message}", file=sys.stderr)
    return 1


def main(argv: list[str] = None) -> int:
    """Main entry point."""
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
    except ValueError as e:
        print(f"seldir: {e}", file=sys.stderr)
        print("Use --help for usage information", file=sys.stderr)
        return 1

    if args.get("help"):
        print(HELP_TEXT)
        return 0

    config = load_config()
    for key in ("show_hidden", "show_icons", "accent"):
        if key in args:
            config[key] = args[key]
    try:
        options = display_options_from_config(config)
    except ValueError as e:
        return fail(str(e))

    setup_logging(debug=args.get("debug", False))

    if not stdout_is_terminal():
        return fail("not a terminal")

    try:
        start = Path.cwd()
    except OSError as e:
        return fail(f"cannot determine working directory: {e}")

    try:
        write_handoff(start)
    except OSError as e:
        return fail(f"cannot write hand-off file: {e}")

    navigator = Navigator(start, options)
    app = SeldirApp(
        navigator,
        theme=config.get("theme"),
        inline_height=int(config.get("inline_height", 12)),
    )
    picked = app.run(inline=not args.get("fullscreen", False))

    if picked is not None:
        try:
            write_handoff(picked)
        except OSError as e:
            return fail(f"cannot write hand-off file: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
