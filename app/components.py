# Shared drawing pieces and the editable text field used by the form pages.
from rich.align import Align
from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from app.keys import BACKSPACE, BACKTAB, TAB, KeyPress

# https://patorjk.com/software/taag/ (Standard)
LOGO = r"""
 ________ ___  ________   _________  ________  ________  ________  ___  __
|\  _____\\  \|\   ___  \|\___   ___\\   __  \|\   __  \|\   ____\|\  \|\  \
 \ \  \__/\ \  \ \  \\ \  \|___ \  \_\ \  \|\  \ \  \|\  \ \  \___|\ \  \/  /|_
   \ \   __\\ \  \ \  \\ \  \   \ \  \ \ \   _  _\ \   __  \ \  \    \ \   ___  \
      \ \  \_| \ \  \ \  \\ \  \   \ \  \ \ \  \\  \\ \  \ \  \ \  \____\ \  \\ \  \
        \ \__\   \ \__\ \__\\ \__\   \ \__\ \ \__\\ _\\ \__\ \__\ \_______\ \__\\ \__\
         \|__|    \|__|\|__| \|__|    \|__|  \|__|\|__|\|__|\|__|\|_______|\|__| \|__|
"""

MASK = "*"
CURSOR = "▏"


class InputField:
    """Single-line text buffer. Never holds control characters."""

    def __init__(self, label: str, masked: bool = False) -> None:
        self.label = label
        self.content = ""
        self.masked = masked

    def handle_key(self, key: KeyPress) -> None:
        if key.key == BACKSPACE:
            self.content = self.content[:-1]
        elif key.printable:
            self.content += key.character

    def clear(self) -> None:
        self.content = ""

    def render(self, active: bool = False) -> Panel:
        shown = MASK * len(self.content) if self.masked else self.content
        if active:
            shown += CURSOR
        return Panel(
            Text(shown, no_wrap=True, overflow="ellipsis"),
            title=self.label,
            title_align="left",
            border_style="bold yellow" if active else "white",
            height=3,
        )


class FieldGroup:
    """Ordered fields with one active index; Tab / Shift+Tab cycle it."""

    def __init__(self, *fields: InputField) -> None:
        self.fields = list(fields)
        self.active = 0

    def __getitem__(self, i: int) -> InputField:
        return self.fields[i]

    def __len__(self) -> int:
        return len(self.fields)

    def next(self) -> None:
        self.active = (self.active + 1) % len(self.fields)

    def previous(self) -> None:
        self.active = (self.active - 1) % len(self.fields)

    def handle_key(self, key: KeyPress) -> None:
        if key.key == TAB:
            self.next()
        elif key.key == BACKTAB:
            self.previous()
        else:
            self.fields[self.active].handle_key(key)

    def values(self) -> list[str]:
        return [f.content for f in self.fields]

    def reset(self) -> None:
        for f in self.fields:
            f.clear()
        self.active = 0

    def render(self) -> list[Panel]:
        return [f.render(i == self.active) for i, f in enumerate(self.fields)]


def logo() -> RenderableType:
    return Align.center(Text(LOGO, style="yellow"))


def title(text: str) -> RenderableType:
    return Align.center(Text(text, style="bold"))


def notice(text: str) -> RenderableType:
    return Align.center(Text(text, style="grey50"))


def response_box(message: str) -> Panel:
    return Panel(Text(message), title="Response", title_align="left", height=5)


def status_line(message: str) -> RenderableType:
    failed = any(w in message for w in ("Error", "Failed", "failed", "Invalid", "Please"))
    return Align.center(Text(message, style="red" if failed else "green"))
