from dataclasses import dataclass

from textual import events

# Textual key names
ESCAPE = "escape"
TAB = "tab"
BACKTAB = "shift+tab"
ENTER = "enter"
BACKSPACE = "backspace"
UP = "up"
DOWN = "down"


@dataclass(frozen=True)
class KeyPress:
    """One key event, detached from the terminal backend.

    `key` is the Textual key name with modifiers folded in ("shift+tab"),
    `character` the produced text, if any.
    """

    key: str
    character: str | None = None

    @classmethod
    def from_event(cls, event: events.Key) -> "KeyPress":
        return cls(key=event.key, character=event.character)

    @classmethod
    def char(cls, c: str) -> "KeyPress":
        return cls(key=c, character=c)

    @property
    def printable(self) -> bool:
        c = self.character
        return c is not None and len(c) == 1 and c.isprintable()

    def is_char(self, c: str) -> bool:
        return self.printable and self.character == c
