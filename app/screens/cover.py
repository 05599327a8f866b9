from rich.console import Group, RenderableType
from rich.text import Text

from app.components import logo, notice
from app.keys import ESCAPE, KeyPress
from app.navigation import QUIT, STAY, NavigationSignal, PageKind, advance


class CoverPage:
    """Start menu; holds no state."""

    def render(self) -> RenderableType:
        return Group(Text("\n" * 4), logo(), Text("\n" * 4), notice("Esc to quit | 1 to signup | 2 to login"))

    async def handle_input(self, key: KeyPress) -> NavigationSignal:
        if key.key == ESCAPE:
            return QUIT
        if key.is_char("1"):
            return advance(PageKind.SIGNUP)
        if key.is_char("2"):
            return advance(PageKind.LOGIN)
        return STAY
