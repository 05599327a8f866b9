from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from app.components import notice
from app.keys import ESCAPE, KeyPress
from app.navigation import QUIT, STAY, NavigationSignal, PageKind, advance
from core.models import HomepagePayload

SUB_PAGES = {"1": PageKind.ACCOUNT, "2": PageKind.CATEGORY, "3": PageKind.REPORT}


def overview_lines(overview: str) -> Text:
    out = Text()
    for line in overview.splitlines():
        if "Category Summary:" in line:
            out.append(line + "\n", style="bold magenta")
        elif "Account Summary:" in line:
            out.append(line + "\n", style="bold bright_blue")
        else:
            out.append(line + "\n")
    return out


class HomePage:
    """Landing page after login. Display only, plus digit shortcuts."""

    def __init__(self, payload: HomepagePayload) -> None:
        self.payload = payload

    def render(self) -> RenderableType:
        header = Table.grid(expand=True)
        header.add_column(justify="left")
        header.add_column(justify="right")
        header.add_row(Text(f"Welcome back, {self.payload.username}"), Text("HOMEPAGE", style="bold"))

        blocks = Table.grid(expand=True, padding=(0, 1))
        for _ in range(3):
            blocks.add_column(ratio=1)
        blocks.add_row(
            Panel(Text("Press 1 to manage accounts"), title="Accounts", height=16),
            Panel(Text("Press 2 to manage categories"), title="Categories", height=16),
            Panel(overview_lines(self.payload.report_overview), title="Report", height=16),
        )
        return Group(header, Text(""), blocks, notice("Esc to quit | 1 to Account | 2 to Category | 3 to Report"))

    async def handle_input(self, key: KeyPress) -> NavigationSignal:
        if key.key == ESCAPE:
            return QUIT
        if key.printable and key.character in SUB_PAGES:
            return advance(SUB_PAGES[key.character])
        return STAY
