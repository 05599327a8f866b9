import logging
from typing import List

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from app.components import notice, status_line, title
from app.keys import ESCAPE, KeyPress
from app.navigation import BACK, STAY, NavigationSignal
from core.api import ApiClientError
from core.models import CategorySummary, ResponseFormatError, parse_category_summaries

logger = logging.getLogger(__name__)


def summary_block(s: CategorySummary) -> Panel:
    body = Text()
    body.append(f"{s.budget_freq.upper()} budget: ", style="bold blue")
    body.append(f"{s.total:g}", style="bold green" if s.total <= s.budget else "bold red")
    body.append(f" / {s.budget:g}", style="bold")
    body.append(" spent already.\n")
    body.append("Relevant transactions: \n", style="bold")
    for txn in s.cat_trans:
        body.append(f"{txn}\n")

    head = Text(s.nickname, style="bold blue")
    head.append("  ")
    head.append("OVERBUDGET!!" if s.overbudget else "OK", style="bold red" if s.overbudget else "bold green")
    return Panel(body, title=head, title_align="left")


class ReportPage:
    def __init__(self, api, email: str) -> None:
        self.api = api
        self.email = email
        self.summaries: List[CategorySummary] = []
        self.message = "Loading report..."

    def render(self) -> RenderableType:
        blocks = [summary_block(s) for s in self.summaries]
        return Group(
            title("REPORT (Category Based)"),
            *blocks,
            status_line(self.message),
            notice("Esc to return to Homepage"),
        )

    async def initialize(self) -> None:
        try:
            resp = await self.api.report_details(self.email)
        except ApiClientError as e:
            self.message = f"Error fetching report: Request failed: {e}"
            return
        if resp.status != 200:
            self.message = "Failed to fetch report"
            return
        try:
            self.summaries = parse_category_summaries(resp.text)
        except ResponseFormatError as e:
            logger.warning("report_details: %s", e)
            self.message = "Failed to parse report data"
            return
        self.message = f"Loaded {len(self.summaries)} category summaries"

    async def handle_input(self, key: KeyPress) -> NavigationSignal:
        if key.key == ESCAPE:
            return BACK
        return STAY
