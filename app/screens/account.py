import logging
from typing import List

from rich.console import Group, RenderableType
from rich.table import Table

from app.components import notice, status_line, title
from app.keys import ESCAPE, KeyPress
from app.navigation import BACK, STAY, NavigationSignal
from core.api import ApiClientError
from core.models import AccountRecord, ResponseFormatError, parse_accounts

logger = logging.getLogger(__name__)


class AccountPage:
    def __init__(self, api, email: str) -> None:
        self.api = api
        self.email = email
        self.accounts: List[AccountRecord] = []
        self.message = "Loading accounts..."

    def render(self) -> RenderableType:
        table = Table(expand=True)
        table.add_column("Nickname", style="cyan", no_wrap=True)
        table.add_column("Type", style="magenta")
        table.add_column("Balance", justify="right", style="green")
        for a in self.accounts:
            table.add_row(a.nickname, a.account_type, f"{a.balance:.2f}")
        return Group(title("ACCOUNTS"), table, status_line(self.message), notice("Esc to return to Homepage"))

    async def initialize(self) -> None:
        try:
            resp = await self.api.account_summary(self.email)
        except ApiClientError as e:
            self.message = f"Error fetching accounts: Request failed: {e}"
            return
        if resp.status != 200:
            self.message = "Failed to fetch accounts"
            return
        try:
            self.accounts = parse_accounts(resp.text)
        except ResponseFormatError as e:
            logger.warning("account_summary: %s", e)
            self.message = "Failed to parse account data"
            return
        self.message = f"Loaded {len(self.accounts)} accounts"

    async def handle_input(self, key: KeyPress) -> NavigationSignal:
        if key.key == ESCAPE:
            return BACK
        return STAY
