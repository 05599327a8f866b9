import logging
import math
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from app.components import FieldGroup, InputField, notice, status_line, title
from app.keys import DOWN, ENTER, ESCAPE, UP, KeyPress
from app.navigation import BACK, STAY, NavigationSignal
from core.api import ApiClientError
from core.models import Category, NewCategory, ResponseFormatError, parse_categories

logger = logging.getLogger(__name__)


def parse_budget(text: str) -> Optional[float]:
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    budget = float(value)
    # huge exponents overflow to inf on conversion
    if not math.isfinite(budget):
        return None
    return budget


class CategoryPage:
    """Category list with delete, plus a create sub-mode (`n`)."""

    def __init__(self, api, email: str) -> None:
        self.api = api
        self.email = email
        self.categories: List[Category] = []
        self.selected: Optional[int] = None
        self.message = "Loading categories..."
        self.creating = False
        self.form = FieldGroup(
            InputField("Nickname"),
            InputField("Category Type"),
            InputField("Budget"),
            InputField("Budget Frequency (daily/weekly/monthly)"),
        )

    # ---- render
    def render(self) -> RenderableType:
        body = Group(*self.form.render()) if self.creating else self._render_list()
        if self.creating:
            help_text = "Esc: Cancel | Tab / Shift+Tab: Next Field | Enter: Submit"
        else:
            help_text = "Esc: Back | N: New Category | D: Delete Category | ↑↓: Navigate"
        return Group(title("CATEGORY MANAGEMENT"), body, status_line(self.message), notice(help_text))

    def _render_list(self) -> Panel:
        lines = Text()
        for i, c in enumerate(self.categories):
            style = "bold yellow" if i == self.selected else ""
            marker = "> " if i == self.selected else "  "
            lines.append(f"{marker}{c.nickname}: {c.category_type} (Budget: ${c.budget:g} {c.budget_freq})\n", style=style)
        if not self.categories:
            lines.append("(no categories)", style="grey50")
        return Panel(lines)

    # ---- input
    async def initialize(self) -> None:
        await self.fetch_categories()

    async def handle_input(self, key: KeyPress) -> NavigationSignal:
        if key.key == ESCAPE:
            if self.creating:
                self.creating = False
                return STAY
            return BACK
        if self.creating:
            await self._handle_create_input(key)
        else:
            await self._handle_list_input(key)
        return STAY

    async def _handle_create_input(self, key: KeyPress) -> None:
        if key.key == ENTER:
            await self.submit_new_category()
        else:
            self.form.handle_key(key)

    async def _handle_list_input(self, key: KeyPress) -> None:
        if key.is_char("n"):
            self.creating = True
            self.form.reset()
        elif key.is_char("d"):
            if self.selected is not None and self.selected < len(self.categories):
                await self.delete_category(self.categories[self.selected].nickname)
        elif key.key == UP:
            self.move_selection(-1)
        elif key.key == DOWN:
            self.move_selection(1)

    def move_selection(self, step: int) -> None:
        if not self.categories:
            return
        current = self.selected if self.selected is not None else 0
        self.selected = (current + step) % len(self.categories)

    # ---- network
    async def fetch_categories(self) -> bool:
        """Reload the list; False (with the error in `message`) on failure."""
        try:
            resp = await self.api.category_summary(self.email)
        except ApiClientError as e:
            self.message = f"Error fetching categories: Request failed: {e}"
            return False
        if resp.status != 200:
            self.message = "Failed to fetch categories"
            return False
        try:
            self.categories = parse_categories(resp.text)
        except ResponseFormatError as e:
            logger.warning("category_summary: %s", e)
            self.message = "Failed to parse category data"
            return False

        if not self.categories:
            self.selected = None
        elif self.selected is None:
            self.selected = 0
        elif self.selected >= len(self.categories):
            self.selected = len(self.categories) - 1
        self.message = f"Loaded {len(self.categories)} categories"
        return True

    async def submit_new_category(self) -> None:
        nickname, category_type, budget_text, budget_freq = self.form.values()
        if any(not v for v in (nickname, category_type, budget_text, budget_freq)):
            self.message = "Please fill in all fields"
            return
        budget = parse_budget(budget_text)
        if budget is None:
            self.message = "Invalid budget value"
            return

        new = NewCategory(self.email, nickname, category_type, budget, budget_freq)
        try:
            resp = await self.api.create_category(new.to_json())
        except ApiClientError as e:
            self.message = f"Error creating category: Request failed: {e}"
            return

        if resp.status == 201:
            self.creating = False
            self.form.reset()
            if await self.fetch_categories():
                self.message = "Category created successfully"
        elif resp.status == 400:
            self.message = resp.text
        else:
            self.message = f"Failed to create category: {resp.text}"

    async def delete_category(self, nickname: str) -> None:
        try:
            resp = await self.api.delete_category(self.email, nickname)
        except ApiClientError as e:
            self.message = f"Error deleting category: Request failed: {e}"
            return
        if resp.status == 200:
            if await self.fetch_categories():
                self.message = "Category deleted successfully"
        else:
            self.message = f"Failed to delete category: {resp.text}"
