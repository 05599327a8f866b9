import pytest

from core.api import ApiClientError, ApiResponse
from core.models import HomepagePayload


class FakeApi:
    """Stands in for ApiClient: canned responses per method, every call recorded.

    A canned value may be an ApiResponse, an exception instance (raised), or a
    list of either, consumed in order.
    """

    def __init__(self, **responses):
        self.responses = responses
        self.calls = []
        self.closed = False

    def count(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)

    async def _answer(self, method, *args):
        self.calls.append((method, args))
        value = self.responses.get(method)
        if isinstance(value, list):
            value = value.pop(0)
        if value is None:
            raise AssertionError(f"unexpected call {method}{args}")
        if isinstance(value, Exception):
            raise value
        return value

    async def signup(self, username, email, password):
        return await self._answer("signup", username, email, password)

    async def login(self, email, password):
        return await self._answer("login", email, password)

    async def report_overview(self, email):
        return await self._answer("report_overview", email)

    async def report_details(self, email):
        return await self._answer("report_details", email)

    async def category_summary(self, email):
        return await self._answer("category_summary", email)

    async def create_category(self, category):
        return await self._answer("create_category", category)

    async def delete_category(self, email, nickname):
        return await self._answer("delete_category", email, nickname)

    async def account_summary(self, email):
        return await self._answer("account_summary", email)

    async def close(self):
        self.closed = True


CATEGORIES_JSON = (
    '[{"email": "alice@x.io", "nickname": "food", "category_type": "expense", "budget": 200.0, "budget_freq": "monthly"},'
    ' {"email": "alice@x.io", "nickname": "rent", "category_type": "expense", "budget": 1200.0, "budget_freq": "monthly"},'
    ' {"email": "alice@x.io", "nickname": "fun", "category_type": "expense", "budget": 50.0, "budget_freq": "weekly"}]'
)


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def payload():
    return HomepagePayload(username="alice", email="alice@x.io", report_overview="Category Summary:\nfood ok")


def ok(text="", status=200):
    return ApiResponse(status=status, text=text)


def refused():
    return ApiClientError("Cannot connect to host localhost:8000")


async def fill(page, values):
    """Type each value into the page's active field, Tab between fields."""
    from app.keys import TAB, KeyPress

    for value in values:
        for c in value:
            await page.handle_input(KeyPress.char(c))
        await page.handle_input(KeyPress(TAB))
