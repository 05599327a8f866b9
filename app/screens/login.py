import logging

from rich.console import Group, RenderableType

from app.components import FieldGroup, InputField, logo, notice, response_box
from app.keys import ENTER, ESCAPE, KeyPress
from app.navigation import QUIT, STAY, NavigationSignal, PageKind, advance
from core.api import ApiClientError
from core.models import HomepagePayload, parse_report_overview, unquote_body

logger = logging.getLogger(__name__)

LOGIN_MARKER = "Login successful"
OVERVIEW_ERROR = "Error querying report overview!"


def extract_username(body: str) -> str | None:
    """First whitespace token of the body once the success marker is dropped."""
    rest = unquote_body(body).replace(LOGIN_MARKER, " ", 1)
    for token in rest.split():
        token = token.strip(".,;:!")
        if token:
            return token
    return None


class LoginPage:
    def __init__(self, api, message: str = "") -> None:
        self.api = api
        self.form = FieldGroup(InputField("Email"), InputField("Password", masked=True))
        self.message = message

    def render(self) -> RenderableType:
        return Group(
            logo(),
            *self.form.render(),
            response_box(self.message),
            notice("Esc to quit | Tab / Shift+Tab to switch field | Enter to login"),
        )

    async def handle_input(self, key: KeyPress) -> NavigationSignal:
        if key.key == ESCAPE:
            return QUIT
        if key.key == ENTER:
            return await self.submit()
        self.form.handle_key(key)
        return STAY

    async def submit(self) -> NavigationSignal:
        email, password = self.form.values()
        try:
            resp = await self.api.login(email, password)
        except ApiClientError as e:
            logger.warning("login request failed: %s", e)
            self.message = f"Request failed: {e}"
            return STAY

        if not resp.ok:
            self.message = f"Login failed: {resp.status}\nMessage: {resp.text}"
            return STAY
        # TODO: switch to a structured success field once the backend sends one
        if LOGIN_MARKER not in resp.text:
            self.message = f"Login successful, but response format is unexpected.\nStatus: {resp.status}\nBody: {resp.text}"
            return STAY
        username = extract_username(resp.text)
        if not username:
            self.message = "Login successful, but failed to extract username."
            return STAY

        overview = await self._fetch_overview(email)
        self.message = "Login successful! Redirecting to homepage..."
        logger.info("logged in as %s", username)
        return advance(PageKind.HOMEPAGE, payload=HomepagePayload(username, email, overview))

    async def _fetch_overview(self, email: str) -> str:
        try:
            resp = await self.api.report_overview(email)
        except ApiClientError as e:
            logger.warning("report overview failed: %s", e)
            return OVERVIEW_ERROR
        if resp.status != 200:
            return OVERVIEW_ERROR
        return parse_report_overview(resp.text)
