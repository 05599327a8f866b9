import logging

from rich.console import Group, RenderableType

from app.components import FieldGroup, InputField, logo, notice, response_box
from app.keys import ENTER, ESCAPE, KeyPress
from app.navigation import BACK, STAY, NavigationSignal, PageKind, advance
from core.api import ApiClientError

logger = logging.getLogger(__name__)

SIGNUP_OK = "Signup successful"


class SignupPage:
    def __init__(self, api) -> None:
        self.api = api
        self.form = FieldGroup(
            InputField("Username"),
            InputField("Email"),
            InputField("Password", masked=True),
            InputField("Confirm Password", masked=True),
        )
        self.message = ""

    def render(self) -> RenderableType:
        return Group(
            logo(),
            *self.form.render(),
            response_box(self.message),
            notice("Esc to go back | Tab / Shift+Tab to switch field | Enter to create a new user"),
        )

    async def handle_input(self, key: KeyPress) -> NavigationSignal:
        if key.key == ESCAPE:
            return BACK
        if key.key == ENTER:
            return await self.submit()
        self.form.handle_key(key)
        return STAY

    async def submit(self) -> NavigationSignal:
        username, email, password, confirm = self.form.values()
        if password != confirm:
            self.message = "Passwords do not match"
            return STAY

        try:
            resp = await self.api.signup(username, email, password)
        except ApiClientError as e:
            logger.warning("signup request failed: %s", e)
            self.message = f"Request failed: {e}"
            return STAY

        if resp.status == 201:
            self.message = SIGNUP_OK
            return advance(PageKind.LOGIN, notice=SIGNUP_OK)
        if 400 <= resp.status < 500:
            # server-side validation message, shown as is
            self.message = resp.text
        else:
            self.message = f"Signup failed: {resp.status}\nMessage: {resp.text}"
        return STAY
