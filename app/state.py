"""Page state machine.

`Application` owns the current page and its kind. Pages never switch pages
themselves: they return a NavigationSignal and the transition table here
decides what comes next.
"""

import logging
from typing import Optional

from rich.console import RenderableType

from app.keys import KeyPress
from app.navigation import NavigationSignal, PageKind, Signal
from app.screens.account import AccountPage
from app.screens.category import CategoryPage
from app.screens.cover import CoverPage
from app.screens.home import HomePage
from app.screens.login import LoginPage
from app.screens.report import ReportPage
from app.screens.signup import SignupPage
from core.models import HomepagePayload

logger = logging.getLogger(__name__)

# Back from these goes one level up; Back from anything else quits.
PARENTS = {
    PageKind.SIGNUP: PageKind.COVER,
    PageKind.LOGIN: PageKind.COVER,
    PageKind.ACCOUNT: PageKind.HOMEPAGE,
    PageKind.CATEGORY: PageKind.HOMEPAGE,
    PageKind.REPORT: PageKind.HOMEPAGE,
}

NEEDS_LOGIN = {PageKind.HOMEPAGE, PageKind.ACCOUNT, PageKind.CATEGORY, PageKind.REPORT}


class Application:
    def __init__(self, api) -> None:
        self.api = api
        self.state = PageKind.COVER
        self.page = CoverPage()
        self.homepage: Optional[HomepagePayload] = None
        self.running = True

    def render(self) -> RenderableType:
        return self.page.render()

    async def handle_key(self, key: KeyPress) -> None:
        signal = await self.page.handle_input(key)
        await self.apply(signal)

    async def apply(self, signal: NavigationSignal) -> None:
        if signal.kind is Signal.STAY:
            return
        if signal.kind is Signal.QUIT:
            logger.info("quit from %s", self.state.value)
            self.running = False
        elif signal.kind is Signal.BACK:
            parent = PARENTS.get(self.state)
            if parent is None:
                self.running = False
            else:
                await self.enter(parent)
        elif signal.kind is Signal.ADVANCE:
            if signal.target is PageKind.HOMEPAGE and self.state is PageKind.LOGIN:
                if signal.payload is None:
                    logger.error("login reported success without homepage data")
                    self.page.message = "Login failed: no user data received"
                    return
                self.homepage = signal.payload
            await self.enter(signal.target, signal.notice)
        else:
            raise ValueError(f"unknown signal {signal.kind!r}")

    async def enter(self, target: PageKind, notice: str = "") -> None:
        if target in NEEDS_LOGIN and self.homepage is None:
            logger.error("refusing %s without a logged-in user", target.value)
            return
        if target is PageKind.COVER:
            self.homepage = None

        page = self._build(target, notice)
        initialize = getattr(page, "initialize", None)
        if initialize is not None:
            await initialize()
        logger.info("page %s -> %s", self.state.value, target.value)
        self.state = target
        self.page = page

    def _build(self, target: PageKind, notice: str):
        if target is PageKind.COVER:
            return CoverPage()
        if target is PageKind.SIGNUP:
            return SignupPage(self.api)
        if target is PageKind.LOGIN:
            return LoginPage(self.api, message=notice)
        if target is PageKind.HOMEPAGE:
            return HomePage(self.homepage)
        if target is PageKind.ACCOUNT:
            return AccountPage(self.api, self.homepage.email)
        if target is PageKind.CATEGORY:
            return CategoryPage(self.api, self.homepage.email)
        if target is PageKind.REPORT:
            return ReportPage(self.api, self.homepage.email)
        raise ValueError(f"unknown page {target!r}")
