from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.models import HomepagePayload


class PageKind(Enum):
    COVER = "cover"
    SIGNUP = "signup"
    LOGIN = "login"
    HOMEPAGE = "homepage"
    ACCOUNT = "account"
    CATEGORY = "category"
    REPORT = "report"


class Signal(Enum):
    STAY = "stay"
    BACK = "back"
    ADVANCE = "advance"
    QUIT = "quit"


@dataclass(frozen=True)
class NavigationSignal:
    """Outcome of one handle_input call.

    ADVANCE carries the target page; Advance(HOMEPAGE) also carries the
    payload built by a successful login. `notice` is shown by the new page.
    """

    kind: Signal
    target: Optional[PageKind] = None
    payload: Optional[HomepagePayload] = None
    notice: str = ""


STAY = NavigationSignal(Signal.STAY)
BACK = NavigationSignal(Signal.BACK)
QUIT = NavigationSignal(Signal.QUIT)


def advance(target: PageKind, payload: Optional[HomepagePayload] = None, notice: str = "") -> NavigationSignal:
    return NavigationSignal(Signal.ADVANCE, target=target, payload=payload, notice=notice)
