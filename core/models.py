# Read models mirrored from the backend, plus their JSON parsing.
# core/models.py
import json
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List


class ResponseFormatError(ValueError):
    """Body could not be turned into the expected records."""


@dataclass
class HomepagePayload:
    username: str
    email: str
    report_overview: str


@dataclass
class Category:
    email: str
    nickname: str
    category_type: str
    budget: float
    budget_freq: str


@dataclass
class NewCategory:
    email: str
    nickname: str
    category_type: str
    budget: float
    budget_freq: str

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CategorySummary:
    nickname: str
    budget: float
    budget_freq: str
    overbudget: bool
    total: float
    # transactions inside the current budget window
    cat_trans: List[str] = field(default_factory=list)


@dataclass
class AccountRecord:
    email: str
    nickname: str
    account_type: str = ""
    balance: float = 0.0


def _load_list(text: str) -> List[Any]:
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ResponseFormatError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ResponseFormatError(f"expected a JSON array, got {type(data).__name__}")
    return data


def _parse_records(text: str, build: Callable[[Dict[str, Any]], Any]) -> List[Any]:
    out = []
    for item in _load_list(text):
        if not isinstance(item, dict):
            raise ResponseFormatError(f"expected an object, got {type(item).__name__}")
        try:
            out.append(build(item))
        except (KeyError, TypeError, ValueError) as exc:
            raise ResponseFormatError(f"bad record {item!r}: {exc}") from exc
    return out


def parse_categories(text: str) -> List[Category]:
    return _parse_records(text, lambda r: Category(
        email=str(r["email"]),
        nickname=str(r["nickname"]),
        category_type=str(r["category_type"]),
        budget=float(r["budget"]),
        budget_freq=str(r["budget_freq"]),
    ))


def parse_category_summaries(text: str) -> List[CategorySummary]:
    return _parse_records(text, lambda r: CategorySummary(
        nickname=str(r["nickname"]),
        budget=float(r["budget"]),
        budget_freq=str(r["budget_freq"]),
        overbudget=bool(r["overbudget"]),
        total=float(r["total"]),
        cat_trans=[str(t) for t in r.get("cat_trans") or []],
    ))


def parse_accounts(text: str) -> List[AccountRecord]:
    return _parse_records(text, lambda r: AccountRecord(
        email=str(r.get("email", "")),
        nickname=str(r["nickname"]),
        account_type=str(r.get("account_type", "")),
        balance=float(r.get("balance", 0.0)),
    ))


def parse_report_overview(text: str) -> str:
    """The overview comes as a JSON array of lines, a JSON string or plain text."""
    try:
        data = json.loads(text)
    except ValueError:
        return text
    if isinstance(data, list):
        return "\n".join(str(line) for line in data)
    if isinstance(data, str):
        return data
    return text


def unquote_body(text: str) -> str:
    """Plain-text bodies sometimes arrive JSON-encoded ("\"...\"")."""
    try:
        data = json.loads(text)
    except ValueError:
        return text
    return data if isinstance(data, str) else text
