import os
from dataclasses import dataclass

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8000
DEFAULT_TIMEOUT = 10.0


@dataclass
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT
    log_file: str | None = None
    log_level: str = "INFO"

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


def _env_number(name: str, default, cast, kind: str):
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be {kind}, got {raw!r}") from None


def load_settings(host: str | None = None, port: int | None = None) -> Settings:
    """Environment first, explicit arguments (command line) win.

    Raises ValueError naming the variable when a numeric setting is malformed.
    """
    s = Settings(
        host=os.getenv("FINTRACK_HOST", DEFAULT_HOST),
        port=_env_number("FINTRACK_PORT", DEFAULT_PORT, int, "an integer"),
        timeout=_env_number("FINTRACK_TIMEOUT", DEFAULT_TIMEOUT, float, "a number"),
        log_file=os.getenv("FINTRACK_LOG_FILE") or None,
        log_level=os.getenv("FINTRACK_LOG_LEVEL", "INFO").upper(),
    )
    if host:
        s.host = host
    if port:
        s.port = port
    return s
