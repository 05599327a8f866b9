import logging
from pathlib import Path

from textual.logging import TextualHandler

from core.config import Settings

FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def setup_logging(settings: Settings) -> None:
    """The terminal belongs to the UI: log to a file or to the Textual console."""
    if settings.log_file:
        p = Path(settings.log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(p, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s " + FORMAT))
    else:
        handler = TextualHandler()
        handler.setFormatter(logging.Formatter(FORMAT))
    logging.basicConfig(level=settings.log_level, handlers=[handler], force=True)
