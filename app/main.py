import argparse
import asyncio

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from app.keys import KeyPress
from app.state import Application
from core.api import ApiClient
from core.config import Settings, load_settings
from core.logs import setup_logging


class PageView(Static, can_focus=True):
    """Draws the active page and feeds it every key, one at a time."""

    async def on_mount(self) -> None:
        await self.redraw()

    async def redraw(self) -> None:
        async with self.app.state_lock:
            self.update(self.app.application.render())

    async def on_key(self, event: events.Key) -> None:
        # pages own every key, including tab / shift+tab
        event.stop()
        event.prevent_default()
        async with self.app.state_lock:
            await self.app.application.handle_key(KeyPress.from_event(event))
        if not self.app.application.running:
            self.app.exit()
            return
        await self.redraw()


class FinTrackApp(App, inherit_bindings=False):
    """Esc on a top-level page is the only way out; no ctrl+q / ctrl+c quit."""

    CSS = """
    Screen { background: $background; color: $foreground; }
    #page { height: 1fr; padding: 0 1; }
    """
    TITLE = "FinTrack"
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, api=None, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or load_settings()
        self.api = api or ApiClient(self.settings.base_url, timeout=self.settings.timeout)
        self.application = Application(self.api)
        self.state_lock = asyncio.Lock()

    def compose(self) -> ComposeResult:
        yield PageView(id="page")

    def on_mount(self) -> None:
        self.query_one(PageView).focus()

    async def on_unmount(self) -> None:
        await self.api.close()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="fintrack", description="Terminal client for the FinTrack backend.")
    parser.add_argument("--host", help="backend host (default: $FINTRACK_HOST or localhost)")
    parser.add_argument("--port", type=int, help="backend port (default: $FINTRACK_PORT or 8000)")
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.host, args.port)
    except ValueError as e:
        parser.error(str(e))
    setup_logging(settings)
    FinTrackApp(settings=settings).run()


if __name__ == "__main__":
    main()
