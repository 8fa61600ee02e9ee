"""Terminal front end: an intro screen followed by the topic menu."""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Callable, List, Optional, TypeVar

from rakusite import fps
from rakusite.app import App

T = TypeVar("T")

INTRO_WIDTH = 43
INTRO_HEIGHT = 3
INTRO_LINES = (
    "| W E L C O M E |",
    "A personal terminal site",
    "https://example.com",
)
INTRO_HINT = (
    ".. PRESS ANY KEY TO START ..",
    ".. this website is NOT mobile friendly ..",
)
OPEN_LINK_KEY = "\x0f"  # Ctrl+O


class Scene(Enum):
    INTRO = "intro"
    LIST = "list"


class State:
    """Which scene is shown, and the menu behind it."""

    def __init__(self, app: Optional[App] = None) -> None:
        self.scene = Scene.INTRO
        self.app = app if app is not None else App()

    def _dispatch(self, action: Callable[[], T]) -> Optional[T]:
        if self.scene is Scene.INTRO:
            self.scene = Scene.LIST
            return None
        return action()

    def on_down(self) -> None:
        self._dispatch(self.app.on_down)

    def on_up(self) -> None:
        self._dispatch(self.app.on_up)

    def on_right(self) -> None:
        self._dispatch(self.app.on_right)

    def on_left(self) -> None:
        self._dispatch(self.app.on_left)

    def on_enter(self) -> None:
        self._dispatch(self.app.on_enter)

    def open_link(self) -> Optional[str]:
        """Open the selected link in the menu; return it if one was opened."""
        return self._dispatch(self.app.open_link)

    def on_key(self, key: str) -> None:
        self._dispatch(lambda: self.app.on_key(key))

    def on_escape(self) -> None:
        """Go back to the intro screen."""
        self.scene = Scene.INTRO


def _place(lines: List[str], row: int, text: str, x: int, area_width: int) -> None:
    if not 0 <= row < len(lines):
        return
    line = lines[row]
    width = len(line)
    centered = text[:area_width].center(area_width)
    lines[row] = (line[:x] + centered + line[x + area_width :])[:width]


def render_intro(width: int, height: int) -> List[str]:
    """The intro screen as ``height`` lines of ``width`` characters."""
    lines = [" " * width for _ in range(height)]
    area_width = min(INTRO_WIDTH, width)
    x = max(0, (width - INTRO_WIDTH) // 2)
    y = max(0, (height - INTRO_HEIGHT) // 2)
    for offset, text in enumerate(INTRO_LINES):
        _place(lines, y + offset, text, x, area_width)
    below = y + INTRO_HEIGHT + 3
    for offset, text in enumerate(INTRO_HINT):
        _place(lines, below + offset, text, x, area_width)
    return lines


def render_frame(state: State, width: int, height: int) -> List[str]:
    """The screen for the current scene."""
    if state.scene is Scene.LIST:
        return state.app.render(width, height)
    return render_intro(width, height)


def _handle_key(state: State, key) -> Optional[str]:
    if key.is_sequence:
        actions = {
            "KEY_ESCAPE": state.on_escape,
            "KEY_RIGHT": state.on_right,
            "KEY_LEFT": state.on_left,
            "KEY_UP": state.on_up,
            "KEY_DOWN": state.on_down,
            "KEY_ENTER": state.on_enter,
        }
        action = actions.get(key.name)
        if action is not None:
            action()
        return None
    if str(key) == OPEN_LINK_KEY:
        url = state.open_link()
        return f"Link: {url}" if url else None
    state.on_key(str(key))
    return None


def _run_interactive(state: State) -> int:
    import blessed

    term = blessed.Terminal()
    fps.init_fps_recorder()
    message = ""
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            while not state.app.should_exit:
                width, height = term.width, term.height
                lines = render_frame(state, width, height)
                if message and lines:
                    lines[-1] = message[:width].ljust(width)
                print(term.home + term.clear + "\n".join(lines), end="", flush=True)
                fps.record_frame()
                key = term.inkey(timeout=0.1)
                if not key:
                    continue
                message = _handle_key(state, key) or ""
        except KeyboardInterrupt:
            pass
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the terminal site, or print one screen with ``--print``."""
    parser = argparse.ArgumentParser(prog="rakusite", description="Personal terminal site.")
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="print a single screen and exit",
    )
    parser.add_argument("--scene", choices=[s.value for s in Scene], default="intro")
    parser.add_argument("--width", type=int, default=100)
    parser.add_argument("--height", type=int, default=30)
    args = parser.parse_args(argv)

    state = State()
    if args.print_only:
        state.scene = Scene(args.scene)
        print("\n".join(render_frame(state, args.width, args.height)))
        return 0
    return _run_interactive(state)