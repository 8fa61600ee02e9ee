"""The interactive list of topics and its text rendering."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from typing import Callable, List, Optional

from rakusite.status import Status
from rakusite.topic import Topic

Opener = Callable[[str], object]

HEADER_TEXT = "Public data"
FOOTER_TEXT = (
    "Use ↓↑ or ws to move, ← or a to unselect, → or d to change status, "
    "h/e to go top/bottom, CTRL + O to open link."
)
NOTHING_SELECTED = "Nothing selected..."
PROMPT = "visitor@example.com:$ ~"
LIST_TITLE = "Topics"
DETAIL_TITLE = "Terminal"
HIGHLIGHT_SYMBOL = ">"


@dataclass
class BulletItem:
    """A topic in the list together with its completion status."""

    topic: Topic
    status: Status = Status.TODO

    def label(self) -> str:
        """The text shown for this item in the list."""
        return f" {self.status.symbol()} {self.topic}"


def _fit(text: str, width: int) -> str:
    return text[:width].ljust(width)


def _center(text: str, width: int) -> str:
    return text[:width].center(width)


class App:
    """Selection state and actions for the topic list."""

    def __init__(self, opener: Optional[Opener] = None) -> None:
        self.items: List[BulletItem] = [BulletItem(topic) for topic in Topic]
        self.selected_index: Optional[int] = None
        self.should_exit = False
        self._opener = opener

    def selected(self) -> Optional[BulletItem]:
        """The selected item, or None when nothing is selected."""
        if self.selected_index is None:
            return None
        return self.items[self.selected_index]

    @property
    def _last_index(self) -> int:
        return len(self.items) - 1

    def on_down(self) -> None:
        """Select the next item, stopping at the last one."""
        if self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = min(self.selected_index + 1, self._last_index)

    def on_up(self) -> None:
        """Select the previous item; with nothing selected, select the last."""
        if self.selected_index is None:
            self.selected_index = self._last_index
        else:
            self.selected_index = max(self.selected_index - 1, 0)

    def on_right(self) -> None:
        """Toggle the status of the selected item."""
        item = self.selected()
        if item is not None:
            item.status = item.status.toggled()

    def on_left(self) -> None:
        """Clear the selection."""
        self.selected_index = None

    def on_enter(self) -> None:
        """Same as moving right: toggle the selected item."""
        self.on_right()

    def select_first(self) -> None:
        self.selected_index = 0

    def select_last(self) -> None:
        self.selected_index = self._last_index

    def open_link(self) -> Optional[str]:
        """Open the selected topic's link, if it has one, and return it."""
        item = self.selected()
        if item is None:
            return None
        url = item.topic.link()
        if not url:
            return None
        if self._opener is not None:
            self._opener(url)
        return url

    def on_key(self, key: str) -> None:
        """Handle a character key."""
        if key == "q":
            self.should_exit = True
            return
        action = _KEYMAP.get(key)
        if action is not None:
            action(self)

    def selected_info(self) -> str:
        """Text for the detail pane of the selected item."""
        item = self.selected()
        if item is None:
            return NOTHING_SELECTED
        command = str(item.topic).lower()
        description = item.topic.description(item.status)
        return f"{PROMPT} {command}:\n{description}"

    def render(self, width: int, height: int) -> List[str]:
        """Draw the whole menu as ``height`` lines of ``width`` characters."""
        main_height = max(height - 3, 0)
        list_height = (main_height + 1) // 2
        detail_height = main_height - list_height

        lines = [_center(HEADER_TEXT, width), _fit("", width)]
        lines.extend(self._render_list(width, list_height))
        lines.extend(self._render_detail(width, detail_height))
        lines.append(_center(FOOTER_TEXT, width))
        return lines[:height]

    def _render_list(self, width: int, height: int) -> List[str]:
        if height <= 0:
            return []
        rows = height - 1
        offset = 0
        if self.selected_index is not None and rows > 0:
            offset = max(0, self.selected_index - rows + 1)
        out = [_center(LIST_TITLE, width)]
        for index, item in enumerate(self.items[offset : offset + rows], start=offset):
            marker = HIGHLIGHT_SYMBOL if index == self.selected_index else " "
            out.append(_fit(marker + item.label(), width))
        out.extend(_fit("", width) for _ in range(height - len(out)))
        return out

    def _render_detail(self, width: int, height: int) -> List[str]:
        if height <= 0:
            return []
        inner = max(width - 2, 0)
        wrapped: List[str] = []
        if inner:
            for paragraph in self.selected_info().split("\n"):
                wrapped.extend(
                    textwrap.wrap(
                        paragraph,
                        inner,
                        replace_whitespace=False,
                        drop_whitespace=False,
                    )
                    or [""]
                )
        out = [_center(DETAIL_TITLE, width)]
        out.extend(_fit(f" {line}", width) for line in wrapped[: height - 1])
        out.extend(_fit("", width) for _ in range(height - len(out)))
        return out


_KEYMAP = {
    "w": App.on_up,
    "↑": App.on_up,
    "a": App.on_left,
    "←": App.on_left,
    "s": App.on_down,
    "↓": App.on_down,
    "d": App.on_right,
    "h": App.select_first,
    "e": App.select_last,
}