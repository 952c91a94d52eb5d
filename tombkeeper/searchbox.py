"""The box in which a glob pattern for filtering secrets is typed."""

from __future__ import annotations

from dataclasses import dataclass, field

from .events import BACKSPACE, ENTER, ESC, KeyEvent, LoopEvent

TITLE = "Search using glob patterns (<Esc> / <Enter>)"


@dataclass
class SearchBox:
    """A search pattern plus the text being edited before it is applied."""

    pattern: str
    tmp: str = field(init=False)
    visible: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.tmp = self.pattern

    def toggle_visible(self) -> None:
        self.visible = not self.visible

    def hide(self) -> None:
        self.visible = False

    def set_tmp(self, tmp: str) -> None:
        self.tmp = tmp

    def write(self, c: str) -> None:
        self.tmp += c

    def backspace(self) -> None:
        self.tmp = self.tmp[:-1]

    def process_keyboard(self, event: KeyEvent) -> LoopEvent:
        """Edit the pending pattern; Enter applies it, Esc discards the box."""
        code = event.code
        if code == BACKSPACE:
            self.backspace()
            return LoopEvent.PROPAGATE
        if code == ESC:
            self.hide()
            return LoopEvent.PROPAGATE
        if code == ENTER:
            if self.tmp:
                self.pattern = self.tmp
            self.hide()
            return LoopEvent.PROPAGATE
        if len(code) == 1:
            self.write(code)
            return LoopEvent.REFRESH
        return LoopEvent.PROPAGATE