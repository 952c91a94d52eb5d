"""A dialog box whose text can be edited from the keyboard."""

from __future__ import annotations

from dataclasses import dataclass

from .events import BACKSPACE, ENTER, ESC, KeyEvent, LoopEvent


@dataclass
class Modal:
    """A titled box of editable text that stays open until dismissed."""

    title: str
    text: str
    active: bool = True

    def set_title(self, title: str) -> None:
        self.title = title

    def set_text(self, text: str) -> None:
        self.text = text

    def write(self, c: str) -> None:
        self.text += c

    def backspace(self) -> None:
        self.text = self.text[:-1]

    def is_active(self) -> bool:
        return self.active

    def deactivate(self) -> None:
        self.active = False

    def process_keyboard(self, event: KeyEvent) -> LoopEvent:
        """Edit the text or close the modal; return what the loop should do."""
        code = event.code
        if code == BACKSPACE:
            self.backspace()
            return LoopEvent.PROPAGATE
        if code == ESC:
            self.deactivate()
            return LoopEvent.PROPAGATE
        if code == ENTER:
            self.write("\n")
            return LoopEvent.PROPAGATE
        if len(code) == 1:
            self.write(code)
            return LoopEvent.REFRESH
        return LoopEvent.PROPAGATE