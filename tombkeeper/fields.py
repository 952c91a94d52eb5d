"""Editable form fields: plain text and RGB hex colours."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Optional

from .events import BACKSPACE, ENTER, ESC, KeyEvent, LoopEvent
from .ui import Color, rgb_to_color

_MAX_COLOR_LENGTH = 7


@dataclass
class _FieldData:
    id: str
    title: Optional[str]
    value: str
    read_only: bool
    visible: bool
    focused: bool = field(default=False, init=False)


@dataclass
class TextField(_FieldData):
    """A titled line of text, optionally read only."""

    def remove_title(self) -> None:
        self.title = None

    def write(self, c: str) -> None:
        if not self.read_only:
            self.value += c

    def backspace(self) -> None:
        if not self.read_only:
            self.value = self.value[:-1]

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def process_keyboard(self, event: KeyEvent) -> LoopEvent:
        code = event.code
        if code == BACKSPACE:
            self.backspace()
            return LoopEvent.REFRESH
        if code == ESC:
            self.blur()
            return LoopEvent.REFRESH
        if code == ENTER:
            return LoopEvent.PROPAGATE
        if len(code) == 1:
            self.write(code)
            return LoopEvent.REFRESH
        return LoopEvent.PROPAGATE


@dataclass
class RGBColorField(_FieldData):
    """A field holding an RGB hex colour, accepting only hex digits."""

    def remove_title(self) -> None:
        self.title = None

    def to_color(self) -> Optional[Color]:
        return rgb_to_color(self.value)

    def write(self, c: str) -> None:
        if not self.read_only:
            self.value += c

    def backspace(self) -> None:
        if not self.read_only:
            self.value = self.value[:-1]

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def process_keyboard(self, event: KeyEvent) -> LoopEvent:
        code = event.code
        if code == BACKSPACE:
            self.backspace()
            return LoopEvent.REFRESH
        if code == ESC:
            self.blur()
            return LoopEvent.REFRESH
        if code == ENTER:
            return LoopEvent.REFRESH
        if len(code) == 1:
            if code in string.hexdigits and len(self.value) <= _MAX_COLOR_LENGTH:
                self.write(code)
                return LoopEvent.REFRESH
            return LoopEvent.PROPAGATE
        return LoopEvent.PROPAGATE