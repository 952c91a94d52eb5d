"""Keyboard events, loop outcomes, navigation context and route matching."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

ESC = "Esc"
ENTER = "Enter"
TAB = "Tab"
BACKSPACE = "Backspace"
UP = "Up"
DOWN = "Down"
LEFT = "Left"
RIGHT = "Right"


class LoopEvent(enum.Enum):
    """What the event loop should do after a component handled an event."""

    PROPAGATE = "propagate"
    REFRESH = "refresh"
    PREVENT = "prevent"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a single character or a special key name, plus modifiers."""

    code: str
    ctrl: bool = False
    shift: bool = False
    alt: bool = False


@dataclass
class Context:
    """The current location of the interface and the way back."""

    location: str = "/"
    history: list[str] = field(default_factory=list)
    error: Optional[str] = None

    def goto(self, path: str) -> None:
        self.history.append(self.location)
        self.location = path

    def goback(self) -> None:
        if self.history:
            self.location = self.history.pop()


def _segments(path: str) -> list[str]:
    return path.strip("/").split("/")


def match_route(pattern: str, path: str) -> Optional[dict[str, str]]:
    """Match ``path`` against a pattern with ``:name`` segments.

    Returns the captured parameters, or ``None`` when the path does not match.
    """
    wanted = _segments(pattern)
    given = _segments(path)
    if len(wanted) != len(given):
        return None
    params: dict[str, str] = {}
    for expected, actual in zip(wanted, given):
        if expected.startswith(":"):
            if not actual:
                return None
            params[expected[1:]] = actual
        elif expected != actual:
            return None
    return params