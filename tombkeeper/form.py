"""A vertical stack of fields with one of them optionally selected."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .applog import log_error
from .events import ESC, TAB, Context, KeyEvent, LoopEvent


@dataclass
class Form:
    """Fields shown one under another; Tab moves the selection between them."""

    id: str
    title: Optional[str] = None
    fields: list[Any] = field(default_factory=list)
    selected_index: Optional[int] = None

    def purge_fields(self) -> None:
        self.fields = []

    def add_field(self, field: Any) -> None:
        self.fields.append(field)

    def set_title(self, title: str) -> None:
        self.title = title

    def remove_title(self) -> None:
        self.title = None

    def tab(self, shift: bool) -> None:
        """Move the selection forward, or backward when ``shift`` is set."""
        total = len(self.fields)
        if total == 0:
            return
        if self.selected_index is None:
            log_error("selected form field: 0")
            self.selected_index = total - 1 if shift else 0
            return
        index = self.selected_index
        if shift:
            new_index = index - 1 if index > 0 else 0
        else:
            new_index = index + 1
        self.selected_index = new_index % total if new_index > 0 else 0

    def focused_field(self) -> Optional[tuple[str, Any]]:
        """Return the title and the first focused field, or ``None``."""
        for item in self.fields:
            if item.focused:
                title = item.title if item.title is not None else "field"
                return title, item
        return None

    def blur(self) -> None:
        for item in self.fields:
            item.blur()
        self.selected_index = None

    def sync_focus(self) -> None:
        """Focus the selected field and blur all the others."""
        for index, item in enumerate(self.fields):
            if index == self.selected_index:
                item.focus()
            else:
                item.blur()

    def process_keyboard(self, event: KeyEvent, context: Optional[Context] = None) -> LoopEvent:
        """Esc blurs the form; other keys go to the focused field."""
        if event.code == ESC:
            self.blur()
            return LoopEvent.REFRESH
        if event.code == TAB:
            return LoopEvent.PROPAGATE
        focused = self.focused_field()
        if focused is None:
            return LoopEvent.PROPAGATE
        _, item = focused
        return item.process_keyboard(event)