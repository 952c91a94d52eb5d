"""A list of items with an optional selection that wraps around."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class StatefulList:
    """Items plus the index of the selected one, if any."""

    items: list[Any] = field(default_factory=list)
    selected: Optional[int] = None

    @classmethod
    def with_items(cls, items: list[Any]) -> "StatefulList":
        return cls(items=list(items))

    @classmethod
    def empty(cls) -> "StatefulList":
        return cls()

    def update(self, items: list[Any]) -> None:
        self.items = list(items)

    def next(self) -> None:
        """Select the following item, wrapping to the first."""
        if self.selected is None or self.selected >= len(self.items) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def previous(self) -> None:
        """Select the preceding item, wrapping to the last."""
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = max(len(self.items) - 1, 0)
        else:
            self.selected -= 1

    def current(self) -> Optional[Any]:
        """Return the selected item, or ``None``."""
        if self.selected is None or self.selected >= len(self.items):
            return None
        return self.items[self.selected]

    def unselect(self) -> None:
        self.selected = None