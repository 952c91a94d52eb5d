"""The main menu of the interface: labelled screens reachable by key or route."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .applog import log_error
from .events import ESC, LEFT, RIGHT, Context, KeyEvent, LoopEvent, match_route


class MenuError(Exception):
    """Raised for an unknown menu item or an empty menu."""


@dataclass(frozen=True)
class MenuItem:
    """A menu entry: its label, the key that selects it and its route."""

    label: str
    code: str
    route_path: str


@dataclass
class Menu:
    """An ordered set of menu items with an optional selection."""

    cid: str = "main-menu"
    selected: Optional[int] = None
    labels: list[str] = field(default_factory=list)
    items: dict[str, MenuItem] = field(default_factory=dict)
    routes: list[tuple[str, MenuItem]] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def empty(cls) -> "Menu":
        return cls()

    @classmethod
    def default(cls) -> "Menu":
        menu = cls.empty()
        menu.add_item("Secrets", "S", "/")
        menu.add_item("Help", "H", "/help")
        menu.add_item("Configuration", "C", "/config")
        menu.add_item("About", "A", "/about")
        try:
            menu.select("Secrets")
        except MenuError as error:
            log_error(f"cannot select Secrets menu: {error}")
        return menu

    def index_of(self, item: str) -> int:
        try:
            return self.labels.index(item)
        except ValueError:
            raise MenuError(f"invalid menu item: {item}") from None

    def _recognize(self, location: str) -> Optional[MenuItem]:
        for pattern, item in self.routes:
            if match_route(pattern, location) is not None:
                return item
        return None

    def select_by_location(self, location: str) -> None:
        """Select the item whose route matches ``location``."""
        item = self._recognize(location)
        if item is None:
            log_error(f"failed to select menu by location: no route for {location}")
            return
        try:
            index = self.index_of(item.label)
        except MenuError as error:
            log_error(f"cannot select by location {location!r}: {error}")
            index = 0
        self.selected = index

    def selected_index(self) -> int:
        return 0 if self.selected is None else self.selected

    def current(self) -> Optional[MenuItem]:
        return self.items.get(self.current_label())

    def current_label(self) -> str:
        try:
            return self.labels[self.selected_index()]
        except IndexError:
            raise MenuError("menu has no items") from None

    def set_index(self, index: int) -> None:
        self.selected = index

    def select(self, item: str) -> None:
        self.set_index(self.index_of(item))

    def next(self) -> None:
        count = len(self.labels)
        if self.selected is not None:
            self.selected = (self.selected + 1) % count
        elif count > 0:
            self.selected = 0
        log_error(f"Menu.next (after) [selected={self.selected}] [count={count}] ")

    def previous(self) -> None:
        count = len(self.labels)
        if self.selected is not None:
            self.selected = self.selected - 1 if self.selected > 0 else count - 1
        elif count > 0:
            self.selected = count - 1
        log_error(f"Menu.previous (after) [selected={self.selected}] [count={count}] ")

    def add_item(self, title: str, code: str, route_path: str) -> None:
        item = MenuItem(label=title, code=code, route_path=route_path)
        self.labels.append(title)
        self.items[title] = item
        self.routes.append((route_path, item))
        if self.selected is None:
            self.selected = 0

    def remove_item(self, item: str) -> None:
        index = self.index_of(item)
        del self.labels[index]
        self.items.pop(item, None)

    def _go_to_current(self, context: Context) -> LoopEvent:
        selected = self.current()
        if selected is not None:
            context.goto(selected.route_path)
        return LoopEvent.REFRESH

    def process_keyboard(self, event: KeyEvent, context: Context) -> LoopEvent:
        """Handle navigation keys; return what the event loop should do."""
        if event.code == RIGHT:
            self.next()
            return self._go_to_current(context)
        if event.code == LEFT:
            self.previous()
            return self._go_to_current(context)
        if event.ctrl and not event.shift and not event.alt and event.code == "q":
            return LoopEvent.QUIT
        if event.code == ESC:
            context.goto("/")
            return LoopEvent.REFRESH
        for label in sorted(self.items):
            if self.items[label].code == event.code:
                try:
                    self.select(label)
                except MenuError as error:
                    log_error(f"Menu.process_keyboard(): {error}")
                    return LoopEvent.QUIT
                return LoopEvent.REFRESH
        return LoopEvent.PROPAGATE