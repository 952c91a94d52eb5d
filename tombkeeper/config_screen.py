"""The configuration screen: file locations beside the colour theme editor."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from .applog import log_error
from .color_config import ColorThemeConfiguration
from .config import ConfigError, TombConfig
from .events import ENTER, TAB, Context, KeyEvent, LoopEvent
from .locations_config import TombConfiguration
from .menu import Menu


class ConfigFocus(enum.Enum):
    """Which panel of the configuration screen receives the keyboard."""

    LOCATIONS = "locations"
    UI_COLORS = "ui_colors"


@dataclass
class Configuration:
    """The screen holding the locations panel and the colour theme panel."""

    menu: Menu
    tomb_config: TombConfig
    color_configuration: ColorThemeConfiguration = field(init=False)
    tomb_configuration: TombConfiguration = field(init=False)
    focused: ConfigFocus = field(default=ConfigFocus.UI_COLORS, init=False)

    name = "Tomb Configuration"
    id = "Configuration"

    def __post_init__(self) -> None:
        self.color_configuration = ColorThemeConfiguration(self.tomb_config)
        self.tomb_configuration = TombConfiguration(self.tomb_config)
        self._sync_focus()

    def _sync_focus(self) -> None:
        # Mirrors what drawing the screen does: the focused panel takes focus,
        # the other is blurred, and each form focuses its selected field.
        if self.focused is ConfigFocus.LOCATIONS:
            self.tomb_configuration.focus()
            self.color_configuration.blur()
        else:
            self.color_configuration.focus()
            self.tomb_configuration.blur()
        self.tomb_configuration.form.sync_focus()
        self.color_configuration.form.sync_focus()

    def switch_focus(self) -> None:
        """Move the keyboard focus to the other panel."""
        if self.focused is ConfigFocus.LOCATIONS:
            self.focused = ConfigFocus.UI_COLORS
        else:
            self.focused = ConfigFocus.LOCATIONS

    def save_config(self) -> None:
        """Store the edited colour theme and write the config file."""
        colors = self.color_configuration.get_color_theme()
        self.tomb_config.set_colors(colors)
        try:
            self.tomb_config.save()
        except ConfigError as error:
            log_error(f"failed to save config: {error}")

    def process_keyboard(self, event: KeyEvent, context: Optional[Context] = None) -> LoopEvent:
        """Tab switches panels, Enter saves; the menu sees keys before the panels."""
        if context is None:
            context = Context()
        if event.code == TAB:
            self.switch_focus()
        elif event.code == ENTER:
            self.save_config()

        result = self.menu.process_keyboard(event, context)
        if result is LoopEvent.PROPAGATE:
            if self.focused is ConfigFocus.UI_COLORS:
                result = self.color_configuration.process_keyboard(event, context)
            else:
                result = self.tomb_configuration.process_keyboard(event, context)
        self._sync_focus()
        return result