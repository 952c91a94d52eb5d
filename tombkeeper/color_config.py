"""The panel for editing the colour theme."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from .config import ColorTheme, TombConfig
from .events import DOWN, UP, Context, KeyEvent, LoopEvent
from .fields import RGBColorField
from .form import Form
from . import ui

_THEME_FIELDS = (
    ("color_default", "default color", "default"),
    ("color_light", "light color", "light"),
    ("color_blurred", "blurred color", "blurred"),
    ("color_default_fg", "default_fg color", "default_fg"),
    ("color_default_bg", "default_bg color", "default_bg"),
    ("color_error_fg", "error_fg color", "error_fg"),
    ("color_error_bg", "error_bg color", "error_bg"),
)


def create_color_fields(colors: ColorTheme) -> list[RGBColorField]:
    """Return one editable colour field per entry of the theme."""
    return [
        RGBColorField(
            id=ident,
            title=title,
            value=getattr(colors, attribute),
            read_only=False,
            visible=True,
        )
        for ident, title, attribute in _THEME_FIELDS
    ]


@dataclass
class ColorThemeConfiguration:
    """A form of colour fields built from a configuration's theme."""

    tomb_config: TombConfig
    form: Form = field(init=False)
    focused: bool = field(default=False, init=False)

    tab_index: ClassVar[int] = 1

    def __post_init__(self) -> None:
        self.form = Form(
            "ColorThemeConfiguration",
            "Tomb ColorThemeConfiguration",
            create_color_fields(self.tomb_config.colors),
        )

    def border_color(self) -> ui.Color:
        if self.focused:
            return ui.color_light(self.tomb_config)
        return ui.color_default(self.tomb_config)

    def get_color_theme(self) -> ColorTheme:
        """Return the theme as currently edited in the form."""
        theme = ColorTheme.builtin()
        attributes = {ident: attribute for ident, _, attribute in _THEME_FIELDS}
        for item in self.form.fields:
            attribute = attributes.get(item.id)
            if attribute is not None:
                setattr(theme, attribute, item.value)
        return theme

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.form.blur()
        self.focused = False

    def process_keyboard(self, event: KeyEvent, context: Optional[Context] = None) -> LoopEvent:
        """Up and Down move between fields; other keys go to the form."""
        if event.code == DOWN:
            self.form.tab(False)
            return LoopEvent.PROPAGATE
        if event.code == UP:
            self.form.tab(True)
            return LoopEvent.PROPAGATE
        return self.form.process_keyboard(event, context)