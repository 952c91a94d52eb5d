"""The panel showing where the key, secrets and log files live."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from .config import TombConfig
from .events import DOWN, UP, Context, KeyEvent, LoopEvent
from .fields import TextField
from .form import Form
from . import ui


def create_location_fields(config: TombConfig) -> list[TextField]:
    """Return read-only fields for the key, tomb and log file names."""
    return [
        TextField(id=name, title=name, value=getattr(config, name), read_only=True, visible=True)
        for name in ("key_filename", "tomb_filename", "log_filename")
    ]


@dataclass
class TombConfiguration:
    """A form listing the file locations of a configuration."""

    tomb_config: TombConfig
    form: Form = field(init=False)
    focused: bool = field(default=False, init=False)

    tab_index: ClassVar[int] = 0

    def __post_init__(self) -> None:
        self.form = Form(
            "TombConfiguration",
            "Tomb TombConfiguration",
            create_location_fields(self.tomb_config),
        )

    def border_color(self) -> ui.Color:
        if self.focused:
            return ui.color_light(self.tomb_config)
        return ui.color_default(self.tomb_config)

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False
        self.form.blur()

    def process_keyboard(self, event: KeyEvent, context: Optional[Context] = None) -> LoopEvent:
        """Up and Down move between fields; other keys go to the form."""
        if event.code == DOWN:
            self.form.tab(False)
            return LoopEvent.PROPAGATE
        if event.code == UP:
            self.form.tab(True)
            return LoopEvent.PROPAGATE
        return self.form.process_keyboard(event, context)