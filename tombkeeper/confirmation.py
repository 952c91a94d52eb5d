"""A yes/no dialog asking to confirm an action."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .events import BACKSPACE, ENTER, ESC, LEFT, RIGHT, TAB, KeyEvent, LoopEvent


class ConfirmationOption(enum.Enum):
    """The two answers of a confirmation dialog."""

    YES = "yes"
    NO = "no"


@dataclass
class ConfirmationDialog:
    """A question with a selectable answer, defaulting to no."""

    question: Optional[list[str]] = None
    selected: ConfirmationOption = ConfirmationOption.NO

    def toggle_selected(self) -> None:
        if self.selected is ConfirmationOption.NO:
            self.selected = ConfirmationOption.YES
        else:
            self.selected = ConfirmationOption.NO

    def execute(self) -> LoopEvent:
        return LoopEvent.PROPAGATE

    def choice(self) -> ConfirmationOption:
        return self.selected

    def set_question(self, question: Optional[list[str]]) -> LoopEvent:
        self.question = None if question is None else list(question)
        return LoopEvent.PROPAGATE

    def process_keyboard(self, event: KeyEvent) -> LoopEvent:
        """Tab and the arrows switch the answer; Enter confirms."""
        code = event.code
        if code in (TAB, LEFT, RIGHT):
            self.toggle_selected()
            return LoopEvent.PROPAGATE
        if code in (BACKSPACE, ESC):
            return LoopEvent.PROPAGATE
        if code == ENTER:
            return self.execute()
        if len(code) == 1:
            return LoopEvent.REFRESH
        return LoopEvent.PROPAGATE