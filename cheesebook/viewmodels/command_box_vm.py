from __future__ import annotations

import logging
from typing import Callable, Optional

from cheesebook.domain.ports import UseCaseError
from cheesebook.usecases.commands import CommandResult


class CommandBoxVM:
    """Holds command-box UI state: current text and last feedback. No I/O here.

    ``execute`` is the ``ExecuteCommand`` use case (or any callable with the
    same shape). Errors are turned into feedback text, never re-raised.
    """

    def __init__(
        self,
        execute: Callable[[str], CommandResult],
        *,
        on_feedback: Optional[Callable[[str, bool], None]] = None,
        on_exit: Optional[Callable[[], None]] = None,
    ) -> None:
        self._execute = execute
        self.on_feedback = on_feedback
        self.on_exit = on_exit
        self.text: str = ""
        self.feedback: str = ""
        self.is_error: bool = False
        self._log = logging.getLogger(__name__)

    def set_text(self, text: str) -> None:
        self.text = text or ""

    def submit(self, text: Optional[str] = None) -> Optional[CommandResult]:
        if text is not None:
            self.set_text(text)
        command_text = self.text.strip()
        if not command_text:
            return None

        try:
            result = self._execute(command_text)
        except UseCaseError as exc:
            self._log.info("Command '%s' failed [%s]: %s", command_text, exc.code, exc.message)
            self._publish(exc.message, is_error=True)
            return None

        self.text = ""
        self._publish(result.feedback, is_error=False)
        if result.exit and self.on_exit:
            self.on_exit()
        return result

    def _publish(self, feedback: str, *, is_error: bool) -> None:
        self.feedback = feedback
        self.is_error = is_error
        if self.on_feedback:
            self.on_feedback(feedback, is_error)


__all__ = ["CommandBoxVM"]
