from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import DomainError
from ..domain.ports import Model, StoragePort, UseCaseError
from .commands import CommandResult
from .error_mapping import map_domain_error
from .parse_command import CommandParser


@dataclass
class ExecuteCommand:
    """Use-case running one line of user input against the model.

    Parses the text, executes the command and then saves the book to the
    model's file path so every successful command is persisted.
    """

    model: Model
    storage: StoragePort
    parser: Optional[CommandParser] = None
    _log: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__), repr=False)

    def __call__(self, text: str) -> CommandResult:
        self._log.info("----------------[USER COMMAND][%s]", text)
        parser = self.parser or CommandParser(ranking=self.model.user_prefs.find_ranking)
        command = parser(text)
        try:
            result = command.execute(self.model)
        except DomainError as exc:
            raise map_domain_error(exc, default_code="COMMAND_FAILED") from exc

        try:
            self.storage.save_cheese_book(self.model.cheese_book, self.model.cheese_book_file_path)
        except OSError as exc:
            raise UseCaseError("SAVE_FAILED", f"Could not save data to file: {exc}") from exc
        self._log.debug("Result: %s", result.feedback)
        return result


__all__ = ["ExecuteCommand"]
