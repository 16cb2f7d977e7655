from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from ..domain.ports import UseCaseError
from ..domain.predicates import NameContainsKeywordsComparator, NameContainsKeywordsPredicate
from .commands import (
    KINDS,
    ClearCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
)

_SINGULAR = {kind[:-1]: kind for kind in KINDS}


def _invalid(usage: str) -> UseCaseError:
    return UseCaseError("INVALID_COMMAND", f"Invalid command format!\n{usage}")


@dataclass
class CommandParser:
    """Turn one line of user input into a ``Command``.

    ``ranking`` names the find-comparator strategy (see ``UserPrefs.find_ranking``).
    """

    ranking: str = "match_count"

    def __call__(self, text: str) -> Command:
        words = (text or "").split()
        if not words:
            raise UseCaseError("UNKNOWN_COMMAND", "Unknown command")
        word, args = words[0].lower(), words[1:]
        handlers: Dict[str, Callable[[List[str]], Command]] = {
            FindCommand.COMMAND_WORD: self._parse_find,
            ListCommand.COMMAND_WORD: self._parse_list,
            DeleteCommand.COMMAND_WORD: self._parse_delete,
            ClearCommand.COMMAND_WORD: lambda _args: ClearCommand(),
            ExitCommand.COMMAND_WORD: lambda _args: ExitCommand(),
        }
        handler = handlers.get(word)
        if handler is None:
            raise UseCaseError("UNKNOWN_COMMAND", "Unknown command")
        return handler(args)

    def _parse_find(self, args: List[str]) -> FindCommand:
        if not args:
            raise _invalid(FindCommand.MESSAGE_USAGE)
        keywords = tuple(args)
        return FindCommand(
            NameContainsKeywordsPredicate(keywords),
            NameContainsKeywordsComparator(keywords, self.ranking),
        )

    def _parse_list(self, args: List[str]) -> ListCommand:
        if not args:
            return ListCommand()
        if len(args) > 1:
            raise _invalid(ListCommand.MESSAGE_USAGE)
        kind = args[0].lower()
        kind = _SINGULAR.get(kind, kind)
        if kind not in (*KINDS, "all"):
            raise _invalid(ListCommand.MESSAGE_USAGE)
        return ListCommand(kind)

    def _parse_delete(self, args: List[str]) -> DeleteCommand:
        if len(args) != 2:
            raise _invalid(DeleteCommand.MESSAGE_USAGE)
        kind = args[0].lower()
        kind = _SINGULAR.get(kind, kind)
        index_text = args[1]
        if kind not in KINDS or not index_text.isdecimal() or int(index_text) <= 0:
            raise _invalid(DeleteCommand.MESSAGE_USAGE)
        return DeleteCommand(kind, int(index_text))


__all__ = ["CommandParser"]
