"""Executable commands produced by ``CommandParser``.

Each command mutates or re-filters the ``Model`` and returns a
``CommandResult`` whose feedback text is shown under the command box.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..domain.cheese_book import CheeseBook
from ..domain.ports import Model, UseCaseError
from ..domain.predicates import (
    COMPARATOR_NORMAL_CHEESE,
    COMPARATOR_NORMAL_CUSTOMER,
    COMPARATOR_NORMAL_ORDER,
    PREDICATE_SHOW_ALL,
    NameContainsKeywordsComparator,
    NameContainsKeywordsPredicate,
)

KINDS = ("customers", "orders", "cheeses")

MESSAGE_CUSTOMERS_LISTED_OVERVIEW = "{count} customers listed!"
MESSAGE_LISTED = "Listed all {kind}"
MESSAGE_DELETED = "Deleted {kind}: {entity}"
MESSAGE_CLEARED = "Cheese book has been cleared!"
MESSAGE_EXIT = "Exiting CheeseBook as requested ..."


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command for the command box and app shell."""

    feedback: str
    exit: bool = False


class Command:
    """Base class for commands; subclasses implement ``execute``."""

    def execute(self, model: Model) -> CommandResult:
        raise NotImplementedError("Command subclasses must implement execute().")


@dataclass(frozen=True, eq=False)
class FindCommand(Command):
    """Lists customers whose name contains any keyword, ranked by the comparator."""

    predicate: NameContainsKeywordsPredicate
    comparator: NameContainsKeywordsComparator

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all customers whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob charlie"
    )

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_customer_list(self.predicate)
        model.update_sorted_customer_list(self.comparator)
        count = len(model.filtered_customer_list)
        return CommandResult(MESSAGE_CUSTOMERS_LISTED_OVERVIEW.format(count=count))

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, FindCommand):
            return NotImplemented
        return self.predicate == other.predicate

    def __hash__(self) -> int:
        return hash(self.predicate)


@dataclass(frozen=True)
class ListCommand(Command):
    """Shows every entity of a kind (or all kinds) in default order."""

    kind: str = "all"

    COMMAND_WORD = "list"
    MESSAGE_USAGE = "list: Lists all entries.\nParameters: [customers|orders|cheeses|all]\nExample: list orders"

    def __post_init__(self) -> None:
        if self.kind not in (*KINDS, "all"):
            raise ValueError(f"Unknown list kind '{self.kind}'.")

    def execute(self, model: Model) -> CommandResult:
        kinds = KINDS if self.kind == "all" else (self.kind,)
        if "customers" in kinds:
            model.update_filtered_customer_list(PREDICATE_SHOW_ALL)
            model.update_sorted_customer_list(COMPARATOR_NORMAL_CUSTOMER)
        if "orders" in kinds:
            model.update_filtered_order_list(PREDICATE_SHOW_ALL)
            model.update_sorted_order_list(COMPARATOR_NORMAL_ORDER)
        if "cheeses" in kinds:
            model.update_filtered_cheese_list(PREDICATE_SHOW_ALL)
            model.update_sorted_cheese_list(COMPARATOR_NORMAL_CHEESE)
        label = "entries" if self.kind == "all" else self.kind
        return CommandResult(MESSAGE_LISTED.format(kind=label))


@dataclass(frozen=True)
class DeleteCommand(Command):
    """Deletes the entity at a 1-based index of the displayed list."""

    kind: str
    index: int

    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the entry identified by the index number used in the displayed list.\n"
        "Parameters: customer|order|cheese INDEX (must be a positive integer)\n"
        "Example: delete customer 1"
    )

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"Unknown delete kind '{self.kind}'.")
        if self.index <= 0:
            raise ValueError("Index must be a positive integer.")

    def execute(self, model: Model) -> CommandResult:
        shown: Sequence = {
            "customers": model.filtered_customer_list,
            "orders": model.filtered_order_list,
            "cheeses": model.filtered_cheese_list,
        }[self.kind]
        current = list(shown)
        if self.index > len(current):
            raise UseCaseError("INVALID_INDEX", f"The {self.kind[:-1]} index provided is invalid")
        target = current[self.index - 1]
        if self.kind == "customers":
            model.delete_customer(target)
        elif self.kind == "orders":
            model.delete_order(target)
        else:
            model.delete_cheese(target)
        return CommandResult(MESSAGE_DELETED.format(kind=self.kind[:-1], entity=_describe(target)))


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD = "clear"

    def execute(self, model: Model) -> CommandResult:
        model.set_cheese_book(CheeseBook())
        return CommandResult(MESSAGE_CLEARED)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD = "exit"

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(MESSAGE_EXIT, exit=True)


def _describe(entity) -> str:
    name = getattr(entity, "name", None)
    if name is not None:
        return f"{name} ({entity.phone})"
    order_id = getattr(entity, "order_id", None)
    if order_id is not None:
        return f"order #{order_id} ({entity.quantity} x {entity.cheese_type})"
    return f"cheese #{entity.cheese_id} ({entity.cheese_type})"


__all__ = [
    "ClearCommand",
    "Command",
    "CommandResult",
    "DeleteCommand",
    "ExitCommand",
    "FindCommand",
    "KINDS",
    "ListCommand",
    "MESSAGE_CUSTOMERS_LISTED_OVERVIEW",
]
