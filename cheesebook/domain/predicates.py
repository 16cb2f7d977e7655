"""Predicates and comparators applied to the filtered-and-sorted views.

Call context:
    ``ModelManager`` installs ``PREDICATE_SHOW_ALL`` and the default
    comparators whenever a list is reset; ``FindCommand`` installs a
    ``NameContainsKeywordsPredicate`` / ``NameContainsKeywordsComparator``
    pair built from the same keyword tuple.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Tuple

from .entities import Cheese, Customer, Order
from .filtered_sorted_list import keep_order, show_all

PREDICATE_SHOW_ALL = show_all


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_customers_by_name(a: Customer, b: Customer) -> int:
    return _cmp(a.name.value.lower(), b.name.value.lower())


def compare_orders_by_id(a: Order, b: Order) -> int:
    return _cmp(a.order_id.value, b.order_id.value)


def compare_cheeses_by_id(a: Cheese, b: Cheese) -> int:
    return _cmp(a.cheese_id.value, b.cheese_id.value)


COMPARATOR_NORMAL_CUSTOMER = compare_customers_by_name
COMPARATOR_NORMAL_ORDER = compare_orders_by_id
COMPARATOR_NORMAL_CHEESE = compare_cheeses_by_id


def _normalize_keywords(keywords: Iterable[str]) -> Tuple[str, ...]:
    cleaned = tuple(str(word).strip() for word in keywords)
    return tuple(word for word in cleaned if word)


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Tests that a customer's name contains any of the keywords (case-insensitive)."""

    keywords: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", _normalize_keywords(self.keywords))

    def matches(self, customer: Customer) -> int:
        """Return how many keywords occur in the customer's name."""
        name = customer.name.value.lower()
        return sum(1 for word in self.keywords if word.lower() in name)

    def __call__(self, customer: Customer) -> bool:
        return self.matches(customer) > 0


def _rank_by_match_count(predicate: NameContainsKeywordsPredicate) -> Callable[[Customer, Customer], int]:
    def compare(a: Customer, b: Customer) -> int:
        by_count = _cmp(predicate.matches(b), predicate.matches(a))
        return by_count or compare_customers_by_name(a, b)

    return compare


def _rank_alphabetically(_predicate: NameContainsKeywordsPredicate) -> Callable[[Customer, Customer], int]:
    return compare_customers_by_name


def _rank_by_insertion(_predicate: NameContainsKeywordsPredicate) -> Callable[[Customer, Customer], int]:
    return keep_order


RANKINGS: Dict[str, Callable[[NameContainsKeywordsPredicate], Callable[[Customer, Customer], int]]] = {
    "match_count": _rank_by_match_count,
    "alphabetical": _rank_alphabetically,
    "insertion": _rank_by_insertion,
}


@dataclass(frozen=True)
class NameContainsKeywordsComparator:
    """Orders customers by relevance to a keyword set.

    ``ranking`` selects the strategy:

    - ``match_count``: more matching keywords first, then by name;
    - ``alphabetical``: by name, ignoring case;
    - ``insertion``: keep the book's order.
    """

    keywords: Tuple[str, ...]
    ranking: str = "match_count"
    _compare: Callable[[Customer, Customer], int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.ranking not in RANKINGS:
            raise ValueError(f"Unknown ranking strategy '{self.ranking}'.")
        predicate = NameContainsKeywordsPredicate(self.keywords)
        object.__setattr__(self, "keywords", predicate.keywords)
        object.__setattr__(self, "_compare", RANKINGS[self.ranking](predicate))

    def __call__(self, a: Customer, b: Customer) -> int:
        return self._compare(a, b)


__all__ = [
    "COMPARATOR_NORMAL_CHEESE",
    "COMPARATOR_NORMAL_CUSTOMER",
    "COMPARATOR_NORMAL_ORDER",
    "NameContainsKeywordsComparator",
    "NameContainsKeywordsPredicate",
    "PREDICATE_SHOW_ALL",
    "RANKINGS",
    "compare_cheeses_by_id",
    "compare_customers_by_name",
    "compare_orders_by_id",
]
