"""Aggregate root that owns the customer, order and cheese collections.

``ModelManager`` wraps one ``CheeseBook`` per session; the JSON storage
adapter produces and consumes it through the ``ReadOnlyCheeseBook`` protocol.
Duplicates are not allowed within a kind (by ``identity_key`` comparison).
"""

from __future__ import annotations

from typing import Iterable, Optional

from .entities import Cheese, Customer, Order, identity_of
from .errors import require_not_none
from .ports import ReadOnlyCheeseBook
from .unique_list import ReadOnlyListView, UniqueEntityList


class CheeseBook:
    """Wraps all data at the book level."""

    def __init__(self, snapshot: Optional[ReadOnlyCheeseBook] = None) -> None:
        self._customers: UniqueEntityList[Customer] = UniqueEntityList("customer", identity_of)
        self._orders: UniqueEntityList[Order] = UniqueEntityList("order", identity_of)
        self._cheeses: UniqueEntityList[Cheese] = UniqueEntityList("cheese", identity_of)
        if snapshot is not None:
            self.reset_data(snapshot)

    @classmethod
    def from_snapshot(cls, snapshot: ReadOnlyCheeseBook) -> "CheeseBook":
        """Create a book holding copies of the snapshot's three lists."""
        require_not_none(snapshot, "snapshot")
        return cls(snapshot)

    # ---- list overwrite operations ----
    def set_customers(self, customers: Iterable[Customer]) -> None:
        self._customers.set_all(customers)

    def set_orders(self, orders: Iterable[Order]) -> None:
        self._orders.set_all(orders)

    def set_cheeses(self, cheeses: Iterable[Cheese]) -> None:
        self._cheeses.set_all(cheeses)

    def reset_data(self, snapshot: ReadOnlyCheeseBook) -> None:
        """Replace all three lists with the snapshot's contents.

        Every list is checked for duplicates before anything is written, so a
        bad snapshot leaves the book untouched.
        """
        require_not_none(snapshot, "snapshot")
        customers = list(snapshot.customer_list)
        orders = list(snapshot.order_list)
        cheeses = list(snapshot.cheese_list)

        self._customers.check_unique(customers)
        self._orders.check_unique(orders)
        self._cheeses.check_unique(cheeses)

        self._customers.set_all(customers)
        self._orders.set_all(orders)
        self._cheeses.set_all(cheeses)

    # ---- customer-level operations ----
    def has_customer(self, customer: Customer) -> bool:
        return self._customers.contains(customer)

    def add_customer(self, customer: Customer) -> None:
        self._customers.add(customer)

    def set_customer(self, target: Customer, edited: Customer) -> None:
        self._customers.set_entity(target, edited)

    def remove_customer(self, key: Customer) -> None:
        self._customers.remove(key)

    # ---- order-level operations ----
    def has_order(self, order: Order) -> bool:
        return self._orders.contains(order)

    def add_order(self, order: Order) -> None:
        self._orders.add(order)

    def set_order(self, target: Order, edited: Order) -> None:
        self._orders.set_entity(target, edited)

    def remove_order(self, key: Order) -> None:
        self._orders.remove(key)

    # ---- cheese-level operations ----
    def has_cheese(self, cheese: Cheese) -> bool:
        return self._cheeses.contains(cheese)

    def add_cheese(self, cheese: Cheese) -> None:
        self._cheeses.add(cheese)

    def set_cheese(self, target: Cheese, edited: Cheese) -> None:
        self._cheeses.set_entity(target, edited)

    def remove_cheese(self, key: Cheese) -> None:
        self._cheeses.remove(key)

    # ---- ReadOnlyCheeseBook ----
    @property
    def customer_list(self) -> ReadOnlyListView[Customer]:
        return self._customers.as_unmodifiable_view()

    @property
    def order_list(self) -> ReadOnlyListView[Order]:
        return self._orders.as_unmodifiable_view()

    @property
    def cheese_list(self) -> ReadOnlyListView[Cheese]:
        return self._cheeses.as_unmodifiable_view()

    # ---- util methods ----
    def __str__(self) -> str:
        return f"{len(self._customers)} customers, {len(self._cheeses)} cheeses, {len(self._orders)} orders"

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, CheeseBook):
            return NotImplemented
        return (
            self._customers == other._customers
            and self._cheeses == other._cheeses
            and self._orders == other._orders
        )

    def __hash__(self) -> int:
        return hash(self._customers)


__all__ = ["CheeseBook"]
