"""Table projections of the live filtered views for ``EntityTableView``.

Call context:
    ``App`` builds one ``EntityTableVM`` per entity kind and calls ``rows()``
    after every command, forwarding the result to the matching table widget.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Sequence, TypeVar

from cheesebook.domain.entities import Cheese, Customer, Order

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class CustomerRow:
    """Display row model consumed by the customers table."""
    index: int
    name: str
    phone: str
    email: str
    address: str


@dataclass
class OrderRow:
    """Display row model consumed by the orders table."""
    index: int
    order_id: str
    customer: str
    cheese_type: str
    quantity: str
    order_date: str
    status: str


@dataclass
class CheeseRow:
    """Display row model consumed by the cheeses table."""
    index: int
    cheese_id: str
    cheese_type: str
    manufacture_date: str
    expiry_date: str


def customer_row(index: int, customer: Customer) -> CustomerRow:
    return CustomerRow(
        index=index,
        name=customer.name.value,
        phone=customer.phone.value,
        email=customer.email.value,
        address=customer.address.value,
    )


def order_row(index: int, order: Order) -> OrderRow:
    return OrderRow(
        index=index,
        order_id=str(order.order_id),
        customer=order.customer.value,
        cheese_type=order.cheese_type.value,
        quantity=str(order.quantity),
        order_date=order.order_date.isoformat(),
        status="Completed" if order.completed else "Pending",
    )


def cheese_row(index: int, cheese: Cheese) -> CheeseRow:
    return CheeseRow(
        index=index,
        cheese_id=str(cheese.cheese_id),
        cheese_type=cheese.cheese_type.value,
        manufacture_date=cheese.manufacture_date.isoformat(),
        expiry_date=cheese.expiry_date.isoformat(),
    )


class EntityTableVM(Generic[T, R]):
    """
    Read-only view-model for one entity table.

    Holds the model's live filtered view and turns its current contents into
    rows numbered from 1, matching the indices that ``delete`` accepts.
    """

    def __init__(self, title: str, view: Sequence[T], to_row: Callable[[int, T], R]) -> None:
        self.title = title
        self._view = view
        self._to_row = to_row

    def rows(self) -> List[R]:
        return [self._to_row(index, item) for index, item in enumerate(list(self._view), start=1)]

    def count_label(self) -> str:
        return f"{self.title} ({len(self._view)})"


__all__ = [
    "CheeseRow",
    "CustomerRow",
    "EntityTableVM",
    "OrderRow",
    "cheese_row",
    "customer_row",
    "order_row",
]
