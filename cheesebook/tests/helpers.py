from __future__ import annotations

from datetime import date

from cheesebook.domain.entities import (
    Address,
    Cheese,
    CheeseId,
    CheeseType,
    Customer,
    Email,
    Name,
    Order,
    OrderId,
    Phone,
    Quantity,
)


def make_customer(name: str, phone: str = "91234567", email: str | None = None, address: str = "1 Cheese Lane") -> Customer:
    local = name.lower().replace(" ", "")
    return Customer(Name(name), Phone(phone), Email(email or f"{local}@example.com"), Address(address))


def make_cheese(cheese_id: int, cheese_type: str = "Brie") -> Cheese:
    return Cheese(CheeseId(cheese_id), CheeseType(cheese_type), date(2026, 9, 1), date(2026, 12, 1))


def make_order(order_id: int, customer: str = "91234567", cheese_type: str = "Feta", quantity: int = 1) -> Order:
    return Order(OrderId(order_id), Phone(customer), CheeseType(cheese_type), Quantity(quantity), date(2026, 10, 1))


ALICE = make_customer("Alice Pauline", "94351253")
BOB = make_customer("Bob Choo", "98765432")
ALICIA = make_customer("Alicia Tan", "95352563")


__all__ = ["ALICE", "ALICIA", "BOB", "make_cheese", "make_customer", "make_order"]
