"""Pydantic document models for the JSON book file.

Each ``Json*`` model mirrors one entity as flat JSON scalars. ``from_model``
converts a domain object into a document; ``to_model`` validates the document
and rebuilds the domain object, raising ``ValueError`` on illegal values.
"""

from __future__ import annotations

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..domain.cheese_book import CheeseBook
from ..domain.entities import (
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
from ..domain.ports import ReadOnlyCheeseBook


class JsonCustomer(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    phone: str
    email: str
    address: str

    @classmethod
    def from_model(cls, customer: Customer) -> "JsonCustomer":
        return cls(
            name=customer.name.value,
            phone=customer.phone.value,
            email=customer.email.value,
            address=customer.address.value,
        )

    def to_model(self) -> Customer:
        return Customer(Name(self.name), Phone(self.phone), Email(self.email), Address(self.address))


class JsonCheese(BaseModel):
    model_config = ConfigDict(extra="forbid")

    cheese_id: int = Field(..., gt=0)
    cheese_type: str
    manufacture_date: date
    expiry_date: date

    @classmethod
    def from_model(cls, cheese: Cheese) -> "JsonCheese":
        return cls(
            cheese_id=cheese.cheese_id.value,
            cheese_type=cheese.cheese_type.value,
            manufacture_date=cheese.manufacture_date,
            expiry_date=cheese.expiry_date,
        )

    def to_model(self) -> Cheese:
        return Cheese(
            CheeseId(self.cheese_id),
            CheeseType(self.cheese_type),
            self.manufacture_date,
            self.expiry_date,
        )


class JsonOrder(BaseModel):
    model_config = ConfigDict(extra="forbid")

    order_id: int = Field(..., gt=0)
    customer: str = Field(..., description="Phone number of the ordering customer")
    cheese_type: str
    quantity: int = Field(..., gt=0)
    order_date: date
    completed: bool = False

    @classmethod
    def from_model(cls, order: Order) -> "JsonOrder":
        return cls(
            order_id=order.order_id.value,
            customer=order.customer.value,
            cheese_type=order.cheese_type.value,
            quantity=order.quantity.value,
            order_date=order.order_date,
            completed=order.completed,
        )

    def to_model(self) -> Order:
        return Order(
            OrderId(self.order_id),
            Phone(self.customer),
            CheeseType(self.cheese_type),
            Quantity(self.quantity),
            self.order_date,
            completed=self.completed,
        )


class JsonCheeseBook(BaseModel):
    """Top-level document: ``{"customers": [...], "orders": [...], "cheeses": [...]}``."""

    model_config = ConfigDict(extra="forbid")

    customers: List[JsonCustomer] = Field(default_factory=list)
    orders: List[JsonOrder] = Field(default_factory=list)
    cheeses: List[JsonCheese] = Field(default_factory=list)

    @classmethod
    def from_model(cls, book: ReadOnlyCheeseBook) -> "JsonCheeseBook":
        return cls(
            customers=[JsonCustomer.from_model(c) for c in book.customer_list],
            orders=[JsonOrder.from_model(o) for o in book.order_list],
            cheeses=[JsonCheese.from_model(c) for c in book.cheese_list],
        )

    def to_model(self) -> CheeseBook:
        """Rebuild a book; duplicates raise ``DuplicateEntityError``."""
        book = CheeseBook()
        book.set_customers([c.to_model() for c in self.customers])
        book.set_orders([o.to_model() for o in self.orders])
        book.set_cheeses([c.to_model() for c in self.cheeses])
        return book


__all__ = ["JsonCheese", "JsonCheeseBook", "JsonCustomer", "JsonOrder"]
