from __future__ import annotations

from datetime import date
from typing import List

from .cheese_book import CheeseBook
from .entities import (
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

# Seed content for a first launch without a data file.


def sample_customers() -> List[Customer]:
    return [
        Customer(Name("Alex Yeoh"), Phone("87438807"), Email("alexyeoh@example.com"), Address("Blk 30 Geylang Street 29, #06-40")),
        Customer(Name("Bernice Yu"), Phone("99272758"), Email("berniceyu@example.com"), Address("Blk 30 Lorong 3 Serangoon Gardens, #07-18")),
        Customer(Name("Charlotte Oliveiro"), Phone("93210283"), Email("charlotte@example.com"), Address("Blk 11 Ang Mo Kio Street 74, #11-04")),
        Customer(Name("David Li"), Phone("91031282"), Email("lidavid@example.com"), Address("Blk 436 Serangoon Gardens Street 26, #16-43")),
    ]


def sample_cheeses() -> List[Cheese]:
    return [
        Cheese(CheeseId(1), CheeseType("Brie"), date(2026, 9, 1), date(2026, 12, 1)),
        Cheese(CheeseId(2), CheeseType("Camembert"), date(2026, 9, 12), date(2026, 11, 30)),
        Cheese(CheeseId(3), CheeseType("Feta"), date(2026, 10, 2), date(2027, 1, 2)),
    ]


def sample_orders() -> List[Order]:
    return [
        Order(OrderId(1), Phone("87438807"), CheeseType("Brie"), Quantity(2), date(2026, 10, 5)),
        Order(OrderId(2), Phone("93210283"), CheeseType("Feta"), Quantity(1), date(2026, 10, 9), completed=True),
    ]


def sample_cheese_book() -> CheeseBook:
    book = CheeseBook()
    book.set_customers(sample_customers())
    book.set_cheeses(sample_cheeses())
    book.set_orders(sample_orders())
    return book


__all__ = ["sample_cheese_book", "sample_cheeses", "sample_customers", "sample_orders"]
