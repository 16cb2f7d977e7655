from __future__ import annotations

"""Domain value objects and entities shared across storage, use-cases, and view models.

Every entity exposes two notions of sameness:

- ``identity_key()``: the key that decides whether two records describe the
  same real-world customer, order or cheese (used for duplicate detection and
  for locating the record to replace during edits);
- ``==``: full-field dataclass equality.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Hashable, Tuple

_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 ]*$")
_PHONE_RE = re.compile(r"^\d{3,}$")
_EMAIL_RE = re.compile(r"^[A-Za-z0-9+_.\-]+@[A-Za-z0-9]([A-Za-z0-9\-]*[A-Za-z0-9])?(\.[A-Za-z0-9]([A-Za-z0-9\-]*[A-Za-z0-9])?)*$")

CHEESE_TYPES: Tuple[str, ...] = (
    "Brie",
    "Camembert",
    "Cheddar",
    "Feta",
    "Mozzarella",
    "Parmesan",
)


@dataclass(frozen=True)
class Name:
    """Customer name; alphanumerics and spaces only."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("Name expects a string.")
        cleaned = self.value.strip()
        if not _NAME_RE.match(cleaned):
            raise ValueError("Names should only contain alphanumeric characters and spaces, and it should not be blank")
        object.__setattr__(self, "value", cleaned)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    """Phone number; digits only, at least three of them."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("Phone expects a string.")
        cleaned = self.value.strip()
        if not _PHONE_RE.match(cleaned):
            raise ValueError("Phone numbers should only contain numbers, and it should be at least 3 digits long")
        object.__setattr__(self, "value", cleaned)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """Email address in ``local-part@domain`` form."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("Email expects a string.")
        cleaned = self.value.strip()
        if not _EMAIL_RE.match(cleaned):
            raise ValueError("Emails should be of the format local-part@domain")
        object.__setattr__(self, "value", cleaned)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Addresses can take any values, and it should not be blank")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CheeseType:
    """One of the cheese varieties the shop stocks."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("CheeseType expects a string.")
        lookup = {name.lower(): name for name in CHEESE_TYPES}
        canonical = lookup.get(self.value.strip().lower())
        if canonical is None:
            raise ValueError(f"Cheese type should be one of: {', '.join(CHEESE_TYPES)}")
        object.__setattr__(self, "value", canonical)

    def __str__(self) -> str:
        return self.value


def _positive_int(cls_name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{cls_name} expects an integer.")
    if value <= 0:
        raise ValueError(f"{cls_name} must be a positive integer.")
    return value


@dataclass(frozen=True)
class CheeseId:
    value: int

    def __post_init__(self) -> None:
        _positive_int("CheeseId", self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrderId:
    value: int

    def __post_init__(self) -> None:
        _positive_int("OrderId", self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Quantity:
    value: int

    def __post_init__(self) -> None:
        _positive_int("Quantity", self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Customer:
    """A customer of the shop; identified by phone number."""

    name: Name
    """Display name, searched by the find command."""
    phone: Phone
    """Contact number; two customers with the same phone are the same customer."""
    email: Email
    address: Address

    def identity_key(self) -> Hashable:
        return ("customer", self.phone.value)

    def is_same_customer(self, other: "Customer") -> bool:
        return other is not None and self.identity_key() == other.identity_key()


@dataclass(frozen=True)
class Cheese:
    """A single cheese inventory item."""

    cheese_id: CheeseId
    """Stock number; unique within the book."""
    cheese_type: CheeseType
    manufacture_date: date
    expiry_date: date

    def __post_init__(self) -> None:
        if not isinstance(self.manufacture_date, date) or not isinstance(self.expiry_date, date):
            raise TypeError("Cheese dates must be date instances.")
        if self.expiry_date < self.manufacture_date:
            raise ValueError("Cheese expiry date cannot be before its manufacture date.")

    def identity_key(self) -> Hashable:
        return ("cheese", self.cheese_id.value)

    def is_same_cheese(self, other: "Cheese") -> bool:
        return other is not None and self.identity_key() == other.identity_key()


@dataclass(frozen=True)
class Order:
    """An order placed by a customer for a quantity of one cheese type."""

    order_id: OrderId
    """Order number; unique within the book."""
    customer: Phone
    """Phone number of the ordering customer."""
    cheese_type: CheeseType
    quantity: Quantity
    order_date: date
    completed: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.order_date, date):
            raise TypeError("Order.order_date must be a date instance.")
        object.__setattr__(self, "completed", bool(self.completed))

    def identity_key(self) -> Hashable:
        return ("order", self.order_id.value)

    def is_same_order(self, other: "Order") -> bool:
        return other is not None and self.identity_key() == other.identity_key()


def identity_of(entity) -> Hashable:
    """Identity-key function usable for any of the three entity kinds."""
    return entity.identity_key()


__all__ = [
    "Address",
    "CHEESE_TYPES",
    "Cheese",
    "CheeseId",
    "CheeseType",
    "Customer",
    "Email",
    "Name",
    "Order",
    "OrderId",
    "Phone",
    "Quantity",
    "identity_of",
]
