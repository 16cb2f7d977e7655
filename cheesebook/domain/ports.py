from __future__ import annotations
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from .entities import Cheese, Customer, Order
from .user_prefs import GuiSettings, UserPrefs

Predicate = Callable[[Any], bool]
Comparator = Callable[[Any, Any], int]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta


# ---- Read-only snapshot of the book ----
class ReadOnlyCheeseBook(Protocol):
    """Unmodifiable view of a book: three ordered entity sequences."""

    @property
    def customer_list(self) -> Sequence[Customer]: ...
    @property
    def order_list(self) -> Sequence[Order]: ...
    @property
    def cheese_list(self) -> Sequence[Cheese]: ...


# ---- Ports (Hexagonal boundaries) ----
class StoragePort(Protocol):
    """Persistence for the book and user preferences."""

    def load_cheese_book(self, path: Path) -> Optional[ReadOnlyCheeseBook]: ...
    def save_cheese_book(self, book: ReadOnlyCheeseBook, path: Path) -> None: ...
    def load_user_prefs(self) -> Optional[UserPrefs]: ...
    def save_user_prefs(self, prefs: UserPrefs) -> None: ...


class Model(Protocol):
    """Operations the command layer may perform on the in-memory model."""

    @property
    def user_prefs(self) -> UserPrefs: ...
    @property
    def gui_settings(self) -> GuiSettings: ...
    @property
    def cheese_book_file_path(self) -> Path: ...
    @property
    def cheese_book(self) -> ReadOnlyCheeseBook: ...
    def set_cheese_book(self, book: ReadOnlyCheeseBook) -> None: ...

    def has_customer(self, customer: Customer) -> bool: ...
    def add_customer(self, customer: Customer) -> None: ...
    def set_customer(self, target: Customer, edited: Customer) -> None: ...
    def delete_customer(self, target: Customer) -> None: ...

    def has_order(self, order: Order) -> bool: ...
    def add_order(self, order: Order) -> None: ...
    def set_order(self, target: Order, edited: Order) -> None: ...
    def delete_order(self, target: Order) -> None: ...

    def has_cheese(self, cheese: Cheese) -> bool: ...
    def add_cheese(self, cheese: Cheese) -> None: ...
    def set_cheese(self, target: Cheese, edited: Cheese) -> None: ...
    def delete_cheese(self, target: Cheese) -> None: ...

    @property
    def filtered_customer_list(self) -> Sequence[Customer]: ...
    @property
    def filtered_order_list(self) -> Sequence[Order]: ...
    @property
    def filtered_cheese_list(self) -> Sequence[Cheese]: ...
    def update_filtered_customer_list(self, predicate: Predicate) -> None: ...
    def update_filtered_order_list(self, predicate: Predicate) -> None: ...
    def update_filtered_cheese_list(self, predicate: Predicate) -> None: ...
    def update_sorted_customer_list(self, comparator: Comparator) -> None: ...
    def update_sorted_order_list(self, comparator: Comparator) -> None: ...
    def update_sorted_cheese_list(self, comparator: Comparator) -> None: ...
