"""In-memory model of the book data plus the three presentation views.

Call context:
    ``cheesebook.app.main.App`` builds one ``ModelManager`` per session from
    the loaded book and preferences. Commands receive it as their ``Model``
    and the table view models read its filtered lists.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from .cheese_book import CheeseBook
from .entities import Cheese, Customer, Order
from .errors import require_not_none
from .filtered_sorted_list import FilteredAndSortedList, FilteredSortedView
from .ports import ReadOnlyCheeseBook
from .predicates import (
    COMPARATOR_NORMAL_CHEESE,
    COMPARATOR_NORMAL_CUSTOMER,
    COMPARATOR_NORMAL_ORDER,
    PREDICATE_SHOW_ALL,
)
from .user_prefs import GuiSettings, UserPrefs

_log = logging.getLogger(__name__)


class ModelManager:
    """Query facade over one ``CheeseBook`` and its filtered/sorted views."""

    def __init__(
        self,
        cheese_book: Optional[ReadOnlyCheeseBook] = None,
        user_prefs: Optional[UserPrefs] = None,
    ) -> None:
        source = cheese_book if cheese_book is not None else CheeseBook()
        prefs = user_prefs if user_prefs is not None else UserPrefs()
        _log.debug("Initializing with cheese book: %s and user prefs %s", source, prefs)

        self._book = CheeseBook.from_snapshot(source)
        self._prefs = prefs.copy()
        self._customers: FilteredAndSortedList[Customer] = FilteredAndSortedList(self._book.customer_list)
        self._orders: FilteredAndSortedList[Order] = FilteredAndSortedList(self._book.order_list)
        self._cheeses: FilteredAndSortedList[Cheese] = FilteredAndSortedList(self._book.cheese_list)

    # ------------------------------------------------------------------
    # User prefs
    # ------------------------------------------------------------------
    @property
    def user_prefs(self) -> UserPrefs:
        return self._prefs

    def set_user_prefs(self, prefs: UserPrefs) -> None:
        self._prefs.reset_data(require_not_none(prefs, "user prefs"))

    @property
    def gui_settings(self) -> GuiSettings:
        return self._prefs.gui_settings

    def set_gui_settings(self, settings: GuiSettings) -> None:
        self._prefs.gui_settings = require_not_none(settings, "gui settings")

    @property
    def cheese_book_file_path(self) -> Path:
        return self._prefs.cheese_book_file_path

    def set_cheese_book_file_path(self, path: Path) -> None:
        self._prefs.cheese_book_file_path = Path(require_not_none(path, "cheese book file path"))

    # ------------------------------------------------------------------
    # Book
    # ------------------------------------------------------------------
    @property
    def cheese_book(self) -> CheeseBook:
        return self._book

    def set_cheese_book(self, book: ReadOnlyCheeseBook) -> None:
        self._book.reset_data(book)

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------
    def has_customer(self, customer: Customer) -> bool:
        return self._book.has_customer(customer)

    def add_customer(self, customer: Customer) -> None:
        self._book.add_customer(customer)
        self.update_filtered_customer_list(PREDICATE_SHOW_ALL)
        self.update_sorted_customer_list(COMPARATOR_NORMAL_CUSTOMER)

    def set_customer(self, target: Customer, edited: Customer) -> None:
        self._book.set_customer(target, edited)

    def delete_customer(self, target: Customer) -> None:
        self._book.remove_customer(target)

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------
    def has_order(self, order: Order) -> bool:
        return self._book.has_order(order)

    def add_order(self, order: Order) -> None:
        self._book.add_order(order)
        self.update_filtered_order_list(PREDICATE_SHOW_ALL)
        self.update_sorted_order_list(COMPARATOR_NORMAL_ORDER)

    def set_order(self, target: Order, edited: Order) -> None:
        self._book.set_order(target, edited)

    def delete_order(self, target: Order) -> None:
        self._book.remove_order(target)

    # ------------------------------------------------------------------
    # Cheeses
    # ------------------------------------------------------------------
    def has_cheese(self, cheese: Cheese) -> bool:
        return self._book.has_cheese(cheese)

    def add_cheese(self, cheese: Cheese) -> None:
        self._book.add_cheese(cheese)
        self.update_filtered_cheese_list(PREDICATE_SHOW_ALL)
        self.update_sorted_cheese_list(COMPARATOR_NORMAL_CHEESE)

    def set_cheese(self, target: Cheese, edited: Cheese) -> None:
        self._book.set_cheese(target, edited)

    def delete_cheese(self, target: Cheese) -> None:
        self._book.remove_cheese(target)

    # ------------------------------------------------------------------
    # Filtered/sorted views
    # ------------------------------------------------------------------
    @property
    def filtered_customer_list(self) -> FilteredSortedView[Customer]:
        """Unmodifiable live view of the customers currently on display."""
        return self._customers.get_view()

    @property
    def filtered_order_list(self) -> FilteredSortedView[Order]:
        return self._orders.get_view()

    @property
    def filtered_cheese_list(self) -> FilteredSortedView[Cheese]:
        return self._cheeses.get_view()

    def update_filtered_customer_list(self, predicate: Callable[[Customer], bool]) -> None:
        self._customers.set_predicate(predicate)

    def update_filtered_order_list(self, predicate: Callable[[Order], bool]) -> None:
        self._orders.set_predicate(predicate)

    def update_filtered_cheese_list(self, predicate: Callable[[Cheese], bool]) -> None:
        self._cheeses.set_predicate(predicate)

    def update_sorted_customer_list(self, comparator: Callable[[Customer, Customer], int]) -> None:
        self._customers.set_comparator(comparator)

    def update_sorted_order_list(self, comparator: Callable[[Order, Order], int]) -> None:
        self._orders.set_comparator(comparator)

    def update_sorted_cheese_list(self, comparator: Callable[[Cheese, Cheese], int]) -> None:
        self._cheeses.set_comparator(comparator)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._book == other._book
            and self._prefs == other._prefs
            and self._customers == other._customers
            and self._orders == other._orders
            and self._cheeses == other._cheeses
        )

    __hash__ = None  # type: ignore[assignment]


__all__ = ["ModelManager"]
