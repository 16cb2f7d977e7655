"""Domain package exports for entities, the book aggregate and its views."""

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
from .errors import (
    DataLoadingError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from .filtered_sorted_list import FilteredAndSortedList
from .model_manager import ModelManager
from .unique_list import UniqueEntityList
from .user_prefs import GuiSettings, UserPrefs

__all__ = [
    "Address",
    "Cheese",
    "CheeseBook",
    "CheeseId",
    "CheeseType",
    "Customer",
    "DataLoadingError",
    "DuplicateEntityError",
    "Email",
    "EntityNotFoundError",
    "FilteredAndSortedList",
    "GuiSettings",
    "InvalidArgumentError",
    "ModelManager",
    "Name",
    "Order",
    "OrderId",
    "Phone",
    "Quantity",
    "UniqueEntityList",
    "UserPrefs",
]
