from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..domain.cheese_book import CheeseBook
from ..domain.errors import DataLoadingError
from ..domain.ports import ReadOnlyCheeseBook, StoragePort
from ..domain.sample_data import sample_cheese_book

_log = logging.getLogger(__name__)


@dataclass
class LoadCheeseBook:
    """Load the start-up book: file contents, sample data, or an empty book."""

    storage: StoragePort

    def __call__(self, path: Path) -> ReadOnlyCheeseBook:
        try:
            loaded = self.storage.load_cheese_book(path)
        except DataLoadingError as exc:
            _log.warning("Data file at %s could not be loaded (%s). Starting with an empty CheeseBook", path, exc)
            return CheeseBook()
        if loaded is None:
            _log.info("Data file not found at %s. Starting with a sample CheeseBook", path)
            return sample_cheese_book()
        return loaded
