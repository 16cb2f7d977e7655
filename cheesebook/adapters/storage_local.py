from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from cheesebook.adapters.json_models import JsonCheeseBook
from cheesebook.domain.errors import DataLoadingError, DuplicateEntityError
from cheesebook.domain.ports import ReadOnlyCheeseBook, StoragePort
from cheesebook.domain.user_prefs import UserPrefs

PathLike = Union[str, Path]


class StorageLocal(StoragePort):
    """Local filesystem storage for the book and user prefs (JSON)."""

    PREFS_FILENAME = "preferences.json"

    def __init__(self, root_dir: PathLike = ".") -> None:
        self.root = Path(root_dir)
        self._log = logging.getLogger(__name__)

    # ---- Book (JSON document) ----
    def load_cheese_book(self, path: PathLike) -> Optional[ReadOnlyCheeseBook]:
        """Return the book stored at ``path`` or ``None`` when no file exists."""
        full = self._resolve(path)
        if not full.exists():
            return None
        try:
            with full.open("r", encoding="utf-8") as f:
                payload = json.load(f)
            document = JsonCheeseBook.model_validate(payload)
            book = document.to_model()
        except (OSError, json.JSONDecodeError, ValidationError, ValueError, TypeError) as exc:
            raise DataLoadingError(f"Illegal values found in {full}: {exc}", path=str(full)) from exc
        except DuplicateEntityError as exc:
            raise DataLoadingError(f"Duplicate entries found in {full}: {exc}", path=str(full)) from exc
        self._log.info("Loaded %s from %s", book, full)
        return book

    def save_cheese_book(self, book: ReadOnlyCheeseBook, path: PathLike) -> None:
        full = self._resolve(path)
        document = JsonCheeseBook.from_model(book)
        self._write_json(full, document.model_dump(mode="json"))
        self._log.debug("Saved cheese book to %s", full)

    # ---- User prefs (JSON) ----
    def load_user_prefs(self) -> Optional[UserPrefs]:
        path = self.root / self.PREFS_FILENAME
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                return UserPrefs.from_dict(json.load(f))
        except (OSError, json.JSONDecodeError, ValueError, TypeError) as exc:
            raise DataLoadingError(f"Preferences file at {path} is not in the correct format: {exc}", path=str(path)) from exc

    def save_user_prefs(self, prefs: UserPrefs) -> None:
        self._write_json(self.root / self.PREFS_FILENAME, prefs.to_dict())

    # ---- Helpers ----
    def _resolve(self, path: PathLike) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self.root / candidate

    @staticmethod
    def _write_json(path: Path, payload) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp, path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
