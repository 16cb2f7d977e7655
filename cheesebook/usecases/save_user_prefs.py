from __future__ import annotations
from dataclasses import dataclass
from ..domain.ports import StoragePort, UseCaseError
from ..domain.user_prefs import UserPrefs


@dataclass
class SaveUserPrefs:
    storage: StoragePort

    def __call__(self, prefs: UserPrefs) -> None:
        try:
            self.storage.save_user_prefs(prefs)
        except Exception as e:
            raise UseCaseError("SAVE_PREFS_FAILED", str(e))
