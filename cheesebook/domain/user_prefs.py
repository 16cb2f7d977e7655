from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .predicates import RANKINGS

DEFAULT_BOOK_PATH = Path("data") / "cheesebook.json"
RANKING_STRATEGIES: tuple[str, ...] = tuple(RANKINGS)


@dataclass(frozen=True)
class GuiSettings:
    """Window geometry remembered between sessions."""

    width: int = 1000
    height: int = 700
    x: Optional[int] = None
    y: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"GuiSettings.{name} must be a positive integer.")


@dataclass
class UserPrefs:
    """Typed user preferences that persist via StorageLocal."""

    gui_settings: GuiSettings = field(default_factory=GuiSettings)
    cheese_book_file_path: Path = DEFAULT_BOOK_PATH
    find_ranking: str = "match_count"

    def __post_init__(self) -> None:
        self.cheese_book_file_path = Path(self.cheese_book_file_path)
        if self.find_ranking not in RANKING_STRATEGIES:
            raise ValueError(
                f"Unsupported find_ranking '{self.find_ranking}'. "
                f"Expected one of: {', '.join(RANKING_STRATEGIES)}"
            )

    def copy(self) -> "UserPrefs":
        return replace(self)

    def reset_data(self, other: "UserPrefs") -> None:
        if other is None:
            raise ValueError("UserPrefs.reset_data requires prefs.")
        self.gui_settings = other.gui_settings
        self.cheese_book_file_path = Path(other.cheese_book_file_path)
        self.find_ranking = other.find_ranking

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gui_settings": asdict(self.gui_settings),
            "cheese_book_file_path": self.cheese_book_file_path.as_posix(),
            "find_ranking": self.find_ranking,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "UserPrefs":
        """Build prefs from a persisted flat mapping; missing keys take defaults."""

        if not isinstance(payload, Mapping):
            raise ValueError("Preferences payload must be a mapping.")
        unknown = set(payload.keys()) - set(cls.__annotations__.keys())
        if unknown:
            raise ValueError(f"Unsupported preference keys: {', '.join(sorted(str(key) for key in unknown))}")

        defaults = cls()
        gui_raw = payload.get("gui_settings")
        if gui_raw is None:
            gui = defaults.gui_settings
        elif isinstance(gui_raw, Mapping):
            gui = GuiSettings(**dict(gui_raw))
        else:
            raise ValueError("gui_settings must be a mapping.")
        return cls(
            gui_settings=gui,
            cheese_book_file_path=Path(payload.get("cheese_book_file_path") or defaults.cheese_book_file_path),
            find_ranking=str(payload.get("find_ranking") or defaults.find_ranking),
        )


__all__ = ["DEFAULT_BOOK_PATH", "GuiSettings", "RANKING_STRATEGIES", "UserPrefs"]
