from __future__ import annotations

from pathlib import Path

import pytest

from cheesebook.domain.predicates import RANKINGS
from cheesebook.domain.user_prefs import DEFAULT_BOOK_PATH, RANKING_STRATEGIES, GuiSettings, UserPrefs


def test_defaults() -> None:
    prefs = UserPrefs()

    assert prefs.gui_settings == GuiSettings()
    assert prefs.cheese_book_file_path == DEFAULT_BOOK_PATH
    assert prefs.find_ranking == "match_count"


def test_copy_is_independent() -> None:
    prefs = UserPrefs()
    clone = prefs.copy()

    clone.cheese_book_file_path = Path("other.json")

    assert prefs.cheese_book_file_path == DEFAULT_BOOK_PATH


def test_reset_data_overwrites_all_fields() -> None:
    prefs = UserPrefs()
    other = UserPrefs(GuiSettings(640, 480), "x.json", "insertion")

    prefs.reset_data(other)

    assert prefs == other


def test_dict_round_trip() -> None:
    prefs = UserPrefs(GuiSettings(800, 600, 5, 6), Path("data") / "b.json", "alphabetical")

    assert UserPrefs.from_dict(prefs.to_dict()) == prefs


def test_from_dict_missing_keys_take_defaults() -> None:
    assert UserPrefs.from_dict({}) == UserPrefs()


@pytest.mark.parametrize(
    "payload",
    [{"theme": "dark"}, {"find_ranking": "random"}, {"gui_settings": {"width": 0, "height": 10}}, []],
)
def test_from_dict_rejects_bad_payloads(payload) -> None:
    with pytest.raises(ValueError):
        UserPrefs.from_dict(payload)


def test_every_ranking_strategy_is_accepted() -> None:
    assert set(RANKING_STRATEGIES) == set(RANKINGS)
    for ranking in RANKING_STRATEGIES:
        assert UserPrefs(find_ranking=ranking).find_ranking == ranking
