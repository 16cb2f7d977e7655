from __future__ import annotations

from cheesebook.domain.cheese_book import CheeseBook
from cheesebook.domain.model_manager import ModelManager
from cheesebook.domain.predicates import NameContainsKeywordsComparator, NameContainsKeywordsPredicate
from cheesebook.usecases.commands import FindCommand
from cheesebook.tests.helpers import make_customer

ALICE = make_customer("Alice", "90000001")
BOB = make_customer("Bob", "90000002")
ALICIA = make_customer("Alicia", "90000003")


def _model() -> ModelManager:
    book = CheeseBook()
    book.set_customers([ALICE, BOB, ALICIA])
    return ModelManager(book)


def _find(*keywords: str, ranking: str = "match_count") -> FindCommand:
    return FindCommand(
        NameContainsKeywordsPredicate(keywords),
        NameContainsKeywordsComparator(keywords, ranking),
    )


def test_find_partial_keyword_lists_matching_customers() -> None:
    model = _model()

    result = _find("ali").execute(model)

    assert result.feedback == "2 customers listed!"
    assert list(model.filtered_customer_list) == [ALICE, ALICIA]


def test_find_no_match_lists_nothing() -> None:
    model = _model()

    result = _find("zzz").execute(model)

    assert result.feedback == "0 customers listed!"
    assert list(model.filtered_customer_list) == []


def test_find_is_case_insensitive_and_ranked_by_match_count() -> None:
    model = _model()

    result = _find("BOB", "alicia").execute(model)

    assert result.feedback == "2 customers listed!"
    assert list(model.filtered_customer_list) == [ALICIA, BOB]


def test_find_insertion_ranking_keeps_book_order() -> None:
    model = _model()

    _find("b", "ali", ranking="insertion").execute(model)

    assert list(model.filtered_customer_list) == [ALICE, BOB, ALICIA]


def test_find_does_not_touch_other_views_or_book() -> None:
    model = _model()

    _find("zzz").execute(model)

    assert list(model.cheese_book.customer_list) == [ALICE, BOB, ALICIA]


def test_find_commands_equal_by_predicate() -> None:
    first = _find("alice")
    same = _find("alice", ranking="alphabetical")
    other = _find("bob")

    assert first == first
    assert first == same
    assert first != other
    assert first != "find alice"
