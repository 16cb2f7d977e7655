from __future__ import annotations

import pytest

from cheesebook.domain.entities import identity_of
from cheesebook.domain.errors import DuplicateEntityError, EntityNotFoundError, InvalidArgumentError
from cheesebook.domain.unique_list import UniqueEntityList
from cheesebook.tests.helpers import ALICE, ALICIA, BOB, make_customer


def _customers(*items) -> UniqueEntityList:
    unique = UniqueEntityList("customer", identity_of)
    for item in items:
        unique.add(item)
    return unique


def test_add_then_contains_and_size_grows_by_one() -> None:
    unique = _customers(ALICE)
    before = len(unique)

    unique.add(BOB)

    assert unique.contains(BOB)
    assert BOB in unique
    assert len(unique) == before + 1
    assert list(unique) == [ALICE, BOB]


def test_contains_matches_identity_not_equality() -> None:
    unique = _customers(ALICE)
    edited = make_customer("Alice Renamed", ALICE.phone.value)

    assert unique.contains(edited)


def test_in_operator_is_false_for_non_entities() -> None:
    unique = _customers(ALICE)

    assert "x" not in unique
    assert None not in unique
    assert 94351253 not in unique


def test_add_duplicate_identity_raises_and_leaves_list_unchanged() -> None:
    unique = _customers(ALICE, BOB)
    duplicate = make_customer("Someone Else", ALICE.phone.value)

    with pytest.raises(DuplicateEntityError):
        unique.add(duplicate)

    assert list(unique) == [ALICE, BOB]


def test_add_none_is_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError):
        _customers().add(None)


def test_set_entity_replaces_in_place() -> None:
    unique = _customers(ALICE, BOB, ALICIA)
    edited_bob = make_customer("Bob Choo Junior", BOB.phone.value)

    unique.set_entity(BOB, edited_bob)

    assert list(unique) == [ALICE, edited_bob, ALICIA]


def test_set_entity_may_change_identity_when_no_clash() -> None:
    unique = _customers(ALICE)
    moved = make_customer("Alice Pauline", "90001111")

    unique.set_entity(ALICE, moved)

    assert list(unique) == [moved]


def test_set_entity_missing_target_raises_not_found() -> None:
    unique = _customers(ALICE)

    with pytest.raises(EntityNotFoundError):
        unique.set_entity(BOB, BOB)

    assert list(unique) == [ALICE]


def test_set_entity_clash_with_other_element_raises_duplicate() -> None:
    unique = _customers(ALICE, BOB)
    clash = make_customer("Alice Pauline", BOB.phone.value)

    with pytest.raises(DuplicateEntityError):
        unique.set_entity(ALICE, clash)

    assert list(unique) == [ALICE, BOB]


def test_remove_existing_and_missing() -> None:
    unique = _customers(ALICE, BOB)

    unique.remove(make_customer("Different Name", ALICE.phone.value))
    assert list(unique) == [BOB]

    with pytest.raises(EntityNotFoundError):
        unique.remove(ALICE)
    assert list(unique) == [BOB]


def test_set_all_preserves_order_and_rejects_duplicates() -> None:
    unique = _customers(ALICE)

    unique.set_all([ALICIA, BOB])
    assert list(unique) == [ALICIA, BOB]

    with pytest.raises(DuplicateEntityError):
        unique.set_all([ALICE, make_customer("Clone", ALICE.phone.value)])
    assert list(unique) == [ALICIA, BOB]


def test_set_all_from_another_unique_list() -> None:
    source = _customers(BOB, ALICE)
    target = _customers(ALICIA)

    target.set_all(source)

    assert target == source
    assert target.as_unmodifiable_view() is not source.as_unmodifiable_view()


def test_unmodifiable_view_is_live_and_read_only() -> None:
    unique = _customers(ALICE)
    view = unique.as_unmodifiable_view()

    unique.add(BOB)
    unique.set_all([ALICIA])

    assert list(view) == [ALICIA]
    assert len(view) == 1
    assert not hasattr(view, "append")
    with pytest.raises(TypeError):
        view[0] = ALICE  # type: ignore[index]


def test_equality_and_hash_follow_contents() -> None:
    first = _customers(ALICE, BOB)
    second = _customers(ALICE, BOB)
    reordered = _customers(BOB, ALICE)

    assert first == second
    assert hash(first) == hash(second)
    assert first != reordered
