from __future__ import annotations

import pytest

from cheesebook.domain.entities import identity_of
from cheesebook.domain.errors import InvalidArgumentError
from cheesebook.domain.filtered_sorted_list import FilteredAndSortedList
from cheesebook.domain.predicates import compare_customers_by_name
from cheesebook.domain.unique_list import UniqueEntityList
from cheesebook.tests.helpers import ALICE, ALICIA, BOB, make_customer


def _backing(*items) -> UniqueEntityList:
    unique = UniqueEntityList("customer", identity_of)
    unique.set_all(items)
    return unique


def _by_name_desc(a, b) -> int:
    return -compare_customers_by_name(a, b)


def test_defaults_show_everything_in_backing_order() -> None:
    backing = _backing(BOB, ALICE, ALICIA)
    view = FilteredAndSortedList(backing.as_unmodifiable_view()).get_view()

    assert list(view) == [BOB, ALICE, ALICIA]


def test_view_tracks_backing_mutations() -> None:
    backing = _backing(ALICE)
    fsl = FilteredAndSortedList(backing.as_unmodifiable_view())
    view = fsl.get_view()

    backing.add(BOB)
    assert list(view) == [ALICE, BOB]

    backing.remove(ALICE)
    assert list(view) == [BOB]


def test_filter_then_sort() -> None:
    backing = _backing(BOB, ALICIA, ALICE)
    fsl = FilteredAndSortedList(backing.as_unmodifiable_view())

    fsl.set_predicate(lambda c: c.name.value.startswith("Ali"))
    fsl.set_comparator(compare_customers_by_name)

    assert list(fsl.get_view()) == [ALICE, ALICIA]


def test_changing_comparator_keeps_membership() -> None:
    backing = _backing(BOB, ALICIA, ALICE)
    fsl = FilteredAndSortedList(backing.as_unmodifiable_view())
    fsl.set_predicate(lambda c: c is not BOB)

    fsl.set_comparator(compare_customers_by_name)
    ascending = list(fsl.get_view())
    fsl.set_comparator(_by_name_desc)
    descending = list(fsl.get_view())

    assert set(ascending) == set(descending) == {ALICE, ALICIA}
    assert descending == list(reversed(ascending))


def test_changing_predicate_keeps_ordering_rule() -> None:
    carl = make_customer("Carl Kurz", "95352563")
    backing = _backing(carl, BOB, ALICE)
    fsl = FilteredAndSortedList(backing.as_unmodifiable_view())
    fsl.set_comparator(compare_customers_by_name)

    fsl.set_predicate(lambda c: c is not BOB)
    assert list(fsl.get_view()) == [ALICE, carl]

    fsl.set_predicate(lambda c: True)
    assert list(fsl.get_view()) == [ALICE, BOB, carl]


def test_sort_is_stable_for_ties() -> None:
    backing = _backing(BOB, ALICIA, ALICE)
    fsl = FilteredAndSortedList(backing.as_unmodifiable_view())

    fsl.set_comparator(lambda a, b: 0)

    assert list(fsl.get_view()) == [BOB, ALICIA, ALICE]


def test_none_predicate_or_comparator_is_rejected() -> None:
    fsl = FilteredAndSortedList(_backing(ALICE).as_unmodifiable_view())

    with pytest.raises(InvalidArgumentError):
        fsl.set_predicate(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        fsl.set_comparator(None)  # type: ignore[arg-type]
    assert list(fsl.get_view()) == [ALICE]


def test_view_is_read_only_sequence() -> None:
    fsl = FilteredAndSortedList(_backing(ALICE, BOB).as_unmodifiable_view())
    view = fsl.get_view()

    assert view[1] == BOB
    assert len(view) == 2
    assert view == [ALICE, BOB]
    with pytest.raises(TypeError):
        view[0] = BOB  # type: ignore[index]


def test_snapshot_is_detached() -> None:
    backing = _backing(ALICE)
    fsl = FilteredAndSortedList(backing.as_unmodifiable_view())

    snap = fsl.snapshot()
    backing.add(BOB)

    assert snap == [ALICE]
