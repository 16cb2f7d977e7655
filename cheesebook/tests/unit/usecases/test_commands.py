from __future__ import annotations

from dataclasses import fields

import pytest

from cheesebook.domain.model_manager import ModelManager
from cheesebook.domain.ports import UseCaseError
from cheesebook.domain.predicates import NameContainsKeywordsPredicate
from cheesebook.domain.sample_data import sample_cheese_book
from cheesebook.usecases.commands import ClearCommand, CommandResult, DeleteCommand, ExitCommand, ListCommand


def _model() -> ModelManager:
    return ModelManager(sample_cheese_book())


def test_list_customers_resets_filter_and_sorts_by_name() -> None:
    model = _model()
    model.update_filtered_customer_list(NameContainsKeywordsPredicate(("bernice",)))

    result = ListCommand("customers").execute(model)

    names = [c.name.value for c in model.filtered_customer_list]
    assert result.feedback == "Listed all customers"
    assert names == sorted(names, key=str.lower)
    assert len(names) == 4


def test_list_all_resets_every_view() -> None:
    model = _model()
    model.update_filtered_order_list(lambda o: False)
    model.update_filtered_cheese_list(lambda c: False)

    result = ListCommand().execute(model)

    assert result.feedback == "Listed all entries"
    assert len(model.filtered_order_list) == 2
    assert len(model.filtered_cheese_list) == 3


def test_list_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        ListCommand("wines")


def test_delete_uses_displayed_index() -> None:
    model = _model()
    model.update_filtered_customer_list(NameContainsKeywordsPredicate(("david",)))

    result = DeleteCommand("customers", 1).execute(model)

    assert result.feedback.startswith("Deleted customer: David Li")
    assert len(model.cheese_book.customer_list) == 3


def test_delete_order_and_cheese() -> None:
    model = _model()

    DeleteCommand("orders", 2).execute(model)
    DeleteCommand("cheeses", 1).execute(model)

    assert [o.order_id.value for o in model.cheese_book.order_list] == [1]
    assert [c.cheese_id.value for c in model.cheese_book.cheese_list] == [2, 3]


def test_delete_out_of_range_raises_invalid_index() -> None:
    model = _model()
    model.update_filtered_cheese_list(lambda c: False)

    with pytest.raises(UseCaseError) as excinfo:
        DeleteCommand("cheeses", 1).execute(model)

    assert excinfo.value.code == "INVALID_INDEX"
    assert len(model.cheese_book.cheese_list) == 3


def test_clear_and_exit() -> None:
    model = _model()

    assert ClearCommand().execute(model).feedback == "Cheese book has been cleared!"
    assert len(model.filtered_customer_list) == 0
    assert ExitCommand().execute(model).exit is True


def test_command_result_carries_feedback_and_exit_only() -> None:
    result = ListCommand().execute(_model())

    assert [f.name for f in fields(CommandResult)] == ["feedback", "exit"]
    assert result.exit is False
