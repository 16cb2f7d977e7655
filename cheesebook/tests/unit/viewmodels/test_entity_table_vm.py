from __future__ import annotations

from cheesebook.domain.model_manager import ModelManager
from cheesebook.domain.predicates import NameContainsKeywordsPredicate
from cheesebook.domain.sample_data import sample_cheese_book
from cheesebook.viewmodels.entity_table_vm import (
    EntityTableVM,
    cheese_row,
    customer_row,
    order_row,
)


def test_customer_rows_follow_live_view() -> None:
    model = ModelManager(sample_cheese_book())
    vm = EntityTableVM("Customers", model.filtered_customer_list, customer_row)

    assert [row.index for row in vm.rows()] == [1, 2, 3, 4]
    assert vm.count_label() == "Customers (4)"

    model.update_filtered_customer_list(NameContainsKeywordsPredicate(("li",)))

    rows = vm.rows()
    assert [row.name for row in rows] == ["Charlotte Oliveiro", "David Li"]
    assert rows[1].phone == "91031282"
    assert vm.count_label() == "Customers (2)"


def test_order_rows_show_status() -> None:
    model = ModelManager(sample_cheese_book())
    vm = EntityTableVM("Orders", model.filtered_order_list, order_row)

    rows = vm.rows()

    assert [row.order_id for row in rows] == ["1", "2"]
    assert [row.status for row in rows] == ["Pending", "Completed"]
    assert rows[1].cheese_type == "Feta"


def test_cheese_rows_format_dates() -> None:
    model = ModelManager(sample_cheese_book())
    vm = EntityTableVM("Cheeses", model.filtered_cheese_list, cheese_row)

    first = vm.rows()[0]

    assert first.cheese_id == "1"
    assert first.cheese_type == "Brie"
    assert len(first.manufacture_date) == 10
