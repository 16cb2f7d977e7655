# cheesebook/app/main.py
from __future__ import annotations
import logging
import os
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.entity_table_view import (
    CHEESE_COLUMNS,
    CUSTOMER_COLUMNS,
    ORDER_COLUMNS,
    EntityTableView,
)

# ---- ViewModels ----
from ..viewmodels.command_box_vm import CommandBoxVM
from ..viewmodels.entity_table_vm import EntityTableVM, cheese_row, customer_row, order_row

# ---- Domain, UseCases & Adapter ----
from ..adapters.storage_local import StorageLocal
from ..domain.errors import DataLoadingError
from ..domain.model_manager import ModelManager
from ..domain.ports import UseCaseError
from ..domain.user_prefs import GuiSettings, UserPrefs
from ..usecases.execute_command import ExecuteCommand
from ..usecases.load_cheese_book import LoadCheeseBook
from ..usecases.save_user_prefs import SaveUserPrefs
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire Views <-> ViewModels, storage adapter and the model."""

    def __init__(self, root_dir: Optional[str] = None) -> None:
        self._log = logging.getLogger(__name__)
        self._log.info("=============================[ Initializing CheeseBook ]===========================")

        # ---- Storage, prefs & model ----
        self.storage = StorageLocal(root_dir or os.getcwd())
        prefs = self._load_prefs()
        book = LoadCheeseBook(self.storage)(prefs.cheese_book_file_path)
        self.model = ModelManager(book, prefs)
        self.uc_execute = ExecuteCommand(self.model, self.storage)
        self.uc_save_prefs = SaveUserPrefs(self.storage)

        # ---- Main window ----
        gui = self.model.gui_settings
        self.win = MainWindowView(
            on_command=self._on_command,
            on_close=self._on_close,
            width=gui.width,
            height=gui.height,
        )
        if gui.x is not None and gui.y is not None:
            self.win.geometry(f"+{gui.x}+{gui.y}")

        # ---- ViewModels ----
        self.command_vm = CommandBoxVM(
            self.uc_execute,
            on_feedback=self.win.show_feedback,
            on_exit=self._on_exit_requested,
        )
        self.customers_vm = EntityTableVM("Customers", self.model.filtered_customer_list, customer_row)
        self.orders_vm = EntityTableVM("Orders", self.model.filtered_order_list, order_row)
        self.cheeses_vm = EntityTableVM("Cheeses", self.model.filtered_cheese_list, cheese_row)

        # ---- Subviews ----
        self.customers_table = EntityTableView(self.win.tab_customers, columns=CUSTOMER_COLUMNS)
        self.orders_table = EntityTableView(self.win.tab_orders, columns=ORDER_COLUMNS)
        self.cheeses_table = EntityTableView(self.win.tab_cheeses, columns=CHEESE_COLUMNS)
        for table in (self.customers_table, self.orders_table, self.cheeses_table):
            table.pack(fill="both", expand=True)

        self.win.set_status_message(f"Data file: {self.model.cheese_book_file_path}")
        self._refresh_tables()

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------
    def _on_command(self, text: str) -> None:
        result = self.command_vm.submit(text)
        self.win.set_command_text(self.command_vm.text)
        if result is not None:
            self._refresh_tables()

    def _on_exit_requested(self) -> None:
        self.win.after(0, self.win.close)

    def _on_close(self) -> None:
        width, height, x, y = self.win.geometry_settings()
        self.model.set_gui_settings(GuiSettings(width=max(width, 1), height=max(height, 1), x=x, y=y))
        try:
            self.uc_save_prefs(self.model.user_prefs)
        except UseCaseError as exc:
            self._log.error("Failed to save preferences: %s", exc.message)
        self._log.info("============================ [ Stopping CheeseBook ] =============================")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _load_prefs(self) -> UserPrefs:
        try:
            prefs = self.storage.load_user_prefs()
        except DataLoadingError as exc:
            self._log.warning("%s. Using default preferences", exc)
            return UserPrefs()
        return prefs if prefs is not None else UserPrefs()

    def _refresh_tables(self) -> None:
        for vm, table, tab in (
            (self.customers_vm, self.customers_table, self.win.tab_customers),
            (self.orders_vm, self.orders_table, self.win.tab_orders),
            (self.cheeses_vm, self.cheeses_table, self.win.tab_cheeses),
        ):
            table.set_rows(vm.rows())
            self.win.set_tab_title(tab, vm.count_label())


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
