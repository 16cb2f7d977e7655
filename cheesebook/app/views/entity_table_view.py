"""Table view for one entity kind (customers, orders or cheeses).

The table renders row DTOs from ``EntityTableVM.rows()``; it never touches
the model.
"""

from __future__ import annotations

import tkinter as tk
from dataclasses import astuple, fields
from tkinter import ttk
from typing import Dict, List, Sequence, Tuple


class EntityTableView(ttk.Frame):
    """Read-only Treeview with a vertical scrollbar."""

    def __init__(self, parent, *, columns: Sequence[Tuple[str, int]], **kwargs):
        """Build the table.

        Args:
            parent: Notebook tab hosting the table.
            columns: ``(field_name, width)`` pairs in display order; field
                names must match the row dataclass fields.
            **kwargs: Additional frame options forwarded to ``ttk.Frame``.
        """
        super().__init__(parent, **kwargs)

        self._columns = tuple(name for name, _width in columns)
        self.tree = ttk.Treeview(
            self,
            columns=self._columns,
            show="headings",
            selectmode="browse",
            height=14,
        )
        for column, width in columns:
            self.tree.heading(column, text="#" if column == "index" else column.replace("_", " ").title())
            stretchable = column not in {"index"}
            self.tree.column(column, width=width, anchor=tk.W, stretch=stretchable)

        vsb = ttk.Scrollbar(self, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)

        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        vsb.pack(side=tk.RIGHT, fill=tk.Y)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_rows(self, rows: List) -> None:
        """Replace table rows with view-model row DTOs."""
        self.tree.delete(*self.tree.get_children())
        for row in rows:
            values = self._values(row)
            self.tree.insert("", tk.END, values=tuple(values[c] for c in self._columns))

    @staticmethod
    def _values(row) -> Dict[str, object]:
        names = [f.name for f in fields(row)]
        return dict(zip(names, astuple(row)))


CUSTOMER_COLUMNS = (("index", 40), ("name", 180), ("phone", 110), ("email", 200), ("address", 300))
ORDER_COLUMNS = (
    ("index", 40),
    ("order_id", 80),
    ("customer", 110),
    ("cheese_type", 120),
    ("quantity", 80),
    ("order_date", 110),
    ("status", 100),
)
CHEESE_COLUMNS = (
    ("index", 40),
    ("cheese_id", 80),
    ("cheese_type", 140),
    ("manufacture_date", 140),
    ("expiry_date", 140),
)

__all__ = ["CHEESE_COLUMNS", "CUSTOMER_COLUMNS", "EntityTableView", "ORDER_COLUMNS"]
