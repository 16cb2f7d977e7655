"""
MainWindowView
---------------
Tkinter main window for CheeseBook following MVVM + Hexagonal architecture.
This file contains **only View code**: no storage, no domain logic. It
exposes callback hooks that are connected to ViewModels by ``App``.

The window provides:
  * Command entry with a feedback line underneath
  * Notebook with tabs: Customers, Orders, Cheeses
  * StatusBar at the bottom showing the data file
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional


class MainWindowView(tk.Tk):
    """Top-level application window.

    UI-only. Defines layout containers and wires the command entry to the
    ``on_command`` callback. Table views are created by ``App`` and mounted
    into the tab frames.
    """

    def __init__(
        self,
        *,
        on_command: Optional[Callable[[str], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
        width: int = 1000,
        height: int = 700,
    ) -> None:
        super().__init__()

        self.title("CheeseBook")
        self.geometry(f"{width}x{height}")
        self.minsize(800, 500)

        self._on_command = on_command
        self._on_close = on_close
        self.protocol("WM_DELETE_WINDOW", self.close)

        # ---- High-level layout: 3 rows (Command, Tables, Status) ----
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_command_box(self)
        self._build_main_area(self)
        self._build_statusbar(self)

    # ------------------------------------------------------------------
    # Command box
    # ------------------------------------------------------------------
    def _build_command_box(self, parent: tk.Widget) -> None:
        box = ttk.Frame(parent)
        box.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))
        box.columnconfigure(0, weight=1)

        self.command_var = tk.StringVar()
        self.entry = ttk.Entry(box, textvariable=self.command_var)
        self.entry.grid(row=0, column=0, sticky="ew")
        self.entry.bind("<Return>", lambda e: self._submit())
        self.entry.focus_set()

        self.feedback_var = tk.StringVar(value="")
        self.lbl_feedback = ttk.Label(box, textvariable=self.feedback_var, justify="left")
        self.lbl_feedback.grid(row=1, column=0, sticky="w", pady=(4, 0))

    def _submit(self) -> None:
        if self._on_command:
            self._on_command(self.command_var.get())

    # ------------------------------------------------------------------
    # Main Area (Notebook with one tab per entity kind)
    # ------------------------------------------------------------------
    def _build_main_area(self, parent: tk.Widget) -> None:
        self.tabs = ttk.Notebook(parent)
        self.tabs.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)

        self.tab_customers = ttk.Frame(self.tabs)
        self.tab_orders = ttk.Frame(self.tabs)
        self.tab_cheeses = ttk.Frame(self.tabs)

        self.tabs.add(self.tab_customers, text="Customers")
        self.tabs.add(self.tab_orders, text="Orders")
        self.tabs.add(self.tab_cheeses, text="Cheeses")

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(0, weight=1)

        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var).grid(row=0, column=0, sticky="w")

    # ------------------------------------------------------------------
    # Public API (called by App)
    # ------------------------------------------------------------------
    def set_command_text(self, text: str) -> None:
        self.command_var.set(text)

    def show_feedback(self, message: str, is_error: bool = False) -> None:
        """Show command feedback; errors are rendered in red."""
        self.feedback_var.set(message)
        self.lbl_feedback.configure(foreground="red" if is_error else "")

    def set_status_message(self, text: str) -> None:
        """Update the short status message shown in the status bar."""
        self.status_message_var.set(text)

    def set_tab_title(self, tab: tk.Widget, text: str) -> None:
        self.tabs.tab(tab, text=text)

    def geometry_settings(self) -> tuple[int, int, int, int]:
        """Return ``(width, height, x, y)`` of the window."""
        return self.winfo_width(), self.winfo_height(), self.winfo_x(), self.winfo_y()

    def close(self) -> None:
        if self._on_close:
            self._on_close()
        self.destroy()
