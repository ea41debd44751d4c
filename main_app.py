"""
Main application window for Tip Calculator GUI
"""
from __future__ import annotations
import logging
from typing import List, Optional

try:
    import tkinter as tk
    from tkinter import ttk
    from tkinter import font as tkfont
except ModuleNotFoundError:
    tk = None
    ttk = None
    tkfont = None

from clipboard import Clipboard, get_clipboard
from config import Settings, get_default_settings
from formatting import CurrencyFormatter, get_currency_formatter
from models import ResultRow, TipState
from presentation import (
    amount_prefix,
    build_result_rows,
    copied_message,
    percentage_label,
    split_label,
)
from store import TipStore

logger = logging.getLogger(__name__)


class TipCalculatorApp(ttk.Frame):
    """Single-screen tip form"""

    def __init__(
        self,
        master: tk.Tk,
        store: Optional[TipStore] = None,
        formatter: Optional[CurrencyFormatter] = None,
        clipboard: Optional[Clipboard] = None,
        settings: Optional[Settings] = None,
    ):
        super().__init__(master, padding=8)
        self.master = master
        self.settings = settings or (store.settings if store else get_default_settings())
        self.master.title(self.settings.title)
        self.grid(row=0, column=0, sticky="nsew")
        self.master.rowconfigure(0, weight=1)
        self.master.columnconfigure(0, weight=1)

        self.store = store or TipStore(self.settings)
        self.formatter = formatter or get_currency_formatter(self.settings.locale)
        self.clipboard = clipboard or get_clipboard(self)

        self.rows: List[ResultRow] = []
        self._row_frames: List[ttk.Frame] = []
        self._press_job: Optional[str] = None
        self._status_job: Optional[str] = None

        self._build_styles()
        self._build_menu()
        self._build_ui()
        self._unsubscribe = self.store.subscribe(self.render)

    # ---------- Menu ----------
    def _build_menu(self):
        """Build application menu bar"""
        menubar = tk.Menu(self.master)
        filem = tk.Menu(menubar, tearoff=0)
        filem.add_command(label="Reset", command=self.store.reset)
        filem.add_separator()
        filem.add_command(label="Exit", command=self.master.destroy)
        menubar.add_cascade(label="File", menu=filem)
        self.master.config(menu=menubar)

    # ---------- UI ----------
    def _build_styles(self):
        """Bold style for emphasized rows, muted style for secondary text"""
        self.bold_font = tkfont.nametofont("TkDefaultFont").copy()
        self.bold_font.configure(weight="bold")
        style = ttk.Style(self.master)
        style.configure("Emphasis.TLabel", font=self.bold_font)
        style.configure("Secondary.TLabel", foreground="gray40")

    def _build_ui(self):
        """Build input and result sections"""
        self.columnconfigure(0, weight=1)
        self._build_input_section()
        self._build_result_section()

        self.status_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.status_var, style="Secondary.TLabel").grid(
            row=2, column=0, sticky="w", pady=(6, 0)
        )

    def _build_input_section(self):
        """Amount field, percentage and split pickers"""
        frm = ttk.LabelFrame(self, text="Input", padding=8)
        frm.grid(row=0, column=0, sticky="ew")
        frm.columnconfigure(2, weight=1)
        state = self.store.state

        ttk.Label(frm, text="Amount").grid(row=0, column=0, sticky="w")
        self.symbol_var = tk.StringVar(value="")
        ttk.Label(frm, textvariable=self.symbol_var, style="Secondary.TLabel").grid(
            row=0, column=1, sticky="e", padx=(6, 0)
        )
        self.amount_var = tk.StringVar(value=state.amount_text)
        self.amount_entry = ttk.Entry(frm, textvariable=self.amount_var, width=18)
        self.amount_entry.grid(row=0, column=2, sticky="ew", pady=2)
        self.amount_var.trace_add("write", lambda *_: self.store.set_amount_text(self.amount_var.get()))

        ttk.Label(frm, text="Percentage").grid(row=1, column=0, sticky="w")
        self.percentage_box = ttk.Combobox(
            frm, values=[percentage_label(p) for p in self.settings.percentage_options],
            width=16, state="readonly"
        )
        self.percentage_box.grid(row=1, column=2, sticky="w", pady=2)
        self.percentage_box.bind("<<ComboboxSelected>>", self._on_percentage_selected)

        ttk.Label(frm, text="Split").grid(row=2, column=0, sticky="w")
        self.split_box = ttk.Combobox(
            frm, values=[split_label(n) for n in self.settings.split_options],
            width=16, state="readonly"
        )
        self.split_box.grid(row=2, column=2, sticky="w", pady=2)
        self.split_box.bind("<<ComboboxSelected>>", self._on_split_selected)

    def _build_result_section(self):
        """Frame that holds the result rows"""
        self.result_frame = ttk.LabelFrame(self, text="Result", padding=8)
        self.result_frame.grid(row=1, column=0, sticky="nsew", pady=(8, 0))
        self.result_frame.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

    # ---------- Input events ----------
    def _on_percentage_selected(self, _event=None):
        idx = self.percentage_box.current()
        if idx >= 0:
            self.store.set_percentage(self.settings.percentage_options[idx])

    def _on_split_selected(self, _event=None):
        idx = self.split_box.current()
        if idx >= 0:
            self.store.set_split_count(self.settings.split_options[idx])

    # ---------- Render ----------
    def render(self, state: TipState):
        """Bring every widget in line with state"""
        if self.amount_var.get() != state.amount_text:
            self.amount_var.set(state.amount_text)
        self.symbol_var.set(amount_prefix(state.amount_text, self.formatter))
        self.percentage_box.current(self.settings.percentage_options.index(state.percentage))
        self.split_box.current(self.settings.split_options.index(state.split_count))

        self.rows = build_result_rows(state, self.formatter)
        self._render_rows()

    def _render_rows(self):
        """Rebuild result rows"""
        self._cancel_press()
        for frame in self._row_frames:
            frame.destroy()
        self._row_frames = []

        for i, row in enumerate(self.rows):
            style = "Emphasis.TLabel" if row.emphasize else "TLabel"
            value_style = "Emphasis.TLabel" if row.emphasize else "Secondary.TLabel"
            frame = ttk.Frame(self.result_frame)
            frame.grid(row=i, column=0, sticky="ew", pady=1)
            frame.columnconfigure(0, weight=1)
            title = ttk.Label(frame, text=row.title, style=style)
            title.grid(row=0, column=0, sticky="w")
            value = ttk.Label(frame, text=row.value, style=value_style)
            value.grid(row=0, column=1, sticky="e")
            for widget in (frame, title, value):
                self._bind_copy_gesture(widget, row)
            self._row_frames.append(frame)

    # ---------- Copy ----------
    def _bind_copy_gesture(self, widget, row: ResultRow):
        """Press-and-hold or context click opens the Copy menu; hover shows the hint"""
        widget.bind("<ButtonPress-1>", lambda e: self._start_press(e, row))
        widget.bind("<ButtonRelease-1>", lambda e: self._cancel_press())
        widget.bind("<Button-3>", lambda e: self._show_copy_menu(e, row))
        widget.bind("<Button-2>", lambda e: self._show_copy_menu(e, row))
        widget.bind("<Enter>", lambda e: self.status_var.set(row.hint))
        widget.bind("<Leave>", lambda e: self._clear_hint(row))

    def _clear_hint(self, row: ResultRow):
        if self.status_var.get() == row.hint:
            self.status_var.set("")

    def _start_press(self, event, row: ResultRow):
        self._cancel_press()
        self._press_job = self.after(self.settings.long_press_ms, lambda: self._show_copy_menu(event, row))

    def _cancel_press(self):
        if self._press_job is not None:
            self.after_cancel(self._press_job)
            self._press_job = None

    def _show_copy_menu(self, event, row: ResultRow):
        self._press_job = None
        menu = tk.Menu(self, tearoff=0)
        menu.add_command(label="Copy", command=lambda: self.copy_row(row))
        try:
            menu.tk_popup(event.x_root, event.y_root)
        finally:
            menu.grab_release()

    def copy_row(self, row: ResultRow):
        """Send the row's display string to the clipboard"""
        self.clipboard.copy(row.value)
        logger.debug("Copied %s", row.title)
        if self.settings.show_copy_confirmation:
            self._flash_status(copied_message(row))

    def _flash_status(self, message: str):
        if self._status_job is not None:
            self.after_cancel(self._status_job)
        self.status_var.set(message)
        self._status_job = self.after(self.settings.confirmation_ms, self._clear_status)

    def _clear_status(self):
        self._status_job = None
        self.status_var.set("")

    def destroy(self):
        self._cancel_press()
        if self._status_job is not None:
            self.after_cancel(self._status_job)
            self._status_job = None
        self._unsubscribe()
        super().destroy()
