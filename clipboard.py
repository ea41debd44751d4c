"""
Clipboard adapters for Tip Calculator

The app only ever writes to the clipboard. Writes are best effort: failures are
logged and never reported to the caller.
"""
from __future__ import annotations
import logging
from typing import List, Optional

try:
    import tkinter as tk
except ModuleNotFoundError:
    tk = None

logger = logging.getLogger(__name__)


class Clipboard:
    """Clipboard port"""

    def copy(self, text: str) -> None:
        raise NotImplementedError


class TkClipboard(Clipboard):
    """Desktop clipboard through a Tk widget"""

    def __init__(self, widget):
        self.widget = widget

    def copy(self, text: str) -> None:
        try:
            self.widget.clipboard_clear()
            self.widget.clipboard_append(text)
            # keep the selection owned after the event handler returns
            self.widget.update_idletasks()
        except tk.TclError as ex:
            logger.warning("Clipboard write failed: %s", ex)


class MemoryClipboard(Clipboard):
    """In-process clipboard for headless runs"""

    def __init__(self):
        self.history: List[str] = []

    @property
    def text(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def copy(self, text: str) -> None:
        self.history.append(text)


def get_clipboard(widget=None) -> Clipboard:
    """Pick the clipboard adapter for the running platform"""
    if tk is not None and widget is not None:
        return TkClipboard(widget)
    logger.info("No Tk widget available; clipboard writes stay in memory")
    return MemoryClipboard()
