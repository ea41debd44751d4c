"""
Tip Calculator GUI
- Enter a bill amount, pick a tip percentage and how many people share it.
- Tip, total and per-person share update as you type; press and hold a result to copy it.

Run:
  python tip_calculator_gui.py

Dependencies:
  pip install Babel
(Tkinter ships with most Python distributions; on some Linux you may need: sudo apt-get install python3-tk)
"""
from __future__ import annotations
import logging
import sys
from typing import Optional

try:
    import tkinter as tk
except ModuleNotFoundError:
    tk = None

from config import Settings, get_default_settings
from formatting import get_currency_formatter
from store import TipStore

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Configure application logging"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main(settings: Optional[Settings] = None):
    """Main entry point for the application"""
    settings = settings or get_default_settings()
    setup_logging(settings.log_level)
    if tk is None:
        raise RuntimeError(
            'tkinter is not available. Install it (e.g., on Ubuntu: sudo apt-get install python3-tk) '
            'and re-run to use the GUI.'
        )

    from clipboard import get_clipboard
    from main_app import TipCalculatorApp

    root = tk.Tk()
    TipCalculatorApp(
        root,
        store=TipStore(settings),
        formatter=get_currency_formatter(settings.locale),
        clipboard=get_clipboard(root),
        settings=settings,
    )
    logger.info("Started %s", settings.title)
    root.mainloop()


if __name__ == "__main__":
    main()
