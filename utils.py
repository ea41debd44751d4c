"""
Utility functions for Tip Calculator application
"""
from __future__ import annotations
from typing import Optional


def safe_float(x: str, default: Optional[float] = 0.0) -> Optional[float]:
    """Convert string to float safely, returning default on error"""
    try:
        return float(x)
    except (TypeError, ValueError):
        return default
