"""
Tip computations for Tip Calculator
"""
from __future__ import annotations
import math

from models import TipResult, TipState
from utils import safe_float


def parse_amount(text: str) -> float:
    """Parse user-entered amount; ',' and '.' both act as decimal separator.
    Empty, malformed, negative or non-finite input gives 0.0"""
    if not text:
        return 0.0
    value = safe_float(text.replace(",", "."), None)
    if value is None or not math.isfinite(value) or value < 0:
        return 0.0
    return value


def tip_amount(amount: float, percentage: float) -> float:
    """Tip on amount at the given percentage"""
    return amount * percentage / 100


def total(amount: float, tip: float) -> float:
    """Amount plus tip"""
    return amount + tip


def per_person(total_amount: float, split_count: int) -> float:
    """Share of total for each person; 0 when split_count is not positive"""
    if split_count <= 0:
        return 0.0
    return total_amount / split_count


def compute_result(state: TipState) -> TipResult:
    """Derive all outputs from the current inputs"""
    amount = parse_amount(state.amount_text)
    tip = tip_amount(amount, state.percentage)
    t = total(amount, tip)
    return TipResult(
        amount=amount,
        tip_amount=tip,
        total=t,
        per_person=per_person(t, state.split_count),
    )
