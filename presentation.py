"""
Render helpers for the Tip Calculator form

Pure functions from the current TipState to the strings the view displays.
"""
from __future__ import annotations
from typing import List

from computations import compute_result
from formatting import CurrencyFormatter
from models import ResultRow, TipState

COPY_HINT = "Press and hold to copy"


def percentage_label(percentage: int) -> str:
    return f"{percentage}%"


def split_label(count: int) -> str:
    return f"{count} {'person' if count == 1 else 'people'}"


def amount_prefix(amount_text: str, formatter: CurrencyFormatter) -> str:
    """Currency symbol shown before the amount field, only once something is typed"""
    return formatter.symbol if amount_text else ""


def build_result_rows(state: TipState, formatter: CurrencyFormatter) -> List[ResultRow]:
    """
    Rows of the result section for state.
    Base amount, tip and total are always present; per person only when the
    bill is split between more than one person.
    """
    result = compute_result(state)
    rows = [
        ResultRow("Base amount", formatter.format(result.amount), hint=COPY_HINT),
        ResultRow(
            f"Added percentage ({percentage_label(state.percentage)})",
            formatter.format(result.tip_amount),
            hint=COPY_HINT,
        ),
        ResultRow("Total", formatter.format(result.total), emphasize=True, hint=COPY_HINT),
    ]
    if state.split_count > 1:
        rows.append(ResultRow(
            f"Per person (x{state.split_count})",
            formatter.format(result.per_person),
            emphasize=True,
            hint=COPY_HINT,
        ))
    return rows


def copied_message(row: ResultRow) -> str:
    return f"{row.title} copied"
