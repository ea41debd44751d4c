"""
Data models for Tip Calculator application
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class TipState:
    """The three user inputs of the form"""
    amount_text: str = ""
    percentage: int = 20  # one of the configured percentage options
    split_count: int = 1  # number of people sharing the total


@dataclass(frozen=True)
class TipResult:
    """Values derived from a TipState"""
    amount: float
    tip_amount: float
    total: float
    per_person: float


@dataclass(frozen=True)
class ResultRow:
    """Single row of the result section"""
    title: str
    value: str  # formatted display string, also what gets copied
    emphasize: bool = False
    hint: str = ""
