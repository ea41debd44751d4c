"""
Configuration for Tip Calculator
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

PERCENTAGE_OPTIONS: Tuple[int, ...] = tuple(range(0, 31, 5))
SPLIT_OPTIONS: Tuple[int, ...] = tuple(range(1, 11))


@dataclass(frozen=True)
class Settings:
    """Application settings; built in code, never persisted"""
    percentage_options: Tuple[int, ...] = PERCENTAGE_OPTIONS
    default_percentage: int = 20
    split_options: Tuple[int, ...] = SPLIT_OPTIONS
    default_split_count: int = 1
    locale: Optional[str] = None  # None -> detect from environment
    show_copy_confirmation: bool = False
    confirmation_ms: int = 1500
    long_press_ms: int = 600
    title: str = "Tip Calculator"
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.default_percentage not in self.percentage_options:
            raise ValueError(
                f"default_percentage {self.default_percentage} not in {self.percentage_options}"
            )
        if not self.split_options or min(self.split_options) < 1:
            raise ValueError("split_options must be non-empty and >= 1")
        if self.default_split_count not in self.split_options:
            raise ValueError(
                f"default_split_count {self.default_split_count} not in {self.split_options}"
            )


def get_default_settings() -> Settings:
    """Create default settings"""
    return Settings()
