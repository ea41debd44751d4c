"""
State store for the Tip Calculator form

Input events replace the single TipState held by the store; every listener is
then called synchronously with the new state.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Callable, List, Optional

from config import Settings, get_default_settings
from models import TipState

logger = logging.getLogger(__name__)

Listener = Callable[[TipState], None]


class TipStore:
    """Owns the form inputs and notifies subscribers on change"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_default_settings()
        self._state = self.initial_state()
        self._listeners: List[Listener] = []

    def initial_state(self) -> TipState:
        return TipState(
            amount_text="",
            percentage=self.settings.default_percentage,
            split_count=self.settings.default_split_count,
        )

    @property
    def state(self) -> TipState:
        return self._state

    # ---------- Subscriptions ----------
    def subscribe(self, listener: Listener, notify: bool = True) -> Callable[[], None]:
        """Register listener; returns a callable that unsubscribes it.
        With notify, the listener is called once right away with the current state."""
        self._listeners.append(listener)
        if notify:
            listener(self._state)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _set(self, state: TipState) -> None:
        if state == self._state:
            return
        self._state = state
        logger.debug("State changed: %s", state)
        for listener in list(self._listeners):
            listener(state)

    # ---------- Mutations ----------
    def set_amount_text(self, text: str) -> None:
        self._set(replace(self._state, amount_text=text or ""))

    def set_percentage(self, percentage: int) -> None:
        if percentage not in self.settings.percentage_options:
            raise ValueError(f"percentage must be one of {self.settings.percentage_options}, got {percentage}")
        self._set(replace(self._state, percentage=percentage))

    def set_split_count(self, split_count: int) -> None:
        if split_count not in self.settings.split_options:
            raise ValueError(f"split count must be one of {self.settings.split_options}, got {split_count}")
        self._set(replace(self._state, split_count=split_count))

    def reset(self) -> None:
        """Back to empty amount and default selections"""
        self._set(self.initial_state())
