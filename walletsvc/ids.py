"""Generation of wallet identifiers."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod


class IDGenerator(ABC):
    """Source of fresh wallet identifiers."""

    @abstractmethod
    def next_wallet_id(self) -> str:
        """Return an identifier not handed out before."""


class Generator(IDGenerator):
    """Thread-safe sequential generator producing ``w_1``, ``w_2``, ..."""

    def __init__(self) -> None:
        self._counter = 0
        self._lock = threading.Lock()

    def next_wallet_id(self) -> str:
        with self._lock:
            self._counter += 1
            value = self._counter
        return f"w_{value}"