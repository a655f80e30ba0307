"""Repository interface and a segmented, lock-protected in-memory store."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from contextlib import ExitStack
from dataclasses import dataclass, field

from walletsvc.domain import (
    InsufficientFundsError,
    InvalidAmountError,
    SameWalletError,
    Wallet,
    WalletNotFoundError,
)

DEFAULT_SEGMENT_COUNT = 64

_FNV32_OFFSET = 0x811C9DC5
_FNV32_PRIME = 0x01000193


def fnv1a_32(data: bytes) -> int:
    """Return the 32-bit FNV-1a hash of ``data``."""
    value = _FNV32_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV32_PRIME) & 0xFFFFFFFF
    return value


class Repository(ABC):
    """Storage for wallets."""

    @abstractmethod
    def create_wallet(self, wallet: Wallet) -> Wallet:
        """Store ``wallet`` and return the stored record."""

    @abstractmethod
    def get_wallet(self, wallet_id: str) -> Wallet:
        """Return the wallet with ``wallet_id`` or raise WalletNotFoundError."""

    @abstractmethod
    def transfer(self, source_id: str, destination_id: str, amount: int) -> None:
        """Move ``amount`` from one wallet to another atomically."""


@dataclass
class _Segment:
    lock: threading.Lock = field(default_factory=threading.Lock)
    wallets: dict[str, Wallet] = field(default_factory=dict)


def _apply_transfer(
    source_wallets: dict[str, Wallet],
    destination_wallets: dict[str, Wallet],
    source_id: str,
    destination_id: str,
    amount: int,
) -> None:
    source = source_wallets.get(source_id)
    if source is None:
        raise WalletNotFoundError()
    destination = destination_wallets.get(destination_id)
    if destination is None:
        raise WalletNotFoundError()
    if source.balance < amount:
        raise InsufficientFundsError()
    source.balance -= amount
    destination.balance += amount


class MemoryRepo(Repository):
    """In-memory repository sharded into locked segments by FNV-1a hash."""

    def __init__(self, segment_count: int = DEFAULT_SEGMENT_COUNT) -> None:
        if segment_count <= 0:
            segment_count = DEFAULT_SEGMENT_COUNT
        self._segments = [_Segment() for _ in range(segment_count)]

    def segment_index(self, wallet_id: str) -> int:
        """Return the index of the segment that holds ``wallet_id``."""
        return fnv1a_32(wallet_id.encode("utf-8")) % len(self._segments)

    def _segment(self, wallet_id: str) -> _Segment:
        return self._segments[self.segment_index(wallet_id)]

    def create_wallet(self, wallet: Wallet) -> Wallet:
        segment = self._segment(wallet.id)
        with segment.lock:
            segment.wallets[wallet.id] = wallet.clone()
        return wallet.clone()

    def get_wallet(self, wallet_id: str) -> Wallet:
        segment = self._segment(wallet_id)
        with segment.lock:
            record = segment.wallets.get(wallet_id)
            if record is None:
                raise WalletNotFoundError()
            return record.clone()

    def transfer(self, source_id: str, destination_id: str, amount: int) -> None:
        if amount <= 0:
            raise InvalidAmountError()
        if source_id == destination_id:
            raise SameWalletError()

        source_index = self.segment_index(source_id)
        destination_index = self.segment_index(destination_id)
        source_segment = self._segments[source_index]
        destination_segment = self._segments[destination_index]

        # Locks are always taken in ascending segment order to avoid deadlock.
        with ExitStack() as stack:
            for index in sorted({source_index, destination_index}):
                stack.enter_context(self._segments[index].lock)
            _apply_transfer(
                source_segment.wallets,
                destination_segment.wallets,
                source_id,
                destination_id,
                amount,
            )

    def set_balance(self, wallet_id: str, balance: int) -> None:
        """Overwrite the balance of ``wallet_id``, creating the record if absent."""
        segment = self._segment(wallet_id)
        with segment.lock:
            record = segment.wallets.setdefault(wallet_id, Wallet(wallet_id))
            record.balance = balance