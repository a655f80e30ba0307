"""Wallet records and the errors raised by wallet operations."""

from __future__ import annotations

from dataclasses import dataclass, replace


class WalletError(Exception):
    """Base class for wallet operation failures."""

    default_message = "wallet error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class WalletNotFoundError(WalletError):
    default_message = "wallet not found"


class InsufficientFundsError(WalletError):
    default_message = "insufficient funds"


class InvalidAmountError(WalletError):
    default_message = "amount must be greater than zero"


class SameWalletError(WalletError):
    default_message = "source and destination wallets must differ"


class InvalidWalletIDError(WalletError):
    default_message = "wallet id is required"


@dataclass
class Wallet:
    """A wallet identified by ``id`` holding an integer ``balance``."""

    id: str
    balance: int = 0

    def clone(self) -> Wallet:
        """Return an independent copy of this wallet."""
        return replace(self)

    def to_dict(self) -> dict[str, object]:
        """Return the JSON-ready representation of this wallet."""
        return {"id": self.id, "balance": self.balance}