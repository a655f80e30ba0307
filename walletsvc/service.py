"""Wallet operations built on a repository and an identifier generator."""

from __future__ import annotations

from walletsvc.domain import InvalidAmountError, SameWalletError, Wallet, WalletNotFoundError
from walletsvc.ids import IDGenerator
from walletsvc.memory_repo import Repository


class WalletService:
    """Creates wallets, looks them up and moves funds between them."""

    def __init__(self, repository: Repository, id_generator: IDGenerator) -> None:
        self.repository = repository
        self.id_generator = id_generator

    def create_wallet(self) -> Wallet:
        """Create and store a new empty wallet."""
        wallet = Wallet(self.id_generator.next_wallet_id(), 0)
        return self.repository.create_wallet(wallet).clone()

    def get_wallet(self, wallet_id: str) -> Wallet:
        """Return the wallet with ``wallet_id``; any lookup failure means not found."""
        try:
            wallet = self.repository.get_wallet(wallet_id)
        except Exception as exc:
            raise WalletNotFoundError() from exc
        return wallet.clone()

    def transfer(self, source_id: str, destination_id: str, amount: int) -> None:
        """Move ``amount`` from the source wallet to the destination wallet."""
        if amount < 0:
            raise InvalidAmountError()
        if source_id == destination_id:
            raise SameWalletError()
        self.repository.transfer(source_id, destination_id, int(amount))