"""Wallet service: wallets, balances and transfers over HTTP, in memory or MySQL."""

__version__ = "0.1.0"