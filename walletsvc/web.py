"""HTTP interface for the wallet service."""

from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from walletsvc.domain import (
    InsufficientFundsError,
    InvalidAmountError,
    InvalidWalletIDError,
    SameWalletError,
    WalletNotFoundError,
)
from walletsvc.service import WalletService

_ERROR_STATUS = (
    (InvalidAmountError, 400),
    (SameWalletError, 400),
    (InsufficientFundsError, 400),
    (WalletNotFoundError, 404),
)


class _BindingError(ValueError):
    """The request body does not describe a valid transfer."""


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def _status_for(exc: Exception) -> int:
    for error_type, status in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status
    return 500


def _required_string(payload: dict[str, Any], name: str) -> str:
    value = payload.get(name)
    if value is None or value == "":
        raise _BindingError(f"{name} is required")
    if not isinstance(value, str):
        raise _BindingError(f"{name} must be a string")
    return value


def _parse_transfer(payload: Any) -> tuple[str, str, int]:
    if not isinstance(payload, dict):
        raise _BindingError("request body must be a JSON object")
    source_id = _required_string(payload, "source_id")
    destination_id = _required_string(payload, "destination_id")
    amount = payload.get("amount")
    if amount is None or amount == 0:
        raise _BindingError("amount is required")
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise _BindingError("amount must be an integer")
    if amount <= 0:
        raise _BindingError("amount must be greater than zero")
    return source_id, destination_id, amount


def create_app(service: WalletService) -> Flask:
    """Return a Flask application exposing ``service`` over HTTP."""
    app = Flask(__name__)

    @app.post("/wallets")
    def create_wallet():
        try:
            wallet = service.create_wallet()
        except Exception as exc:
            return _error(str(exc), 500)
        return jsonify(wallet.to_dict()), 201

    @app.get("/wallets/<wallet_id>")
    def get_wallet(wallet_id: str):
        if not wallet_id:
            return _error(InvalidWalletIDError().message, 400)
        try:
            wallet = service.get_wallet(wallet_id)
        except Exception as exc:
            return _error(str(exc), _status_for(exc))
        return jsonify(wallet.to_dict()), 200

    @app.post("/transfer")
    def transfer():
        try:
            source_id, destination_id, amount = _parse_transfer(
                request.get_json(silent=True)
            )
        except _BindingError as exc:
            return _error(str(exc), 400)
        try:
            service.transfer(source_id, destination_id, amount)
        except Exception as exc:
            return _error(str(exc), _status_for(exc))
        return jsonify({"status": "success"}), 200

    return app