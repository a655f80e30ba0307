import pytest

from walletsvc.domain import (
    InsufficientFundsError,
    InvalidAmountError,
    InvalidWalletIDError,
    SameWalletError,
    Wallet,
    WalletError,
    WalletNotFoundError,
)


def test_clone_is_equal_but_independent():
    original = Wallet("w_7", 250)
    copy = original.clone()
    assert copy == original
    copy.balance = 10
    assert original.balance == 250


def test_clone_is_new_object():
    original = Wallet("abc", 5)
    assert original.clone() is not original
    assert original.clone().id == "abc"


def test_default_balance_is_zero():
    assert Wallet("x").balance == 0


def test_to_dict_has_id_and_balance():
    assert Wallet("w_3", 42).to_dict() == {"id": "w_3", "balance": 42}


@pytest.mark.parametrize(
    "error_type, message",
    [
        (WalletNotFoundError, "wallet not found"),
        (InsufficientFundsError, "insufficient funds"),
        (InvalidAmountError, "amount must be greater than zero"),
        (SameWalletError, "source and destination wallets must differ"),
        (InvalidWalletIDError, "wallet id is required"),
    ],
)
def test_error_messages(error_type, message):
    error = error_type()
    assert str(error) == message
    assert error.message == message
    assert isinstance(error, WalletError)


def test_error_custom_message():
    error = WalletNotFoundError("missing here")
    assert str(error) == "missing here"
    with pytest.raises(WalletError) as caught:
        raise error
    assert str(caught.value) == "missing here"