import logging

import pytest
from pydantic import ValidationError

from ..models import BalanceUpdate, TransferRequest
from ..services import InMemoryBank, TransferService


@pytest.fixture
def service() -> TransferService:
    return TransferService(InMemoryBank())


def test_set_and_get_balance(service: TransferService) -> None:
    response = service.set_balance(BalanceUpdate(account="alice", amount=500))
    assert response.account == "alice"
    assert response.funds == 500
    assert service.get_balance("alice").funds == 500
    assert service.get_balance("bob").funds == 0


def test_transfer_receipt_reports_new_balances(service: TransferService) -> None:
    service.set_balance(BalanceUpdate(account="alice", amount=500))

    receipt = service.transfer(
        TransferRequest(from_account="alice", to_account="bob", amount=200)
    )

    assert receipt.accepted is True
    assert receipt.amount == 200
    assert receipt.from_balance == 300
    assert receipt.to_balance == 200


def test_declined_transfer_leaves_balances(service: TransferService, caplog) -> None:
    caplog.set_level(logging.INFO)
    service.set_balance(BalanceUpdate(account="alice", amount=50))
    service.set_balance(BalanceUpdate(account="bob", amount=5))

    receipt = service.transfer(
        TransferRequest(from_account="alice", to_account="bob", amount=51)
    )

    assert receipt.accepted is False
    assert receipt.from_balance == 50
    assert receipt.to_balance == 5
    declined = [r for r in caplog.records if r.getMessage() == "transfer.declined"]
    assert len(declined) == 1
    assert declined[0].levelno == logging.WARNING
    assert declined[0].amount == 51


def test_requests_validate_amount_and_accounts() -> None:
    with pytest.raises(ValidationError):
        TransferRequest(from_account="alice", to_account="bob", amount=-1)
    with pytest.raises(ValidationError):
        TransferRequest(from_account="", to_account="bob", amount=1)
    with pytest.raises(ValidationError):
        BalanceUpdate(account="alice", amount=-10)
