from __future__ import annotations

import logging

from ..models import (
    BalanceResponse,
    BalanceUpdate,
    TransferReceipt,
    TransferRequest,
)
from .banking import WireTransfers


logger = logging.getLogger(__name__)


class TransferService:
    def __init__(self, bank: WireTransfers) -> None:
        self.bank = bank

    def get_balance(self, account: str) -> BalanceResponse:
        return BalanceResponse(account=account, funds=self.bank.get_funds(account))

    def set_balance(self, payload: BalanceUpdate) -> BalanceResponse:
        self.bank.set_funds(payload.account, payload.amount)
        return self.get_balance(payload.account)

    def transfer(self, payload: TransferRequest) -> TransferReceipt:
        accepted = self.bank.transfer_funds(
            payload.amount, payload.from_account, payload.to_account
        )
        if not accepted:
            logger.warning(
                "transfer.declined",
                extra={
                    "from_account": payload.from_account,
                    "to_account": payload.to_account,
                    "amount": payload.amount,
                },
            )
        return TransferReceipt(
            from_account=payload.from_account,
            to_account=payload.to_account,
            amount=payload.amount,
            accepted=accepted,
            from_balance=self.bank.get_funds(payload.from_account),
            to_balance=self.bank.get_funds(payload.to_account),
        )
