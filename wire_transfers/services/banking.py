"""Funds transfer contract and its in-memory implementation."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict

from ..core.errors import InvalidAmountError


logger = logging.getLogger(__name__)


def ensure_non_negative(amount: int) -> None:
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {amount}")


class WireTransfers(ABC):
    """Operations a bank offers to the code that moves money around.

    Unknown accounts have a balance of zero. A transfer that the source
    account cannot cover returns ``False`` instead of raising.
    """

    @abstractmethod
    def get_funds(self, account: str) -> int:
        """Return the balance of ``account``, 0 if it was never set."""

    @abstractmethod
    def set_funds(self, account: str, amount: int) -> None:
        """Overwrite the balance of ``account``."""

    @abstractmethod
    def transfer_funds(self, amount: int, from_account: str, to_account: str) -> bool:
        """Move ``amount`` between accounts if the source can cover it."""


class InMemoryBank(WireTransfers):
    def __init__(self) -> None:
        self._accounts: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get_funds(self, account: str) -> int:
        return self._accounts.get(account, 0)

    def set_funds(self, account: str, amount: int) -> None:
        ensure_non_negative(amount)
        with self._lock:
            self._accounts[account] = amount
        logger.info("funds.set", extra={"account": account, "amount": amount})

    def transfer_funds(self, amount: int, from_account: str, to_account: str) -> bool:
        ensure_non_negative(amount)
        with self._lock:
            source_balance = self._accounts.get(from_account, 0)
            if source_balance < amount:
                logger.info(
                    "funds.transfer.rejected",
                    extra={
                        "from_account": from_account,
                        "to_account": to_account,
                        "amount": amount,
                        "balance": source_balance,
                    },
                )
                return False

            if amount == 0:
                return True

            self._accounts[from_account] = source_balance - amount
            self._accounts[to_account] = self._accounts.get(to_account, 0) + amount

        logger.info(
            "funds.transfer",
            extra={
                "from_account": from_account,
                "to_account": to_account,
                "amount": amount,
            },
        )
        return True
