from __future__ import annotations

from typing import Optional

from sqlalchemy import insert, update
from sqlmodel import Session

from ..models import AccountBalanceModel


class BalanceRepository:
    """Thin data access layer around the SQLModel session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_balance(self, account: str) -> Optional[AccountBalanceModel]:
        return self.session.get(AccountBalanceModel, account)

    # Balance writes: each starts with an UPDATE ----------------------------
    def overwrite_funds(self, account: str, funds: int) -> None:
        result = self.session.connection().execute(
            update(AccountBalanceModel)
            .where(AccountBalanceModel.account == account)
            .values(funds=funds)
        )
        if result.rowcount == 0:
            self.session.connection().execute(
                insert(AccountBalanceModel).values(account=account, funds=funds)
            )

    def debit_if_covered(self, account: str, amount: int) -> bool:
        """Subtract ``amount`` only when the stored balance covers it.

        The check and the write are one UPDATE statement, so the row is
        write-locked before the balance is compared.
        """
        stmt = (
            update(AccountBalanceModel)
            .where(AccountBalanceModel.account == account)
            .where(AccountBalanceModel.funds >= amount)
            .values(funds=AccountBalanceModel.funds - amount)
        )
        result = self.session.connection().execute(stmt)
        return result.rowcount == 1

    def credit(self, account: str, amount: int) -> None:
        stmt = (
            update(AccountBalanceModel)
            .where(AccountBalanceModel.account == account)
            .values(funds=AccountBalanceModel.funds + amount)
        )
        result = self.session.connection().execute(stmt)
        if result.rowcount == 0:
            self.session.connection().execute(
                insert(AccountBalanceModel).values(account=account, funds=amount)
            )
