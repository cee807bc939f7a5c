from __future__ import annotations

import logging
import threading

from sqlalchemy.engine import Engine
from sqlmodel import Session

from ..core.db import init_db
from .banking import WireTransfers, ensure_non_negative
from .repository import BalanceRepository


logger = logging.getLogger(__name__)


class SqlBank(WireTransfers):
    """Bank whose balance table lives in a SQLModel database.

    Every call opens its own session and commits once. A transfer debits
    the source with a single conditional UPDATE, so banks sharing one
    database can never both spend the same balance. Writers within an
    instance are also serialized by a lock.
    """

    def __init__(self, engine: Engine, *, create_tables: bool = True) -> None:
        self.engine = engine
        self._lock = threading.Lock()
        if create_tables:
            init_db(engine)

    def get_funds(self, account: str) -> int:
        with Session(self.engine) as session:
            balance = BalanceRepository(session).get_balance(account)
            return balance.funds if balance is not None else 0

    def set_funds(self, account: str, amount: int) -> None:
        ensure_non_negative(amount)
        with self._lock, Session(self.engine) as session:
            BalanceRepository(session).overwrite_funds(account, amount)
            session.commit()
        logger.info("funds.set", extra={"account": account, "amount": amount})

    def transfer_funds(self, amount: int, from_account: str, to_account: str) -> bool:
        ensure_non_negative(amount)
        if amount == 0:
            return True

        with self._lock, Session(self.engine) as session:
            repository = BalanceRepository(session)
            if not repository.debit_if_covered(from_account, amount):
                source = repository.get_balance(from_account)
                logger.info(
                    "funds.transfer.rejected",
                    extra={
                        "from_account": from_account,
                        "to_account": to_account,
                        "amount": amount,
                        "balance": source.funds if source is not None else 0,
                    },
                )
                return False

            repository.credit(to_account, amount)
            session.commit()

        logger.info(
            "funds.transfer",
            extra={
                "from_account": from_account,
                "to_account": to_account,
                "amount": amount,
            },
        )
        return True
