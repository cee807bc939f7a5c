from .banking import InMemoryBank, WireTransfers
from .repository import BalanceRepository
from .sql_bank import SqlBank
from .transfers import TransferService

__all__ = [
    "BalanceRepository",
    "InMemoryBank",
    "SqlBank",
    "TransferService",
    "WireTransfers",
]
