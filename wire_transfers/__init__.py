from .core.errors import BankError, InvalidAmountError
from .services import InMemoryBank, SqlBank, TransferService, WireTransfers

__all__ = [
    "BankError",
    "InMemoryBank",
    "InvalidAmountError",
    "SqlBank",
    "TransferService",
    "WireTransfers",
]
