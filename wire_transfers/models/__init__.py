from .db import AccountBalance as AccountBalanceModel
from .schemas import (
    BalanceResponse,
    BalanceUpdate,
    TransferReceipt,
    TransferRequest,
)

__all__ = [
    "BalanceResponse",
    "BalanceUpdate",
    "TransferReceipt",
    "TransferRequest",
    "AccountBalanceModel",
]
