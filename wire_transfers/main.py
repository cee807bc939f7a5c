import logging

from .core.config import get_settings
from .core.dependencies import get_bank
from .services import TransferService, WireTransfers


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)


def bootstrap() -> WireTransfers:
    configure_logging()
    return get_bank()


def get_transfer_service() -> TransferService:
    return TransferService(bootstrap())
