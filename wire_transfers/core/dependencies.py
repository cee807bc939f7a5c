from __future__ import annotations

import logging
from functools import lru_cache

from ..services import InMemoryBank, SqlBank, WireTransfers
from .config import Settings, get_settings
from .db import create_engine_for_url


logger = logging.getLogger(__name__)


def build_bank(settings: Settings) -> WireTransfers:
    if settings.bank_backend == "sql":
        bank: WireTransfers = SqlBank(create_engine_for_url(settings.database_url))
    else:
        bank = InMemoryBank()
    logger.info("bank.created", extra={"backend": settings.bank_backend})
    return bank


@lru_cache()
def get_bank() -> WireTransfers:
    return build_bank(get_settings())
