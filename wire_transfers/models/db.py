from __future__ import annotations

from sqlmodel import Field, SQLModel


class AccountBalance(SQLModel, table=True):
    account: str = Field(primary_key=True)
    funds: int = Field(default=0, ge=0)
