from pydantic import BaseModel, Field


class BalanceUpdate(BaseModel):
    account: str = Field(..., min_length=1, description="Account identifier")
    amount: int = Field(..., ge=0, description="New balance in minor units")


class BalanceResponse(BaseModel):
    account: str
    funds: int


class TransferRequest(BaseModel):
    from_account: str = Field(..., min_length=1)
    to_account: str = Field(..., min_length=1)
    amount: int = Field(..., ge=0, description="Amount in minor units")


class TransferReceipt(BaseModel):
    from_account: str
    to_account: str
    amount: int
    accepted: bool
    from_balance: int = Field(..., description="Source balance after the attempt")
    to_balance: int = Field(..., description="Destination balance after the attempt")
