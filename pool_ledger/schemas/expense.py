from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, BeforeValidator, Field
from pool_ledger.core.utils import to_decimal

MemberId = int | str


def _float_to_decimal(v):
    if isinstance(v, float):
        return to_decimal(v)
    return v


Money = Annotated[Decimal, BeforeValidator(_float_to_decimal)]

class ExpenseRecord(BaseModel):
    payer_id: MemberId
    amount: Money = Field(ge=0)
    title: str | None = None

    class Config:
        frozen = True
        from_attributes = True
