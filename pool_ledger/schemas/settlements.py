from pydantic import BaseModel, Field
from pool_ledger.schemas.balances import PoolBalanceResult
from pool_ledger.schemas.expense import MemberId, Money

class SettlementRecord(BaseModel):
    from_id: MemberId
    to_id: MemberId
    amount: Money = Field(ge=0)
    note: str | None = None

    class Config:
        frozen = True
        from_attributes = True

class SettlementCreate(BaseModel):
    from_id: MemberId
    to_id: MemberId
    amount: Money = Field(gt=0)
    note: str | None = None

    class Config:
        frozen = True

class SettlementOutcome(BaseModel):
    settlement: SettlementRecord
    settlements: tuple[SettlementRecord, ...]
    result: PoolBalanceResult
    pool_settled: bool

    class Config:
        frozen = True
