from decimal import Decimal
from pydantic import BaseModel, Field
from pool_ledger.schemas.expense import MemberId
from pool_ledger.schemas.user import MemberProfile

class NetBalance(BaseModel):
    member_id: MemberId
    balance: Decimal
    member: MemberProfile | None = None

    class Config:
        frozen = True

class SimplifiedDebt(BaseModel):
    from_id: MemberId
    to_id: MemberId
    amount: Decimal = Field(gt=0)
    from_member: MemberProfile | None = None
    to_member: MemberProfile | None = None

    class Config:
        frozen = True

class PoolBalanceResult(BaseModel):
    net_balances: list[NetBalance] = []
    simplified_debts: list[SimplifiedDebt] = []
    total_expense_amount: Decimal = Decimal("0.00")

    class Config:
        frozen = True

    def balance_of(self, member_id: MemberId) -> Decimal | None:
        for nb in self.net_balances:
            if nb.member_id == member_id:
                return nb.balance
        return None
