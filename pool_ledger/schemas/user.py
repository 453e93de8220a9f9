from pydantic import BaseModel
from pool_ledger.schemas.expense import MemberId

class MemberProfile(BaseModel):
    id: MemberId
    email: str
    first_name: str | None = None
    last_name: str | None = None
    venmo_handle: str | None = None

    class Config:
        frozen = True
        from_attributes = True
