import pytest
from pool_ledger.schemas.expense import ExpenseRecord
from pool_ledger.schemas.settlements import SettlementRecord


@pytest.fixture
def expense():
    def make(payer_id, amount, title=None):
        return ExpenseRecord(payer_id=payer_id, amount=amount, title=title)
    return make


@pytest.fixture
def settlement():
    def make(from_id, to_id, amount, note=None):
        return SettlementRecord(from_id=from_id, to_id=to_id, amount=amount, note=note)
    return make
