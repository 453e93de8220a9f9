import logging
from decimal import Decimal
from typing import Iterable, Sequence
from pool_ledger.core.config import settings
from pool_ledger.core.exceptions import (
    NotAMemberError,
    OverpaymentError,
    RecipientNotMemberError,
    SelfPaymentError,
)
from pool_ledger.schemas.expense import ExpenseRecord, MemberId
from pool_ledger.schemas.settlements import SettlementCreate, SettlementOutcome, SettlementRecord
from pool_ledger.services.balance_service import compute_balances, is_group_settled

logger = logging.getLogger(__name__)


def validate_settlement(
    data: SettlementCreate,
    expenses: Iterable[ExpenseRecord],
    settlements: Iterable[SettlementRecord],
    member_ids: Sequence[MemberId],
) -> Decimal:
    """
    Checks a payment before it is recorded and returns the largest amount
    the payer may send to the recipient right now.
    """
    if data.from_id not in member_ids:
        raise NotAMemberError("Not a member of this pool")

    if data.to_id not in member_ids:
        raise RecipientNotMemberError("Recipient is not a member of this pool")

    if data.from_id == data.to_id:
        raise SelfPaymentError("Cannot record a payment to yourself")

    result = compute_balances(expenses, settlements, member_ids)

    debt = next(
        (
            d for d in result.simplified_debts
            if d.from_id == data.from_id and d.to_id == data.to_id
        ),
        None,
    )
    max_amount = debt.amount if debt else Decimal("0.00")

    if data.amount > max_amount + settings.CURRENCY_TOLERANCE:
        raise OverpaymentError(
            f"Amount exceeds what you owe. Maximum: ${max_amount:.2f}",
            max_amount=max_amount,
        )

    return max_amount


def record_settlement(
    data: SettlementCreate,
    expenses: Iterable[ExpenseRecord],
    settlements: Iterable[SettlementRecord],
    member_ids: Sequence[MemberId],
) -> SettlementOutcome:
    expenses = tuple(expenses)
    settlements = tuple(settlements)

    validate_settlement(data, expenses, settlements, member_ids)

    settlement = SettlementRecord(
        from_id=data.from_id,
        to_id=data.to_id,
        amount=data.amount,
        note=data.note,
    )
    updated = settlements + (settlement,)

    # Check if pool is now fully settled
    result = compute_balances(expenses, updated, member_ids)
    pool_settled = bool(expenses) and is_group_settled(result)

    if pool_settled:
        logger.info("Pool settled after payment %r -> %r", data.from_id, data.to_id)

    return SettlementOutcome(
        settlement=settlement,
        settlements=updated,
        result=result,
        pool_settled=pool_settled,
    )
