import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence
from pool_ledger.core.config import settings
from pool_ledger.core.utils import qround, is_negligible
from pool_ledger.schemas.balances import NetBalance, PoolBalanceResult, SimplifiedDebt
from pool_ledger.schemas.expense import ExpenseRecord, MemberId
from pool_ledger.schemas.settlements import SettlementRecord

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _credit(net: Dict[MemberId, Decimal], member_id: MemberId, amount: Decimal):
    if member_id not in net:
        logger.warning("Member %r is not in the roster, tracking separately", member_id)
        net[member_id] = ZERO
    net[member_id] += amount


def accumulate_net_balances(
    expenses: Iterable[ExpenseRecord],
    settlements: Iterable[SettlementRecord],
    member_ids: Sequence[MemberId],
) -> Dict[MemberId, Decimal]:
    """
    Returns:
        {
            member_id: net_balance (Decimal, unrounded)
        }

    net_balance = total_paid - equal_share_of_every_expense
                  + settlements_paid - settlements_received

    Keys follow roster order; ids outside the roster are appended in the
    order they are first seen.
    """
    net: Dict[MemberId, Decimal] = {uid: ZERO for uid in member_ids}
    if not net:
        return net

    roster = list(net)
    member_count = len(roster)

    for exp in expenses:
        share = exp.amount / member_count

        # payer is credited the full amount
        _credit(net, exp.payer_id, exp.amount)

        # everyone in the roster owes their share, payer included
        for uid in roster:
            net[uid] -= share

    for s in settlements:
        _credit(net, s.from_id, s.amount)
        _credit(net, s.to_id, -s.amount)

    return net


def simplify_debts(
    net_map: Dict[MemberId, Decimal],
    tolerance: Decimal | None = None,
) -> List[SimplifiedDebt]:
    """
    Greedy largest-creditor vs largest-debtor matching.

    Every iteration fully resolves at least one side, so the loop runs at most
    once per non-zero balance and yields at most n - 1 transfers. Ties go to
    the member seen first in ``net_map`` order.
    """
    if tolerance is None:
        tolerance = settings.CURRENCY_TOLERANCE

    balances: Dict[MemberId, Decimal] = {}
    for uid, bal in net_map.items():
        rounded = qround(bal)
        if abs(rounded) > tolerance:  # one cent or less is rounding noise
            balances[uid] = rounded

    transfers: List[SimplifiedDebt] = []

    while balances:
        cred_id, cred_amt = None, ZERO
        for uid, bal in balances.items():
            if bal > cred_amt:
                cred_id, cred_amt = uid, bal

        debt_id, debt_amt = None, ZERO
        for uid, bal in balances.items():
            if -bal > debt_amt:
                debt_id, debt_amt = uid, -bal

        if cred_id is None or debt_id is None:
            break

        pay_amt = min(cred_amt, debt_amt)

        if pay_amt > tolerance:
            transfers.append(SimplifiedDebt(from_id=debt_id, to_id=cred_id, amount=qround(pay_amt)))

        new_cred = cred_amt - pay_amt
        new_debt = -debt_amt + pay_amt

        if is_negligible(new_cred, tolerance):
            del balances[cred_id]
        else:
            balances[cred_id] = new_cred

        if is_negligible(new_debt, tolerance):
            del balances[debt_id]
        else:
            balances[debt_id] = new_debt

    return transfers


def compute_balances(
    expenses: Iterable[ExpenseRecord],
    settlements: Iterable[SettlementRecord],
    member_ids: Sequence[MemberId],
    *,
    tolerance: Decimal | None = None,
) -> PoolBalanceResult:
    """
    Net balances and suggested transfers for a pool snapshot.

    Expenses are split equally across the whole current roster. Balances are
    rounded to cents and sorted largest creditor first; members with equal
    balances keep roster order.
    """
    if not member_ids:
        logger.debug("Empty roster, nothing to compute")
        return PoolBalanceResult()

    expenses = list(expenses)
    net = accumulate_net_balances(expenses, settlements, member_ids)

    net_balances = [
        NetBalance(member_id=uid, balance=qround(bal)) for uid, bal in net.items()
    ]
    net_balances.sort(key=lambda nb: nb.balance, reverse=True)

    total = sum((exp.amount for exp in expenses), ZERO)

    return PoolBalanceResult(
        net_balances=net_balances,
        simplified_debts=simplify_debts(net, tolerance),
        total_expense_amount=qround(total),
    )


def compute_member_balance(
    expenses: Iterable[ExpenseRecord],
    settlements: Iterable[SettlementRecord],
    member_ids: Sequence[MemberId],
    member_id: MemberId,
) -> Decimal:
    net = accumulate_net_balances(expenses, settlements, member_ids)
    return qround(net.get(member_id, ZERO))


def is_group_settled(
    result: PoolBalanceResult,
    tolerance: Decimal | None = None,
) -> bool:
    """
    A group is settled if:
        abs(net_balance) <= tolerance
        for every member
    """
    if tolerance is None:
        tolerance = settings.CURRENCY_TOLERANCE

    for nb in result.net_balances:
        if abs(nb.balance) > tolerance:
            return False

    return True
