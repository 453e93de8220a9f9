from typing import Mapping
from pool_ledger.schemas.balances import PoolBalanceResult
from pool_ledger.schemas.expense import MemberId
from pool_ledger.schemas.user import MemberProfile


def get_display_name(profile: MemberProfile | None) -> str:
    """
    Priority: first + last name > first or last name > email username
    """
    if profile is None:
        return "Unknown"

    if profile.first_name or profile.last_name:
        return " ".join(p for p in (profile.first_name, profile.last_name) if p)

    return profile.email.split("@")[0]


def get_initials(profile: MemberProfile | None) -> str:
    if profile is None:
        return "?"

    if profile.first_name:
        return profile.first_name[0].upper()

    return profile.email[0].upper()


def attach_profiles(
    result: PoolBalanceResult,
    profiles: Mapping[MemberId, MemberProfile],
) -> PoolBalanceResult:
    """
    Copy of ``result`` with display data attached; the computed amounts are
    left untouched.
    """
    net_balances = [
        nb.model_copy(update={"member": profiles.get(nb.member_id)})
        for nb in result.net_balances
    ]
    debts = [
        d.model_copy(update={
            "from_member": profiles.get(d.from_id),
            "to_member": profiles.get(d.to_id),
        })
        for d in result.simplified_debts
    ]

    return result.model_copy(update={
        "net_balances": net_balances,
        "simplified_debts": debts,
    })
