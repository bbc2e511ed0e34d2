# accounting/services/balance_service.py

"""
BALANCE VERIFICATION SERVICE

Read-only checks of the running Account.balance against the journal.

RULES:
- READ-ONLY: no writes, ever
- JournalLine rows are the source of truth; Account.balance is a cache of them
- Same sign rule as posting:
    Assets & Expenses → debits - credits
    Liabilities, Equity & Revenue → credits - debits
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from django.db.models import Sum
from django.db.models.functions import Coalesce

from accounting.models.account import Account
from accounting.models.journal_line import JournalLine


class BalanceServiceError(Exception):
    """Base error for balance verification services."""


TWOPLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def _q2(v) -> Decimal:
    return Decimal(str(v or "0.00")).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class BalanceDrift:
    account_id: int
    outlet_id: object
    account_name: str
    stored_balance: Decimal
    computed_balance: Decimal

    @property
    def difference(self) -> Decimal:
        return _q2(self.stored_balance - self.computed_balance)


def _signed(account: Account, debit: Decimal, credit: Decimal) -> Decimal:
    return _q2(account.signed_delta(debit=_q2(debit), credit=_q2(credit)))


def compute_account_balance(account: Account) -> Decimal:
    """Recompute an account's balance from its journal lines."""
    if account is None:
        raise BalanceServiceError("Account is required")

    totals = JournalLine.objects.filter(account=account).aggregate(
        debit_total=Coalesce(Sum("debit"), ZERO),
        credit_total=Coalesce(Sum("credit"), ZERO),
    )
    return _signed(account, totals["debit_total"], totals["credit_total"])


def _line_totals_by_account(account_ids) -> dict:
    rows = (
        JournalLine.objects.filter(account_id__in=account_ids)
        .values("account_id")
        .annotate(
            debit_total=Coalesce(Sum("debit"), ZERO),
            credit_total=Coalesce(Sum("credit"), ZERO),
        )
    )
    return {r["account_id"]: (r["debit_total"], r["credit_total"]) for r in rows}


def _accounts_qs(outlet=None):
    qs = Account.objects.all()
    if outlet is not None:
        qs = qs.filter(outlet=outlet)
    return qs.order_by("outlet_id", "code", "name")


def find_balance_drift(outlet=None) -> list[BalanceDrift]:
    """
    Accounts whose stored balance differs from the journal (bulk, no N+1).
    outlet=None checks every outlet.
    """
    accounts = list(_accounts_qs(outlet))
    if not accounts:
        return []

    totals = _line_totals_by_account([a.id for a in accounts])

    drift = []
    for acc in accounts:
        debit, credit = totals.get(acc.id, (ZERO, ZERO))
        computed = _signed(acc, debit, credit)
        stored = _q2(acc.balance)
        if stored != computed:
            drift.append(
                BalanceDrift(
                    account_id=acc.id,
                    outlet_id=acc.outlet_id,
                    account_name=acc.name,
                    stored_balance=stored,
                    computed_balance=computed,
                )
            )
    return drift


def get_trial_balance(outlet) -> list[dict]:
    """
    Per-account debit/credit totals for one outlet, alongside the stored balance.
    Σ debit_total == Σ credit_total whenever every entry was posted balanced.
    """
    if outlet is None:
        raise BalanceServiceError("Outlet is required")

    accounts = list(_accounts_qs(outlet))
    if not accounts:
        return []

    totals = _line_totals_by_account([a.id for a in accounts])

    results = []
    for acc in accounts:
        debit, credit = totals.get(acc.id, (ZERO, ZERO))
        results.append(
            {
                "account_id": acc.id,
                "code": acc.code,
                "name": acc.name,
                "account_type": acc.account_type,
                "debit_total": _q2(debit),
                "credit_total": _q2(credit),
                "balance": _q2(acc.balance),
            }
        )

    return results
