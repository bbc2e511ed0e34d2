# accounting/services/ledger_service.py

"""
======================================================
PATH: accounting/services/ledger_service.py
======================================================
LEDGER SERVICE (POSTING ENGINE)

This module is the ONLY place allowed to:
- Create JournalEntry / JournalLine rows
- Enforce debits == credits (within LEDGER_BALANCE_TOLERANCE)
- Move Account.balance

Order of operations (post_entry):
1) validate + balance check on the raw input   (no DB access)
2) resolve every line's account within the outlet (reads only)
3) one transaction: insert entry + lines, then one atomic increment per account

Steps 1-2 fail with LedgerError subclasses before anything is written.
Step 3 is all-or-nothing; database errors propagate untouched (no retries here).

Workflows (orders, supplier payments, daily close...) decide WHEN to post and
WHICH lines to build; they all pass through post_entry.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Union

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from accounting.models.account import Account
from accounting.models.journal import JournalEntry
from accounting.services.exceptions import (
    AccountNotFoundError,
    InvalidJournalLineError,
    MissingAccountReferenceError,
    UnbalancedEntryError,
)
from accounting.services.ledger_store import DjangoLedgerStore, LedgerStore

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")
MIN_LINES = 2


# ============================================================
# INPUT TYPES
# ============================================================


@dataclass(frozen=True)
class AccountById:
    account_id: Any

    def __str__(self):
        return f"id={self.account_id}"


@dataclass(frozen=True)
class AccountByName:
    name: str

    def __str__(self):
        return self.name


AccountRef = Union[AccountById, AccountByName]


@dataclass(frozen=True)
class LedgerLine:
    account: AccountRef
    debit: Any = Decimal("0.00")
    credit: Any = Decimal("0.00")
    description: str | None = None


@dataclass(frozen=True)
class ResolvedLine:
    account: Account
    debit: Decimal
    credit: Decimal
    description: str | None = None


def _balance_tolerance() -> Decimal:
    return Decimal(str(getattr(settings, "LEDGER_BALANCE_TOLERANCE", "0.01")))


def _amount(value, *, field: str) -> Decimal:
    """
    Parse a line amount without rounding (rounding happens at persistence).
    Floats go through str() so 99.995 stays 99.995.
    """
    if value is None or value == "":
        return Decimal("0.00")

    if isinstance(value, bool):
        raise InvalidJournalLineError(f"Invalid {field} amount: {value!r}")

    if isinstance(value, Decimal):
        amt = value
    else:
        try:
            amt = Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError) as exc:
            raise InvalidJournalLineError(f"Invalid {field} amount: {value!r}") from exc

    if not amt.is_finite():
        raise InvalidJournalLineError(f"Invalid {field} amount: {value!r}")
    if amt < 0:
        raise InvalidJournalLineError(f"{field.capitalize()} cannot be negative: {amt}")

    return amt


def _money(value: Decimal) -> Decimal:
    return value.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _account_ref(account_id=None, account_name=None) -> AccountRef:
    if account_id not in (None, ""):
        return AccountById(account_id)

    name = (account_name or "").strip() if isinstance(account_name, str) else account_name
    if name:
        return AccountByName(name)

    raise MissingAccountReferenceError("Line missing account_id or account_name")


def coerce_line(raw) -> LedgerLine:
    """
    Accept a LedgerLine or a mapping:
        {"account_id": 7, "debit": "50.00", "credit": 0}
        {"account_name": "Cash on Hand", "debit": 50, "credit": 0, "description": "..."}
    An explicit id wins over a name when both are given.
    """
    if isinstance(raw, LedgerLine):
        if raw.account is None:
            raise MissingAccountReferenceError("Line missing account_id or account_name")
        return raw

    if not isinstance(raw, Mapping):
        raise InvalidJournalLineError("Each line must be a LedgerLine or a mapping")

    return LedgerLine(
        account=_account_ref(raw.get("account_id"), raw.get("account_name")),
        debit=raw.get("debit"),
        credit=raw.get("credit"),
        description=raw.get("description"),
    )


def _as_aware_dt(dt: datetime | None) -> datetime:
    if dt is None:
        return timezone.now()
    if timezone.is_naive(dt):
        return timezone.make_aware(dt, timezone.get_current_timezone())
    return dt


def _clean_optional(value) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


# ============================================================
# ENGINE STEPS
# ============================================================


def check_balanced(lines: Iterable[LedgerLine]) -> tuple[Decimal, Decimal]:
    """
    Sum debits and credits on the raw input AND on the per-line cent amounts
    that will be stored.
    Raises UnbalancedEntryError when either |debits - credits| exceeds the tolerance.
    """
    tolerance = _balance_tolerance()

    total_debit = Decimal("0")
    total_credit = Decimal("0")
    stored_debit = Decimal("0.00")
    stored_credit = Decimal("0.00")

    for line in lines:
        debit = _amount(line.debit, field="debit")
        credit = _amount(line.credit, field="credit")
        total_debit += debit
        total_credit += credit
        stored_debit += _money(debit)
        stored_credit += _money(credit)

    if abs(total_debit - total_credit) > tolerance:
        raise UnbalancedEntryError(total_debit, total_credit)

    # Per-line rounding can drift apart across many sub-cent lines.
    if abs(stored_debit - stored_credit) > tolerance:
        raise UnbalancedEntryError(stored_debit, stored_credit)

    return total_debit, total_credit


def resolve_lines(
    *, outlet_id, lines: Iterable[LedgerLine], store: LedgerStore
) -> list[ResolvedLine]:
    """
    Resolve each line's AccountRef to an Account of this outlet, in input order.
    """
    resolved: list[ResolvedLine] = []

    for line in lines:
        ref = line.account
        if isinstance(ref, AccountByName):
            account = store.find_account_by_name(outlet_id, ref.name)
        elif isinstance(ref, AccountById):
            account = store.get_account(outlet_id, ref.account_id)
        else:
            raise MissingAccountReferenceError("Line missing account_id or account_name")

        if account is None:
            raise AccountNotFoundError(ref)

        resolved.append(
            ResolvedLine(
                account=account,
                debit=_money(_amount(line.debit, field="debit")),
                credit=_money(_amount(line.credit, field="credit")),
                description=_clean_optional(line.description),
            )
        )

    return resolved


def balance_deltas(resolved: Iterable[ResolvedLine]) -> "OrderedDict[Any, Decimal]":
    """
    Signed balance change per account id (accounting-equation sign rule),
    aggregated so each account receives exactly one increment.
    """
    deltas: OrderedDict[Any, Decimal] = OrderedDict()
    for line in resolved:
        delta = line.account.signed_delta(debit=line.debit, credit=line.credit)
        deltas[line.account.pk] = deltas.get(line.account.pk, Decimal("0.00")) + delta
    return deltas


# ============================================================
# PUBLIC API
# ============================================================


def post_entry(
    *,
    outlet_id,
    lines: Iterable,
    description: str,
    posted_at: datetime | None = None,
    reference_id: str | None = None,
    reference_type: str | None = None,
    store: LedgerStore | None = None,
) -> JournalEntry:
    """
    Post one balanced journal entry for an outlet and move account balances.

    lines: LedgerLine objects or mappings with account_id | account_name, debit, credit.
    Returns the created JournalEntry.

    Raises:
    - UnbalancedEntryError / MissingAccountReferenceError / InvalidJournalLineError
    - AccountNotFoundError
    - django.db.DatabaseError (and subclasses) from the persistence layer
    """
    store = store or DjangoLedgerStore()

    description = (description or "").strip()
    if not description:
        raise InvalidJournalLineError("Journal entry description is required")

    ledger_lines = [coerce_line(raw) for raw in (lines or [])]
    if len(ledger_lines) < MIN_LINES:
        raise InvalidJournalLineError(
            f"Journal entry needs at least {MIN_LINES} lines (got {len(ledger_lines)})"
        )

    try:
        total_debit, total_credit = check_balanced(ledger_lines)
    except UnbalancedEntryError as exc:
        logger.warning(
            "Rejected unbalanced journal entry",
            extra={
                "outlet_id": str(outlet_id),
                "total_debit": str(exc.total_debit),
                "total_credit": str(exc.total_credit),
            },
        )
        raise

    try:
        resolved = resolve_lines(outlet_id=outlet_id, lines=ledger_lines, store=store)
    except AccountNotFoundError as exc:
        logger.warning(
            "Rejected journal entry: account not found",
            extra={"outlet_id": str(outlet_id), "account_ref": str(exc.reference)},
        )
        raise

    deltas = balance_deltas(resolved)
    posted_at_dt = _as_aware_dt(posted_at)

    try:
        with transaction.atomic(using=store.using):
            entry = store.create_entry_with_lines(
                outlet_id=outlet_id,
                description=description,
                posted_at=posted_at_dt,
                reference_id=_clean_optional(reference_id),
                reference_type=_clean_optional(reference_type),
                lines=resolved,
            )
            for account_id, delta in deltas.items():
                if delta:
                    store.increment_balance(account_id, delta)
    except Exception:
        logger.exception(
            "Journal entry persistence failed; nothing was committed",
            extra={"outlet_id": str(outlet_id), "line_count": len(resolved)},
        )
        raise

    logger.info(
        "Journal entry posted",
        extra={
            "journal_entry_id": entry.id,
            "outlet_id": str(outlet_id),
            "line_count": len(resolved),
            "total_debit": str(total_debit),
            "total_credit": str(total_credit),
            "reference_type": entry.reference_type,
            "reference_id": entry.reference_id,
        },
    )
    return entry
