# accounting/services/ledger_store.py

"""
======================================================
PATH: accounting/services/ledger_store.py
======================================================
LEDGER STORE (PERSISTENCE SEAM)

The posting engine only needs four persistence capabilities:
- point lookup of an outlet account by exact name
- point lookup of an outlet account by id
- insert a journal entry together with all of its lines
- atomic "balance = balance + delta" on one account

LedgerStore is that narrow interface. DjangoLedgerStore implements it with the ORM
against one database alias. The transaction boundary is owned by the engine
(transaction.atomic(using=store.using)), so a store works the same whether it is
called at top level or inside a caller's open transaction (nested → savepoint).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Iterable, Protocol, runtime_checkable

from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS
from django.db.models import F

from accounting.models.account import Account
from accounting.models.journal import JournalEntry
from accounting.models.journal_line import JournalLine


@runtime_checkable
class LedgerStore(Protocol):
    using: str

    def find_account_by_name(self, outlet_id, name: str) -> Account | None: ...

    def get_account(self, outlet_id, account_id) -> Account | None: ...

    def create_entry_with_lines(
        self,
        *,
        outlet_id,
        description: str,
        posted_at: datetime,
        reference_id: str | None,
        reference_type: str | None,
        lines: Iterable,
    ) -> JournalEntry: ...

    def increment_balance(self, account_id, delta: Decimal) -> None: ...


class DjangoLedgerStore:
    """
    ORM-backed LedgerStore.

    increment_balance issues a single UPDATE with an F() expression, so concurrent
    postings against the same account serialize on the row lock instead of
    overwriting each other (no read-modify-write).
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def _accounts(self):
        return Account.objects.using(self.using)

    def find_account_by_name(self, outlet_id, name: str) -> Account | None:
        try:
            return self._accounts().filter(outlet_id=outlet_id, name=name).first()
        except (TypeError, ValueError, ValidationError):
            # Malformed outlet ids (e.g. "abc" for a UUID pk) own no accounts.
            return None

    def get_account(self, outlet_id, account_id) -> Account | None:
        try:
            return self._accounts().filter(outlet_id=outlet_id, pk=account_id).first()
        except (TypeError, ValueError, ValidationError):
            # Malformed account or outlet ids simply do not resolve.
            return None

    def create_entry_with_lines(
        self,
        *,
        outlet_id,
        description: str,
        posted_at: datetime,
        reference_id: str | None,
        reference_type: str | None,
        lines: Iterable,
    ) -> JournalEntry:
        entry = JournalEntry(
            outlet_id=outlet_id,
            description=description,
            posted_at=posted_at,
            reference_id=reference_id,
            reference_type=reference_type,
        )
        entry.save(using=self.using)

        JournalLine.objects.using(self.using).bulk_create(
            [
                JournalLine(
                    journal_entry=entry,
                    account=line.account,
                    debit=line.debit,
                    credit=line.credit,
                    description=line.description or entry.description,
                )
                for line in lines
            ]
        )
        return entry

    def increment_balance(self, account_id, delta: Decimal) -> None:
        updated = self._accounts().filter(pk=account_id).update(balance=F("balance") + delta)
        if updated != 1:
            # Resolution already proved the row exists; a miss here means it vanished
            # mid-transaction, which must abort the whole posting.
            raise Account.DoesNotExist(f"Account {account_id} disappeared during posting")
