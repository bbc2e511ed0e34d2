# accounting/tests/test_concurrent_posting.py

from __future__ import annotations

import threading
import unittest
from decimal import Decimal
from unittest.mock import patch

from django.db import connection, connections
from django.test import TestCase, TransactionTestCase

from accounting.models.journal import JournalEntry
from accounting.services.ledger_service import post_entry
from accounting.services.ledger_store import DjangoLedgerStore
from accounting.tests.factories import account, make_seeded_outlet


def _sale(outlet, amount: str, description: str):
    return post_entry(
        outlet_id=outlet.id,
        lines=[
            {"account_name": "Cash on Hand", "debit": amount},
            {"account_name": "Sales Revenue", "credit": amount},
        ],
        description=description,
    )


class NestedInterleavingPostingTests(TestCase):
    """
    Deterministic lost-update check on a single connection.

    A second posting runs, nested inside the first one's transaction, after the
    first resolved its accounts but before it applied its increment. Both deltas
    must survive, which a read-modify-write of a stale balance would break.

    This does not exercise parallel transactions; ThreadedPostingTests below
    does, on PostgreSQL only.
    """

    def setUp(self):
        self.outlet = make_seeded_outlet("Harbour")
        self.cash = account(self.outlet, "Cash on Hand")
        self.sales = account(self.outlet, "Sales Revenue")

    def test_nested_posting_between_resolve_and_increment_keeps_both_deltas(self):
        original = DjangoLedgerStore.increment_balance
        state = {"fired": False}
        outlet = self.outlet
        cash_id = self.cash.id

        def interleaving(store, account_id, delta):
            if not state["fired"] and account_id == cash_id:
                state["fired"] = True
                _sale(outlet, "25.00", "Concurrent order")
            return original(store, account_id, delta)

        with patch.object(
            DjangoLedgerStore, "increment_balance", autospec=True, side_effect=interleaving
        ):
            _sale(self.outlet, "100.00", "First order")

        self.cash.refresh_from_db()
        self.sales.refresh_from_db()

        self.assertEqual(JournalEntry.objects.count(), 2)
        self.assertEqual(self.cash.balance, Decimal("125.00"))
        self.assertEqual(self.sales.balance, Decimal("125.00"))


@unittest.skipUnless(connection.vendor == "postgresql", "needs row-level locking (PostgreSQL)")
class ThreadedPostingTests(TransactionTestCase):
    """
    Parallel postings from separate connections against one account.
    Skipped on SQLite, which serializes writers at the database level.
    """

    WORKERS = 8

    def setUp(self):
        self.outlet = make_seeded_outlet("Stress")
        self.cash = account(self.outlet, "Cash on Hand")

    def test_parallel_postings_on_one_account(self):
        barrier = threading.Barrier(self.WORKERS)
        errors = []

        def worker(i):
            try:
                barrier.wait()
                _sale(self.outlet, "10.00", f"Order {i}")
            except Exception as exc:  # surfaced through the assertion below
                errors.append(exc)
            finally:
                connections.close_all()

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(self.WORKERS)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        self.cash.refresh_from_db()
        self.assertEqual(self.cash.balance, Decimal("10.00") * self.WORKERS)
        self.assertEqual(JournalEntry.objects.count(), self.WORKERS)
