# accounting/tests/test_account_seeding.py

from __future__ import annotations

from io import StringIO

from django.core.management import CommandError, call_command
from django.test import TestCase

from accounting.models.account import Account
from accounting.services.account_seeding import DEFAULT_ACCOUNTS, seed_default_accounts
from accounting.tests.factories import make_outlet
from outlets.models import Outlet


class SeedDefaultAccountsTests(TestCase):
    def setUp(self):
        self.outlet = make_outlet("Seaside")

    def test_seeds_every_default_account(self):
        result = seed_default_accounts(self.outlet)

        self.assertEqual(result.created, len(DEFAULT_ACCOUNTS))
        self.assertEqual(result.skipped, 0)

        accounts = {a.name: a for a in Account.objects.filter(outlet=self.outlet)}
        for code, name, account_type in DEFAULT_ACCOUNTS:
            self.assertIn(name, accounts)
            self.assertEqual(accounts[name].code, code)
            self.assertEqual(accounts[name].account_type, account_type)
            self.assertTrue(accounts[name].is_system)
            self.assertEqual(str(accounts[name].balance), "0.00")

    def test_seeding_logs_counts_at_info_level(self):
        with self.assertLogs("accounting.services.account_seeding", level="INFO") as logs:
            result = seed_default_accounts(self.outlet)

        self.assertEqual(result.created, len(DEFAULT_ACCOUNTS))
        self.assertEqual(len(logs.records), 1)

        record = logs.records[0]
        self.assertEqual(record.getMessage(), "Default accounts seeded")
        self.assertEqual(record.created_count, len(DEFAULT_ACCOUNTS))
        self.assertEqual(record.skipped_count, 0)
        self.assertEqual(Account.objects.filter(outlet=self.outlet).count(), len(DEFAULT_ACCOUNTS))

    def test_is_idempotent(self):
        seed_default_accounts(self.outlet)
        again = seed_default_accounts(self.outlet)

        self.assertEqual(again.created, 0)
        self.assertEqual(again.skipped, len(DEFAULT_ACCOUNTS))
        self.assertEqual(Account.objects.filter(outlet=self.outlet).count(), len(DEFAULT_ACCOUNTS))

    def test_existing_account_with_same_name_is_skipped(self):
        Account.objects.create(
            outlet=self.outlet, code="1100", name="Cash on Hand", account_type=Account.ASSET
        )

        result = seed_default_accounts(self.outlet)

        self.assertEqual(result.skipped, 1)
        self.assertEqual(Account.objects.get(outlet=self.outlet, name="Cash on Hand").code, "1100")

    def test_taken_code_is_left_blank_on_the_seeded_account(self):
        Account.objects.create(
            outlet=self.outlet, code="1000", name="Float", account_type=Account.ASSET
        )

        seed_default_accounts(self.outlet)

        self.assertIsNone(Account.objects.get(outlet=self.outlet, name="Cash on Hand").code)

    def test_outlets_are_seeded_independently(self):
        other = make_outlet("Hillside")

        seed_default_accounts(self.outlet)
        result = seed_default_accounts(other)

        self.assertEqual(result.created, len(DEFAULT_ACCOUNTS))


class SeedFinancialAccountsCommandTests(TestCase):
    def test_seeds_active_outlets_only(self):
        active = make_outlet("Open")
        closed = make_outlet("Closed", status=Outlet.STATUS_INACTIVE)

        out = StringIO()
        call_command("seed_financial_accounts", stdout=out)

        self.assertEqual(Account.objects.filter(outlet=active).count(), len(DEFAULT_ACCOUNTS))
        self.assertEqual(Account.objects.filter(outlet=closed).count(), 0)
        self.assertIn("Open: 6 created, 0 skipped", out.getvalue())

    def test_single_outlet_option(self):
        first = make_outlet("First")
        second = make_outlet("Second")

        call_command("seed_financial_accounts", "--outlet", str(second.id), stdout=StringIO())

        self.assertEqual(Account.objects.filter(outlet=first).count(), 0)
        self.assertEqual(Account.objects.filter(outlet=second).count(), len(DEFAULT_ACCOUNTS))

    def test_unknown_outlet_fails(self):
        with self.assertRaises(CommandError):
            call_command(
                "seed_financial_accounts",
                "--outlet",
                "00000000-0000-0000-0000-000000000000",
                stdout=StringIO(),
            )
