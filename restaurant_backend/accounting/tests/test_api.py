# accounting/tests/test_api.py

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from accounting.models.journal import JournalEntry
from accounting.services.ledger_service import post_entry
from accounting.tests.factories import account, make_seeded_outlet
from outlets.models import OutletMembership

User = get_user_model()


class OutletLedgerApiTests(TestCase):
    """
    GUARANTEES:
    - Outlet data is visible to members only
    - Manual posting goes through the ledger service (same validation, same errors)
    - Staff can read but cannot post
    """

    def setUp(self):
        self.client = APIClient()

        self.outlet = make_seeded_outlet("Central")
        self.other_outlet = make_seeded_outlet("Airport")

        self.manager = User.objects.create_user(username="manager", password="pass")
        self.waiter = User.objects.create_user(username="waiter", password="pass")
        self.stranger = User.objects.create_user(username="stranger", password="pass")

        OutletMembership.objects.create(
            user=self.manager, outlet=self.outlet, role=OutletMembership.ROLE_MANAGER
        )
        OutletMembership.objects.create(
            user=self.waiter, outlet=self.outlet, role=OutletMembership.ROLE_STAFF
        )

        self.cash = account(self.outlet, "Cash on Hand")

        self.base = f"/api/accounting/outlets/{self.outlet.id}"

    # --------------------------------------------------
    # Helpers
    # --------------------------------------------------

    def _post_sale(self, amount="50.00", posted_at=None):
        return post_entry(
            outlet_id=self.outlet.id,
            lines=[
                {"account_name": "Cash on Hand", "debit": amount},
                {"account_name": "Sales Revenue", "credit": amount},
            ],
            description="Table 4",
            posted_at=posted_at,
        )

    def _payload(self, credit="30.00"):
        return {
            "description": "Cash count adjustment",
            "reference_type": "adjustment",
            "lines": [
                {"account_name": "Cash on Hand", "debit": "30.00"},
                {"account_name": "Sales Revenue", "credit": credit},
            ],
        }

    # --------------------------------------------------
    # Access control
    # --------------------------------------------------

    def test_anonymous_is_rejected(self):
        res = self.client.get(f"{self.base}/accounts/")
        self.assertEqual(res.status_code, 401)

    def test_non_member_is_forbidden(self):
        self.client.force_authenticate(self.stranger)
        res = self.client.get(f"{self.base}/accounts/")
        self.assertEqual(res.status_code, 403)

    def test_superuser_sees_any_outlet(self):
        admin = User.objects.create_superuser(username="root", password="pass")
        self.client.force_authenticate(admin)
        res = self.client.get(f"/api/accounting/outlets/{self.other_outlet.id}/accounts/")
        self.assertEqual(res.status_code, 200)

    # --------------------------------------------------
    # Reads
    # --------------------------------------------------

    def test_accounts_listed_by_code(self):
        self.client.force_authenticate(self.waiter)
        res = self.client.get(f"{self.base}/accounts/")

        self.assertEqual(res.status_code, 200)
        codes = [row["code"] for row in res.data]
        self.assertEqual(codes, sorted(codes))
        self.assertEqual(len(codes), 6)

    def test_journal_lists_entries_with_lines_newest_first(self):
        self._post_sale("10.00", posted_at=datetime(2026, 1, 5, 9))
        self._post_sale("20.00", posted_at=datetime(2026, 1, 20, 9))

        self.client.force_authenticate(self.waiter)
        res = self.client.get(f"{self.base}/journal/")

        self.assertEqual(res.status_code, 200)
        results = res.data["results"]
        self.assertEqual(len(results), 2)
        self.assertEqual(results[0]["lines"][0]["debit"], "20.00")
        self.assertEqual(results[0]["lines"][0]["account"]["name"], "Cash on Hand")

        res = self.client.get(
            f"{self.base}/journal/", {"start_date": "2026-01-01", "end_date": "2026-01-10"}
        )
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["lines"][0]["debit"], "10.00")

    def test_journal_excludes_other_outlets(self):
        post_entry(
            outlet_id=self.other_outlet.id,
            lines=[
                {"account_name": "Cash on Hand", "debit": "5.00"},
                {"account_name": "Sales Revenue", "credit": "5.00"},
            ],
            description="Elsewhere",
        )

        self.client.force_authenticate(self.manager)
        res = self.client.get(f"{self.base}/journal/")
        self.assertEqual(res.data["count"], 0)

    def test_account_ledger(self):
        self._post_sale("15.00")
        self._post_sale("25.00")

        self.client.force_authenticate(self.waiter)
        res = self.client.get(f"{self.base}/accounts/{self.cash.id}/ledger/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["account"]["name"], "Cash on Hand")
        self.assertEqual(res.data["account"]["balance"], "40.00")
        self.assertEqual(len(res.data["lines"]), 2)

    def test_account_ledger_unknown_or_foreign_account_is_404(self):
        foreign = account(self.other_outlet, "Cash on Hand")
        self.client.force_authenticate(self.manager)

        res = self.client.get(f"{self.base}/accounts/999999/ledger/")
        self.assertEqual(res.status_code, 404)

        res = self.client.get(f"{self.base}/accounts/{foreign.id}/ledger/")
        self.assertEqual(res.status_code, 404)

    # --------------------------------------------------
    # Manual posting
    # --------------------------------------------------

    def test_manager_can_post_journal_entry(self):
        self.client.force_authenticate(self.manager)
        res = self.client.post(f"{self.base}/journal/", self._payload(), format="json")

        self.assertEqual(res.status_code, 201, res.data)
        self.assertEqual(len(res.data["lines"]), 2)
        self.assertEqual(res.data["reference_type"], "adjustment")

        self.cash.refresh_from_db()
        self.assertEqual(self.cash.balance, Decimal("30.00"))

    def test_unbalanced_post_returns_400_and_writes_nothing(self):
        self.client.force_authenticate(self.manager)
        res = self.client.post(
            f"{self.base}/journal/", self._payload(credit="20.00"), format="json"
        )

        self.assertEqual(res.status_code, 400)
        self.assertIn("Unbalanced Ledger Entry", res.data["detail"])
        self.assertEqual(JournalEntry.objects.count(), 0)

    def test_unknown_account_post_returns_400(self):
        self.client.force_authenticate(self.manager)
        payload = self._payload()
        payload["lines"][1]["account_name"] = "Tips"

        res = self.client.post(f"{self.base}/journal/", payload, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["detail"], "Account not found: Tips")

    def test_line_without_account_fails_validation(self):
        self.client.force_authenticate(self.manager)
        payload = self._payload()
        del payload["lines"][0]["account_name"]

        res = self.client.post(f"{self.base}/journal/", payload, format="json")
        self.assertEqual(res.status_code, 400)

    def test_staff_cannot_post(self):
        self.client.force_authenticate(self.waiter)
        res = self.client.post(f"{self.base}/journal/", self._payload(), format="json")

        self.assertEqual(res.status_code, 403)
        self.assertEqual(JournalEntry.objects.count(), 0)


class ApiRootTests(TestCase):
    def test_health_check(self):
        res = APIClient().get("/api/health/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["status"], "ok")
