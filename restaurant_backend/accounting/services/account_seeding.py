# accounting/services/account_seeding.py

"""
Default chart seeding for outlets.

Every outlet needs the system accounts that workflow postings refer to by name
(e.g. "Cash on Hand", "Sales Revenue"). Seeding is idempotent: accounts that
already exist in the outlet under the same name are left untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import transaction

from accounting.models.account import Account

logger = logging.getLogger(__name__)


DEFAULT_ACCOUNTS = [
    ("1000", "Cash on Hand", Account.ASSET),
    ("1001", "Bank Account", Account.ASSET),
    ("1200", "Inventory Asset", Account.ASSET),
    ("2000", "Accounts Payable", Account.LIABILITY),
    ("4000", "Sales Revenue", Account.REVENUE),
    ("5000", "Cost of Goods Sold", Account.EXPENSE),
]


@dataclass(frozen=True)
class SeedResult:
    created: int
    skipped: int


@transaction.atomic
def seed_default_accounts(outlet) -> SeedResult:
    existing = set(Account.objects.filter(outlet=outlet).values_list("name", flat=True))
    taken_codes = set(
        Account.objects.filter(outlet=outlet, code__isnull=False).values_list("code", flat=True)
    )

    created = 0
    skipped = 0

    for code, name, account_type in DEFAULT_ACCOUNTS:
        if name in existing:
            skipped += 1
            continue

        Account.objects.create(
            outlet=outlet,
            # A custom account may already hold the default code; keep the name, drop the code.
            code=None if code in taken_codes else code,
            name=name,
            account_type=account_type,
            is_system=True,
        )
        created += 1

    logger.info(
        "Default accounts seeded",
        extra={
            "outlet_id": str(outlet.pk),
            "created_count": created,
            "skipped_count": skipped,
        },
    )
    return SeedResult(created=created, skipped=skipped)
