# accounting/tests/factories.py

from __future__ import annotations

import uuid

from accounting.models.account import Account
from accounting.services.account_seeding import seed_default_accounts
from outlets.models import Brand, Outlet


def make_outlet(name: str | None = None, *, brand: Brand | None = None, **extra) -> Outlet:
    if brand is None:
        brand = Brand.objects.create(name=f"Brand {uuid.uuid4().hex[:8]}")
    return Outlet.objects.create(
        brand=brand,
        name=name or f"Outlet {uuid.uuid4().hex[:8]}",
        **extra,
    )


def make_seeded_outlet(name: str | None = None, **extra) -> Outlet:
    outlet = make_outlet(name, **extra)
    seed_default_accounts(outlet)
    return outlet


def account(outlet: Outlet, name: str) -> Account:
    return Account.objects.get(outlet=outlet, name=name)
