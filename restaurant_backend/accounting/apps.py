# accounting/apps.py

"""
ACCOUNTING APP CONFIG

Outlet-scoped double-entry ledger:
- Accounts (running balances)
- Journal entries + lines (immutable)
- Ledger posting service (the only writer of balances)
"""

from django.apps import AppConfig


class AccountingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "accounting"
    verbose_name = "Accounting Ledger"
