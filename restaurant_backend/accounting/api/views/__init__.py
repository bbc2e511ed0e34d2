# accounting/api/views/__init__.py

"""
accounting.api.views package

Do NOT import accounting.api.urls from here to avoid circular imports.
"""

from accounting.api.views.accounts import AccountLedgerView, OutletAccountsView
from accounting.api.views.journal import OutletJournalView

__all__ = [
    "OutletAccountsView",
    "AccountLedgerView",
    "OutletJournalView",
]
