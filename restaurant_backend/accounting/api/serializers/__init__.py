# accounting/api/serializers/__init__.py

from accounting.api.serializers.accounts import AccountListSerializer
from accounting.api.serializers.journal_entries import (
    JournalEntryCreateSerializer,
    JournalEntrySerializer,
    JournalLineInputSerializer,
    JournalLineSerializer,
)
from accounting.api.serializers.ledger_entries import LedgerLineSerializer

__all__ = [
    "AccountListSerializer",
    "JournalEntrySerializer",
    "JournalLineSerializer",
    "JournalLineInputSerializer",
    "JournalEntryCreateSerializer",
    "LedgerLineSerializer",
]
