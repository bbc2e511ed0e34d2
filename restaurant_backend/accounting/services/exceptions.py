# accounting/services/exceptions.py

"""
LEDGER SERVICE ERRORS

Centralized domain errors for ledger posting.

All of these are raised BEFORE any write happens, so the caller may fix the
input and retry. Database errors are never wrapped: they propagate as-is.
"""


class LedgerError(Exception):
    """Base exception for all ledger posting failures."""


class LedgerValidationError(LedgerError):
    """Raised when posting input is rejected before any lookup or write."""


class UnbalancedEntryError(LedgerValidationError):
    """Raised when total debits and total credits differ beyond tolerance."""

    def __init__(self, total_debit, total_credit):
        self.total_debit = total_debit
        self.total_credit = total_credit
        super().__init__(f"Unbalanced Ledger Entry: Debit {total_debit} != Credit {total_credit}")


class MissingAccountReferenceError(LedgerValidationError):
    """Raised when a line supplies neither an account id nor an account name."""


class InvalidJournalLineError(LedgerValidationError):
    """Raised on malformed lines (bad/negative amounts, too few lines, no description)."""


class AccountNotFoundError(LedgerError):
    """Raised when a line's account cannot be resolved within the outlet."""

    def __init__(self, reference):
        self.reference = reference
        super().__init__(f"Account not found: {reference}")
