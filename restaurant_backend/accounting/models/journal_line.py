# accounting/models/journal_line.py

"""
======================================================
PATH: accounting/models/journal_line.py
======================================================
JOURNAL LINE MODEL

One debit/credit component of a journal entry, tied to one account.

Guarantees:
- Immutable once created (no updates, no deletes)
- debit >= 0 and credit >= 0 (DB-enforced)
- Account and journal entry belong to the same outlet
- description defaults to the parent entry's description
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from accounting.models.account import Account
from accounting.models.journal import JournalEntry


class JournalLine(models.Model):
    journal_entry = models.ForeignKey(
        JournalEntry,
        on_delete=models.PROTECT,
        related_name="lines",
    )

    account = models.ForeignKey(
        Account,
        on_delete=models.PROTECT,
        related_name="journal_lines",
    )

    debit = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    credit = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal("0.00"),
    )

    description = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Journal Line"
        verbose_name_plural = "Journal Lines"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["account"], name="jline_account_idx"),
            models.Index(fields=["journal_entry"], name="jline_entry_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(debit__gte=0),
                name="chk_journal_line_debit_non_negative",
            ),
            models.CheckConstraint(
                condition=Q(credit__gte=0),
                name="chk_journal_line_credit_non_negative",
            ),
        ]

    def __str__(self):
        if self.debit and not self.credit:
            return f"DR {self.debit} → {self.account}"
        if self.credit and not self.debit:
            return f"CR {self.credit} → {self.account}"
        return f"DR {self.debit} / CR {self.credit} → {self.account}"

    def clean(self):
        if self.debit is None or self.credit is None:
            raise ValidationError("Debit and credit are required (use 0.00)")

        if self.debit < 0 or self.credit < 0:
            raise ValidationError("Debit or credit cannot be negative")

        if self.journal_entry_id and self.account_id:
            if self.account.outlet_id != self.journal_entry.outlet_id:
                raise ValidationError("Journal line account must belong to the entry's outlet")

        if not (self.description or "").strip() and self.journal_entry_id:
            self.description = self.journal_entry.description

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("JournalLine records are immutable and cannot be modified")

        self.full_clean()
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("JournalLine records are immutable and cannot be deleted")
