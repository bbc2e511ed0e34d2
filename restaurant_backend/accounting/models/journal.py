# accounting/models/journal.py

"""
======================================================
PATH: accounting/models/journal.py
======================================================
JOURNAL ENTRY MODEL

Represents a single balanced financial event (journal header) for one outlet.

Guarantees:
- Immutable once created (no updates, no deletes)
- Always created together with its lines by the ledger service
- posted_at is the accounting effective date (used for journal filtering + ledgers)
- reference_type/reference_id are traceability only (never validated elsewhere)
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Sum
from django.utils import timezone

from outlets.models import Outlet


class JournalEntry(models.Model):
    outlet = models.ForeignKey(
        Outlet,
        on_delete=models.PROTECT,
        related_name="journal_entries",
    )

    posted_at = models.DateTimeField(
        default=timezone.now,
        help_text="Accounting effective date",
    )

    description = models.TextField(help_text="Narrative description of the journal entry")

    reference_id = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        help_text="Originating business object id (order, payment, purchase...)",
    )
    reference_type = models.CharField(
        max_length=50,
        blank=True,
        null=True,
        help_text="Originating business object type (e.g. order)",
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when the journal entry was created",
    )

    class Meta:
        ordering = ["-posted_at", "-created_at"]
        indexes = [
            models.Index(fields=["outlet", "posted_at"], name="journal_outlet_posted_idx"),
            models.Index(fields=["reference_type", "reference_id"], name="journal_reference_idx"),
        ]
        verbose_name = "Journal Entry"
        verbose_name_plural = "Journal Entries"

    def __str__(self):
        return f"JournalEntry #{self.id} – {self.posted_at.date()}"

    @property
    def reference(self) -> str | None:
        if self.reference_type and self.reference_id:
            return f"{self.reference_type}:{self.reference_id}"
        return self.reference_id or None

    def _line_total(self, field: str) -> Decimal:
        total = self.lines.aggregate(total=Sum(field))["total"]
        return total or Decimal("0.00")

    @property
    def total_debit(self) -> Decimal:
        return self._line_total("debit")

    @property
    def total_credit(self) -> Decimal:
        return self._line_total("credit")

    def clean(self):
        for attr in ("reference_id", "reference_type"):
            value = getattr(self, attr)
            if value is not None:
                setattr(self, attr, str(value).strip() or None)

        self.description = (self.description or "").strip()
        if not self.description:
            raise ValidationError("Journal entry description is required")

        if self.posted_at and timezone.is_naive(self.posted_at):
            self.posted_at = timezone.make_aware(self.posted_at, timezone.get_current_timezone())

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("JournalEntry records are immutable once created")

        self.full_clean()
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("JournalEntry records are immutable and cannot be deleted")
