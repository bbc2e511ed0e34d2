# accounting/models/account.py

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from outlets.models import Outlet


class Account(models.Model):
    """
    A named ledger bucket owned by one outlet.

    Guarantees:
    - Account names are unique per outlet (name lookups are unambiguous)
    - Codes, when present, are unique per outlet
    - balance starts at zero and is ONLY moved by ledger postings
      (atomic increments issued by the ledger store)
    """

    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    REVENUE = "REVENUE"
    EXPENSE = "EXPENSE"

    ACCOUNT_TYPES = [
        (ASSET, "Asset"),
        (LIABILITY, "Liability"),
        (EQUITY, "Equity"),
        (REVENUE, "Revenue"),
        (EXPENSE, "Expense"),
    ]

    # Debits increase these; credits increase everything else.
    DEBIT_NORMAL_TYPES = frozenset({ASSET, EXPENSE})

    outlet = models.ForeignKey(
        Outlet,
        on_delete=models.PROTECT,
        related_name="accounts",
    )

    name = models.CharField(max_length=150)
    code = models.CharField(max_length=10, null=True, blank=True)

    account_type = models.CharField(
        max_length=20,
        choices=ACCOUNT_TYPES,
    )

    balance = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal("0.00"),
        editable=False,
        help_text="Running balance. Maintained by ledger postings only.",
    )

    is_system = models.BooleanField(
        default=False,
        help_text="Reserved account seeded for every outlet",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["code", "name"]
        verbose_name = "Account"
        verbose_name_plural = "Accounts"
        indexes = [
            models.Index(fields=["outlet", "account_type"], name="acct_outlet_type_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["outlet", "name"],
                name="uniq_account_outlet_name",
            ),
            models.UniqueConstraint(
                fields=["outlet", "code"],
                condition=Q(code__isnull=False) & ~Q(code=""),
                name="uniq_account_outlet_code_when_present",
            ),
            models.CheckConstraint(
                condition=~Q(name=""),
                name="chk_account_name_not_blank",
            ),
        ]

    def __str__(self):
        if self.code:
            return f"{self.code} – {self.name}"
        return self.name

    @property
    def is_debit_normal(self) -> bool:
        return self.account_type in self.DEBIT_NORMAL_TYPES

    def signed_delta(self, *, debit: Decimal, credit: Decimal) -> Decimal:
        """
        Balance change caused by a debit/credit pair on this account.

        - Assets & Expenses → debit - credit
        - Liabilities, Equity & Revenue → credit - debit
        """
        if self.is_debit_normal:
            return debit - credit
        return credit - debit

    def clean(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("Account name is required")

        if self.code is not None:
            self.code = self.code.strip() or None

        if self.account_type not in self.DEBIT_NORMAL_TYPES | {
            self.LIABILITY,
            self.EQUITY,
            self.REVENUE,
        }:
            raise ValidationError({"account_type": "Invalid account type"})

    def save(self, *args, **kwargs):
        if self._state.adding:
            if Decimal(self.balance or 0) != Decimal("0.00"):
                raise ValidationError(
                    "Accounts are created with a zero balance; post an opening journal entry instead"
                )
        else:
            update_fields = kwargs.get("update_fields")
            if update_fields is not None and "balance" in update_fields:
                raise ValidationError("Account balance can only change through ledger postings")

            # Never write balance from an in-memory (possibly stale) instance.
            if update_fields is None:
                kwargs["update_fields"] = [
                    f.name
                    for f in self._meta.concrete_fields
                    if not f.primary_key and f.name != "balance"
                ]

        self.full_clean()
        return super().save(*args, **kwargs)
