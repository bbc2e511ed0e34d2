# outlets/models/outlet.py

import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from outlets.models.brand import Brand


class OutletQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status=Outlet.STATUS_ACTIVE)


class Outlet(models.Model):
    """
    Represents a single physical restaurant location.

    Guarantees:
    - Outlet is the scoping unit for ledger accounts + journal entries
    - name is unique within its brand
    - code is optional, but if provided it must be unique within the brand
    """

    STATUS_ACTIVE = "ACTIVE"
    STATUS_INACTIVE = "INACTIVE"

    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_INACTIVE, "Inactive"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    brand = models.ForeignKey(
        Brand,
        on_delete=models.PROTECT,
        related_name="outlets",
    )

    name = models.CharField(max_length=255)
    code = models.CharField(
        max_length=50,
        null=True,
        blank=True,
        help_text="Short outlet code (optional). If set, must be unique within the brand.",
    )
    address = models.TextField(blank=True)

    status = models.CharField(
        max_length=16,
        choices=STATUS_CHOICES,
        default=STATUS_ACTIVE,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = OutletQuerySet.as_manager()

    class Meta:
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=["brand", "name"],
                name="uniq_outlet_brand_name",
            ),
            models.UniqueConstraint(
                fields=["brand", "code"],
                condition=Q(code__isnull=False) & ~Q(code=""),
                name="uniq_outlet_brand_code_when_present",
            ),
        ]

    def __str__(self):
        c = (self.code or "").strip()
        if c:
            return f"{self.name} ({c})"
        return self.name

    @property
    def is_active(self) -> bool:
        return self.status == self.STATUS_ACTIVE

    def clean(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("Outlet name is required")

        if self.code is not None:
            self.code = self.code.strip() or None

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)
