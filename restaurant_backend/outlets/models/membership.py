# outlets/models/membership.py

from django.conf import settings
from django.db import models

from outlets.models.outlet import Outlet


class OutletMembership(models.Model):
    """
    Grants a user access to one outlet with a job role.

    A user may belong to several outlets (one row each).
    """

    ROLE_OWNER = "OWNER"
    ROLE_MANAGER = "MANAGER"
    ROLE_ACCOUNTANT = "ACCOUNTANT"
    ROLE_STAFF = "STAFF"

    ROLE_CHOICES = [
        (ROLE_OWNER, "Owner"),
        (ROLE_MANAGER, "Manager"),
        (ROLE_ACCOUNTANT, "Accountant"),
        (ROLE_STAFF, "Staff"),
    ]

    # Roles allowed to post manual journal entries.
    LEDGER_POSTING_ROLES = frozenset({ROLE_OWNER, ROLE_MANAGER, ROLE_ACCOUNTANT})

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="outlet_memberships",
    )
    outlet = models.ForeignKey(
        Outlet,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    role = models.CharField(max_length=16, choices=ROLE_CHOICES, default=ROLE_STAFF)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["user", "outlet"],
                name="uniq_membership_user_outlet",
            ),
        ]

    def __str__(self):
        return f"{self.user} @ {self.outlet} ({self.role})"

    @property
    def can_post_ledger(self) -> bool:
        return self.role in self.LEDGER_POSTING_ROLES
