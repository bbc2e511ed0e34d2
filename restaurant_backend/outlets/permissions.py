# outlets/permissions.py

"""
OUTLET TENANT GUARDS

Every outlet-scoped endpoint carries an `outlet_id` URL kwarg.
Access rules:
- Superusers can see every outlet
- Everyone else needs an OutletMembership row for that outlet
- Ledger posting additionally needs a posting role (owner/manager/accountant)
"""

from __future__ import annotations

from rest_framework.permissions import SAFE_METHODS, BasePermission

from outlets.models import OutletMembership


def get_membership(user, outlet_id) -> OutletMembership | None:
    if not user or not user.is_authenticated or not outlet_id:
        return None

    return (
        OutletMembership.objects.filter(user=user, outlet_id=outlet_id)
        .select_related("outlet")
        .first()
    )


def user_can_access_outlet(user, outlet_id) -> bool:
    if not user or not user.is_authenticated:
        return False
    if user.is_superuser:
        return True
    return get_membership(user, outlet_id) is not None


def user_can_post_ledger(user, outlet_id) -> bool:
    if not user or not user.is_authenticated:
        return False
    if user.is_superuser:
        return True

    membership = get_membership(user, outlet_id)
    return membership is not None and membership.can_post_ledger


class IsOutletMember(BasePermission):
    """
    Tenant isolation for views routed under /outlets/<outlet_id>/.

    Reads need membership; writes need a ledger posting role.
    """

    message = "You do not have access to this outlet."

    def has_permission(self, request, view):
        outlet_id = view.kwargs.get("outlet_id")

        if request.method in SAFE_METHODS:
            return user_can_access_outlet(request.user, outlet_id)

        if not user_can_access_outlet(request.user, outlet_id):
            return False

        if not user_can_post_ledger(request.user, outlet_id):
            self.message = "Your role at this outlet cannot post journal entries."
            return False

        return True
