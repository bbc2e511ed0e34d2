# accounting/api/views/accounts.py

"""
PATH: accounting/api/views/accounts.py

OUTLET ACCOUNTS API (READ-ONLY)

GET /api/accounting/outlets/<outlet_id>/accounts/
    - Accounts of one outlet, ordered by code
GET /api/accounting/outlets/<outlet_id>/accounts/<account_id>/ledger/
    - {account, lines}: every journal line on the account, newest posting first

Tenant safety:
- IsOutletMember gates on the outlet in the URL
- Every query is filtered by that outlet (an id from another outlet is a 404)
"""

from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounting.api.serializers.accounts import AccountListSerializer
from accounting.api.serializers.ledger_entries import LedgerLineSerializer
from accounting.models.account import Account
from accounting.models.journal_line import JournalLine
from outlets.models import Outlet
from outlets.permissions import IsOutletMember


class OutletAccountsView(GenericAPIView):
    permission_classes = [IsAuthenticated, IsOutletMember]
    serializer_class = AccountListSerializer
    pagination_class = None

    @extend_schema(
        tags=["accounting"],
        responses=AccountListSerializer(many=True),
    )
    def get(self, request, outlet_id, *args, **kwargs):
        outlet = get_object_or_404(Outlet, pk=outlet_id)

        qs = Account.objects.filter(outlet=outlet).order_by("code", "name")

        return Response(AccountListSerializer(qs, many=True).data, status=status.HTTP_200_OK)


class AccountLedgerView(GenericAPIView):
    permission_classes = [IsAuthenticated, IsOutletMember]
    serializer_class = LedgerLineSerializer
    pagination_class = None

    @extend_schema(
        tags=["accounting"],
        responses={200: dict, 404: dict},
    )
    def get(self, request, outlet_id, account_id, *args, **kwargs):
        account = Account.objects.filter(outlet_id=outlet_id, pk=account_id).first()
        if account is None:
            return Response(
                {"detail": "Account not found."},
                status=status.HTTP_404_NOT_FOUND,
            )

        lines = (
            JournalLine.objects.filter(account=account)
            .select_related("journal_entry")
            .order_by("-journal_entry__posted_at", "-id")
        )

        return Response(
            {
                "account": AccountListSerializer(account).data,
                "lines": LedgerLineSerializer(lines, many=True).data,
            },
            status=status.HTTP_200_OK,
        )
