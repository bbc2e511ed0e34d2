# accounting/api/views/journal.py

"""
PATH: accounting/api/views/journal.py

OUTLET JOURNAL API

GET  /api/accounting/outlets/<outlet_id>/journal/?start_date=&end_date=
    - Entries with nested lines + accounts, newest first (paginated)
    - Any outlet member

POST /api/accounting/outlets/<outlet_id>/journal/
    - Manual journal posting (adjustments) through the ledger service
    - Owner / manager / accountant of the outlet (or superuser)
    - Rejected input → 400 {"detail": ...}; nothing is written
"""

import logging

from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounting.api.filters import JournalEntryFilter
from accounting.api.serializers.journal_entries import (
    JournalEntryCreateSerializer,
    JournalEntrySerializer,
)
from accounting.models.journal import JournalEntry
from accounting.services.exceptions import LedgerError
from accounting.services.ledger_service import post_entry
from outlets.models import Outlet
from outlets.permissions import IsOutletMember

logger = logging.getLogger(__name__)


def _journal_queryset(outlet_id):
    return (
        JournalEntry.objects.filter(outlet_id=outlet_id)
        .prefetch_related("lines__account")
        .order_by("-posted_at", "-id")
    )


class OutletJournalView(GenericAPIView):
    permission_classes = [IsAuthenticated, IsOutletMember]
    filterset_class = JournalEntryFilter

    def get_queryset(self):
        return _journal_queryset(self.kwargs.get("outlet_id"))

    def get_serializer_class(self):
        if self.request is not None and self.request.method == "POST":
            return JournalEntryCreateSerializer
        return JournalEntrySerializer

    @extend_schema(
        tags=["accounting"],
        responses=JournalEntrySerializer(many=True),
    )
    def get(self, request, outlet_id, *args, **kwargs):
        get_object_or_404(Outlet, pk=outlet_id)

        qs = self.filter_queryset(self.get_queryset())

        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(JournalEntrySerializer(page, many=True).data)

        return Response(JournalEntrySerializer(qs, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["accounting"],
        request=JournalEntryCreateSerializer,
        responses={201: JournalEntrySerializer, 400: dict, 403: dict},
    )
    def post(self, request, outlet_id, *args, **kwargs):
        outlet = get_object_or_404(Outlet, pk=outlet_id)

        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            entry = post_entry(
                outlet_id=outlet.pk,
                lines=[dict(line) for line in data["lines"]],
                description=data["description"],
                posted_at=data.get("posted_at"),
                reference_id=data.get("reference_id"),
                reference_type=data.get("reference_type") or "manual",
            )
        except LedgerError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        logger.info(
            "Manual journal entry posted",
            extra={
                "journal_entry_id": entry.id,
                "outlet_id": str(outlet.pk),
                "user_id": request.user.pk,
            },
        )

        entry = _journal_queryset(outlet.pk).get(pk=entry.pk)
        return Response(JournalEntrySerializer(entry).data, status=status.HTTP_201_CREATED)
