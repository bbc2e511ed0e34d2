# accounting/api/serializers/journal_entries.py

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from accounting.api.serializers.accounts import AccountListSerializer
from accounting.models.journal import JournalEntry
from accounting.models.journal_line import JournalLine


class JournalLineSerializer(serializers.ModelSerializer):
    account = AccountListSerializer(read_only=True)

    class Meta:
        model = JournalLine
        fields = ("id", "account", "debit", "credit", "description")
        read_only_fields = fields


class JournalEntrySerializer(serializers.ModelSerializer):
    lines = JournalLineSerializer(many=True, read_only=True)

    class Meta:
        model = JournalEntry
        fields = (
            "id",
            "outlet",
            "posted_at",
            "description",
            "reference_id",
            "reference_type",
            "created_at",
            "lines",
        )
        read_only_fields = fields


class JournalLineInputSerializer(serializers.Serializer):
    """
    One posting line. Either account_id or account_name must be given.
    Amounts accept sub-cent precision; the ledger service applies the
    balance tolerance and stores cents.
    """

    account_id = serializers.IntegerField(required=False, allow_null=True)
    account_name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    debit = serializers.DecimalField(
        max_digits=18,
        decimal_places=4,
        min_value=Decimal("0"),
        required=False,
        default=Decimal("0"),
    )
    credit = serializers.DecimalField(
        max_digits=18,
        decimal_places=4,
        min_value=Decimal("0"),
        required=False,
        default=Decimal("0"),
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        name = attrs.get("account_name")
        if name is not None:
            attrs["account_name"] = str(name).strip() or None

        if attrs.get("account_id") is None and not attrs.get("account_name"):
            raise serializers.ValidationError("Line missing account_id or account_name")
        return attrs


class JournalEntryCreateSerializer(serializers.Serializer):
    """
    Input serializer for manual journal postings (Swagger-visible).
    """

    description = serializers.CharField()
    posted_at = serializers.DateTimeField(required=False, allow_null=True)
    reference_id = serializers.CharField(
        max_length=100, required=False, allow_blank=True, allow_null=True
    )
    reference_type = serializers.CharField(
        max_length=50, required=False, allow_blank=True, allow_null=True
    )
    lines = JournalLineInputSerializer(many=True)

    def validate_description(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("description is required")
        return v

    def validate_lines(self, value):
        if len(value) < 2:
            raise serializers.ValidationError("A journal entry needs at least 2 lines")
        return value
