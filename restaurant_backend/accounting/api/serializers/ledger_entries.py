# accounting/api/serializers/ledger_entries.py

from rest_framework import serializers

from accounting.models.journal_line import JournalLine


class LedgerLineSerializer(serializers.ModelSerializer):
    """
    A journal line as seen from one account's ledger (carries its journal header).
    """

    journal_entry_id = serializers.IntegerField(read_only=True)
    posted_at = serializers.DateTimeField(source="journal_entry.posted_at", read_only=True)
    entry_description = serializers.CharField(source="journal_entry.description", read_only=True)
    reference_id = serializers.CharField(source="journal_entry.reference_id", read_only=True)
    reference_type = serializers.CharField(source="journal_entry.reference_type", read_only=True)

    class Meta:
        model = JournalLine
        fields = (
            "id",
            "journal_entry_id",
            "posted_at",
            "entry_description",
            "reference_id",
            "reference_type",
            "debit",
            "credit",
            "description",
        )
        read_only_fields = fields
