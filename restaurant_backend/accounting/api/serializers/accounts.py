# accounting/api/serializers/accounts.py

from rest_framework import serializers

from accounting.models.account import Account


class AccountListSerializer(serializers.ModelSerializer):
    """
    Read-only serializer for an outlet's accounts.
    balance is the running balance maintained by ledger postings.
    """

    class Meta:
        model = Account
        fields = ("id", "code", "name", "account_type", "balance", "is_system")
        read_only_fields = fields
