# accounting/api/filters.py

import django_filters

from accounting.models.journal import JournalEntry


class JournalEntryFilter(django_filters.FilterSet):
    """
    /journal/?start_date=2026-01-01&end_date=2026-01-31
    Both bounds are inclusive calendar dates on posted_at.
    """

    start_date = django_filters.DateFilter(field_name="posted_at", lookup_expr="date__gte")
    end_date = django_filters.DateFilter(field_name="posted_at", lookup_expr="date__lte")
    reference_type = django_filters.CharFilter(field_name="reference_type")
    reference_id = django_filters.CharFilter(field_name="reference_id")

    class Meta:
        model = JournalEntry
        fields = ["start_date", "end_date", "reference_type", "reference_id"]
