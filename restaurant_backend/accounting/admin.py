# accounting/admin.py

from django.contrib import admin

from accounting.models.account import Account
from accounting.models.journal import JournalEntry
from accounting.models.journal_line import JournalLine


class _ReadOnlyAdminMixin:
    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# ============================================================
# ACCOUNT
# ============================================================


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = (
        "code",
        "name",
        "account_type",
        "outlet",
        "balance",
        "is_system",
    )
    list_filter = ("account_type", "is_system", "outlet")
    search_fields = ("code", "name", "outlet__name")
    ordering = ("outlet", "code")
    readonly_fields = ("balance", "created_at", "updated_at")

    fieldsets = (
        (
            "Account Identity",
            {
                "fields": ("outlet", "code", "name", "account_type", "is_system"),
            },
        ),
        (
            "Ledger",
            {
                "fields": ("balance",),
            },
        ),
        (
            "System Fields",
            {
                "fields": ("created_at", "updated_at"),
            },
        ),
    )


# ============================================================
# JOURNAL (STRICTLY IMMUTABLE)
# ============================================================


class JournalLineInline(_ReadOnlyAdminMixin, admin.TabularInline):
    model = JournalLine
    extra = 0
    fields = ("account", "debit", "credit", "description")
    readonly_fields = fields


@admin.register(JournalEntry)
class JournalEntryAdmin(_ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = (
        "id",
        "outlet",
        "description",
        "reference",
        "posted_at",
        "created_at",
    )
    list_filter = ("outlet", "reference_type", "posted_at")
    search_fields = ("description", "reference_id")
    ordering = ("-posted_at",)
    inlines = [JournalLineInline]

    readonly_fields = (
        "outlet",
        "description",
        "reference_type",
        "reference_id",
        "posted_at",
        "created_at",
    )


@admin.register(JournalLine)
class JournalLineAdmin(_ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = (
        "id",
        "journal_entry",
        "account",
        "debit",
        "credit",
        "created_at",
    )
    list_filter = ("account__account_type",)
    search_fields = ("journal_entry__reference_id", "account__code", "account__name")
    ordering = ("created_at",)

    readonly_fields = (
        "journal_entry",
        "account",
        "debit",
        "credit",
        "description",
        "created_at",
    )
