# accounting/api/urls.py

from django.urls import path

from accounting.api.views.accounts import AccountLedgerView, OutletAccountsView
from accounting.api.views.journal import OutletJournalView

urlpatterns = [
    path(
        "outlets/<uuid:outlet_id>/accounts/",
        OutletAccountsView.as_view(),
        name="outlet-accounts",
    ),
    path(
        "outlets/<uuid:outlet_id>/accounts/<int:account_id>/ledger/",
        AccountLedgerView.as_view(),
        name="account-ledger",
    ),
    path(
        "outlets/<uuid:outlet_id>/journal/",
        OutletJournalView.as_view(),
        name="outlet-journal",
    ),
]
