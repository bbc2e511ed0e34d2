# outlets/apps.py

"""
OUTLETS APP CONFIG

Tenancy master data:
- Brand (restaurant group)
- Outlet (physical location; the ledger scoping unit)
- OutletMembership (staff -> outlet access + role)
"""

from django.apps import AppConfig


class OutletsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "outlets"
    verbose_name = "Brands & Outlets"
