# outlets/models/__init__.py

"""
OUTLETS MODELS PACKAGE EXPORTS

Keep this file imports-only.
"""

from outlets.models.brand import Brand
from outlets.models.membership import OutletMembership
from outlets.models.outlet import Outlet

__all__ = [
    "Brand",
    "Outlet",
    "OutletMembership",
]
