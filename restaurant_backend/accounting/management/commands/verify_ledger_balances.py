# accounting/management/commands/verify_ledger_balances.py

from __future__ import annotations

from django.core.management.base import BaseCommand

from accounting.services.balance_service import find_balance_drift
from outlets.models import Outlet


class Command(BaseCommand):
    help = "Verify stored account balances against the journal lines (read-only)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--outlet",
            dest="outlet_id",
            help="Outlet UUID (optional; defaults to every outlet)",
        )
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Fail (non-zero exit) if any drift is found.",
        )

    def handle(self, *args, **options):
        strict = bool(options.get("strict"))
        outlet = None

        outlet_id = options.get("outlet_id")
        if outlet_id:
            try:
                outlet = Outlet.objects.get(pk=outlet_id)
            except (Outlet.DoesNotExist, ValueError, TypeError):
                outlet = None
            if outlet is None:
                self.stderr.write(self.style.ERROR(f"Outlet not found: {outlet_id}"))
                return self._exit(strict)

        drift = find_balance_drift(outlet)

        if not drift:
            self.stdout.write(self.style.SUCCESS("✔ All account balances match the journal."))
            return None

        for d in drift:
            self.stdout.write(
                self.style.ERROR(
                    f"✖ {d.account_name} (account {d.account_id}, outlet {d.outlet_id}): "
                    f"stored={d.stored_balance} journal={d.computed_balance} diff={d.difference}"
                )
            )

        self.stdout.write(self.style.WARNING(f"{len(drift)} account(s) drifted from the journal."))
        return self._exit(strict)

    def _exit(self, fail: bool):
        if fail:
            raise SystemExit(1)
        return None
