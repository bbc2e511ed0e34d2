# accounting/management/commands/seed_financial_accounts.py

from django.core.management.base import BaseCommand, CommandError

from accounting.services.account_seeding import seed_default_accounts
from outlets.models import Outlet


class Command(BaseCommand):
    help = "Seed the default financial accounts for every active outlet (or one outlet)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--outlet",
            dest="outlet_id",
            help="Outlet UUID (optional; defaults to all ACTIVE outlets)",
        )

    def handle(self, *args, **options):
        outlet_id = options.get("outlet_id")

        if outlet_id:
            try:
                outlets = [Outlet.objects.get(pk=outlet_id)]
            except (Outlet.DoesNotExist, ValueError, TypeError) as exc:
                raise CommandError(f"Outlet not found: {outlet_id}") from exc
        else:
            outlets = list(Outlet.objects.active().select_related("brand").order_by("name"))

        if not outlets:
            self.stdout.write(self.style.WARNING("No active outlets found. Nothing to seed."))
            return

        total_created = 0
        for outlet in outlets:
            result = seed_default_accounts(outlet)
            total_created += result.created
            self.stdout.write(
                f"{outlet.name}: {result.created} created, {result.skipped} skipped"
            )

        self.stdout.write(
            self.style.SUCCESS(
                f"✔ Financial accounts seeded for {len(outlets)} outlet(s) ({total_created} new accounts)."
            )
        )
