"""
Django management command to expire licensees past their expiration date.

This command should be run periodically (e.g., via cron or scheduled task).
"""

import logging
from datetime import date

from django.core.management.base import BaseCommand, CommandError

from api.services import LicenseeLifecycleService

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise CommandError(f"Invalid --as-of date {value!r}, expected YYYY-MM-DD") from exc


class Command(BaseCommand):
    """Command to run the licensee expiration sweep."""

    help = "Mark licensees whose expiration date has passed as Expired"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--as-of",
            dest="as_of",
            help="Reference date (YYYY-MM-DD), defaults to today",
        )
        parser.add_argument(
            "--days",
            type=int,
            default=None,
            help="Horizon in days for the expiring-soon count",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Dry run mode - report candidates without changing anything",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        as_of = _parse_date(options["as_of"]) if options["as_of"] else None
        service = LicenseeLifecycleService.default()

        if options["dry_run"]:
            evaluation = service.evaluate_expirations(as_of=as_of, horizon_days=options["days"])
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING("DRY RUN - No changes will be made"))
            self.stdout.write(
                f"Found {len(evaluation.expired)} licensee(s) to expire "
                f"and {len(evaluation.expiring_soon)} expiring within "
                f"{evaluation.horizon_days} day(s) as of {evaluation.as_of}"
            )
            for licensee_id in evaluation.expired[:10]:  # Show first 10
                self.stdout.write(f"  - Licensee {licensee_id}")
            return

        report = service.run_expiration_sweep(as_of=as_of, horizon_days=options["days"])
        for failure in report.failures:
            self.stderr.write(
                f"  - Licensee {failure.licensee_id}: {failure.code} {failure.message}"
            )
        self.stdout.write(
            # pylint: disable=no-member
            self.style.SUCCESS(
                f"Marked {report.expired_count} licensee(s) as expired; "
                f"{report.expiring_soon_count} expiring within "
                f"{report.horizon_days} day(s) as of {report.as_of}"
            )
        )
