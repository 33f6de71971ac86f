import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError, connections

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Check that the task store is reachable, then serve the tracker over HTTP."

    def add_arguments(self, parser):
        parser.add_argument(
            "addrport", nargs="?",
            help="Optional ip:port to bind (defaults to 0.0.0.0:WEEKLY_PORT).",
        )
        parser.add_argument(
            "--noreload", action="store_false", dest="use_reloader",
            help="Do not use the auto-reloader.",
        )

    def handle(self, *args, **options):
        connection = connections[settings.TRACKER_DB_ALIAS]
        try:
            connection.ensure_connection()
        except DatabaseError as exc:
            raise CommandError(f"Cannot reach the task database: {exc}") from exc
        logger.info("Connected to the task database (%s)", connection.vendor)

        addrport = options["addrport"] or f"0.0.0.0:{settings.TRACKER_PORT}"
        host = addrport.rpartition(":")[0].strip("[]")
        if host in ("", "0.0.0.0", "::") and "*" not in settings.ALLOWED_HOSTS:
            logger.warning(
                "Listening on all interfaces but only serving hosts %s; set WEEKLY_ALLOWED_HOSTS "
                "to accept requests for other names",
                ", ".join(settings.ALLOWED_HOSTS) or "(none)",
            )
        self.stdout.write(f"Weekly tracker listening on http://{addrport}/")
        call_command("runserver", addrport, use_reloader=options["use_reloader"])
