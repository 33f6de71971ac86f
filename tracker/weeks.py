"""ISO-8601 week identifiers ("YYYY-Www")."""
import re

from django.utils import timezone

WEEK_IDENTIFIER_RE = re.compile(r"^\d{4}-W(0[1-9]|[1-4]\d|5[0-3])\Z")


def week_identifier(moment=None):
    """
    Return the ISO week identifier for ``moment`` (defaults to now).

    Aware datetimes are read in the configured local time zone. Near year
    boundaries the ISO year can differ from the calendar year, e.g.
    2021-01-01 belongs to 2020-W53.
    """
    if moment is None:
        moment = timezone.now()
    if timezone.is_aware(moment):
        moment = timezone.localtime(moment)
    iso_year, iso_week, _ = moment.isocalendar()
    return f"{iso_year:04d}-W{iso_week:02d}"
