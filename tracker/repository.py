import datetime
import logging

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .exceptions import StorageError, TaskIdUnavailable
from .models import Task, TaskStatus

logger = logging.getLogger(__name__)

INSERT_TASK_SQL = "INSERT INTO tasks (description, week_identifier, status) VALUES (%s, %s, %s)"
SELECT_TASKS_BY_WEEK_SQL = (
    "SELECT id, description, week_identifier, status, created_at, updated_at "
    "FROM tasks WHERE week_identifier = %s ORDER BY created_at DESC, id DESC"
)


def _to_datetime(value):
    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = parse_datetime(value)
    else:
        parsed = None
    if parsed is None:
        raise ValueError(f"unreadable timestamp: {value!r}")
    # naive values coming back from the store are UTC
    if settings.USE_TZ and timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, datetime.timezone.utc)
    return parsed


class TaskRepository:
    """
    Raw, parameterized SQL against the ``tasks`` table.

    The connection is a Django database wrapper (``connections[alias]``)
    handed in by the caller; nothing here reaches for a global handle.
    """

    def __init__(self, connection):
        self.connection = connection

    def insert(self, description, week_identifier, status=TaskStatus.PENDING):
        params = [description, week_identifier, str(status)]
        returning = self.connection.features.can_return_columns_from_insert
        try:
            with self.connection.cursor() as cursor:
                if returning:
                    cursor.execute(INSERT_TASK_SQL + " RETURNING id", params)
                else:
                    cursor.execute(INSERT_TASK_SQL, params)
                return self._generated_id(cursor, returning)
        except DatabaseError as exc:
            raise StorageError("inserting task failed") from exc

    def _generated_id(self, cursor, returning):
        try:
            if returning:
                row = cursor.fetchone()
                task_id = row[0] if row else None
            else:
                task_id = self.connection.ops.last_insert_id(cursor, Task._meta.db_table, "id")
        except DatabaseError as exc:
            raise TaskIdUnavailable("task inserted but id lookup failed") from exc
        # ids start at 1; some drivers report 0 for "unknown"
        if not task_id:
            raise TaskIdUnavailable("task inserted but the store returned no id")
        return int(task_id)

    def list_by_week(self, week_identifier):
        tasks = []
        try:
            with self.connection.cursor() as cursor:
                cursor.execute(SELECT_TASKS_BY_WEEK_SQL, [week_identifier])
                for row in cursor:
                    tasks.append(self._row_to_task(row))
        except DatabaseError as exc:
            raise StorageError(f"listing tasks for {week_identifier} failed") from exc
        except (ValueError, TypeError) as exc:
            raise StorageError(f"malformed task row for {week_identifier}") from exc
        logger.debug("Fetched %d task(s) for %s", len(tasks), week_identifier)
        return tasks

    def _row_to_task(self, row):
        task_id, description, week, status, created_at, updated_at = row
        return Task(
            id=int(task_id),
            description=description,
            week_identifier=week,
            status=status,
            created_at=_to_datetime(created_at),
            updated_at=_to_datetime(updated_at),
        )
