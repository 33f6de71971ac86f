import json
import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import connections
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET

from .exceptions import StorageError, TaskIdUnavailable
from .forms import TaskCreateForm, TaskListForm
from .models import TaskStatus
from .repository import TaskRepository
from .weeks import week_identifier

logger = logging.getLogger(__name__)


# --- helpers ---
def _form_errors(form):
    return "; ".join(
        f"{field}: {message}"
        for field, messages in form.errors.items()
        for message in messages
    )


def _error(message, status):
    return JsonResponse({"error": message}, status=status)


def _parse_create_body(request):
    try:
        payload = json.loads(request.body or b"null")
    except (UnicodeDecodeError, ValueError) as exc:
        raise ValidationError(f"body is not valid JSON ({exc})")
    if not isinstance(payload, dict):
        raise ValidationError("body must be a JSON object")

    form = TaskCreateForm(data=payload)
    if not form.is_valid():
        raise ValidationError(_form_errors(form))
    return form.cleaned_data


def _parse_list_query(request):
    form = TaskListForm(data=request.GET)
    if not form.is_valid():
        raise ValidationError(_form_errors(form))
    return form.cleaned_data["week"] or week_identifier()


# --- pages ---
@require_GET
def welcome(request):
    return JsonResponse({"message": "Welcome to the weekly task tracker!"})


# --- JSON API ---
@method_decorator(csrf_exempt, name="dispatch")
class TaskCollectionView(View):
    """POST creates a task in the current week, GET lists one week's tasks."""

    http_method_names = ["get", "post", "options"]
    repository = None

    def get_repository(self):
        if self.repository is not None:
            return self.repository
        return TaskRepository(connections[settings.TRACKER_DB_ALIAS])

    def post(self, request):
        try:
            data = _parse_create_body(request)
        except ValidationError as exc:
            return _error("Invalid request: " + "; ".join(exc.messages), 400)

        description = data["description"]
        week = week_identifier()
        status = TaskStatus.PENDING

        try:
            task_id = self.get_repository().insert(description, week, status)
        except TaskIdUnavailable:
            logger.exception("Task created for %s but its id could not be read", week)
            return _error("Task was created, but its ID could not be retrieved", 500)
        except StorageError:
            logger.exception("Database error while creating task for %s", week)
            return _error("Failed to create task", 500)

        logger.info("Created task %s in %s", task_id, week)
        return JsonResponse({
            "message": "Task created",
            "task_id": task_id,
            "week_identifier": week,
            "description": description,
            "status": str(status),
        }, status=201)

    def get(self, request):
        try:
            week = _parse_list_query(request)
        except ValidationError as exc:
            return _error("Invalid request: " + "; ".join(exc.messages), 400)

        try:
            tasks = self.get_repository().list_by_week(week)
        except StorageError:
            logger.exception("Database error while listing tasks (week: %s)", week)
            return _error("Failed to list tasks", 500)

        return JsonResponse([t.as_dict() for t in tasks], safe=False)
