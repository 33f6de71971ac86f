from django.contrib import admin
from .models import Task

@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ("id","description","week_identifier","status","created_at","updated_at")
    search_fields = ("description","week_identifier")
    list_filter = ("status","week_identifier")
    readonly_fields = ("created_at","updated_at")

    # tasks are only created through the API: week and status come from the server
    def has_add_permission(self, request):
        return False

    # updates and deletes are not part of the tracker yet
    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
