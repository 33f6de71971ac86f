from django.db import models
from django.db.models.functions import Now


class TaskStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    COMPLETED = "completed", "Completed"


class Task(models.Model):
    description = models.TextField()
    week_identifier = models.CharField(max_length=8, db_index=True)
    status = models.CharField(max_length=20, choices=TaskStatus.choices, default=TaskStatus.PENDING)
    # stamped by the store, inserts never pass these
    created_at = models.DateTimeField(db_default=Now())
    updated_at = models.DateTimeField(db_default=Now())

    class Meta:
        db_table = "tasks"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.week_identifier} • {self.description[:50]}"

    def as_dict(self):
        return {
            "id": self.id,
            "description": self.description,
            "week_identifier": self.week_identifier,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
