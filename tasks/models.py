# tasks/models.py

from django.db import models
from users.models import User
from projects.models import Project


class TaskStatus(models.TextChoices):
    PENDING = 'pendiente', 'Pending'
    IN_PROGRESS = 'en progreso', 'In progress'
    COMPLETED = 'completada', 'Completed'


class TaskPriority(models.TextChoices):
    LOW = 'baja', 'Low'
    MEDIUM = 'media', 'Medium'
    HIGH = 'alta', 'High'


class Task(models.Model):
    name = models.CharField(max_length=150)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    status = models.CharField(max_length=20, choices=TaskStatus.choices, default=TaskStatus.PENDING)
    priority = models.CharField(max_length=20, choices=TaskPriority.choices, default=TaskPriority.MEDIUM)
    project = models.ForeignKey(
        Project,
        related_name='tasks',
        on_delete=models.CASCADE
    )
    assigned_to = models.ForeignKey(
        User,
        related_name='assigned_tasks',
        on_delete=models.SET_NULL,
        null=True,
        blank=True
    )
    created_by = models.ForeignKey(
        User,
        related_name='created_tasks',
        on_delete=models.CASCADE
    )

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"Task '{self.name}' in project '{self.project.name}'."
