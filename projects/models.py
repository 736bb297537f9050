# projects/models.py

from django.db import models
from users.models import User

class Project(models.Model):
    name = models.CharField(max_length=150)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    owner = models.ForeignKey(
        User,
        related_name='owned_projects',
        on_delete=models.CASCADE
    )
    collaborators = models.ManyToManyField(
        User,
        related_name='collaborating_projects',
        blank=True
    )

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self):
        return self.name

    def touch(self):
        self.save(update_fields=['updated_at'])
