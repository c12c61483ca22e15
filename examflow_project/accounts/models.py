from django.db import models
from django.contrib.auth.models import AbstractUser


class Department(models.Model):
    name = models.CharField(max_length=150, unique=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class User(AbstractUser):

    class Role(models.TextChoices):
        LECTURER = "lecturer", "Lecturer"
        HOS = "hos", "Head of Section"
        EXAM_UNIT = "exam_unit", "Exam Unit"
        ADMIN = "admin", "Admin"

    position_title = models.CharField(max_length=150, blank=True)

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.LECTURER,
        db_index=True,
    )

    department = models.ForeignKey(
        Department,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="users"
    )

    def __str__(self):
        full = self.get_full_name()
        return f"{full} ({self.username})" if full else self.username

    @property
    def display_name(self):
        """Name shown on review records: full name, then email, then username."""
        return self.get_full_name() or self.email or self.username

    @property
    def is_lecturer(self):
        return self.role == self.Role.LECTURER

    @property
    def is_hos(self):
        return self.role == self.Role.HOS

    @property
    def is_exam_unit(self):
        return self.role == self.Role.EXAM_UNIT
