from django.db import models
from django.conf import settings
from django.utils import timezone

from exam_files.models import ExamFile


class Notification(models.Model):
    """
    A derived, user-facing notification.
    Notifications are NOT the source of truth; they reflect
    review decisions recorded on ExamFile / Feedback.
    """

    # =====================================================
    # TYPE (drives the panel icon)
    # =====================================================
    class Type(models.TextChoices):
        APPROVAL = "approval", "Approval"
        REJECTION = "rejection", "Rejection"
        REVIEW_REQUEST = "review_request", "Review Request"
        INFO = "info", "Info"

    # =====================================================
    # CORE RELATIONSHIPS
    # =====================================================
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
        help_text="User who receives this notification"
    )

    type = models.CharField(
        max_length=20,
        choices=Type.choices,
        default=Type.INFO,
        db_index=True
    )

    # =====================================================
    # CONTENT
    # =====================================================
    title = models.CharField(
        max_length=200,
        help_text="Short headline shown in notification list"
    )

    message = models.TextField(blank=True)

    # =====================================================
    # OPTIONAL CONTEXT
    # =====================================================
    exam_file = models.ForeignKey(
        ExamFile,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="notifications"
    )

    action_url = models.CharField(
        max_length=255,
        blank=True,
        help_text="Optional URL the notification should link to"
    )

    # =====================================================
    # STATE
    # =====================================================
    is_read = models.BooleanField(
        default=False,
        db_index=True
    )

    read_at = models.DateTimeField(
        null=True,
        blank=True
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        db_index=True
    )

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["recipient", "is_read"], name="notif_recipient_read_idx"),
        ]

    def __str__(self):
        return (
            f"{self.recipient} | "
            f"{self.type.upper()} | "
            f"{self.title}"
        )

    # =====================================================
    # INSTANCE HELPERS
    # =====================================================
    def mark_as_read(self):
        """Safely mark notification as read."""
        if not self.is_read:
            self.is_read = True
            self.read_at = timezone.now()
            self.save(update_fields=["is_read", "read_at"])

    # =====================================================
    # BULK HELPERS
    # =====================================================
    @classmethod
    def mark_all_as_read(cls, user):
        """Mark every unread notification of a user as read."""
        return (
            cls.objects
            .filter(recipient=user, is_read=False)
            .update(is_read=True, read_at=timezone.now())
        )

    @classmethod
    def clear_for(cls, user, read_only=False):
        """Delete a user's notifications; returns how many were removed."""
        qs = cls.objects.filter(recipient=user)
        if read_only:
            qs = qs.filter(is_read=True)

        deleted, _ = qs.delete()
        return deleted
