import os

from django.db import models
from django.conf import settings
from django.utils import timezone

from accounts.models import Department


def exam_file_upload_path(instance, filename):
    # exam_files/<department>/<YYYY>/<filename>
    dept = instance.department_id or "unassigned"
    return os.path.join("exam_files", str(dept), timezone.now().strftime("%Y"), filename)


class ExamFile(models.Model):
    """
    An exam paper moving through the approval chain:

        lecturer upload -> HOS review -> Exam Unit final approval

    A rejection at either review stage sends the file back to the
    lecturer as NEEDS_REVISION.
    """

    # =====================================================
    # WORKFLOW STATUS
    # =====================================================
    class WorkflowStatus(models.TextChoices):
        PENDING_HOS = "PENDING_HOS", "Pending HOS Review"
        PENDING_EXAM_UNIT = "PENDING_EXAM_UNIT", "Pending Exam Unit Review"
        NEEDS_REVISION = "NEEDS_REVISION", "Needs Revision"
        APPROVED = "APPROVED", "Approved"

    # =====================================================
    # FILE + SUBJECT
    # =====================================================
    file = models.FileField(upload_to=exam_file_upload_path)
    file_name = models.CharField(max_length=255)
    file_size = models.PositiveBigIntegerField(default=0)

    subject_code = models.CharField(max_length=30, db_index=True)
    subject_name = models.CharField(max_length=200, blank=True)

    department = models.ForeignKey(
        Department,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="exam_files"
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="exam_files"
    )

    workflow_status = models.CharField(
        max_length=20,
        choices=WorkflowStatus.choices,
        default=WorkflowStatus.PENDING_HOS,
        db_index=True
    )

    # =====================================================
    # HOS STAGE
    # =====================================================
    hos_comments = models.TextField(blank=True)

    hos_approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="hos_approved_files"
    )

    hos_approved_at = models.DateTimeField(null=True, blank=True)

    # =====================================================
    # EXAM UNIT STAGE
    # =====================================================
    exam_unit_comments = models.TextField(blank=True)

    exam_unit_approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="exam_unit_approved_files"
    )

    exam_unit_approved_at = models.DateTimeField(null=True, blank=True)
    exam_unit_rejected_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["workflow_status", "department"], name="examfile_status_dept_idx"),
        ]

    def __str__(self):
        return f"{self.subject_code} | {self.file_name}"

    # =====================================================
    # DISPLAY HELPERS
    # =====================================================
    @property
    def department_name(self):
        return self.department.name if self.department else ""

    @property
    def created_by_name(self):
        return self.created_by.display_name if self.created_by else ""

    @property
    def hos_approved_by_name(self):
        return self.hos_approved_by.display_name if self.hos_approved_by else ""

    @property
    def exam_unit_approved_by_name(self):
        return (
            self.exam_unit_approved_by.display_name
            if self.exam_unit_approved_by else ""
        )

    @property
    def is_editable_by_owner(self):
        return self.workflow_status != self.WorkflowStatus.APPROVED


class Feedback(models.Model):
    """One review decision on an exam file (review history)."""

    class Action(models.TextChoices):
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"

    file = models.ForeignKey(
        ExamFile,
        on_delete=models.CASCADE,
        related_name="feedback"
    )

    reviewer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name="given_feedback"
    )

    # snapshot, survives reviewer deletion
    reviewer_name = models.CharField(max_length=200)
    reviewer_role = models.CharField(max_length=20)

    action = models.CharField(max_length=20, choices=Action.choices)
    comments = models.TextField(blank=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.file} | {self.action} by {self.reviewer_name}"

    def as_dict(self):
        return {
            "id": self.id,
            "reviewer_name": self.reviewer_name,
            "reviewer_role": self.reviewer_role,
            "action": self.action,
            "comments": self.comments,
            "created_at": self.created_at.isoformat(),
        }
