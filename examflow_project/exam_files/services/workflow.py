import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from accounts.models import User
from exam_files.models import ExamFile, Feedback
from notifications.services.workflow import (
    notify_review_requested,
    notify_hos_approved,
    notify_file_rejected,
    notify_exam_unit_approved,
)

logger = logging.getLogger(__name__)

Status = ExamFile.WorkflowStatus


# ============================================================
# GUARDS
# ============================================================

def _require_role(user, role, action):
    if user.role != role:
        raise ValidationError(f"Only {User.Role(role).label} users can {action}.")


def _require_status(exam_file, *allowed):
    if exam_file.workflow_status not in allowed:
        raise ValidationError(
            f"File is {exam_file.get_workflow_status_display().lower()} "
            f"and cannot be reviewed at this stage."
        )


def _require_comments(comments):
    comments = (comments or "").strip()
    if not comments:
        raise ValidationError("Please provide revision notes")
    return comments


def _lock(exam_file):
    """Re-read the row under a lock so the guards see the stored status."""
    return ExamFile.objects.select_for_update().get(pk=exam_file.pk)


def _require_owner(exam_file, lecturer):
    if exam_file.created_by_id != lecturer.pk:
        raise ValidationError("You can only modify your own files.")


def _record_feedback(exam_file, reviewer, action, comments):
    return Feedback.objects.create(
        file=exam_file,
        reviewer=reviewer,
        reviewer_name=reviewer.display_name,
        reviewer_role=reviewer.role,
        action=action,
        comments=comments,
    )


def _attach_upload(exam_file, upload):
    exam_file.file = upload
    exam_file.file_name = upload.name
    exam_file.file_size = upload.size or 0


# ============================================================
# LECTURER
# ============================================================

@transaction.atomic
def upload_exam_file(*, lecturer, upload, subject_code, subject_name=""):
    """New upload, queued for the lecturer's HOS."""
    _require_role(lecturer, User.Role.LECTURER, "upload exam files")

    if upload is None:
        raise ValidationError("Please choose a file to upload.")

    subject_code = (subject_code or "").strip().upper()
    if not subject_code:
        raise ValidationError("Subject code is required.")

    exam_file = ExamFile(
        subject_code=subject_code,
        subject_name=(subject_name or "").strip(),
        department=lecturer.department,
        created_by=lecturer,
        workflow_status=Status.PENDING_HOS,
    )
    _attach_upload(exam_file, upload)
    exam_file.save()

    logger.info("File %s uploaded by %s", exam_file.pk, lecturer)
    notify_review_requested(exam_file=exam_file)
    return exam_file


@transaction.atomic
def resubmit_exam_file(*, lecturer, exam_file, upload):
    """Replace a file sent back for revision and restart the review chain."""
    exam_file = _lock(exam_file)
    _require_owner(exam_file, lecturer)

    if exam_file.workflow_status != Status.NEEDS_REVISION:
        raise ValidationError("Only files that need revision can be resubmitted.")

    if upload is None:
        raise ValidationError("Please choose a file to upload.")

    _attach_upload(exam_file, upload)
    exam_file.workflow_status = Status.PENDING_HOS
    exam_file.hos_approved_by = None
    exam_file.hos_approved_at = None
    exam_file.save()

    logger.info("File %s resubmitted by %s", exam_file.pk, lecturer)
    notify_review_requested(exam_file=exam_file, resubmitted=True)
    return exam_file


@transaction.atomic
def delete_exam_file(*, lecturer, exam_file):
    exam_file = _lock(exam_file)
    _require_owner(exam_file, lecturer)

    if not exam_file.is_editable_by_owner:
        raise ValidationError("Approved files cannot be deleted.")

    file_id = exam_file.pk
    exam_file.file.delete(save=False)
    exam_file.delete()
    logger.info("File %s deleted by %s", file_id, lecturer)


# ============================================================
# HEAD OF SECTION
# ============================================================

def _require_same_department(exam_file, reviewer):
    if exam_file.department_id != reviewer.department_id:
        raise ValidationError("You can only review files from your own department.")


@transaction.atomic
def hos_approve_file(*, exam_file, reviewer, comments=""):
    exam_file = _lock(exam_file)
    _require_role(reviewer, User.Role.HOS, "approve at this stage")
    _require_same_department(exam_file, reviewer)
    _require_status(exam_file, Status.PENDING_HOS)

    comments = (comments or "").strip()

    exam_file.workflow_status = Status.PENDING_EXAM_UNIT
    exam_file.hos_comments = comments
    exam_file.hos_approved_by = reviewer
    exam_file.hos_approved_at = timezone.now()
    exam_file.save()

    _record_feedback(exam_file, reviewer, Feedback.Action.APPROVED, comments)
    logger.info("File %s approved by HOS %s", exam_file.pk, reviewer)

    notify_hos_approved(exam_file=exam_file, reviewer=reviewer)
    return exam_file


@transaction.atomic
def hos_reject_file(*, exam_file, reviewer, comments):
    exam_file = _lock(exam_file)
    _require_role(reviewer, User.Role.HOS, "request revisions at this stage")
    _require_same_department(exam_file, reviewer)
    _require_status(exam_file, Status.PENDING_HOS)
    comments = _require_comments(comments)

    exam_file.workflow_status = Status.NEEDS_REVISION
    exam_file.hos_comments = comments
    exam_file.save()

    _record_feedback(exam_file, reviewer, Feedback.Action.REJECTED, comments)
    logger.info("File %s sent back for revision by HOS %s", exam_file.pk, reviewer)

    notify_file_rejected(exam_file=exam_file, reviewer=reviewer, comments=comments)
    return exam_file


# ============================================================
# EXAM UNIT (FINAL)
# ============================================================

@transaction.atomic
def exam_unit_approve_file(*, exam_file, reviewer, comments=""):
    exam_file = _lock(exam_file)
    _require_role(reviewer, User.Role.EXAM_UNIT, "give final approval")
    _require_status(exam_file, Status.PENDING_EXAM_UNIT)

    comments = (comments or "").strip()

    exam_file.workflow_status = Status.APPROVED
    exam_file.exam_unit_comments = comments
    exam_file.exam_unit_approved_by = reviewer
    exam_file.exam_unit_approved_at = timezone.now()
    exam_file.save()

    _record_feedback(exam_file, reviewer, Feedback.Action.APPROVED, comments)
    logger.info("File %s approved for printing by %s", exam_file.pk, reviewer)

    notify_exam_unit_approved(exam_file=exam_file, reviewer=reviewer)
    return exam_file


@transaction.atomic
def exam_unit_reject_file(*, exam_file, reviewer, comments):
    exam_file = _lock(exam_file)
    _require_role(reviewer, User.Role.EXAM_UNIT, "request final revisions")
    _require_status(exam_file, Status.PENDING_EXAM_UNIT)
    comments = _require_comments(comments)

    exam_file.workflow_status = Status.NEEDS_REVISION
    exam_file.exam_unit_comments = comments
    exam_file.exam_unit_rejected_at = timezone.now()
    exam_file.save()

    _record_feedback(exam_file, reviewer, Feedback.Action.REJECTED, comments)
    logger.info("File %s sent back for revision by exam unit %s", exam_file.pk, reviewer)

    notify_file_rejected(exam_file=exam_file, reviewer=reviewer, comments=comments)
    return exam_file
