import logging

from django.contrib.auth import get_user_model
from django.core.mail import send_mail
from django.conf import settings
from django.urls import reverse

from notifications.models import Notification
from notifications.services.inbox import invalidate_unread_cache

logger = logging.getLogger(__name__)

User = get_user_model()

SIGNATURE = "Exam Unit Approval System"


def _file_label(exam_file):
    label = exam_file.subject_code
    if exam_file.subject_name:
        label = f"{label} {exam_file.subject_name}"
    return f"“{exam_file.file_name}” ({label})"


def _send_email(recipients, subject, body):
    # one message per recipient; addresses are not shared
    for address in [user.email for user in recipients if user.email]:
        send_mail(
            subject=subject,
            message=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[address],
            fail_silently=True,
        )


def _notify(recipients, *, kind, title, message, exam_file, action_url):
    recipients = list(recipients)
    if not recipients:
        return []

    created = Notification.objects.bulk_create([
        Notification(
            recipient=user,
            type=kind,
            title=title,
            message=message,
            exam_file=exam_file,
            action_url=action_url,
        )
        for user in recipients
    ])

    # bulk_create skips post_save
    for user in recipients:
        invalidate_unread_cache(user)

    logger.info(
        "Sent %s notification '%s' to %s recipient(s) for file %s",
        kind, title, len(recipients), exam_file.pk,
    )
    return created


# ============================================================
# REVIEW REQUEST (LECTURER → HOS)
# ============================================================

def notify_review_requested(*, exam_file, resubmitted=False):
    """
    Tell every active HOS of the file's department that a file
    is waiting for review.
    """
    if not exam_file.department_id:
        logger.warning("File %s has no department; no HOS to notify", exam_file.pk)
        return []

    reviewers = User.objects.filter(
        role=User.Role.HOS,
        department_id=exam_file.department_id,
        is_active=True,
    )

    verb = "resubmitted" if resubmitted else "uploaded"
    title = "File resubmitted for review" if resubmitted else "New file awaiting review"
    message = (
        f"{exam_file.created_by_name} {verb} {_file_label(exam_file)} "
        f"for your review."
    )

    _send_email(
        reviewers,
        f"Review Request: {exam_file.subject_code}",
        (
            f"Good day.\n\n"
            f"{message}\n\n"
            f"Please log in to the system to review the file.\n\n"
            f"{SIGNATURE}"
        ),
    )

    return _notify(
        reviewers,
        kind=Notification.Type.REVIEW_REQUEST,
        title=title,
        message=message,
        exam_file=exam_file,
        action_url=reverse("exam_files:hos-review"),
    )


# ============================================================
# HOS APPROVED (HOS → LECTURER + EXAM UNIT)
# ============================================================

def notify_hos_approved(*, exam_file, reviewer):
    """
    - Lecturer: approval notice
    - Exam Unit: final review request
    """
    _notify(
        [exam_file.created_by],
        kind=Notification.Type.APPROVAL,
        title="Approved by Head of Section",
        message=(
            f"{_file_label(exam_file)} was approved by "
            f"{reviewer.display_name} and sent to the Exam Unit."
        ),
        exam_file=exam_file,
        action_url=reverse("exam_files:my-files"),
    )

    exam_unit = User.objects.filter(role=User.Role.EXAM_UNIT, is_active=True)
    department = exam_file.department_name or "Unknown Department"

    _send_email(
        exam_unit,
        f"Final Approval Required: {exam_file.subject_code}",
        (
            f"Good day.\n\n"
            f"{_file_label(exam_file)} from {department} has been approved by "
            f"the Head of Section and is awaiting final approval.\n\n"
            f"{SIGNATURE}"
        ),
    )

    return _notify(
        exam_unit,
        kind=Notification.Type.REVIEW_REQUEST,
        title="File awaiting final approval",
        message=(
            f"{_file_label(exam_file)} from {department} "
            f"is ready for final review."
        ),
        exam_file=exam_file,
        action_url=reverse("exam_files:exam-unit-review"),
    )


# ============================================================
# REJECTED (HOS / EXAM UNIT → LECTURER)
# ============================================================

def notify_file_rejected(*, exam_file, reviewer, comments):
    lecturer = exam_file.created_by
    stage = "the Exam Unit" if reviewer.is_exam_unit else "the Head of Section"

    message = (
        f"{stage[0].upper()}{stage[1:]} requested a revision of "
        f"{_file_label(exam_file)}: {comments}"
    )

    _send_email(
        [lecturer],
        "Action Required: Exam File Needs Revision",
        (
            f"Good day.\n\n"
            f"Your exam file {_file_label(exam_file)} has been reviewed by "
            f"{stage} and requires revision.\n\n"
            f"Revision notes:\n{comments}\n\n"
            f"Please log in to the system to upload a revised file.\n\n"
            f"{SIGNATURE}"
        ),
    )

    return _notify(
        [lecturer],
        kind=Notification.Type.REJECTION,
        title="Revision requested",
        message=message,
        exam_file=exam_file,
        action_url=reverse("exam_files:my-files"),
    )


# ============================================================
# FINAL APPROVAL (EXAM UNIT → LECTURER)
# ============================================================

def notify_exam_unit_approved(*, exam_file, reviewer):
    lecturer = exam_file.created_by

    _send_email(
        [lecturer],
        "Notice: Exam File Approved for Printing",
        (
            f"Good day.\n\n"
            f"This is to inform you that your exam file {_file_label(exam_file)} "
            f"has received final approval and is ready for printing.\n\n"
            f"No further action is required at this time.\n\n"
            f"{SIGNATURE}"
        ),
    )

    return _notify(
        [lecturer],
        kind=Notification.Type.APPROVAL,
        title="Final approval granted",
        message=(
            f"{_file_label(exam_file)} was approved by "
            f"{reviewer.display_name} and is ready for printing."
        ),
        exam_file=exam_file,
        action_url=reverse("exam_files:my-files"),
    )
