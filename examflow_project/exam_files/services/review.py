"""
Read side of the review pages: loading, searching, grouping and
summarising exam files. Everything here is in-memory and single pass
over lists already fetched from the database.
"""

from django.utils import timezone

from accounts.models import Department
from exam_files.models import ExamFile, Feedback

UNKNOWN_DEPARTMENT = "Unknown Department"

SEARCH_FIELDS = (
    "file_name",
    "subject_code",
    "subject_name",
    "department_name",
    "created_by_name",
)


def _base_queryset():
    return ExamFile.objects.select_related(
        "department",
        "created_by",
        "hos_approved_by",
        "exam_unit_approved_by",
    )


# ============================================================
# LOADERS
# ============================================================

def get_exam_unit_review_files():
    """HOS-approved files waiting for final approval, oldest first."""
    return list(
        _base_queryset()
        .filter(workflow_status=ExamFile.WorkflowStatus.PENDING_EXAM_UNIT)
        .order_by("hos_approved_at", "created_at")
    )


def get_hos_review_files(reviewer):
    return list(
        _base_queryset()
        .filter(
            workflow_status=ExamFile.WorkflowStatus.PENDING_HOS,
            department_id=reviewer.department_id,
        )
        .order_by("created_at")
    )


def get_lecturer_files(lecturer):
    return list(_base_queryset().filter(created_by=lecturer))


def get_all_files():
    return list(_base_queryset())


def get_departments():
    return list(Department.objects.order_by("name"))


def get_file_feedback(exam_file):
    return list(
        Feedback.objects
        .filter(file=exam_file)
        .order_by("-created_at", "-id")
    )


# ============================================================
# SEARCH / GROUPING
# ============================================================

def filter_files(files, query):
    """
    Case-insensitive substring search over file name, subject code,
    subject name, department name and lecturer name.
    A blank query returns the list unchanged.
    """
    if not query or not query.strip():
        return list(files)

    needle = query.strip().lower()

    def matches(exam_file):
        for field in SEARCH_FIELDS:
            value = getattr(exam_file, field, None)
            if value and needle in value.lower():
                return True
        return False

    return [f for f in files if matches(f)]


def group_by_department(files):
    """
    {department name: [files]} in first-seen order.
    Files without a department land in "Unknown Department".
    """
    grouped = {}

    for exam_file in files:
        name = getattr(exam_file, "department_name", "") or UNKNOWN_DEPARTMENT
        grouped.setdefault(name, []).append(exam_file)

    return grouped


def approved_files(files):
    return [
        f for f in files
        if f.workflow_status == ExamFile.WorkflowStatus.APPROVED
    ]


# ============================================================
# STATS
# ============================================================

def _on_day(timestamp, day):
    if not timestamp:
        return False
    return timezone.localtime(timestamp).date() == day


def compute_review_stats(review_files, all_files, department_count, today=None):
    """
    Header counters for the exam unit page.

    approved_today / rejected_today compare against the local calendar
    date, not a rolling 24 hours.
    """
    if today is None:
        today = timezone.localdate()

    return {
        "pending": len(review_files),
        "approved_today": sum(
            1 for f in all_files if _on_day(f.exam_unit_approved_at, today)
        ),
        "rejected_today": sum(
            1 for f in all_files if _on_day(f.exam_unit_rejected_at, today)
        ),
        "total_approved": len(approved_files(all_files)),
        "departments": department_count,
    }
