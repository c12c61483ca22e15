import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_POST

from accounts.models import User
from exam_files.decorators import role_required
from exam_files.models import ExamFile
from exam_files.services.review import (
    approved_files,
    compute_review_stats,
    filter_files,
    get_all_files,
    get_departments,
    get_exam_unit_review_files,
    get_file_feedback,
    group_by_department,
)
from exam_files.services.workflow import (
    exam_unit_approve_file,
    exam_unit_reject_file,
)
from .helpers import error_message

logger = logging.getLogger(__name__)

TABS = ("pending", "approved")


def _empty_state(tab, query):
    if query:
        return (
            "No files match your search",
            "Try adjusting your search query",
        )
    if tab == "pending":
        return (
            "No files pending final review",
            "HOS-approved files will appear here",
        )
    return (
        "No approved files yet",
        "Approved files will appear here",
    )


# ============================================================
# EXAM UNIT REVIEW PAGE
# ============================================================
@role_required(User.Role.EXAM_UNIT)
@require_GET
def exam_unit_review(request):
    """
    Final approval page.

    - pending tab: HOS-approved files awaiting final approval
    - approved tab: every file that completed final approval
    - ?q= filters both tabs; results are grouped by department
    """
    tab = request.GET.get("tab", "pending")
    if tab not in TABS:
        tab = "pending"

    query = request.GET.get("q", "").strip()

    try:
        review_files = get_exam_unit_review_files()
        departments = get_departments()
        all_files = get_all_files()
    except Exception:
        logger.exception("Error loading exam unit review data")
        messages.error(request, "Failed to load files")
        review_files, departments, all_files = [], [], []

    stats = compute_review_stats(review_files, all_files, len(departments))

    current = review_files if tab == "pending" else approved_files(all_files)
    filtered = filter_files(current, query)
    grouped = group_by_department(filtered)

    empty_title, empty_hint = _empty_state(tab, query)

    return render(
        request,
        "exam_files/exam_unit_review.html",
        {
            "tab": tab,
            "query": query,
            "stats": stats,
            "grouped_files": list(grouped.items()),
            "total_shown": len(filtered),
            "empty_title": empty_title,
            "empty_hint": empty_hint,
            "banner_timeout_ms": settings.REVIEW_BANNER_TIMEOUT_MS,
        }
    )


# ============================================================
# APPROVE / REQUEST REVISION
# ============================================================
@role_required(User.Role.EXAM_UNIT)
@require_POST
def exam_unit_review_action(request, file_id):
    exam_file = get_object_or_404(ExamFile, id=file_id)

    action = request.POST.get("action")
    comments = request.POST.get("comments", "")

    back = reverse("exam_files:exam-unit-review")

    try:
        if action == "approve":
            exam_unit_approve_file(
                exam_file=exam_file,
                reviewer=request.user,
                comments=comments,
            )
            messages.success(request, "File approved! Ready for printing.")

        elif action == "reject":
            if not comments.strip():
                messages.error(request, "Please provide revision notes")
                return redirect(back)

            exam_unit_reject_file(
                exam_file=exam_file,
                reviewer=request.user,
                comments=comments,
            )
            messages.success(request, "Revision requested. Lecturer has been notified.")

        else:
            messages.error(request, "Unknown review action.")

    except ValidationError as e:
        messages.error(request, error_message(e))

    except Exception:
        logger.exception("Error submitting exam unit review for file %s", file_id)
        messages.error(request, "Failed to submit review")

    return redirect(back)


# ============================================================
# REVIEW HISTORY (JSON, FOR THE MODAL)
# ============================================================
@login_required
@require_GET
def file_feedback(request, file_id):
    exam_file = get_object_or_404(
        ExamFile.objects.select_related("department", "created_by", "hos_approved_by"),
        id=file_id,
    )

    user = request.user
    allowed = (
        user.is_exam_unit
        or exam_file.created_by_id == user.pk
        or (user.is_hos and exam_file.department_id == user.department_id)
    )
    if not allowed:
        return JsonResponse(
            {"success": False, "error": "You do not have access to this file."},
            status=403,
        )

    try:
        feedback = get_file_feedback(exam_file)
    except Exception:
        logger.exception("Error loading feedback for file %s", file_id)
        return JsonResponse(
            {"success": False, "error": "Failed to load review history"},
            status=500,
        )

    return JsonResponse({
        "success": True,
        "file": {
            "id": exam_file.id,
            "file_name": exam_file.file_name,
            "hos_approved_by_name": exam_file.hos_approved_by_name,
            "hos_approved_at": (
                exam_file.hos_approved_at.isoformat()
                if exam_file.hos_approved_at else None
            ),
            "hos_comments": exam_file.hos_comments,
        },
        "feedback": [fb.as_dict() for fb in feedback],
    })
