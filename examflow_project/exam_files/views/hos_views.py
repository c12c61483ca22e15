import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_POST

from accounts.models import User
from exam_files.decorators import role_required
from exam_files.models import ExamFile
from exam_files.services.review import filter_files, get_hos_review_files
from exam_files.services.workflow import hos_approve_file, hos_reject_file
from .helpers import error_message

logger = logging.getLogger(__name__)


# ============================================================
# HOS REVIEW QUEUE (OWN DEPARTMENT ONLY)
# ============================================================
@role_required(User.Role.HOS)
@require_GET
def hos_review(request):
    query = request.GET.get("q", "").strip()

    files = filter_files(get_hos_review_files(request.user), query)

    return render(
        request,
        "exam_files/hos_review.html",
        {
            "files": files,
            "query": query,
            "department": request.user.department,
        }
    )


@role_required(User.Role.HOS)
@require_POST
def hos_review_action(request, file_id):
    exam_file = get_object_or_404(ExamFile, id=file_id)

    action = request.POST.get("action")
    comments = request.POST.get("comments", "")

    try:
        if action == "approve":
            hos_approve_file(
                exam_file=exam_file,
                reviewer=request.user,
                comments=comments,
            )
            messages.success(request, "File approved and sent to the Exam Unit.")

        elif action == "reject":
            hos_reject_file(
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
        logger.exception("Error submitting HOS review for file %s", file_id)
        messages.error(request, "Failed to submit review")

    return redirect("exam_files:hos-review")
