import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_POST

from accounts.models import User
from exam_files.decorators import role_required
from exam_files.forms import ExamFileResubmitForm, ExamFileUploadForm
from exam_files.models import ExamFile
from exam_files.services.review import get_lecturer_files
from exam_files.services.workflow import (
    delete_exam_file,
    resubmit_exam_file,
    upload_exam_file,
)
from .helpers import error_message

logger = logging.getLogger(__name__)


@role_required(User.Role.LECTURER)
@require_GET
def my_files(request):
    return render(
        request,
        "exam_files/my_files.html",
        {
            "files": get_lecturer_files(request.user),
            "form": ExamFileUploadForm(),
            "resubmit_form": ExamFileResubmitForm(),
        }
    )


@role_required(User.Role.LECTURER)
@require_POST
def upload_file(request):
    form = ExamFileUploadForm(request.POST, request.FILES)

    if not form.is_valid():
        messages.error(request, "Please choose a file and enter the subject code.")
        return redirect("exam_files:my-files")

    try:
        upload_exam_file(
            lecturer=request.user,
            upload=form.cleaned_data["file"],
            subject_code=form.cleaned_data["subject_code"],
            subject_name=form.cleaned_data["subject_name"],
        )
        messages.success(request, "File uploaded and sent to your Head of Section.")

    except ValidationError as e:
        messages.error(request, error_message(e))

    except Exception:
        logger.exception("Error uploading exam file")
        messages.error(request, "Failed to upload file")

    return redirect("exam_files:my-files")


@role_required(User.Role.LECTURER)
@require_POST
def resubmit_file(request, file_id):
    exam_file = get_object_or_404(ExamFile, id=file_id, created_by=request.user)
    form = ExamFileResubmitForm(request.POST, request.FILES)

    if not form.is_valid():
        messages.error(request, "Please choose the revised file.")
        return redirect("exam_files:my-files")

    try:
        resubmit_exam_file(
            lecturer=request.user,
            exam_file=exam_file,
            upload=form.cleaned_data["file"],
        )
        messages.success(request, "Revised file submitted for review.")

    except ValidationError as e:
        messages.error(request, error_message(e))

    except Exception:
        logger.exception("Error resubmitting exam file %s", file_id)
        messages.error(request, "Failed to resubmit file")

    return redirect("exam_files:my-files")


@role_required(User.Role.LECTURER)
@require_POST
def delete_file(request, file_id):
    exam_file = get_object_or_404(ExamFile, id=file_id, created_by=request.user)

    try:
        delete_exam_file(lecturer=request.user, exam_file=exam_file)
        messages.success(request, "File deleted.")

    except ValidationError as e:
        messages.error(request, error_message(e))

    return redirect("exam_files:my-files")
