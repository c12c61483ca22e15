from django.urls import path

from .views import (
    my_files, upload_file, resubmit_file, delete_file,
    hos_review, hos_review_action,
    exam_unit_review, exam_unit_review_action,
    file_feedback,
)

app_name = "exam_files"

urlpatterns = [
    # Lecturer
    path("mine/", my_files, name="my-files"),
    path("upload/", upload_file, name="upload"),
    path("<int:file_id>/resubmit/", resubmit_file, name="resubmit"),
    path("<int:file_id>/delete/", delete_file, name="delete"),

    # Head of Section
    path("hos/", hos_review, name="hos-review"),
    path("hos/<int:file_id>/review/", hos_review_action, name="hos-review-action"),

    # Exam Unit
    path("exam-unit/", exam_unit_review, name="exam-unit-review"),
    path("exam-unit/<int:file_id>/review/", exam_unit_review_action, name="exam-unit-review-action"),

    # Review history (modal)
    path("<int:file_id>/feedback/", file_feedback, name="feedback"),
]
