"""Tests for the lecturer upload page and the HOS review queue."""

from django.contrib.messages import get_messages
from django.urls import reverse

from accounts.models import User
from exam_files.models import ExamFile
from notifications.models import Notification

from factories import BaseTestCase, make_department, make_exam_file, make_user, pdf_upload

Status = ExamFile.WorkflowStatus


def flashed(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


class LecturerViewsTest(BaseTestCase):

    def setUp(self):
        super().setUp()
        self.dept = make_department()
        self.lecturer = make_user("lecturer1", department=self.dept)
        self.hos = make_user("hos1", role=User.Role.HOS, department=self.dept)
        self.client.force_login(self.lecturer)

    def test_my_files_lists_only_own_files(self):
        make_exam_file(self.lecturer, file_name="mine.pdf")
        make_exam_file(make_user("lecturer2", department=self.dept), file_name="theirs.pdf")

        response = self.client.get(reverse("exam_files:my-files"))

        self.assertContains(response, "mine.pdf")
        self.assertNotContains(response, "theirs.pdf")

    def test_upload(self):
        response = self.client.post(reverse("exam_files:upload"), {
            "file": pdf_upload("quiz.pdf"),
            "subject_code": "cs101",
            "subject_name": "Intro",
        })

        self.assertRedirects(response, reverse("exam_files:my-files"), fetch_redirect_response=False)
        self.assertEqual(flashed(response), ["File uploaded and sent to your Head of Section."])

        exam_file = ExamFile.objects.get()
        self.assertEqual(exam_file.subject_code, "CS101")
        self.assertTrue(Notification.objects.filter(recipient=self.hos, exam_file=exam_file).exists())

    def test_upload_without_file(self):
        response = self.client.post(reverse("exam_files:upload"), {"subject_code": "CS101"})

        self.assertEqual(flashed(response), ["Please choose a file and enter the subject code."])
        self.assertFalse(ExamFile.objects.exists())

    def test_resubmit(self):
        exam_file = make_exam_file(self.lecturer, status=Status.NEEDS_REVISION)

        response = self.client.post(
            reverse("exam_files:resubmit", args=[exam_file.id]),
            {"file": pdf_upload("fixed.pdf")},
        )

        self.assertEqual(flashed(response), ["Revised file submitted for review."])
        exam_file.refresh_from_db()
        self.assertEqual(exam_file.workflow_status, Status.PENDING_HOS)

    def test_delete(self):
        exam_file = make_exam_file(self.lecturer)

        response = self.client.post(reverse("exam_files:delete", args=[exam_file.id]))

        self.assertEqual(flashed(response), ["File deleted."])
        self.assertFalse(ExamFile.objects.exists())

    def test_cannot_delete_other_lecturers_file(self):
        exam_file = make_exam_file(make_user("lecturer2", department=self.dept))

        response = self.client.post(reverse("exam_files:delete", args=[exam_file.id]))

        self.assertEqual(response.status_code, 404)
        self.assertTrue(ExamFile.objects.filter(id=exam_file.id).exists())


class HosViewsTest(BaseTestCase):

    def setUp(self):
        super().setUp()
        self.dept = make_department("Computer Science")
        self.other_dept = make_department("Mathematics")
        self.lecturer = make_user("lecturer1", department=self.dept)
        self.hos = make_user("hos1", role=User.Role.HOS, department=self.dept)
        self.client.force_login(self.hos)

    def test_queue_shows_own_department_only(self):
        make_exam_file(self.lecturer, file_name="ours.pdf")
        make_exam_file(make_user("lecturer2", department=self.other_dept), file_name="elsewhere.pdf")
        make_exam_file(self.lecturer, status=Status.PENDING_EXAM_UNIT, file_name="already-approved.pdf")

        response = self.client.get(reverse("exam_files:hos-review"))

        self.assertContains(response, "ours.pdf")
        self.assertNotContains(response, "elsewhere.pdf")
        self.assertNotContains(response, "already-approved.pdf")

    def test_approve(self):
        exam_file = make_exam_file(self.lecturer)

        response = self.client.post(
            reverse("exam_files:hos-review-action", args=[exam_file.id]),
            {"action": "approve"},
        )

        self.assertRedirects(response, reverse("exam_files:hos-review"), fetch_redirect_response=False)
        self.assertEqual(flashed(response), ["File approved and sent to the Exam Unit."])

        exam_file.refresh_from_db()
        self.assertEqual(exam_file.workflow_status, Status.PENDING_EXAM_UNIT)

    def test_reject_requires_notes(self):
        exam_file = make_exam_file(self.lecturer)

        response = self.client.post(
            reverse("exam_files:hos-review-action", args=[exam_file.id]),
            {"action": "reject", "comments": ""},
        )

        self.assertEqual(flashed(response), ["Please provide revision notes"])
        exam_file.refresh_from_db()
        self.assertEqual(exam_file.workflow_status, Status.PENDING_HOS)
