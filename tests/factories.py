"""Shared fixtures for the test suite."""

import shutil
import tempfile

from django.core.cache import cache
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.utils import timezone

from accounts.models import Department, User
from exam_files.models import ExamFile
from notifications.models import Notification

PASSWORD = "s3cret-pass-123"


def make_department(name="Computer Science"):
    return Department.objects.create(name=name)


def make_user(username, role=User.Role.LECTURER, department=None, **extra):
    extra.setdefault("email", f"{username}@uni.example")
    return User.objects.create_user(
        username=username,
        password=PASSWORD,
        role=role,
        department=department,
        **extra,
    )


def make_exam_file(created_by, department=None, status=ExamFile.WorkflowStatus.PENDING_HOS, **extra):
    extra.setdefault("file_name", "final-paper.pdf")
    extra.setdefault("subject_code", "CS101")
    extra.setdefault("subject_name", "Intro to Programming")
    return ExamFile.objects.create(
        file=f"exam_files/test/{extra['file_name']}",
        created_by=created_by,
        department=department if department is not None else created_by.department,
        workflow_status=status,
        **extra,
    )


def make_notification(recipient, **extra):
    extra.setdefault("title", "Something happened")
    extra.setdefault("message", "Details")
    extra.setdefault("type", Notification.Type.INFO)
    return Notification.objects.create(recipient=recipient, **extra)


def pdf_upload(name="paper.pdf", content=b"%PDF-1.4 test"):
    return SimpleUploadedFile(name, content, content_type="application/pdf")


class BaseTestCase(TestCase):
    """TestCase with a clean cache and a throwaway MEDIA_ROOT."""

    @classmethod
    def setUpClass(cls):
        cls._media_root = tempfile.mkdtemp()
        cls._media_override = override_settings(MEDIA_ROOT=cls._media_root)
        cls._media_override.enable()
        super().setUpClass()

    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        cls._media_override.disable()
        shutil.rmtree(cls._media_root, ignore_errors=True)

    def setUp(self):
        cache.clear()
        self.now = timezone.now()
