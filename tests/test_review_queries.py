"""Search, grouping and header stats for the review pages."""

from datetime import date, datetime, timedelta
from types import SimpleNamespace

from django.test import SimpleTestCase
from django.utils import timezone

from exam_files.models import ExamFile
from exam_files.services.review import (
    UNKNOWN_DEPARTMENT,
    compute_review_stats,
    filter_files,
    group_by_department,
)

Status = ExamFile.WorkflowStatus


def fake_file(**kwargs):
    defaults = {
        "file_name": "paper.pdf",
        "subject_code": "CS101",
        "subject_name": "",
        "department_name": "Computer Science",
        "created_by_name": "Lee Wei",
        "workflow_status": Status.PENDING_EXAM_UNIT,
        "exam_unit_approved_at": None,
        "exam_unit_rejected_at": None,
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


class FilterFilesTest(SimpleTestCase):

    def setUp(self):
        self.algebra = fake_file(
            file_name="algebra-final.pdf",
            subject_code="MA201",
            subject_name="Linear Algebra",
            department_name="Mathematics",
            created_by_name="Nurul Huda",
        )
        self.networks = fake_file(
            file_name="midterm.docx",
            subject_code="CS330",
            subject_name="Computer Networks",
            department_name="Computer Science",
            created_by_name="Lee Wei",
        )
        self.files = [self.algebra, self.networks]

    def test_blank_query_returns_everything(self):
        self.assertEqual(filter_files(self.files, ""), self.files)
        self.assertEqual(filter_files(self.files, "   "), self.files)
        self.assertEqual(filter_files(self.files, None), self.files)

    def test_matches_each_searchable_field(self):
        self.assertEqual(filter_files(self.files, "ALGEBRA-FINAL"), [self.algebra])
        self.assertEqual(filter_files(self.files, "cs330"), [self.networks])
        self.assertEqual(filter_files(self.files, "networks"), [self.networks])
        self.assertEqual(filter_files(self.files, "mathem"), [self.algebra])
        self.assertEqual(filter_files(self.files, "nurul"), [self.algebra])

    def test_surrounding_whitespace_is_ignored(self):
        self.assertEqual(filter_files(self.files, "  cs330  "), [self.networks])

    def test_no_match(self):
        self.assertEqual(filter_files(self.files, "chemistry"), [])

    def test_missing_values_are_skipped(self):
        orphan = fake_file(subject_name=None, department_name="", created_by_name="")

        self.assertEqual(filter_files([orphan], "science"), [])


class GroupByDepartmentTest(SimpleTestCase):

    def test_groups_in_first_seen_order(self):
        a = fake_file(department_name="Mathematics")
        b = fake_file(department_name="Computer Science")
        c = fake_file(department_name="Mathematics")

        grouped = group_by_department([a, b, c])

        self.assertEqual(list(grouped), ["Mathematics", "Computer Science"])
        self.assertEqual(grouped["Mathematics"], [a, c])

    def test_files_without_department(self):
        orphan = fake_file(department_name="")

        self.assertEqual(group_by_department([orphan]), {UNKNOWN_DEPARTMENT: [orphan]})
        self.assertEqual(UNKNOWN_DEPARTMENT, "Unknown Department")

    def test_empty(self):
        self.assertEqual(group_by_department([]), {})


class ComputeReviewStatsTest(SimpleTestCase):

    def setUp(self):
        self.today = date(2025, 3, 14)
        tz = timezone.get_current_timezone()
        self.this_morning = timezone.make_aware(datetime(2025, 3, 14, 9, 30), tz)
        self.yesterday = self.this_morning - timedelta(days=1)

    def test_counts(self):
        pending = [fake_file(), fake_file()]
        all_files = pending + [
            fake_file(workflow_status=Status.APPROVED, exam_unit_approved_at=self.this_morning),
            fake_file(workflow_status=Status.APPROVED, exam_unit_approved_at=self.yesterday),
            fake_file(workflow_status=Status.NEEDS_REVISION, exam_unit_rejected_at=self.this_morning),
            fake_file(workflow_status=Status.NEEDS_REVISION, exam_unit_rejected_at=self.yesterday),
        ]

        stats = compute_review_stats(pending, all_files, department_count=4, today=self.today)

        self.assertEqual(stats, {
            "pending": 2,
            "approved_today": 1,
            "rejected_today": 1,
            "total_approved": 2,
            "departments": 4,
        })

    def test_nothing_loaded(self):
        stats = compute_review_stats([], [], 0, today=self.today)

        self.assertEqual(set(stats.values()), {0})
