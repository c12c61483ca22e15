import django.db.models.deletion
import django.utils.timezone
import exam_files.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ExamFile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("file", models.FileField(upload_to=exam_files.models.exam_file_upload_path)),
                ("file_name", models.CharField(max_length=255)),
                ("file_size", models.PositiveBigIntegerField(default=0)),
                ("subject_code", models.CharField(db_index=True, max_length=30)),
                ("subject_name", models.CharField(blank=True, max_length=200)),
                (
                    "workflow_status",
                    models.CharField(
                        choices=[
                            ("PENDING_HOS", "Pending HOS Review"),
                            ("PENDING_EXAM_UNIT", "Pending Exam Unit Review"),
                            ("NEEDS_REVISION", "Needs Revision"),
                            ("APPROVED", "Approved"),
                        ],
                        db_index=True,
                        default="PENDING_HOS",
                        max_length=20,
                    ),
                ),
                ("hos_comments", models.TextField(blank=True)),
                ("hos_approved_at", models.DateTimeField(blank=True, null=True)),
                ("exam_unit_comments", models.TextField(blank=True)),
                ("exam_unit_approved_at", models.DateTimeField(blank=True, null=True)),
                ("exam_unit_rejected_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="exam_files",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "department",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="exam_files",
                        to="accounts.department",
                    ),
                ),
                (
                    "exam_unit_approved_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="exam_unit_approved_files",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "hos_approved_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="hos_approved_files",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["workflow_status", "department"], name="examfile_status_dept_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Feedback",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("reviewer_name", models.CharField(max_length=200)),
                ("reviewer_role", models.CharField(max_length=20)),
                (
                    "action",
                    models.CharField(
                        choices=[("approved", "Approved"), ("rejected", "Rejected")],
                        max_length=20,
                    ),
                ),
                ("comments", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "file",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="feedback",
                        to="exam_files.examfile",
                    ),
                ),
                (
                    "reviewer",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="given_feedback",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
