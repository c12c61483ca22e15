from django.contrib import admin

from .models import ExamFile, Feedback


class FeedbackInline(admin.TabularInline):
    model = Feedback
    extra = 0
    can_delete = False
    readonly_fields = (
        "reviewer",
        "reviewer_name",
        "reviewer_role",
        "action",
        "comments",
        "created_at",
    )


@admin.register(ExamFile)
class ExamFileAdmin(admin.ModelAdmin):

    # =====================================================
    # LIST VIEW
    # =====================================================
    list_display = (
        "id",
        "subject_code",
        "file_name",
        "department",
        "created_by",
        "workflow_status",
        "created_at",
    )

    list_filter = (
        "workflow_status",
        "department",
        "created_at",
    )

    search_fields = (
        "file_name",
        "subject_code",
        "subject_name",
        "created_by__username",
        "created_by__first_name",
        "created_by__last_name",
    )

    ordering = ("-created_at",)
    list_per_page = 25

    # =====================================================
    # FIELDSETS (DETAIL VIEW)
    # =====================================================
    fieldsets = (
        ("File", {
            "fields": ("file", "file_name", "file_size"),
        }),
        ("Subject", {
            "fields": ("subject_code", "subject_name", "department", "created_by"),
        }),
        ("Workflow", {
            "fields": ("workflow_status",),
        }),
        ("Head of Section", {
            "fields": ("hos_comments", "hos_approved_by", "hos_approved_at"),
        }),
        ("Exam Unit", {
            "fields": (
                "exam_unit_comments",
                "exam_unit_approved_by",
                "exam_unit_approved_at",
                "exam_unit_rejected_at",
            ),
        }),
    )

    readonly_fields = (
        "file_size",
        "hos_approved_at",
        "exam_unit_approved_at",
        "exam_unit_rejected_at",
    )

    inlines = (FeedbackInline,)
