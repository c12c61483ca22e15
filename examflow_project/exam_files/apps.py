from django.apps import AppConfig


class ExamFilesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "exam_files"
    verbose_name = "Exam files"
