"""
Exam file service layer.

- workflow: state transitions (upload → HOS → Exam Unit) with guards
- review:   loaders, search, department grouping and header stats
"""

# =====================================================
# WORKFLOW
# =====================================================
from .workflow import (
    upload_exam_file,
    resubmit_exam_file,
    delete_exam_file,
    hos_approve_file,
    hos_reject_file,
    exam_unit_approve_file,
    exam_unit_reject_file,
)

# =====================================================
# REVIEW
# =====================================================
from .review import (
    get_exam_unit_review_files,
    get_hos_review_files,
    get_lecturer_files,
    get_all_files,
    get_departments,
    get_file_feedback,
    filter_files,
    group_by_department,
    approved_files,
    compute_review_stats,
)

__all__ = [
    # Workflow
    "upload_exam_file",
    "resubmit_exam_file",
    "delete_exam_file",
    "hos_approve_file",
    "hos_reject_file",
    "exam_unit_approve_file",
    "exam_unit_reject_file",

    # Review
    "get_exam_unit_review_files",
    "get_hos_review_files",
    "get_lecturer_files",
    "get_all_files",
    "get_departments",
    "get_file_feedback",
    "filter_files",
    "group_by_department",
    "approved_files",
    "compute_review_stats",
]
