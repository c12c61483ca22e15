"""
Exam file views
===============

One module per role: lecturer, head of section, exam unit.
"""

# Lecturer
from .lecturer_views import (
    my_files,
    upload_file,
    resubmit_file,
    delete_file,
)

# Head of Section
from .hos_views import (
    hos_review,
    hos_review_action,
)

# Exam Unit
from .exam_unit_views import (
    exam_unit_review,
    exam_unit_review_action,
    file_feedback,
)
