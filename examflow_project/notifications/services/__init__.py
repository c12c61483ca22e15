"""
Notification service layer.

- inbox:    per-user read / delete / clear operations used by the panel
- workflow: emits notifications when an exam file changes review stage
"""

# =====================================================
# INBOX
# =====================================================
from .inbox import (
    get_user_notifications,
    get_unread_notification_count,
    get_cached_unread_count,
    mark_notification_as_read,
    mark_all_notifications_as_read,
    delete_notification,
    clear_all_notifications,
    clear_read_notifications,
    invalidate_unread_cache,
)

# =====================================================
# WORKFLOW
# =====================================================
from .workflow import (
    notify_review_requested,
    notify_hos_approved,
    notify_file_rejected,
    notify_exam_unit_approved,
)

__all__ = [
    # Inbox
    "get_user_notifications",
    "get_unread_notification_count",
    "get_cached_unread_count",
    "mark_notification_as_read",
    "mark_all_notifications_as_read",
    "delete_notification",
    "clear_all_notifications",
    "clear_read_notifications",
    "invalidate_unread_cache",

    # Workflow
    "notify_review_requested",
    "notify_hos_approved",
    "notify_file_rejected",
    "notify_exam_unit_approved",
]
