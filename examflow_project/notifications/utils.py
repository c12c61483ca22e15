"""
Formatting helpers shared by the notification panel
(server-rendered badge, JSON feed and template filters).
"""

from django.conf import settings
from django.utils import timezone
from django.utils.formats import date_format


ICONS = {
    "approval": "check-circle",
    "rejection": "alert-circle",
    "review_request": "info",
}


def format_badge(count, maximum=None):
    """
    Unread badge label.

    0 -> ""  (badge hidden)
    3 -> "3"
    12 -> "9+"
    """
    if maximum is None:
        maximum = getattr(settings, "NOTIFICATION_BADGE_MAX", 9)

    if not count or count <= 0:
        return ""
    if count > maximum:
        return f"{maximum}+"
    return str(count)


def format_relative_time(timestamp, now=None):
    """
    Short relative age used in the panel:
    "Just now", "5m ago", "3h ago", "2d ago", then the local date.
    """
    if not timestamp:
        return ""

    now = now or timezone.now()
    seconds = (now - timestamp).total_seconds()

    minutes = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"

    return date_format(timezone.localtime(timestamp), "SHORT_DATE_FORMAT")


def icon_for_type(notification_type):
    return ICONS.get(notification_type, "bell")


def pluralize_count(count, noun):
    """pluralize_count(1, "notification") -> "1 notification"."""
    return f"{count} {noun}{'' if count == 1 else 's'}"
