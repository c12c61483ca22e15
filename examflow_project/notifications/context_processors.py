"""
Context processor for the notification bell.

Enable in settings.py:

TEMPLATES = [
    {
        "OPTIONS": {
            "context_processors": [
                # ...
                "notifications.context_processors.notification_badge",
            ],
        },
    },
]
"""

from django.conf import settings

from notifications.services.inbox import get_cached_unread_count
from notifications.utils import format_badge


def notification_badge(request):
    """
    Template usage:
        {% if notification_badge %}
            <span class="badge">{{ notification_badge }}</span>
        {% endif %}
    """
    poll_interval = settings.NOTIFICATION_POLL_INTERVAL

    if not request.user.is_authenticated:
        return {
            "unread_notifications_count": 0,
            "notification_badge": "",
            "notification_poll_interval": poll_interval,
        }

    count = get_cached_unread_count(request.user)

    return {
        "unread_notifications_count": count,
        "notification_badge": format_badge(count),
        "notification_poll_interval": poll_interval,
    }
