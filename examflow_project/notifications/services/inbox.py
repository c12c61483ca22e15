import logging

from django.conf import settings
from django.core.cache import cache

from notifications.models import Notification

logger = logging.getLogger(__name__)


def _cache_key(user_id):
    return f"unread_notifications_user_{user_id}"


def invalidate_unread_cache(user_or_id):
    """
    Drop the cached unread count for a user.

    Call this when:
    - A notification is created or deleted
    - A notification (or all of them) is marked as read
    """
    user_id = getattr(user_or_id, "pk", user_or_id)
    cache.delete(_cache_key(user_id))


# ============================================================
# READ
# ============================================================

def get_user_notifications(user, limit=None):
    """Newest first, capped at NOTIFICATIONS_PANEL_LIMIT."""
    if limit is None:
        limit = settings.NOTIFICATIONS_PANEL_LIMIT

    return list(
        Notification.objects
        .filter(recipient=user)
        .order_by("-created_at", "-id")[:limit]
    )


def get_unread_notification_count(user):
    return Notification.objects.filter(recipient=user, is_read=False).count()


def get_cached_unread_count(user):
    """
    Unread count for server-rendered pages.
    Per-user cache key, NOTIFICATION_COUNT_CACHE_TTL seconds,
    explicitly invalidated on every inbox change.
    """
    key = _cache_key(user.pk)
    cached = cache.get(key)

    if cached is not None:
        return cached

    count = get_unread_notification_count(user)
    cache.set(key, count, timeout=settings.NOTIFICATION_COUNT_CACHE_TTL)
    return count


# ============================================================
# MUTATIONS (always scoped to the owner)
# ============================================================

def mark_notification_as_read(user, notification_id):
    notification = Notification.objects.get(pk=notification_id, recipient=user)
    notification.mark_as_read()
    return notification


def mark_all_notifications_as_read(user):
    updated = Notification.mark_all_as_read(user)
    invalidate_unread_cache(user)

    logger.info("Marked %s notifications as read for %s", updated, user)
    return updated


def delete_notification(user, notification_id):
    Notification.objects.get(pk=notification_id, recipient=user).delete()


def clear_all_notifications(user):
    count = Notification.clear_for(user)
    invalidate_unread_cache(user)

    logger.info("Cleared %s notifications for %s", count, user)
    return count


def clear_read_notifications(user):
    count = Notification.clear_for(user, read_only=True)
    invalidate_unread_cache(user)

    logger.info("Cleared %s read notifications for %s", count, user)
    return count
