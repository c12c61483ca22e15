import logging

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import redirect
from django.utils import timezone
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_POST

from accounts.views.dashboard_views import role_home_url
from notifications.models import Notification
from notifications.services.inbox import (
    get_user_notifications,
    get_unread_notification_count,
    mark_notification_as_read,
    mark_all_notifications_as_read,
    delete_notification,
    clear_all_notifications,
    clear_read_notifications,
)
from notifications.utils import (
    format_badge,
    format_relative_time,
    icon_for_type,
    pluralize_count,
)

logger = logging.getLogger(__name__)


def serialize_notification(notification, now=None):
    return {
        "id": notification.id,
        "type": notification.type,
        "icon": icon_for_type(notification.type),
        "title": notification.title,
        "message": notification.message,
        "action_url": notification.action_url,
        "read": notification.is_read,
        "created_at": notification.created_at.isoformat(),
        "time_ago": format_relative_time(notification.created_at, now),
    }


def _error(message, status):
    return JsonResponse({"success": False, "error": message}, status=status)


def _not_found():
    return _error("Notification not found.", 404)


# ============================================================
# FEED (POLLED BY THE PANEL)
# ============================================================
@login_required
@require_GET
def notification_feed(request):
    try:
        notifications = get_user_notifications(request.user)
        count = get_unread_notification_count(request.user)
    except Exception:
        logger.exception("Error loading notifications for %s", request.user)
        return _error("Failed to load notifications", 500)

    now = timezone.now()

    return JsonResponse({
        "success": True,
        "notifications": [serialize_notification(n, now) for n in notifications],
        "unread_count": count,
        "badge": format_badge(count),
    })


@login_required
@require_GET
def unread_count(request):
    count = get_unread_notification_count(request.user)

    return JsonResponse({
        "success": True,
        "unread_count": count,
        "badge": format_badge(count),
    })


# ============================================================
# SINGLE NOTIFICATION
# ============================================================
@login_required
@require_POST
def mark_read(request, notification_id):
    try:
        mark_notification_as_read(request.user, notification_id)
    except Notification.DoesNotExist:
        return _not_found()
    except Exception:
        logger.exception("Error marking notification %s as read", notification_id)
        return _error("Failed to mark notification as read", 500)

    return JsonResponse({"success": True})


@login_required
@require_POST
def delete(request, notification_id):
    try:
        delete_notification(request.user, notification_id)
    except Notification.DoesNotExist:
        return _not_found()
    except Exception:
        logger.exception("Error deleting notification %s", notification_id)
        return _error("Failed to delete notification", 500)

    return JsonResponse({"success": True})


@login_required
def open_notification(request, notification_id):
    """
    Clicking a notification: mark it read (if needed),
    then follow its link or fall back to the role dashboard.
    """
    try:
        notification = mark_notification_as_read(request.user, notification_id)
    except Notification.DoesNotExist:
        return redirect(role_home_url(request.user))

    target = notification.action_url
    if target and url_has_allowed_host_and_scheme(
        target,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return redirect(target)

    return redirect(role_home_url(request.user))


# ============================================================
# BULK
# ============================================================
@login_required
@require_POST
def mark_all_read(request):
    try:
        updated = mark_all_notifications_as_read(request.user)
    except Exception:
        logger.exception("Error marking all notifications as read")
        return _error("Failed to mark notifications as read", 500)

    return JsonResponse({"success": True, "updated": updated})


@login_required
@require_POST
def clear_all(request):
    try:
        count = clear_all_notifications(request.user)
    except Exception:
        logger.exception("Error clearing all notifications")
        return _error("Failed to clear notifications", 500)

    return JsonResponse({
        "success": True,
        "count": count,
        "message": f"Cleared {pluralize_count(count, 'notification')}",
    })


@login_required
@require_POST
def clear_read(request):
    try:
        count = clear_read_notifications(request.user)
    except Exception:
        logger.exception("Error clearing read notifications")
        return _error("Failed to clear read notifications", 500)

    if count > 0:
        message = f"Cleared {pluralize_count(count, 'read notification')}"
    else:
        message = "No read notifications to clear"

    return JsonResponse({"success": True, "count": count, "message": message})
