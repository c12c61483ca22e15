from django.urls import path

from . import views

app_name = "notifications"

urlpatterns = [
    # Panel feed (polled)
    path("feed/", views.notification_feed, name="feed"),
    path("unread-count/", views.unread_count, name="unread-count"),

    # Single notification
    path("<int:notification_id>/read/", views.mark_read, name="mark-read"),
    path("<int:notification_id>/delete/", views.delete, name="delete"),
    path("<int:notification_id>/open/", views.open_notification, name="open"),

    # Bulk
    path("mark-all-read/", views.mark_all_read, name="mark-all-read"),
    path("clear-all/", views.clear_all, name="clear-all"),
    path("clear-read/", views.clear_read, name="clear-read"),
]
