from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from .models import Notification
from .services.inbox import invalidate_unread_cache


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):

    # =====================================================
    # LIST VIEW
    # =====================================================
    list_display = (
        "id",
        "recipient",
        "type",
        "colored_title",
        "is_read",
        "created_at",
    )

    list_filter = (
        "type",
        "is_read",
        "created_at",
    )

    search_fields = (
        "title",
        "message",
        "recipient__username",
        "recipient__first_name",
        "recipient__last_name",
    )

    ordering = ("-created_at",)
    list_per_page = 25

    # =====================================================
    # FIELDSETS (DETAIL VIEW)
    # =====================================================
    fieldsets = (
        ("Recipient", {
            "fields": ("recipient",),
        }),
        ("Content", {
            "fields": ("type", "title", "message"),
        }),
        ("Context", {
            "fields": ("exam_file", "action_url"),
        }),
        ("Status", {
            "fields": ("is_read", "read_at", "created_at"),
        }),
    )

    readonly_fields = (
        "created_at",
        "read_at",
    )

    actions = (
        "mark_as_read",
        "mark_as_unread",
    )

    def colored_title(self, obj):
        color_map = {
            Notification.Type.APPROVAL: "#16a34a",        # green
            Notification.Type.REJECTION: "#dc2626",       # red
            Notification.Type.REVIEW_REQUEST: "#2563eb",  # blue
            Notification.Type.INFO: "#6b7280",            # gray
        }

        return format_html(
            '<span style="color:{}; font-weight:600;">{}</span>',
            color_map.get(obj.type, "#000000"),
            obj.title,
        )

    colored_title.short_description = "Title"

    # =====================================================
    # ADMIN ACTIONS
    # =====================================================
    @admin.action(description="Mark selected notifications as READ")
    def mark_as_read(self, request, queryset):
        queryset.update(is_read=True, read_at=timezone.now())
        self._refresh_badges(queryset)

    @admin.action(description="Mark selected notifications as UNREAD")
    def mark_as_unread(self, request, queryset):
        queryset.update(is_read=False, read_at=None)
        self._refresh_badges(queryset)

    def _refresh_badges(self, queryset):
        for recipient_id in set(queryset.values_list("recipient_id", flat=True)):
            invalidate_unread_cache(recipient_id)
