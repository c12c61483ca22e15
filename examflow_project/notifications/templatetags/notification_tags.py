from django import template

from notifications.utils import format_relative_time

register = template.Library()


@register.filter
def time_ago(timestamp):
    """{{ file.created_at|time_ago }} -> "5m ago"."""
    return format_relative_time(timestamp)
