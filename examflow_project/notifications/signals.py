from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from notifications.models import Notification
from notifications.services.inbox import invalidate_unread_cache


# =====================================================
# KEEP THE CACHED BADGE COUNT IN STEP WITH THE INBOX
# =====================================================
@receiver(post_save, sender=Notification)
@receiver(post_delete, sender=Notification)
def refresh_unread_badge(sender, instance, **kwargs):
    invalidate_unread_cache(instance.recipient_id)
