"""Django signals for cache invalidation."""

from django.conf import settings
from django.core.cache import cache
from django.db.models.signals import post_delete, post_save, pre_delete
from django.dispatch import Signal, receiver

from events.models import Category, Event

EVENT_DETAIL_KEY = "events:{event_id}"

# Sent with ``path`` after an event mutation. Receivers that render or cache
# pages for that path connect here.
path_invalidated = Signal()


def event_detail_key(event_id) -> str:
    return EVENT_DETAIL_KEY.format(event_id=event_id)


def invalidate_path(path: str | None) -> None:
    """Announce that whatever is displayed under ``path`` is stale."""
    if path:
        path_invalidated.send(sender=Event, path=path)


def _drop_event_details(event_ids) -> None:
    keys = [event_detail_key(event_id) for event_id in event_ids]
    if keys:
        cache.delete_many(keys)


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    cache.delete(event_detail_key(instance.pk))


# Cached event details embed the category and organizer summaries. Deleting
# either nulls the foreign key with a bulk update that sends no Event signals,
# so the affected ids are collected before the row goes away.


@receiver(post_save, sender=Category)
def invalidate_category_events(sender, instance, created, **kwargs):
    if not created:
        _drop_event_details(Event.objects.filter(category_id=instance.pk).values_list("pk", flat=True))


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def invalidate_organizer_events(sender, instance, created, **kwargs):
    if not created:
        _drop_event_details(Event.objects.filter(organizer_id=instance.pk).values_list("pk", flat=True))


@receiver(pre_delete, sender=Category)
def collect_category_events(sender, instance, **kwargs):
    instance._cached_event_ids = list(Event.objects.filter(category_id=instance.pk).values_list("pk", flat=True))


@receiver(pre_delete, sender=settings.AUTH_USER_MODEL)
def collect_organizer_events(sender, instance, **kwargs):
    instance._cached_event_ids = list(Event.objects.filter(organizer_id=instance.pk).values_list("pk", flat=True))


@receiver(post_delete, sender=Category)
@receiver(post_delete, sender=settings.AUTH_USER_MODEL)
def drop_related_event_details(sender, instance, **kwargs):
    """Forget cached details of events that lost their category or organizer."""
    _drop_event_details(getattr(instance, "_cached_event_ids", ()))
