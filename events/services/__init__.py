from events.services.category_service import CategoryService
from events.services.event_service import EventService
from events.stores.django_store import DjangoCategoryStore, DjangoEventStore, DjangoUserDirectory


def get_event_service() -> EventService:
    return EventService(
        store=DjangoEventStore(),
        categories=DjangoCategoryStore(),
        users=DjangoUserDirectory(),
    )


def get_category_service() -> CategoryService:
    return CategoryService(store=DjangoCategoryStore())


__all__ = ["CategoryService", "EventService", "get_category_service", "get_event_service"]
