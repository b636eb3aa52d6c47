from events.handlers.views import (
    CategoryListView,
    EventDetailView,
    EventListView,
    RelatedEventListView,
    UserEventListView,
)

__all__ = [
    "CategoryListView",
    "EventDetailView",
    "EventListView",
    "RelatedEventListView",
    "UserEventListView",
]
