from events.domain.models import Category, Event, EventInput, OrganizerSummary, Page
from events.domain.value_objects import CategoryId, EventId, Money, PageRequest

__all__ = [
    "Category",
    "Event",
    "EventInput",
    "OrganizerSummary",
    "Page",
    "CategoryId",
    "EventId",
    "Money",
    "PageRequest",
]
