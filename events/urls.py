from django.urls import path

from events.handlers import (
    CategoryListView,
    EventDetailView,
    EventListView,
    RelatedEventListView,
    UserEventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/related",
        RelatedEventListView.as_view(),
        name="related-event-list",
    ),
    path("users/<str:user_id>/events", UserEventListView.as_view(), name="user-event-list"),
    path("categories", CategoryListView.as_view(), name="category-list"),
]
