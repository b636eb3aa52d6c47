"""Integration tests for the event catalog API.

Run with: pytest tests/test_event_catalog.py -v
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events.models import Event


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_returns_paginated_results(self, api_client: APIClient, make_event):
        base = timezone.now()
        for i in range(8):
            make_event(f"Event {i}", created_at=base + timedelta(minutes=i))

        first = api_client.get("/api/events", {"page": 1, "limit": 6}).json()
        second = api_client.get("/api/events", {"page": 2, "limit": 6}).json()

        assert first["total_pages"] == 2
        assert [e["title"] for e in first["data"]] == [f"Event {i}" for i in range(7, 1, -1)]
        assert [e["title"] for e in second["data"]] == ["Event 1", "Event 0"]

    def test_pages_never_repeat_or_skip_events_with_equal_timestamps(self, api_client: APIClient, make_event):
        same = timezone.now()
        created = {str(make_event(f"Event {i}", created_at=same).id) for i in range(5)}

        seen = []
        for page in (1, 2, 3):
            body = api_client.get("/api/events", {"page": page, "limit": 2}).json()
            assert body["total_pages"] == 3
            seen.extend(e["id"] for e in body["data"])

        assert len(seen) == len(set(seen)) == 5
        assert set(seen) == created
        assert seen == sorted(seen)

    def test_list_events_empty_catalog(self, api_client: APIClient):
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert response.json() == {"data": [], "total_pages": 0}

    def test_default_limit_is_six(self, api_client: APIClient, make_event):
        for i in range(7):
            make_event(f"Event {i}")
        body = api_client.get("/api/events").json()
        assert len(body["data"]) == 6
        assert body["total_pages"] == 2

    def test_title_search_is_case_insensitive_substring(self, api_client: APIClient, make_event):
        make_event("Late Night JAZZ")
        make_event("Jazz brunch")
        make_event("Rock festival")
        body = api_client.get("/api/events", {"query": "jazz"}).json()
        assert sorted(e["title"] for e in body["data"]) == ["Jazz brunch", "Late Night JAZZ"]

    def test_category_filter_by_name(self, api_client: APIClient, make_event, music, tech):
        make_event("Jazz night", category=music)
        make_event("PyCon", category=tech)
        body = api_client.get("/api/events", {"category": "music"}).json()
        assert [e["title"] for e in body["data"]] == ["Jazz night"]
        assert body["data"][0]["category"] == {"id": str(music.id), "name": "Music"}

    def test_category_filter_by_partial_name(self, api_client: APIClient, make_event, music, tech):
        make_event("PyCon", category=tech)
        body = api_client.get("/api/events", {"category": "talks"}).json()
        assert [e["title"] for e in body["data"]] == ["PyCon"]

    def test_query_and_category_combined(self, api_client: APIClient, make_event, music, tech):
        make_event("Jazz night", category=music)
        make_event("Jazz and Python", category=tech)
        body = api_client.get("/api/events", {"query": "jazz", "category": "Music"}).json()
        assert [e["title"] for e in body["data"]] == ["Jazz night"]

    def test_unknown_category_returns_no_events(self, api_client: APIClient, make_event, music):
        make_event("Jazz night", category=music)
        body = api_client.get("/api/events", {"category": "opera"}).json()
        assert body == {"data": [], "total_pages": 0}

    @pytest.mark.parametrize("limit", [0, -3])
    def test_non_positive_limit_is_rejected(self, api_client: APIClient, limit):
        response = api_client.get("/api/events", {"limit": limit})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PAGINATION"

    def test_events_are_joined_with_organizer(self, api_client: APIClient, make_event, organizer):
        make_event("Jazz night")
        event = api_client.get("/api/events").json()["data"][0]
        assert event["organizer"] == {
            "id": str(organizer.pk),
            "first_name": "Ada",
            "last_name": "Lovelace",
        }
        assert event["category"] is None


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, make_event, music):
        event = make_event("Jazz night", category=music, location="Club", price="15.50")
        response = api_client.get(f"/api/events/{event.id}")
        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Jazz night"
        assert body["location"] == "Club"
        assert body["price"] == "15.50"

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/6f1c1a52-5a0c-4a4e-9d3f-2d0c7f7c9a11")
        assert response.status_code == 404
        assert response.json() == {"code": "EVENT_NOT_FOUND", "message": "Event not found"}

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/not-a-uuid")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EVENT_ID"

    def test_deleted_category_yields_null(self, api_client: APIClient, make_event, music):
        event = make_event("Jazz night", category=music)
        music.delete()
        body = api_client.get(f"/api/events/{event.id}").json()
        assert body["category"] is None


@pytest.mark.django_db
class TestCreateEvent:
    """Tests for POST /api/events"""

    def test_create_then_fetch_round_trip(self, organizer_client: APIClient, api_client: APIClient, organizer, music):
        payload = {"title": "Jazz night", "category_id": str(music.id), "price": "20.00"}
        response = organizer_client.post("/api/events", payload, format="json")
        assert response.status_code == 201
        event_id = response.json()["id"]

        fetched = api_client.get(f"/api/events/{event_id}").json()
        assert fetched["category"]["name"] == "Music"
        assert fetched["organizer"]["id"] == str(organizer.pk)
        assert fetched["organizer"]["first_name"] == organizer.first_name
        assert fetched["organizer"]["last_name"] == organizer.last_name

    def test_create_requires_authentication(self, api_client: APIClient):
        response = api_client.post("/api/events", {"title": "Gig"}, format="json")
        assert response.status_code in (401, 403)
        assert Event.objects.count() == 0

    def test_create_with_unknown_category(self, organizer_client: APIClient):
        payload = {"title": "Gig", "category_id": "6f1c1a52-5a0c-4a4e-9d3f-2d0c7f7c9a11"}
        response = organizer_client.post("/api/events", payload, format="json")
        assert response.status_code == 404
        assert response.json()["code"] == "CATEGORY_NOT_FOUND"

    def test_create_requires_title(self, organizer_client: APIClient):
        response = organizer_client.post("/api/events", {"location": "Club"}, format="json")
        assert response.status_code == 400

    def test_end_before_start_is_rejected(self, organizer_client: APIClient):
        payload = {
            "title": "Gig",
            "start_date_time": "2026-06-01T20:00:00Z",
            "end_date_time": "2026-06-01T18:00:00Z",
        }
        response = organizer_client.post("/api/events", payload, format="json")
        assert response.status_code == 400


@pytest.mark.django_db
class TestUpdateEvent:
    """Tests for PUT /api/events/{id}"""

    def test_organizer_replaces_fields(self, organizer_client: APIClient, make_event, music):
        event = make_event("Jazz night", category=music, location="Club")
        response = organizer_client.put(
            f"/api/events/{event.id}",
            {"title": "Jazz morning", "path": f"/events/{event.id}"},
            format="json",
        )
        assert response.status_code == 200
        event.refresh_from_db()
        assert event.title == "Jazz morning"
        # full replacement: omitted fields fall back to their defaults
        assert event.location == ""
        assert event.category is None

    def test_non_organizer_is_forbidden_and_event_unchanged(self, other_client: APIClient, make_event):
        event = make_event("Jazz night")
        response = other_client.put(f"/api/events/{event.id}", {"title": "Hijacked"}, format="json")
        assert response.status_code == 403
        assert response.json()["code"] == "NOT_EVENT_ORGANIZER"
        event.refresh_from_db()
        assert event.title == "Jazz night"

    def test_update_missing_event(self, organizer_client: APIClient):
        response = organizer_client.put(
            "/api/events/6f1c1a52-5a0c-4a4e-9d3f-2d0c7f7c9a11", {"title": "Gig"}, format="json"
        )
        assert response.status_code == 404


@pytest.mark.django_db
class TestDeleteEvent:
    """Tests for DELETE /api/events/{id}"""

    def test_organizer_deletes_event(self, organizer_client: APIClient, make_event):
        event = make_event("Jazz night")
        response = organizer_client.delete(f"/api/events/{event.id}?path=/profile")
        assert response.status_code == 204
        assert not Event.objects.filter(pk=event.pk).exists()

    def test_deleting_missing_event_is_a_no_op(self, organizer_client: APIClient):
        response = organizer_client.delete("/api/events/6f1c1a52-5a0c-4a4e-9d3f-2d0c7f7c9a11")
        assert response.status_code == 204

    def test_non_organizer_cannot_delete(self, other_client: APIClient, make_event):
        event = make_event("Jazz night")
        response = other_client.delete(f"/api/events/{event.id}")
        assert response.status_code == 403
        assert Event.objects.filter(pk=event.pk).exists()


@pytest.mark.django_db
class TestRelatedAndUserEvents:
    def test_related_events_share_category_and_exclude_event(self, api_client: APIClient, make_event, music, tech):
        event = make_event("Jazz night", category=music)
        for i in range(4):
            make_event(f"Blues {i}", category=music)
        make_event("PyCon", category=tech)

        body = api_client.get(f"/api/events/{event.id}/related").json()
        titles = [e["title"] for e in body["data"]]
        assert len(titles) == 3
        assert "Jazz night" not in titles
        assert all(t.startswith("Blues") for t in titles)
        assert body["total_pages"] == 2

    def test_related_events_with_explicit_category(self, api_client: APIClient, make_event, music, tech):
        event = make_event("Jazz night", category=music)
        make_event("PyCon", category=tech)
        body = api_client.get(f"/api/events/{event.id}/related", {"category_id": str(tech.id)}).json()
        assert [e["title"] for e in body["data"]] == ["PyCon"]

    def test_events_by_organizer(self, api_client: APIClient, make_event, organizer, other_user):
        make_event("Mine")
        make_event("Theirs", user=other_user)
        body = api_client.get(f"/api/users/{organizer.pk}/events").json()
        assert [e["title"] for e in body["data"]] == ["Mine"]
        assert body["total_pages"] == 1

    def test_events_by_unknown_user_is_empty(self, api_client: APIClient, make_event):
        make_event("Mine")
        body = api_client.get("/api/users/not-a-number/events").json()
        assert body == {"data": [], "total_pages": 0}


@pytest.mark.django_db
class TestCategories:
    def test_create_and_list_categories(self, organizer_client: APIClient):
        created = organizer_client.post("/api/categories", {"name": "Music"}, format="json")
        assert created.status_code == 201
        again = organizer_client.post("/api/categories", {"name": "music"}, format="json")
        assert again.status_code == 200
        assert again.json()["id"] == created.json()["id"]

        listed = organizer_client.get("/api/categories").json()
        assert [c["name"] for c in listed] == ["Music"]
