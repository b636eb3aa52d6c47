"""Pytest configuration and shared fixtures."""

import hashlib
import hmac
import json
import time

import pytest
from rest_framework.test import APIClient

WEBHOOK_SECRET = "whsec_test_secret"


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def organizer(django_user_model):
    return django_user_model.objects.create_user(
        username="ada", password="pw", first_name="Ada", last_name="Lovelace"
    )


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        username="grace", password="pw", first_name="Grace", last_name="Hopper"
    )


@pytest.fixture
def organizer_client(organizer) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=organizer)
    return client


@pytest.fixture
def other_client(other_user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


@pytest.fixture
def music(db):
    from events.models import Category
    return Category.objects.create(name="Music")


@pytest.fixture
def tech(db):
    from events.models import Category
    return Category.objects.create(name="Tech Talks")


@pytest.fixture
def make_event(db, organizer):
    from events.models import Event

    def _make(title: str, category=None, user=None, created_at=None, **fields):
        event = Event.objects.create(title=title, category=category, organizer=user or organizer, **fields)
        if created_at is not None:
            # auto_now_add ignores values passed to create()
            Event.objects.filter(pk=event.pk).update(created_at=created_at)
            event.refresh_from_db()
        return event

    return _make


@pytest.fixture
def webhook_secret(settings) -> str:
    settings.STRIPE_WEBHOOK_SECRET = WEBHOOK_SECRET
    return WEBHOOK_SECRET


def _sign_payload(payload: str, secret: str = WEBHOOK_SECRET, timestamp: int | None = None) -> str:
    """Build a Stripe-Signature header value for ``payload``."""
    timestamp = int(time.time()) if timestamp is None else timestamp
    signed = f"{timestamp}.{payload}".encode("utf-8")
    digest = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={digest}"


def _checkout_notification(
    session_id: str = "cs_test_1",
    amount_total: int | str | None = 5000,
    metadata: dict | list | None = None,
    event_type: str = "checkout.session.completed",
) -> str:
    session = {"id": session_id, "object": "checkout.session", "amount_total": amount_total}
    if metadata is not None:
        session["metadata"] = metadata
    return json.dumps({"id": "evt_1", "type": event_type, "data": {"object": session}})


@pytest.fixture
def sign_payload():
    return _sign_payload


@pytest.fixture
def checkout_notification():
    return _checkout_notification
