"""Ownership rules for mutating events."""

from events.domain.errors import NotEventOrganizerError
from events.domain.models import Event


def is_organizer(event: Event, user_id: object) -> bool:
    if event.organizer is None or user_id is None:
        return False
    return str(event.organizer.id) == str(user_id)


def ensure_organizer(event: Event, user_id: object) -> None:
    """Raise NotEventOrganizerError unless ``user_id`` organizes ``event``."""
    if not is_organizer(event, user_id):
        raise NotEventOrganizerError(event_id=str(event.id), user_id=str(user_id))
