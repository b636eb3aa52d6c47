"""Django ORM implementation of the event stores."""

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.db.models import Q, QuerySet

from events import models
from events.domain import Category, CategoryId, Event, EventId, EventInput, Money, OrganizerSummary
from events.domain.predicates import (
    And,
    CategoryEquals,
    ExcludeEvent,
    MatchAll,
    MatchNone,
    OrganizerEquals,
    Predicate,
    TitleContains,
)
from events.stores.interfaces import CategoryStore, EventStore, UserDirectory


def _to_user_pk(value: str):
    """Coerce an external user id to the user model's primary key, or None."""
    try:
        return get_user_model()._meta.pk.to_python(value)
    except DjangoValidationError:
        return None


def compile_predicate(predicate: Predicate) -> Q | None:
    """Translate a predicate into a Q object. None means "matches nothing"."""
    match predicate:
        case MatchAll():
            return Q()
        case MatchNone():
            return None
        case TitleContains(text=text):
            return Q(title__icontains=text)
        case CategoryEquals(category_id=category_id):
            return Q(category_id=category_id.value)
        case OrganizerEquals(organizer_id=organizer_id):
            pk = _to_user_pk(organizer_id)
            return None if pk is None else Q(organizer_id=pk)
        case ExcludeEvent(event_id=event_id):
            return ~Q(pk=event_id.value)
        case And(predicates=predicates):
            combined = Q()
            for child in predicates:
                compiled = compile_predicate(child)
                if compiled is None:
                    return None
                combined &= compiled
            return combined
    raise TypeError(f"Unsupported predicate: {predicate!r}")


def category_to_domain(row: models.Category) -> Category:
    return Category(id=CategoryId(value=row.id), name=row.name)


def event_to_domain(row: models.Event) -> Event:
    organizer = None
    if row.organizer is not None:
        organizer = OrganizerSummary(
            id=str(row.organizer.pk),
            first_name=row.organizer.first_name,
            last_name=row.organizer.last_name,
        )
    category = category_to_domain(row.category) if row.category is not None else None
    return Event(
        id=EventId(value=row.id),
        title=row.title,
        description=row.description,
        location=row.location,
        image_url=row.image_url,
        start_date_time=row.start_date_time,
        end_date_time=row.end_date_time,
        price=Money(amount=row.price),
        is_free=row.is_free,
        url=row.url,
        category=category,
        organizer=organizer,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _field_values(data: EventInput) -> dict:
    return {
        "title": data.title,
        "description": data.description,
        "location": data.location,
        "image_url": data.image_url,
        "start_date_time": data.start_date_time,
        "end_date_time": data.end_date_time,
        "price": data.price.amount,
        "is_free": data.is_free,
        "url": data.url,
        "category_id": data.category_id.value if data.category_id else None,
    }


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _joined(self) -> QuerySet:
        return models.Event.objects.select_related("organizer", "category").order_by("-created_at", "id")

    def _filtered(self, predicate: Predicate) -> QuerySet:
        condition = compile_predicate(predicate)
        if condition is None:
            return models.Event.objects.none()
        return self._joined().filter(condition)

    def find_events(self, predicate: Predicate, skip: int, limit: int) -> list[Event]:
        rows = self._filtered(predicate)[skip : skip + limit]
        return [event_to_domain(row) for row in rows]

    def count_events(self, predicate: Predicate) -> int:
        return self._filtered(predicate).count()

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._joined().filter(pk=event_id.value).first()
        return event_to_domain(row) if row is not None else None

    def create_event(self, data: EventInput, organizer_id: str) -> Event:
        row = models.Event.objects.create(organizer_id=_to_user_pk(organizer_id), **_field_values(data))
        return self.get_event(EventId(value=row.id))

    def update_event(self, event_id: EventId, data: EventInput) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        for field, value in _field_values(data).items():
            setattr(row, field, value)
        row.save()
        return self.get_event(event_id)

    def delete_event(self, event_id: EventId) -> bool:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return False
        row.delete()
        return True


class DjangoCategoryStore(CategoryStore):
    """Category store using Django ORM."""

    def list_categories(self) -> list[Category]:
        return [category_to_domain(row) for row in models.Category.objects.order_by("name")]

    def category_exists(self, category_id: CategoryId) -> bool:
        return models.Category.objects.filter(pk=category_id.value).exists()

    def find_by_name(self, name: str) -> Category | None:
        row = models.Category.objects.filter(name__iexact=name).first()
        if row is None:
            row = models.Category.objects.filter(name__icontains=name).order_by("name").first()
        return category_to_domain(row) if row is not None else None

    def get_or_create(self, name: str) -> tuple[Category, bool]:
        existing = models.Category.objects.filter(name__iexact=name).first()
        if existing is not None:
            return category_to_domain(existing), False
        try:
            with transaction.atomic():
                row = models.Category.objects.create(name=name)
        except IntegrityError:
            # Lost a race against a concurrent create of the same name.
            row = models.Category.objects.get(name__iexact=name)
            return category_to_domain(row), False
        return category_to_domain(row), True


class DjangoUserDirectory(UserDirectory):
    """Looks users up in Django's configured user model."""

    def user_exists(self, user_id: str) -> bool:
        pk = _to_user_pk(user_id)
        if pk is None:
            return False
        return get_user_model().objects.filter(pk=pk).exists()
