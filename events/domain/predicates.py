"""Filter conditions over events.

A predicate is an immutable description of which events match. Stores
translate it into their own query language; nothing here touches storage.
"""

from dataclasses import dataclass

from events.domain.value_objects import CategoryId, EventId


@dataclass(frozen=True)
class MatchAll:
    """Matches every event."""


@dataclass(frozen=True)
class MatchNone:
    """Matches no event, e.g. when a category name does not resolve."""


@dataclass(frozen=True)
class TitleContains:
    """Case-insensitive substring match on the title."""

    text: str


@dataclass(frozen=True)
class CategoryEquals:
    category_id: CategoryId


@dataclass(frozen=True)
class OrganizerEquals:
    organizer_id: str


@dataclass(frozen=True)
class ExcludeEvent:
    event_id: EventId


@dataclass(frozen=True)
class And:
    predicates: tuple["Predicate", ...]


Predicate = MatchAll | MatchNone | TitleContains | CategoryEquals | OrganizerEquals | ExcludeEvent | And


def all_of(*predicates: Predicate) -> Predicate:
    """Combine predicates, dropping MatchAll and collapsing on MatchNone."""
    kept = []
    for predicate in predicates:
        if isinstance(predicate, MatchNone):
            return predicate
        if isinstance(predicate, MatchAll):
            continue
        kept.append(predicate)
    if not kept:
        return MatchAll()
    if len(kept) == 1:
        return kept[0]
    return And(predicates=tuple(kept))
