"""Builds event predicates from listing filters."""

from events.domain.predicates import CategoryEquals, MatchNone, Predicate, TitleContains, all_of
from events.stores.interfaces import CategoryStore


def build_event_predicate(
    query: str | None,
    category: str | None,
    categories: CategoryStore,
) -> Predicate:
    """Return the predicate for a title search and a category name.

    Blank inputs match everything. A category name that resolves to no
    category matches no events at all.
    """
    conditions: list[Predicate] = []

    if query and query.strip():
        conditions.append(TitleContains(text=query.strip()))

    if category and category.strip():
        resolved = categories.find_by_name(category.strip())
        if resolved is None:
            return MatchNone()
        conditions.append(CategoryEquals(category_id=resolved.id))

    return all_of(*conditions)
