"""Category directory operations."""

import logging

from events.domain import Category
from events.domain.errors import InvalidInputError
from events.stores.interfaces import CategoryStore

logger = logging.getLogger(__name__)

MAX_CATEGORY_NAME_LENGTH = 100


class CategoryService:
    """Service for listing and creating categories."""

    def __init__(self, store: CategoryStore) -> None:
        self._store = store

    def list_categories(self) -> list[Category]:
        return self._store.list_categories()

    def find_by_name(self, name: str) -> Category | None:
        return self._store.find_by_name(name)

    def create_category(self, name: str) -> tuple[Category, bool]:
        """Return the category called ``name``, creating it if needed.

        Names compare case-insensitively, so "Music" and "music" are the
        same category.

        Raises:
            InvalidInputError: If the name is blank or too long.
        """
        cleaned = (name or "").strip()
        if not cleaned:
            raise InvalidInputError("Category name is required")
        if len(cleaned) > MAX_CATEGORY_NAME_LENGTH:
            raise InvalidInputError("Category name is too long")
        category, created = self._store.get_or_create(cleaned)
        if created:
            logger.info("Category %r created", category.name)
        return category, created
