from typing import Mapping, Protocol

from cardpick.domain.models import CategoryInfo


class CategoryCatalog(Protocol):
    def lookup(self, category_code: str) -> CategoryInfo | None:
        """Return the category for a merchant category code, or None if unknown."""


class MappingCategoryCatalog:
    """Read-only catalog backed by an in-memory mapping."""

    def __init__(self, entries: Mapping[str, CategoryInfo] | None = None):
        self._entries = dict(entries or {})

    def lookup(self, category_code: str) -> CategoryInfo | None:
        return self._entries.get(str(category_code))

    def __len__(self) -> int:
        return len(self._entries)


def category_name(catalog: CategoryCatalog | None, category_code: str, default: str) -> str:
    if catalog is None:
        return default
    info = catalog.lookup(category_code)
    return info.category if info else default
