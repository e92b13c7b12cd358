"""
Sort strategies for content listings.
Each strategy implements SortStrategy and can be swapped on a ContentService
at any time. All of them return a new list and leave the input untouched.
"""
from abc import abstractmethod
from typing import Any, Dict, List, Sequence, Type

from .content import ContentItem
from .errors import ConfigurationError
from .interfaces import SortStrategy


class _KeySortStrategy(SortStrategy):
    """Stable sort on a single key function"""

    def sort(self, items: Sequence[ContentItem]) -> List[ContentItem]:
        # sorted() is stable, so equal keys keep their input order
        return sorted(items, key=self.key)

    @abstractmethod
    def key(self, item: ContentItem) -> Any:
        """Sort key for one item"""
        pass


class ByRecency(_KeySortStrategy):
    """Newest first"""

    label = "Most recent first"

    def key(self, item: ContentItem) -> int:
        return -item.created_at


class ByPopularity(_KeySortStrategy):
    """Most viewed first"""

    label = "Most popular first"

    def key(self, item: ContentItem) -> int:
        return -item.views


class ByTitle(_KeySortStrategy):
    """Alphabetical by title, compared by code point"""

    label = "By title (A–Z)"

    def key(self, item: ContentItem) -> str:
        return item.title


class SortStrategyFactory:
    """Factory for creating sort strategies by name"""

    _registry: Dict[str, Type[SortStrategy]] = {
        "recency": ByRecency,
        "popularity": ByPopularity,
        "title": ByTitle,
    }

    @classmethod
    def create(cls, name: str) -> SortStrategy:
        """Create a strategy from its short name"""
        try:
            return cls._registry[name]()
        except KeyError:
            raise ConfigurationError(
                f"Unknown sort strategy: {name!r} (expected one of {', '.join(cls._registry)})"
            ) from None

    @classmethod
    def from_config(cls, config: Any) -> SortStrategy:
        """Create the strategy named by the store's default_sort setting"""
        return cls.create(config.get("default_sort", "recency"))

    @classmethod
    def names(cls) -> List[str]:
        return list(cls._registry)
