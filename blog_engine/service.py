"""
ContentService ties the blog together.

Publishing goes factory -> collection -> notifier; listing goes
sort strategy -> access proxy per item. The service owns the item collection,
the notifier and the active strategy, and shares the ConfigStore it is given.
"""
from typing import Any, List, Mapping, Optional, Tuple, Union

from .access import AccessProxy, ContentSummary, Viewer
from .config import ConfigStore
from .content import ContentFactory, ContentItem, ContentKind, CreationResult
from .errors import ConfigurationError
from .interfaces import Logger, SortStrategy
from .logging import LoggerFactory
from .notifier import PublicationNotifier
from .sorting import SortStrategyFactory


class ContentService:
    """Publishes content, notifies subscribers and renders gated listings"""

    def __init__(self, config: ConfigStore,
                 notifier: Optional[PublicationNotifier] = None,
                 factory: Optional[ContentFactory] = None,
                 sort_strategy: Optional[SortStrategy] = None,
                 logger: Optional[Logger] = None):
        self.config = config
        self.logger = logger or LoggerFactory.create_standard_logger("blog_engine.service")
        self.notifier = notifier or PublicationNotifier(self.logger)
        self.factory = factory or ContentFactory(logger=self.logger)
        self._sort_strategy = sort_strategy or SortStrategyFactory.from_config(config)
        self._items: List[ContentItem] = []

    @property
    def items(self) -> Tuple[ContentItem, ...]:
        """Published items in publication order"""
        return tuple(self._items)

    @property
    def sort_strategy(self) -> SortStrategy:
        return self._sort_strategy

    def publish(self, kind: Union[ContentKind, str], payload: Mapping[str, Any],
                premium: bool = False) -> ContentItem:
        """Create an item, store it and notify subscribers.

        An unknown ``kind`` raises InvalidKindError before anything is stored
        or sent.
        """
        item = self.factory.create(kind, payload)
        return self._accept(item, premium)

    def try_publish(self, kind: Union[ContentKind, str], payload: Mapping[str, Any],
                    premium: bool = False) -> CreationResult:
        """Like publish, but reports an unknown kind through the result"""
        result = self.factory.try_create(kind, payload)
        if result.success:
            self._accept(result.item, premium)
        else:
            self.logger.warning(f"Publish rejected: {result.message}")
        return result

    def _accept(self, item: ContentItem, premium: bool) -> ContentItem:
        item.premium = premium
        self._items.append(item)
        self.logger.info(
            f"✨ New post published: \"{item.title}\" ({item.kind.value}{', premium' if premium else ''})"
        )
        self.notifier.publish(item)
        return item

    def set_sort_strategy(self, strategy: SortStrategy) -> None:
        """Replace the active strategy; used from the next listing on"""
        self._sort_strategy = strategy
        self.logger.info(f"📊 Sort strategy changed to: {strategy.label}")

    def sorted_items(self) -> List[ContentItem]:
        """Items ordered by the active strategy, without rendering anything"""
        return self._sort_strategy.sort(self._items)

    def list_for_viewer(self, viewer: Viewer) -> List[str]:
        """Render every item for the viewer in the active strategy's order.

        Views are counted one item at a time in that same order.
        """
        ordered = self.sorted_items()
        self.logger.debug(
            f"Listing {len(ordered)} items for {viewer.name} ({self._sort_strategy.label})"
        )
        return [AccessProxy(item, viewer).render() for item in ordered]

    def list_page(self, viewer: Viewer, page: int = 1) -> List[str]:
        """Render one page of the sorted listing; pages start at 1"""
        if page < 1:
            raise ValueError(f"Page numbers start at 1, got {page}")

        per_page = self._page_size()
        start = (page - 1) * per_page
        ordered = self.sorted_items()[start:start + per_page]
        return [AccessProxy(item, viewer).render() for item in ordered]

    def _page_size(self) -> int:
        per_page = self.config.get("posts_per_page", 10)
        if isinstance(per_page, bool) or not isinstance(per_page, int) or per_page < 1:
            raise ConfigurationError(
                f"Setting 'posts_per_page' must be a positive integer, got {per_page!r}"
            )
        return per_page

    def list_summaries(self) -> List[ContentSummary]:
        """Metadata for every item in sort order; costs no views"""
        # Summaries never consult the viewer, so any placeholder will do
        anonymous = Viewer("anonymous")
        return [AccessProxy(item, anonymous).summary() for item in self.sorted_items()]

    def get(self, item_id: str) -> Optional[ContentItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def __len__(self) -> int:
        return len(self._items)
