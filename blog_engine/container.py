"""
Dependency injection container for the blog engine.
Holds the one ConfigStore every wired component shares and builds services
around it.
"""
from typing import Any, Callable, Dict, Iterable, Optional, Type, TypeVar

from .config import ConfigStore
from .content import ContentFactory
from .interfaces import Logger, SortStrategy, Subscriber
from .logging import LoggerFactory
from .notifier import PublicationNotifier
from .service import ContentService
from .sorting import SortStrategyFactory

T = TypeVar('T')


class DIContainer:
    """Dependency injection container for managing application dependencies"""

    def __init__(self, config: Optional[ConfigStore] = None, logger_type: str = "standard"):
        self._factories: Dict[str, Callable] = {}
        self._singletons: Dict[str, Any] = {}
        self.logger_type = logger_type

        self.register_singleton(ConfigStore, config if config is not None else ConfigStore())
        self._register_default_factories()

    def register_singleton(self, service_type: Type[T], instance: T) -> None:
        """Register a singleton instance"""
        self._singletons[service_type.__name__] = instance

    def register_factory(self, service_type: Type[T], factory: Callable[..., T]) -> None:
        """Register a factory function for creating instances"""
        self._factories[service_type.__name__] = factory

    def get(self, service_type: Type[T]) -> T:
        """Get an instance of the requested service type"""
        key = service_type.__name__

        # Check singletons first
        if key in self._singletons:
            return self._singletons[key]

        if key in self._factories:
            return self._factories[key]()

        raise ValueError(f"Service {service_type.__name__} not registered")

    def get_logger(self, name: str = "blog_engine") -> Logger:
        """Get a logger of the container's configured type"""
        return LoggerFactory.create(self.logger_type, name)

    def get_config_store(self) -> ConfigStore:
        """Get the shared configuration store"""
        return self.get(ConfigStore)

    def get_content_factory(self, logger: Optional[Logger] = None) -> ContentFactory:
        """Get content factory instance"""
        return ContentFactory(logger=logger or self.get_logger("blog_engine.factory"))

    def get_notifier(self, logger: Optional[Logger] = None) -> PublicationNotifier:
        """Get publication notifier instance"""
        return PublicationNotifier(logger or self.get_logger("blog_engine.notifier"))

    def get_sort_strategy(self, name: Optional[str] = None) -> SortStrategy:
        """Get a sort strategy by name, or the configured default"""
        if name is None:
            return SortStrategyFactory.from_config(self.get_config_store())
        return SortStrategyFactory.create(name)

    def get_content_service(self, logger: Optional[Logger] = None) -> ContentService:
        """Get a content service wired to the shared configuration store"""
        logger = logger or self.get_logger("blog_engine.service")
        return ContentService(
            config=self.get_config_store(),
            notifier=self.get_notifier(logger),
            factory=self.get_content_factory(logger),
            sort_strategy=self.get_sort_strategy(),
            logger=logger
        )

    def _register_default_factories(self) -> None:
        """Register default factory functions"""
        self.register_factory(ContentFactory, self.get_content_factory)
        self.register_factory(PublicationNotifier, self.get_notifier)
        self.register_factory(ContentService, self.get_content_service)


class ServiceBuilder:
    """Builder class for constructing ready-to-use blogs"""

    def __init__(self, container: DIContainer):
        self.container = container
        self.logger = container.get_logger()

    def build_blog(self, subscribers: Iterable[Subscriber] = (),
                   sort: Optional[str] = None) -> ContentService:
        """Build a content service with subscribers attached"""
        service = self.container.get_content_service(self.logger)

        for subscriber in subscribers:
            service.notifier.subscribe(subscriber)

        if sort is not None:
            service.set_sort_strategy(self.container.get_sort_strategy(sort))

        return service


# Global container instance
_container = DIContainer()

def get_container() -> DIContainer:
    """Get the global container instance"""
    return _container

def get_service_builder() -> ServiceBuilder:
    """Get a service builder instance"""
    return ServiceBuilder(get_container())
