"""
Blog engine package.
Exposes the content service, its collaborators and factory helpers.
"""

# Core interfaces
from .interfaces import (
    SortStrategy,
    Subscriber,
    ConfigurationProvider,
    Logger
)

# Errors
from .errors import (
    BlogEngineError,
    ConfigurationError,
    ErrorKind,
    InvalidKindError
)

# Configuration management
from .config import (
    ConfigStore,
    DictConfigProvider,
    EnvironmentConfigProvider
)

# Content and collaborators
from .content import (
    ContentFactory,
    ContentItem,
    ContentKind,
    CreationResult,
    ImageItem,
    TextItem,
    VideoItem
)
from .access import AccessProxy, ContentSummary, Viewer
from .notifier import DeliveryFailure, EmailSubscriber, PublicationNotifier
from .sorting import ByPopularity, ByRecency, ByTitle, SortStrategyFactory
from .service import ContentService

# Main service container
from .container import DIContainer, ServiceBuilder, get_container, get_service_builder

# Factory classes for easy instantiation
from .logging import LoggerFactory

__all__ = [
    # Interfaces
    'SortStrategy',
    'Subscriber',
    'ConfigurationProvider',
    'Logger',

    # Errors
    'BlogEngineError',
    'ConfigurationError',
    'ErrorKind',
    'InvalidKindError',

    # Configuration
    'ConfigStore',
    'DictConfigProvider',
    'EnvironmentConfigProvider',

    # Content
    'ContentFactory',
    'ContentItem',
    'ContentKind',
    'CreationResult',
    'TextItem',
    'ImageItem',
    'VideoItem',

    # Access, notification and ordering
    'AccessProxy',
    'ContentSummary',
    'Viewer',
    'DeliveryFailure',
    'EmailSubscriber',
    'PublicationNotifier',
    'ByRecency',
    'ByPopularity',
    'ByTitle',
    'SortStrategyFactory',

    # Service and wiring
    'ContentService',
    'DIContainer',
    'ServiceBuilder',
    'get_container',
    'get_service_builder',
    'LoggerFactory'
]
