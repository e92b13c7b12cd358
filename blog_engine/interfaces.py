"""
Abstract interfaces and protocols for the blog engine.
Components depend on these abstractions rather than on concrete classes.
"""
from abc import ABC, abstractmethod
from typing import Any, Sequence, List, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .content import ContentItem


class SortStrategy(ABC):
    """Interchangeable, non-destructive ordering policy over content items"""
    
    #: Human-readable name shown next to a listing
    label: str = ""
    
    @abstractmethod
    def sort(self, items: Sequence["ContentItem"]) -> List["ContentItem"]:
        """Return a new, stably ordered list; the input is left untouched"""
        pass
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Subscriber(Protocol):
    """Protocol for anything that wants to hear about new publications"""
    
    def notify(self, item: "ContentItem") -> None:
        """Receive a freshly published item"""
        ...


class ConfigurationProvider(Protocol):
    """Protocol for configuration providers"""
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value"""
        ...
    
    def validate(self) -> bool:
        """Validate configuration completeness"""
        ...


class Logger(Protocol):
    """Protocol for logging operations"""
    
    def info(self, message: str) -> None:
        """Log info message"""
        ...
    
    def warning(self, message: str) -> None:
        """Log warning message"""
        ...
    
    def error(self, message: str) -> None:
        """Log error message"""
        ...
    
    def debug(self, message: str) -> None:
        """Log debug message"""
        ...
