"""
Error types for the blog engine.
InvalidKindError is the only error a publish request can fail with.
"""
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Enumerated error kinds carried by result objects"""
    INVALID_KIND = "invalid_kind"


class BlogEngineError(Exception):
    """Base class for all blog engine errors"""


class InvalidKindError(BlogEngineError, ValueError):
    """Raised when a content creation request names an unknown kind"""
    
    error_kind = ErrorKind.INVALID_KIND
    
    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f'Invalid content kind "{kind}"')


class ConfigurationError(BlogEngineError):
    """Raised when a setting cannot be interpreted"""
