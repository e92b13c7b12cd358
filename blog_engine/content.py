"""
Content items and the factory that creates them.
Client code asks the factory for a kind and never touches the concrete classes.
"""
import time
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Union

from .errors import ErrorKind, InvalidKindError
from .interfaces import Logger
from .logging import LoggerFactory


class ContentKind(str, Enum):
    """Closed set of publishable content kinds"""
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"


@dataclass(eq=False)
class ContentItem(ABC):
    """Common fields of every published item"""
    title: str
    author: str
    created_at: int
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    published_at: datetime = field(default_factory=datetime.now)
    premium: bool = False
    _views: int = field(default=0, init=False, repr=False)

    kind: ClassVar[ContentKind]
    banner: ClassVar[str]

    @property
    def views(self) -> int:
        return self._views

    def record_view(self) -> int:
        """Count one granted view; only AccessProxy should call this"""
        self._views += 1
        return self._views

    @abstractmethod
    def payload_text(self) -> str:
        """Variant-specific body, without title and author"""
        pass

    def display(self) -> str:
        """Full rendering of the item"""
        return f"{self.banner} {self.title}\nBy: {self.author}\n{self.payload_text()}"


@dataclass(eq=False)
class TextItem(ContentItem):
    body: str = ""

    kind: ClassVar[ContentKind] = ContentKind.TEXT
    banner: ClassVar[str] = "[TEXT POST]"

    def payload_text(self) -> str:
        return self.body


@dataclass(eq=False)
class ImageItem(ContentItem):
    image_url: str = ""
    caption: str = ""

    kind: ClassVar[ContentKind] = ContentKind.IMAGE
    banner: ClassVar[str] = "[IMAGE POST]"

    def payload_text(self) -> str:
        return f"Image: {self.image_url}\n{self.caption}"


@dataclass(eq=False)
class VideoItem(ContentItem):
    video_url: str = ""
    description: str = ""

    kind: ClassVar[ContentKind] = ContentKind.VIDEO
    banner: ClassVar[str] = "[VIDEO POST]"

    def payload_text(self) -> str:
        return f"Video: {self.video_url}\n{self.description}"


@dataclass
class CreationResult:
    """Outcome of ContentFactory.try_create"""
    success: bool
    item: Optional[ContentItem] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None


class ContentFactory:
    """Factory for creating typed content items.

    Timestamps come from ``clock`` (``time.monotonic_ns`` unless injected) and
    are strictly increasing per factory: a repeated or backwards clock reading
    is bumped to one past the previous timestamp.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None,
                 logger: Optional[Logger] = None):
        self.clock = clock or time.monotonic_ns
        self.logger = logger or LoggerFactory.create_standard_logger("blog_engine.factory")
        self._last_timestamp: Optional[int] = None
        self._builders: Dict[ContentKind, Callable[[Mapping[str, Any], int], ContentItem]] = {
            ContentKind.TEXT: self._build_text,
            ContentKind.IMAGE: self._build_image,
            ContentKind.VIDEO: self._build_video,
        }

    def create(self, kind: Union[ContentKind, str], payload: Mapping[str, Any]) -> ContentItem:
        """Create an item of the given kind; unknown kinds raise InvalidKindError"""
        content_kind = self._resolve_kind(kind)
        item = self._builders[content_kind](payload, self._next_timestamp())
        self.logger.info(f"Created {content_kind.value} item {item.id}: {item.title!r}")
        return item

    def try_create(self, kind: Union[ContentKind, str],
                   payload: Mapping[str, Any]) -> CreationResult:
        """Like create, but reports an unknown kind through the result"""
        try:
            item = self.create(kind, payload)
        except InvalidKindError as e:
            return CreationResult(success=False, error=e.error_kind, message=str(e))
        return CreationResult(success=True, item=item)

    @staticmethod
    def _resolve_kind(kind: Union[ContentKind, str]) -> ContentKind:
        if isinstance(kind, ContentKind):
            return kind
        try:
            return ContentKind(kind)
        except ValueError:
            raise InvalidKindError(kind) from None

    def _next_timestamp(self) -> int:
        timestamp = self.clock()
        if self._last_timestamp is not None and timestamp <= self._last_timestamp:
            timestamp = self._last_timestamp + 1
        self._last_timestamp = timestamp
        return timestamp

    @staticmethod
    def _common(payload: Mapping[str, Any], timestamp: int) -> Dict[str, Any]:
        return {
            "title": payload.get("title", ""),
            "author": payload.get("author", ""),
            "created_at": timestamp,
        }

    def _build_text(self, payload: Mapping[str, Any], timestamp: int) -> TextItem:
        body = payload.get("body", payload.get("content", ""))
        return TextItem(body=body, **self._common(payload, timestamp))

    def _build_image(self, payload: Mapping[str, Any], timestamp: int) -> ImageItem:
        return ImageItem(
            image_url=payload.get("image_url", ""),
            caption=payload.get("caption", ""),
            **self._common(payload, timestamp)
        )

    def _build_video(self, payload: Mapping[str, Any], timestamp: int) -> VideoItem:
        return VideoItem(
            video_url=payload.get("video_url", ""),
            description=payload.get("description", ""),
            **self._common(payload, timestamp)
        )
