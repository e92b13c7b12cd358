"""
Premium access control for content items.
AccessProxy stands in front of an item and decides per request whether the
viewer gets the full rendering (costing one view) or a redacted preview.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict

from .content import ContentItem, ContentKind


PREMIUM_NOTICE = (
    "⚠️ This content is available to premium members only.\n"
    "Upgrade your account to get access."
)


@dataclass(frozen=True)
class Viewer:
    """Identity presented when rendering; only the premium flag is consulted"""
    name: str
    premium: bool = False


@dataclass(frozen=True)
class ContentSummary:
    """Read-only metadata snapshot of an item"""
    title: str
    author: str
    kind: ContentKind
    views: int
    premium: bool

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


class AccessProxy:
    """Per-request wrapper around an item and the viewer asking for it"""

    def __init__(self, item: ContentItem, viewer: Viewer):
        self.item = item
        self.viewer = viewer

    @property
    def is_blocked(self) -> bool:
        return self.item.premium and not self.viewer.premium

    def render(self) -> str:
        """Return the full item and count a view, or a redacted preview"""
        if self.is_blocked:
            return self._redacted()

        self.item.record_view()
        return self.item.display()

    def summary(self) -> ContentSummary:
        """Metadata for listings; never counts as a view"""
        return ContentSummary(
            title=self.item.title,
            author=self.item.author,
            kind=self.item.kind,
            views=self.item.views,
            premium=self.item.premium,
        )

    def _redacted(self) -> str:
        return f"🔒 [PREMIUM CONTENT]\n{self.item.title}\nBy: {self.item.author}\n\n{PREMIUM_NOTICE}"
