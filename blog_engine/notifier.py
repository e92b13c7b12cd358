"""
Publication notification following the observer pattern.
The notifier fans out each published item to every registered subscriber.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .content import ContentItem
from .interfaces import Logger, Subscriber
from .logging import LoggerFactory


@dataclass
class DeliveryFailure:
    """A subscriber whose notify raised during a fan-out"""
    subscriber: Subscriber
    error: Exception


class EmailSubscriber:
    """Subscriber identified by a name and an email address"""

    def __init__(self, name: str, email: str, logger: Optional[Logger] = None):
        self.name = name
        self.email = email
        self.received: List[ContentItem] = []
        self.logger = logger or LoggerFactory.create_standard_logger("blog_engine.subscriber")

    def notify(self, item: ContentItem) -> None:
        self.received.append(item)
        self.logger.info(
            f"📧 {self.name} ({self.email}) notified: new post \"{item.title}\" by {item.author}"
        )

    def __repr__(self) -> str:
        return f"EmailSubscriber({self.name!r}, {self.email!r})"


class PublicationNotifier:
    """Keeps the subscriber sequence and notifies it on every publication.

    Subscribers are referenced, not copied; the caller keeps ownership.
    Registering the same subscriber twice is allowed; it is then notified
    twice.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self._subscribers: List[Subscriber] = []
        self.logger = logger or LoggerFactory.create_standard_logger("blog_engine.notifier")

    def subscribe(self, subscriber: Subscriber) -> None:
        """Append a subscriber, duplicates included"""
        self._subscribers.append(subscriber)
        self.logger.info(f"✅ {_name_of(subscriber)} subscribed")

    def unsubscribe(self, subscriber: Subscriber) -> None:
        """Remove every registration of this exact object; unknown ones are ignored"""
        before = len(self._subscribers)
        self._subscribers = [
            registered for registered in self._subscribers
            if registered is not subscriber
        ]
        if len(self._subscribers) < before:
            self.logger.info(f"❌ {_name_of(subscriber)} unsubscribed")

    def publish(self, item: ContentItem) -> List[DeliveryFailure]:
        """Notify a snapshot of current subscribers in registration order.

        A subscriber that raises is logged and skipped so the rest still hear
        about the item. The failures are returned to the caller.
        """
        snapshot = self.subscribers
        self.logger.debug(f"📢 Notifying {len(snapshot)} subscribers about {item.title!r}")

        failures = []
        for subscriber in snapshot:
            try:
                subscriber.notify(item)
            except Exception as e:
                self.logger.error(f"Subscriber {_name_of(subscriber)} failed on {item.title!r}: {e}")
                failures.append(DeliveryFailure(subscriber, e))
        return failures

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        """Registered subscribers in registration order"""
        return tuple(self._subscribers)

    @property
    def subscriber_count(self) -> int:
        return len(self.subscribers)


def _name_of(subscriber: Subscriber) -> str:
    return getattr(subscriber, "name", repr(subscriber))
