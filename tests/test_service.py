#!/usr/bin/env python3
"""
ContentService tests.

Publishing, strategy switching, gated listings and the full
publish -> notify -> render -> order flow.
"""

import gc
import itertools
import sys
import unittest
from pathlib import Path
from unittest.mock import Mock

sys.path.append(str(Path(__file__).parent.parent))

from blog_engine.access import AccessProxy, Viewer
from blog_engine.config import ConfigStore
from blog_engine.container import DIContainer, ServiceBuilder
from blog_engine.content import ContentFactory, ContentKind, TextItem
from blog_engine.errors import ConfigurationError, ErrorKind, InvalidKindError
from blog_engine.logging import NullLogger
from blog_engine.notifier import EmailSubscriber, PublicationNotifier
from blog_engine.service import ContentService
from blog_engine.sorting import ByPopularity, ByRecency, ByTitle


class RecordingSubscriber:
    
    def __init__(self, name):
        self.name = name
        self.received = []
    
    def notify(self, item):
        self.received.append(item)


def make_service(**settings):
    logger = NullLogger()
    return ContentService(
        config=ConfigStore(settings),
        notifier=PublicationNotifier(logger),
        factory=ContentFactory(clock=itertools.count(1).__next__, logger=logger),
        logger=logger
    )


class TestPublish(unittest.TestCase):
    
    def setUp(self):
        self.service = make_service()
        self.subscriber = RecordingSubscriber("reader")
        self.service.notifier.subscribe(self.subscriber)
    
    def test_publish_stores_and_notifies(self):
        item = self.service.publish("text", {"title": "A", "author": "X", "body": "alpha"})
        
        self.assertIsInstance(item, TextItem)
        self.assertEqual(self.service.items, (item,))
        self.assertEqual(self.subscriber.received, [item])
        self.assertIs(self.service.get(item.id), item)
    
    def test_premium_flag_set_before_notification(self):
        seen = []
        
        class Inspector:
            name = "inspector"
            
            def notify(self, item):
                seen.append(item.premium)
        
        inspector = Inspector()
        self.service.notifier.subscribe(inspector)
        self.service.publish("video", {"title": "V", "author": "Y"}, premium=True)
        
        self.assertEqual(seen, [True])
    
    def test_items_keep_publication_order(self):
        titles = ["c", "a", "b"]
        for title in titles:
            self.service.publish("text", {"title": title, "author": "X"})
        
        self.service.set_sort_strategy(ByTitle())
        self.service.list_for_viewer(Viewer("v"))
        
        self.assertEqual([item.title for item in self.service.items], titles)
    
    def test_invalid_kind_leaves_no_trace(self):
        with self.assertRaises(InvalidKindError):
            self.service.publish("audio", {"title": "Podcast", "author": "X"})
        
        self.assertEqual(len(self.service), 0)
        self.assertEqual(self.subscriber.received, [])
    
    def test_try_publish_failure(self):
        result = self.service.try_publish("audio", {"title": "Podcast"})
        
        self.assertFalse(result.success)
        self.assertEqual(result.error, ErrorKind.INVALID_KIND)
        self.assertEqual(self.service.items, ())
        self.assertEqual(self.subscriber.received, [])
    
    def test_try_publish_success(self):
        result = self.service.try_publish(ContentKind.IMAGE, {"title": "I", "author": "Y"}, premium=True)
        
        self.assertTrue(result.success)
        self.assertTrue(result.item.premium)
        self.assertEqual(self.service.items, (result.item,))
        self.assertEqual(self.subscriber.received, [result.item])
    
    def test_failing_subscriber_does_not_break_publish(self):
        broken = Mock()
        broken.notify.side_effect = RuntimeError("boom")
        late = RecordingSubscriber("late")
        self.service.notifier.subscribe(broken)
        self.service.notifier.subscribe(late)
        
        item = self.service.publish("text", {"title": "A", "author": "X"})
        
        self.assertEqual(late.received, [item])
        self.assertEqual(self.service.items, (item,))
    
    def test_unsubscribed_reader_misses_later_posts(self):
        other = RecordingSubscriber("other")
        self.service.notifier.subscribe(other)
        first = self.service.publish("text", {"title": "1", "author": "X"})
        
        self.service.notifier.unsubscribe(other)
        second = self.service.publish("text", {"title": "2", "author": "X"})
        
        self.assertEqual(other.received, [first])
        self.assertEqual(self.subscriber.received, [first, second])


class TestListing(unittest.TestCase):
    
    def setUp(self):
        self.service = make_service()
        self.regular = Viewer("Regular")
        self.member = Viewer("Member", premium=True)
    
    def test_default_strategy_is_recency(self):
        self.assertIsInstance(self.service.sort_strategy, ByRecency)
        
        old = self.service.publish("text", {"title": "old", "author": "X", "body": "o"})
        new = self.service.publish("text", {"title": "new", "author": "X", "body": "n"})
        
        self.assertEqual(self.service.sorted_items(), [new, old])
    
    def test_default_strategy_from_config(self):
        service = make_service(default_sort="title")
        self.assertIsInstance(service.sort_strategy, ByTitle)
    
    def test_set_sort_strategy_applies_to_next_listing(self):
        a = self.service.publish("text", {"title": "a", "author": "X", "body": "a"})
        b = self.service.publish("text", {"title": "b", "author": "X", "body": "b"})
        
        self.assertEqual(self.service.sorted_items(), [b, a])
        
        strategy = ByTitle()
        self.service.set_sort_strategy(strategy)
        self.assertIs(self.service.sort_strategy, strategy)
        self.assertEqual(self.service.sorted_items(), [a, b])
    
    def test_listing_renders_in_sort_order(self):
        self.service.publish("text", {"title": "first", "author": "X", "body": "1"})
        self.service.publish("text", {"title": "second", "author": "X", "body": "2"})
        
        output = self.service.list_for_viewer(self.regular)
        
        self.assertEqual(len(output), 2)
        self.assertIn("second", output[0])
        self.assertIn("first", output[1])
    
    def test_listing_counts_views_in_render_order(self):
        order = []
        
        class TrackingItem(TextItem):
            def record_view(self):
                order.append(self.title)
                return super().record_view()
        
        first = TrackingItem(title="first", author="X", created_at=1)
        second = TrackingItem(title="second", author="X", created_at=2)
        self.service._items.extend([first, second])
        
        self.service.list_for_viewer(self.regular)
        
        self.assertEqual(order, ["second", "first"])
    
    def test_listing_of_empty_service(self):
        self.assertEqual(self.service.list_for_viewer(self.regular), [])
        self.assertEqual(self.service.list_summaries(), [])
    
    def test_summaries_cost_no_views(self):
        item = self.service.publish("text", {"title": "a", "author": "X"}, premium=True)
        AccessProxy(item, self.member).render()
        
        summaries = self.service.list_summaries()
        
        self.assertEqual(len(summaries), 1)
        self.assertEqual(summaries[0].views, 1)
        self.assertTrue(summaries[0].premium)
        self.assertEqual(item.views, 1)
    
    def test_list_page(self):
        service = make_service(posts_per_page=2)
        for title in ["a", "b", "c", "d", "e"]:
            service.publish("text", {"title": title, "author": "X", "body": title})
        service.set_sort_strategy(ByTitle())
        
        pages = [service.list_page(self.regular, page) for page in (1, 2, 3, 4)]
        
        self.assertEqual([len(page) for page in pages], [2, 2, 1, 0])
        self.assertIn("[TEXT POST] a", pages[0][0])
        self.assertIn("[TEXT POST] e", pages[2][0])
        self.assertEqual([item.views for item in service.items], [1, 1, 1, 1, 1])
    
    def test_list_page_rejects_bad_page_size(self):
        item = self.service.publish("text", {"title": "a", "author": "X"})
        
        for bad in (0, -2, None, "ten", True):
            with self.subTest(posts_per_page=bad):
                self.service.config.set("posts_per_page", bad)
                with self.assertRaises(ConfigurationError) as ctx:
                    self.service.list_page(self.regular)
                self.assertIn("posts_per_page", str(ctx.exception))
        
        self.assertEqual(item.views, 0)
    
    def test_list_page_rejects_zero(self):
        with self.assertRaises(ValueError):
            self.service.list_page(self.regular, 0)
    
    def test_page_size_follows_live_config(self):
        for title in "abc":
            self.service.publish("text", {"title": title, "author": "X"})
        
        self.service.config.set("posts_per_page", 1)
        self.assertEqual(len(self.service.list_page(self.regular)), 1)


class TestEndToEnd(unittest.TestCase):
    """Creation -> notification -> gated rendering -> ordering"""
    
    def test_popularity_listing_for_regular_viewer(self):
        service = make_service()
        subscriber = RecordingSubscriber("reader")
        service.notifier.subscribe(subscriber)
        member = Viewer("Member", premium=True)
        regular = Viewer("Regular")
        
        a = service.publish("text", {"title": "A", "author": "X", "body": "full text of A"})
        b = service.publish("image", {
            "title": "B", "author": "Y",
            "image_url": "https://example.com/b.jpg", "caption": "caption of B"
        }, premium=True)
        for _ in range(5):
            AccessProxy(b, member).render()
        self.assertEqual(b.views, 5)
        
        service.set_sort_strategy(ByPopularity())
        output = service.list_for_viewer(regular)
        
        self.assertEqual(len(output), 2)
        self.assertIn("[PREMIUM CONTENT]", output[0])
        self.assertIn("B", output[0])
        self.assertNotIn("https://example.com/b.jpg", output[0])
        self.assertEqual(output[1], "[TEXT POST] A\nBy: X\nfull text of A")
        self.assertEqual(b.views, 5)
        self.assertEqual(a.views, 1)
        self.assertEqual(subscriber.received, [a, b])


class TestServiceBuilder(unittest.TestCase):
    
    def test_build_blog(self):
        container = DIContainer(logger_type="null")
        subscriber = EmailSubscriber("Ana", "ana@example.com", NullLogger())
        
        service = ServiceBuilder(container).build_blog([subscriber], sort="popularity")
        item = service.publish("text", {"title": "Hi", "author": "X"})
        
        self.assertIsInstance(service.sort_strategy, ByPopularity)
        self.assertEqual(subscriber.received, [item])
        self.assertIs(service.config, container.get_config_store())
    
    def test_build_blog_keeps_inline_subscribers(self):
        service = ServiceBuilder(DIContainer(logger_type="null")).build_blog(
            [EmailSubscriber("Ana", "ana@example.com", NullLogger())]
        )
        gc.collect()
        
        item = service.publish("text", {"title": "Hi", "author": "X"})
        
        self.assertEqual(service.notifier.subscriber_count, 1)
        self.assertEqual(service.notifier.subscribers[0].received, [item])
    
    def test_container_resolves_registered_types(self):
        container = DIContainer(logger_type="null")
        
        self.assertIsInstance(container.get(ContentService), ContentService)
        self.assertIsInstance(container.get(PublicationNotifier), PublicationNotifier)
        self.assertIsNot(container.get(ContentService), container.get(ContentService))
        with self.assertRaises(ValueError):
            container.get(Viewer)


if __name__ == '__main__':
    unittest.main()
