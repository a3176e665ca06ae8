# tests/test_search_engine.py
import json
import unittest
from unittest.mock import MagicMock

from library_search.core.book import Book
from library_search.search_engine import SearchEngine, SearchOutcome
from library_search.utils.config_manager import Config


class SearchEngineTests(unittest.TestCase):
    def setUp(self):
        self.engine = SearchEngine()

    def test_loads_sample_books_by_default(self):
        self.assertEqual(len(self.engine.index), 5)
        self.assertEqual(self.engine.get_book("b3").title, "Design Patterns")
        self.assertIsNone(self.engine.get_book("zz"))

    def test_text_changed_trims_and_suggests(self):
        self.assertEqual(self.engine.on_text_changed("  prog "), ["programming"])
        self.assertEqual(self.engine.on_text_changed("   "), [])
        self.assertEqual(self.engine.metrics.count("suggest_time"), 1)

    def test_submitted_query_returns_outcome(self):
        outcome = self.engine.on_query_submitted("java")
        self.assertIsInstance(outcome, SearchOutcome)
        self.assertEqual([b.id for b in outcome], ["b4"])
        self.assertFalse(outcome.is_empty)
        self.assertEqual(self.engine.metrics.count("search_time"), 1)

    def test_no_results_differs_from_no_query(self):
        outcome = self.engine.on_query_submitted("zzz")
        self.assertIsNotNone(outcome)
        self.assertTrue(outcome.is_empty)
        self.assertEqual(outcome.query, "zzz")
        self.assertEqual(len(outcome), 0)

    def test_limits_come_from_config(self):
        engine = SearchEngine(config=Config(suggest_limit=1, search_limit=2))
        self.assertEqual(len(engine.on_query_submitted("programming").books), 2)
        self.assertEqual(len(engine.on_text_changed("p")), 1)


class SearchEngineWiringTests(unittest.TestCase):
    def test_injected_index_is_used_as_is(self):
        index = MagicMock()
        index.suggest_queries.return_value = ["Clean Code"]
        index.search.return_value = [Book("b2", "Clean Code", "Robert C. Martin")]
        engine = SearchEngine(index=index, config=Config(suggest_limit=4, search_limit=7))

        self.assertEqual(engine.on_text_changed("cle"), ["Clean Code"])
        index.suggest_queries.assert_called_once_with("cle", 4)
        engine.on_query_submitted(" clean ")
        index.search.assert_called_once_with("clean", 7)
        index.add_book.assert_not_called()

    def test_empty_catalog(self):
        engine = SearchEngine(load_sample=False)
        self.assertEqual(len(engine.index), 0)
        self.assertTrue(engine.on_query_submitted("java").is_empty)

    def test_catalog_path_from_config(self):
        import tempfile, os
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "books.json")
            with open(path, "w", encoding="utf8") as f:
                json.dump([{"id": "k1", "title": "Kafka on the Shore", "author": "Haruki Murakami"}], f)
            engine = SearchEngine(config=Config(catalog_path=path))
        self.assertEqual([b.id for b in engine.index.books()], ["k1"])
        self.assertEqual(engine.on_text_changed("haru"), ["Haruki Murakami"])


if __name__ == "__main__":
    unittest.main()
