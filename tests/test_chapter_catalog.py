import unittest
from unittest.mock import MagicMock

from fakes import FakeApi, make_chapters
from models.chapter_catalog import ChapterCatalog, STATIC_CHAPTERS
from models.errors import CatalogLoadError


class TestChapterCatalog(unittest.TestCase):
    def test_load_success(self):
        catalog = ChapterCatalog()
        count = catalog.load(FakeApi())
        self.assertEqual(count, 114)
        self.assertEqual(len(catalog), 114)
        self.assertFalse(catalog.is_fallback)
        self.assertEqual(catalog[0].number, 1)
        self.assertEqual(catalog.last_index, 113)

    def test_load_failure_uses_fallback(self):
        catalog = ChapterCatalog()
        count = catalog.load(FakeApi(fail_catalog=True))

        self.assertGreaterEqual(count, 5)
        self.assertTrue(catalog.is_fallback)
        self.assertEqual(catalog[0].number, 1)
        self.assertEqual(catalog[0].english_name, "Al-Fatihah")

    def test_fallback_has_complete_metadata(self):
        for position, chapter in enumerate(STATIC_CHAPTERS, start=1):
            self.assertEqual(chapter.number, position)
            self.assertTrue(chapter.native_name)
            self.assertTrue(chapter.english_translation)
            self.assertGreater(chapter.ayah_count, 0)

    def test_unexpected_errors_propagate(self):
        api = MagicMock()
        api.fetch_catalog.side_effect = RuntimeError("bug")
        with self.assertRaises(RuntimeError):
            ChapterCatalog().load(api)

    def test_load_replaces_previous_fallback(self):
        api = MagicMock()
        api.fetch_catalog.side_effect = [CatalogLoadError("down"), make_chapters(7)]
        catalog = ChapterCatalog()
        catalog.load(api)
        catalog.load(api)
        self.assertEqual(len(catalog), 7)
        self.assertFalse(catalog.is_fallback)

    def test_index_helpers(self):
        catalog = ChapterCatalog(make_chapters(3))
        self.assertTrue(catalog.is_valid_index(2))
        self.assertFalse(catalog.is_valid_index(3))
        self.assertFalse(catalog.is_valid_index(-1))

    def test_empty_catalog(self):
        catalog = ChapterCatalog()
        self.assertEqual(len(catalog), 0)
        self.assertFalse(catalog.is_valid_index(0))


if __name__ == '__main__':
    unittest.main()
