import unittest

from controllers.chapter_loader import ChapterLoader
from controllers.navigation import NavigationController
from fakes import FakeApi, capture, make_chapters
from models.app_state import AppState
from models.chapter_catalog import ChapterCatalog
from models.chapter_list_model import ChapterListModel


class TestNavigationController(unittest.TestCase):
    def setUp(self):
        chapters = make_chapters(5)
        self.state = AppState(catalog=ChapterCatalog(chapters))
        self.api = FakeApi(chapters=chapters)
        self.loader = ChapterLoader(self.state, self.api, threaded=False)
        self.model = ChapterListModel(chapters)
        self.navigation = NavigationController(self.state, self.loader, self.model)

    def test_previous_at_first_is_noop(self):
        self.assertFalse(self.navigation.previous())
        self.assertEqual(self.state.playback.current_chapter_index, 0)
        self.assertEqual(self.api.fetch_calls, [])

    def test_next_at_last_is_noop(self):
        self.loader.load_chapter(4)
        self.assertFalse(self.navigation.next())
        self.assertEqual(self.state.playback.current_chapter_index, 4)
        self.assertEqual(self.api.fetch_calls, [5])

    def test_next_and_previous(self):
        self.assertTrue(self.navigation.next())
        self.assertEqual(self.state.playback.current_chapter_index, 1)
        self.assertTrue(self.navigation.next())
        self.assertTrue(self.navigation.previous())
        self.assertEqual(self.state.playback.current_chapter_index, 1)

    def test_set_active_marks_exactly_one_row(self):
        changes = capture(self.navigation.active_changed)
        self.navigation.set_active(2)
        self.navigation.set_active(3)

        active = [row for row in range(self.model.rowCount())
                  if self.model.data(self.model.index(row), ChapterListModel.ActiveRole)]
        self.assertEqual(active, [3])
        self.assertEqual(self.state.active_index, 3)
        self.assertEqual(changes, [(2,), (3,)])

    def test_set_active_ignores_invalid_index(self):
        self.navigation.set_active(2)
        self.navigation.set_active(9)
        self.assertEqual(self.state.active_index, 2)
        self.assertEqual(self.model.active_row, 2)


class TestChapterListModel(unittest.TestCase):
    def test_rows_and_roles(self):
        model = ChapterListModel(make_chapters(3))
        self.assertEqual(model.rowCount(), 3)
        index = model.index(1)
        self.assertEqual(model.data(index), "2. سورة 2")
        self.assertEqual(model.data(index, ChapterListModel.ActiveRole), False)

    def test_update_chapters_resets_active_row(self):
        model = ChapterListModel(make_chapters(3))
        model.setActiveRow(1)
        model.updateChapters(make_chapters(4))
        self.assertEqual(model.rowCount(), 4)
        self.assertEqual(model.active_row, -1)

    def test_active_change_notifies_both_rows(self):
        model = ChapterListModel(make_chapters(3))
        changed = capture(model.dataChanged)
        model.setActiveRow(0)
        model.setActiveRow(2)
        rows = [args[0].row() for args in changed]
        self.assertEqual(rows, [0, 0, 2])


if __name__ == '__main__':
    unittest.main()
