import logging

from models.chapter import Chapter, RevelationType
from models.errors import CatalogLoadError

# Used when the remote chapter list is unreachable.
STATIC_CHAPTERS = (
    Chapter(1, "الفاتحة", "Al-Fatihah", "The Opening", 7, RevelationType.MECCAN),
    Chapter(2, "البقرة", "Al-Baqarah", "The Cow", 286, RevelationType.MEDINAN),
    Chapter(3, "آل عمران", "Ali 'Imran", "Family of Imran", 200, RevelationType.MEDINAN),
    Chapter(4, "النساء", "An-Nisa", "The Women", 176, RevelationType.MEDINAN),
    Chapter(5, "المائدة", "Al-Ma'idah", "The Table Spread", 120, RevelationType.MEDINAN),
)


class ChapterCatalog:
    """Ordered list of chapters, populated once at startup."""

    def __init__(self, chapters=None):
        self._chapters = list(chapters or [])
        self.is_fallback = False

    def load(self, api):
        """
        Fetch the chapter list through ``api``.

        Any CatalogLoadError is absorbed: the built-in list is used instead so
        the reader stays usable offline. Returns the number of chapters.
        """
        try:
            chapters = api.fetch_catalog()
        except CatalogLoadError as e:
            logging.warning(f"Error loading surahs, using built-in list: {e}")
            self.use_fallback()
        else:
            self._chapters = list(chapters)
            self.is_fallback = False
            logging.info(f"Loaded {len(self._chapters)} surahs")
        return len(self._chapters)

    def use_fallback(self):
        self._chapters = list(STATIC_CHAPTERS)
        self.is_fallback = True

    def __len__(self):
        return len(self._chapters)

    def __getitem__(self, index):
        return self._chapters[index]

    def __iter__(self):
        return iter(self._chapters)

    @property
    def chapters(self):
        return list(self._chapters)

    @property
    def last_index(self):
        return len(self._chapters) - 1

    def is_valid_index(self, index):
        return isinstance(index, int) and 0 <= index < len(self._chapters)
