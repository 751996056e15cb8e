import logging

from PyQt5 import QtCore

from models.errors import ContentFetchError, QuranReaderError


class ContentFetchWorker(QtCore.QThread):
    """Fetch the verse text of one chapter off the GUI thread."""
    text_ready = QtCore.pyqtSignal(int, int, str)       # generation, index, text
    error_occurred = QtCore.pyqtSignal(int, int, str)   # generation, index, message

    def __init__(self, api, generation, index, chapter_number, parent=None):
        super().__init__(parent)
        self.api = api
        self.generation = generation
        self.index = index
        self.chapter_number = chapter_number

    def run(self):
        try:
            text = self.api.fetch_chapter_text(self.chapter_number)
        except ContentFetchError as e:
            self.error_occurred.emit(self.generation, self.index, str(e))
            return
        except Exception as e:
            logging.exception("Unexpected error while fetching surah text")
            self.error_occurred.emit(self.generation, self.index, str(e))
            return
        self.text_ready.emit(self.generation, self.index, text)


class CatalogWorker(QtCore.QThread):
    """Populate the chapter catalog off the GUI thread."""
    catalog_loaded = QtCore.pyqtSignal(int)
    error_occurred = QtCore.pyqtSignal(str)

    def __init__(self, catalog, api, parent=None):
        super().__init__(parent)
        self.catalog = catalog
        self.api = api

    def run(self):
        try:
            count = self.catalog.load(self.api)
        except QuranReaderError as e:
            self.error_occurred.emit(str(e))
            return
        except Exception as e:
            logging.exception("Error during catalog load")
            self.error_occurred.emit(str(e))
            return
        self.catalog_loaded.emit(count)
