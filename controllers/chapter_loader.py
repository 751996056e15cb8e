import logging

from PyQt5 import QtCore

from controllers.fetch_worker import ContentFetchWorker
from models.chapter import ChapterContent
from models.errors import ContentFetchError


class ChapterLoader(QtCore.QObject):
    """
    Resolve chapter text and audio URL, from the cache or the network.

    Every call to load_chapter() takes a new generation number; a fetch that
    completes after a newer load was issued is cached but never displayed.
    With ``threaded=False`` the fetch runs inline, which is how tests drive it.
    """
    loading_started = QtCore.pyqtSignal(int, object)                 # index, Chapter
    chapter_ready = QtCore.pyqtSignal(int, object, object)          # index, Chapter, ChapterContent
    load_failed = QtCore.pyqtSignal(int, object, str, str)          # index, Chapter, audio URL, message

    def __init__(self, state, api, threaded=True, parent=None):
        super().__init__(parent)
        self.state = state
        self.api = api
        self.threaded = threaded
        self._generation = 0
        self._workers = []

    @property
    def generation(self):
        return self._generation

    def load_chapter(self, index):
        """Start loading the chapter at ``index``; returns False for an invalid index."""
        catalog = self.state.catalog
        if not catalog.is_valid_index(index):
            logging.debug(f"Ignoring load of invalid surah index {index}")
            return False

        chapter = catalog[index]
        self._generation += 1
        generation = self._generation
        self.state.playback.current_chapter_index = index
        logging.debug(f"Loading surah {chapter.number} (generation {generation})")
        self.loading_started.emit(index, chapter)

        cached = self.state.cache.get(chapter.number)
        if cached is not None:
            self.chapter_ready.emit(index, chapter, cached)
            return True

        if self.threaded:
            worker = ContentFetchWorker(self.api, generation, index, chapter.number, parent=self)
            worker.text_ready.connect(self._on_text_ready)
            worker.error_occurred.connect(self._on_fetch_failed)
            worker.finished.connect(lambda: self._release_worker(worker))
            self._workers.append(worker)
            worker.start()
        else:
            try:
                text = self.api.fetch_chapter_text(chapter.number)
            except ContentFetchError as e:
                self._on_fetch_failed(generation, index, str(e))
            else:
                self._on_text_ready(generation, index, text)
        return True

    def _release_worker(self, worker):
        if worker in self._workers:
            self._workers.remove(worker)
        worker.deleteLater()

    def _is_stale(self, generation):
        return generation != self._generation

    def _on_text_ready(self, generation, index, text):
        chapter = self.state.catalog[index]
        content = ChapterContent(
            chapter_number=chapter.number,
            full_text=text,
            audio_url=self.api.audio_url(chapter.number),
        )
        self.state.cache.put(chapter.number, content)

        if self._is_stale(generation):
            logging.debug(f"Discarding stale result for surah {chapter.number} (generation {generation})")
            return
        self.chapter_ready.emit(index, chapter, content)

    def _on_fetch_failed(self, generation, index, message):
        chapter = self.state.catalog[index]
        if self._is_stale(generation):
            logging.debug(f"Discarding stale failure for surah {chapter.number} (generation {generation})")
            return
        logging.warning(f"Error loading surah {chapter.number}: {message}")
        self.load_failed.emit(index, chapter, self.api.audio_url(chapter.number), message)

    def shutdown(self):
        """Drop every in-flight fetch and block until its thread has exited."""
        self._generation += 1
        for worker in list(self._workers):
            for signal in (worker.text_ready, worker.error_occurred, worker.finished):
                try:
                    signal.disconnect()
                except TypeError:
                    pass
            # requests gives up after its own timeout, so this always returns
            worker.wait()
        self._workers.clear()
