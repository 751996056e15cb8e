import logging

from PyQt5 import QtCore

from controllers.audio_controller import AudioController
from controllers.chapter_loader import ChapterLoader
from controllers.fetch_worker import CatalogWorker
from controllers.host_bridge import HostBridge
from controllers.navigation import NavigationController
from models.app_state import AppState, PlaybackState
from models.chapter_cache import ChapterCache
from models.chapter_list_model import ChapterListModel
from models.errors import InitializationError, QuranReaderError
from models.quran_api import QuranApiClient

LOADING_QURAN = "Loading Quran data..."
LOAD_ERROR = "Error loading. Trying again..."
INIT_ERROR = "Error loading Quran. Please restart."
DEGRADED_TEXT = ("Surah {name} - {ayahs} ayahs.\n\n"
                 "Full text loading failed. Please check your internet connection.")


def degraded_text(chapter):
    return DEGRADED_TEXT.format(name=chapter.english_name, ayahs=chapter.ayah_count)


class ReaderController(QtCore.QObject):
    """
    Wires the loader, audio controller, navigation and host bridge together
    and runs the startup sequence: catalog, list, first chapter.
    """
    catalog_ready = QtCore.pyqtSignal(int)                 # number of chapters
    chapter_displayed = QtCore.pyqtSignal(object, str)     # Chapter, text
    status_changed = QtCore.pyqtSignal(str)                # "" clears the status
    initialization_failed = QtCore.pyqtSignal(str)
    ready = QtCore.pyqtSignal(int)

    def __init__(self, config, api=None, player=None, media_factory=None, bridge=None,
                 threaded=True, parent=None):
        super().__init__(parent)
        self.config = config
        self.threaded = threaded
        self.api = api or QuranApiClient.from_config(config)
        self.state = AppState(
            cache=ChapterCache(max_age=config.cache_max_age),
            playback=PlaybackState(volume=config.default_volume / 100),
        )
        self.list_model = ChapterListModel(parent=self)
        self.loader = ChapterLoader(self.state, self.api, threaded=threaded, parent=self)
        self.audio = AudioController(self.state, player=player, media_factory=media_factory,
                                     resume_delay_ms=config.resume_delay_ms, parent=self)
        self.navigation = NavigationController(self.state, self.loader, self.list_model, parent=self)
        self.bridge = bridge or HostBridge.from_config(config, parent=self)
        self.is_ready = False
        self._catalog_worker = None

        self.loader.loading_started.connect(self.on_loading_started)
        self.loader.chapter_ready.connect(self.on_chapter_ready)
        self.loader.load_failed.connect(self.on_load_failed)
        self.audio.track_finished.connect(self.on_track_finished)

    @property
    def catalog(self):
        return self.state.catalog

    def start(self):
        self.status_changed.emit(LOADING_QURAN)
        if self.threaded:
            self._catalog_worker = CatalogWorker(self.state.catalog, self.api, parent=self)
            self._catalog_worker.catalog_loaded.connect(self.on_catalog_loaded)
            self._catalog_worker.error_occurred.connect(self.on_initialization_error)
            self._catalog_worker.start()
        else:
            try:
                count = self.state.catalog.load(self.api)
            except QuranReaderError as e:
                self.on_initialization_error(str(e))
                return
            except Exception as e:
                logging.exception("Error during catalog load")
                self.on_initialization_error(str(e))
                return
            self.on_catalog_loaded(count)

    def on_catalog_loaded(self, count):
        try:
            if not count:
                raise InitializationError("Chapter catalog is empty")
            self.list_model.updateChapters(self.state.catalog.chapters)
            self.catalog_ready.emit(count)
            self.audio.set_volume(round(self.state.playback.volume * 100))
            self.loader.load_chapter(0)
        except InitializationError as e:
            self.on_initialization_error(str(e))
            return
        except Exception as e:
            logging.exception("Initialization error")
            self.on_initialization_error(str(e))
            return
        self.is_ready = True
        self.ready.emit(count)

    def on_initialization_error(self, message):
        logging.error(f"Initialization failed: {message}")
        self.initialization_failed.emit(INIT_ERROR)

    def on_loading_started(self, index, chapter):
        self.status_changed.emit(f"Loading {chapter.english_name}...")

    def on_chapter_ready(self, index, chapter, content):
        self.chapter_displayed.emit(chapter, content.full_text)
        self._bind(index, chapter, content.audio_url)
        self.status_changed.emit("")

    def on_load_failed(self, index, chapter, audio_url, message):
        self.status_changed.emit(LOAD_ERROR)
        self.chapter_displayed.emit(chapter, degraded_text(chapter))
        self._bind(index, chapter, audio_url)
        self.status_changed.emit("")

    def _bind(self, index, chapter, audio_url):
        self.audio.bind_source(audio_url, chapter)
        self.navigation.set_active(index)
        self.bridge.notify_chapter_loaded(chapter)

    def on_track_finished(self):
        if self.navigation.has_next():
            self.audio.continue_on_next_source()
            self.navigation.next()

    def select_chapter(self, index):
        return self.navigation.select(index)

    def next_chapter(self):
        return self.navigation.next()

    def previous_chapter(self):
        return self.navigation.previous()

    def toggle_play_pause(self):
        return self.audio.toggle_play_pause()

    def shutdown(self):
        self.audio.stop()
        self.loader.shutdown()
        worker = self._catalog_worker
        if worker is not None:
            for signal in (worker.catalog_loaded, worker.error_occurred):
                try:
                    signal.disconnect()
                except TypeError:
                    pass
            worker.wait()
            self._catalog_worker = None
