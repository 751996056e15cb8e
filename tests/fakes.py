import time
from unittest.mock import MagicMock

from PyQt5 import QtCore

from models.chapter import Chapter, RevelationType
from models.errors import CatalogLoadError, ContentFetchError


def make_chapters(count):
    return [
        Chapter(
            number=n,
            native_name=f"سورة {n}",
            english_name=f"Surah-{n}",
            english_translation=f"Translation {n}",
            ayah_count=n + 2,
            revelation_type=RevelationType.MECCAN if n % 2 else RevelationType.MEDINAN,
        )
        for n in range(1, count + 1)
    ]


class FakeApi:
    def __init__(self, chapters=None, fail_catalog=False, fail_numbers=(), delays=None):
        self.chapters = chapters if chapters is not None else make_chapters(114)
        self.fail_catalog = fail_catalog
        self.fail_numbers = set(fail_numbers)
        self.delays = delays or {}
        self.fetch_calls = []

    def fetch_catalog(self):
        if self.fail_catalog:
            raise CatalogLoadError("network down")
        return list(self.chapters)

    def fetch_chapter_text(self, chapter_number):
        self.fetch_calls.append(chapter_number)
        if chapter_number in self.delays:
            time.sleep(self.delays[chapter_number])
        if chapter_number in self.fail_numbers:
            raise ContentFetchError(chapter_number, "network down")
        return f"verse-a-{chapter_number} (1) verse-b-{chapter_number} (2) "

    def audio_url(self, chapter_number):
        return f"https://cdn.test/quran/audio/128/ar.test/{chapter_number}.mp3"


class FakePlayer:
    """Stands in for QMediaPlayer: same enum names, recorded calls."""
    StoppedState, PlayingState, PausedState = 0, 1, 2
    (UnknownMediaStatus, NoMedia, LoadingMedia, LoadedMedia, StalledMedia,
     BufferingMedia, BufferedMedia, EndOfMedia, InvalidMedia) = range(9)
    NoError, ResourceError, FormatError, NetworkError, AccessDeniedError = range(5)

    def __init__(self):
        self.stateChanged = MagicMock()
        self.mediaStatusChanged = MagicMock()
        self.positionChanged = MagicMock()
        self.durationChanged = MagicMock()
        self.error = MagicMock()
        self.calls = []
        self.media = None
        self.volume = None
        self.position_ms = 0
        self.duration_ms = 0
        self.error_string = ""

    def play(self):
        self.calls.append("play")

    def pause(self):
        self.calls.append("pause")

    def stop(self):
        self.calls.append("stop")

    def setMedia(self, media):
        self.calls.append("setMedia")
        self.media = media

    def setVolume(self, volume):
        self.volume = volume

    def setPosition(self, position):
        self.position_ms = position

    def position(self):
        return self.position_ms

    def duration(self):
        return self.duration_ms

    def errorString(self):
        return self.error_string


def capture(signal):
    """Connect a recorder to a Qt signal and return the list it fills."""
    received = []
    signal.connect(lambda *args: received.append(args))
    return received


def wait_until(predicate, timeout=5.0):
    """Pump the Qt event queue until ``predicate()`` holds or ``timeout`` seconds pass."""
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            return False
        QtCore.QCoreApplication.processEvents(QtCore.QEventLoop.AllEvents, 20)
        time.sleep(0.01)
    return True
