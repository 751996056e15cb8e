class QuranReaderError(Exception):
    """Base class for errors raised by the reader."""


class CatalogLoadError(QuranReaderError):
    """The chapter list could not be fetched or parsed."""


class ContentFetchError(QuranReaderError):
    """The verse text of a chapter could not be fetched or parsed."""

    def __init__(self, chapter_number, message):
        super().__init__(f"Surah {chapter_number}: {message}")
        self.chapter_number = chapter_number


class InitializationError(QuranReaderError):
    """Startup could not complete."""
