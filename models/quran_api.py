import logging

import requests

from models.chapter import Chapter
from models.errors import CatalogLoadError, ContentFetchError

DEFAULT_API_BASE = "https://api.alquran.cloud/v1"
DEFAULT_AUDIO_CDN_BASE = "https://cdn.islamic.network"
DEFAULT_RECITER = "ar.alafasy"
AUDIO_BITRATE = 128


def compose_chapter_text(ayahs):
    """Join verse texts into one string, each followed by its 1-based number."""
    return "".join(f"{ayah['text']} ({position}) " for position, ayah in enumerate(ayahs, start=1))


class QuranApiClient:
    """Thin client over the alquran.cloud REST API and the audio CDN."""

    def __init__(self, api_base=DEFAULT_API_BASE, audio_cdn_base=DEFAULT_AUDIO_CDN_BASE,
                 reciter_id=DEFAULT_RECITER, timeout=10, session=None):
        self.api_base = api_base.rstrip("/")
        self.audio_cdn_base = audio_cdn_base.rstrip("/")
        self.reciter_id = reciter_id
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config, session=None):
        return cls(
            api_base=config.api_base,
            audio_cdn_base=config.audio_cdn_base,
            reciter_id=config.reciter_id,
            timeout=config.request_timeout,
            session=session,
        )

    def _get_json(self, url):
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def fetch_catalog(self):
        """Return the ordered list of chapters or raise CatalogLoadError."""
        url = f"{self.api_base}/surah"
        try:
            payload = self._get_json(url)
        except (requests.exceptions.RequestException, ValueError) as e:
            raise CatalogLoadError(f"Request to {url} failed: {e}") from e

        if not isinstance(payload, dict) or payload.get("code") != 200:
            raise CatalogLoadError("Failed to load surahs")
        entries = payload.get("data")
        if not isinstance(entries, list) or not entries:
            raise CatalogLoadError("Surah list is empty")
        try:
            return [Chapter.from_api(entry) for entry in entries]
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogLoadError(f"Malformed surah entry: {e}") from e

    def fetch_chapter_text(self, chapter_number):
        """Return the flattened verse text of a chapter or raise ContentFetchError."""
        url = f"{self.api_base}/surah/{chapter_number}/{self.reciter_id}"
        logging.debug(f"Fetching {url}")
        try:
            payload = self._get_json(url)
        except (requests.exceptions.RequestException, ValueError) as e:
            raise ContentFetchError(chapter_number, f"request failed: {e}") from e

        if not isinstance(payload, dict) or payload.get("code") != 200:
            raise ContentFetchError(chapter_number, "Failed to fetch surah text")
        try:
            ayahs = payload["data"]["ayahs"]
            return compose_chapter_text(ayahs)
        except (KeyError, TypeError) as e:
            raise ContentFetchError(chapter_number, f"malformed response: {e}") from e

    def audio_url(self, chapter_number):
        return (f"{self.audio_cdn_base}/quran/audio/{AUDIO_BITRATE}/"
                f"{self.reciter_id}/{chapter_number}.mp3")
