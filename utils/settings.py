from dataclasses import dataclass

from PyQt5.QtCore import QSettings

from models.quran_api import DEFAULT_API_BASE, DEFAULT_AUDIO_CDN_BASE, DEFAULT_RECITER


class AppSettings:
    def __init__(self):
        self.settings = QSettings("MOSAID", "QuranReader")

    def get(self, key, default=None):
        return self.settings.value(key, default)

    def set(self, key, value):
        self.settings.setValue(key, value)

    def get_bool(self, key, default=False):
        return self.settings.value(key, default, type=bool)

    def value(self, key, default=None, type=None):
        if type is not None:
            return self.settings.value(key, default, type)
        return self.settings.value(key, default)


@dataclass(frozen=True)
class ReaderConfig:
    reciter_id: str = DEFAULT_RECITER
    api_base: str = DEFAULT_API_BASE
    audio_cdn_base: str = DEFAULT_AUDIO_CDN_BASE
    request_timeout: float = 10
    cache_max_age: int = 0
    resume_delay_ms: int = 500
    default_volume: int = 70
    telegram_bot_token: str = ""
    telegram_chat_id: str = ""

    @classmethod
    def from_settings(cls, settings):
        """Read every option from ``settings``, falling back to the defaults."""
        defaults = cls()
        return cls(
            reciter_id=settings.value("ReciterId", defaults.reciter_id, type=str),
            api_base=settings.value("ApiBase", defaults.api_base, type=str),
            audio_cdn_base=settings.value("AudioCdnBase", defaults.audio_cdn_base, type=str),
            request_timeout=settings.value("RequestTimeout", defaults.request_timeout, type=float),
            cache_max_age=settings.value("CacheMaxAge", defaults.cache_max_age, type=int),
            resume_delay_ms=settings.value("ResumeDelayMs", defaults.resume_delay_ms, type=int),
            default_volume=settings.value("DefaultVolume", defaults.default_volume, type=int),
            telegram_bot_token=settings.value("TelegramBotToken", "", type=str),
            telegram_chat_id=settings.value("TelegramChatId", "", type=str),
        )
