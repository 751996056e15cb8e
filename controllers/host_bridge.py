import logging
import threading

import requests
from PyQt5 import QtCore

TELEGRAM_API = "https://api.telegram.org"


def log_sink(message):
    logging.info(f"Host message: {message}")


class TelegramSink:
    """Post host messages to a Telegram chat without waiting for the reply."""

    def __init__(self, token, chat_id, timeout=10, session=None):
        self.token = token
        self.chat_id = chat_id
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def url(self):
        return f"{TELEGRAM_API}/bot{self.token}/sendMessage"

    def send(self, message):
        try:
            response = self.session.post(
                self.url,
                data={"chat_id": self.chat_id, "text": message},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logging.warning(f"Failed to notify host: {e}")

    def __call__(self, message):
        threading.Thread(target=self.send, args=(message,), daemon=True).start()


class HostBridge(QtCore.QObject):
    """One-way notification to the embedding host on each chapter load."""
    message_sent = QtCore.pyqtSignal(str)

    def __init__(self, sink=None, parent=None):
        super().__init__(parent)
        self.sink = sink or log_sink

    @classmethod
    def from_config(cls, config, parent=None):
        if config.telegram_bot_token and config.telegram_chat_id:
            return cls(TelegramSink(config.telegram_bot_token, config.telegram_chat_id,
                                    timeout=config.request_timeout), parent=parent)
        return cls(parent=parent)

    @staticmethod
    def format_message(chapter):
        return f"surah_loaded:{chapter.number}:{chapter.english_name}"

    def notify_chapter_loaded(self, chapter):
        message = self.format_message(chapter)
        try:
            self.sink(message)
        except Exception:
            logging.exception("Host sink failed")
        self.message_sent.emit(message)
        return message
