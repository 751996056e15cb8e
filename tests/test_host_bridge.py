import unittest
from unittest.mock import MagicMock, patch

import requests

from controllers.host_bridge import HostBridge, TelegramSink
from fakes import capture, make_chapters
from utils.settings import ReaderConfig


class TestHostBridge(unittest.TestCase):
    def test_message_format(self):
        chapter = make_chapters(2)[1]
        self.assertEqual(HostBridge.format_message(chapter), "surah_loaded:2:Surah-2")

    def test_notify_calls_sink(self):
        sent = []
        bridge = HostBridge(sink=sent.append)
        emitted = capture(bridge.message_sent)

        bridge.notify_chapter_loaded(make_chapters(1)[0])

        self.assertEqual(sent, ["surah_loaded:1:Surah-1"])
        self.assertEqual(emitted, [("surah_loaded:1:Surah-1",)])

    def test_failing_sink_does_not_raise(self):
        sink = MagicMock(side_effect=RuntimeError("host gone"))
        bridge = HostBridge(sink=sink)
        message = bridge.notify_chapter_loaded(make_chapters(1)[0])
        self.assertEqual(message, "surah_loaded:1:Surah-1")

    def test_from_config_without_telegram_uses_log_sink(self):
        bridge = HostBridge.from_config(ReaderConfig())
        self.assertNotIsInstance(bridge.sink, TelegramSink)

    def test_from_config_with_telegram(self):
        config = ReaderConfig(telegram_bot_token="123:abc", telegram_chat_id="42")
        bridge = HostBridge.from_config(config)
        self.assertIsInstance(bridge.sink, TelegramSink)
        self.assertEqual(bridge.sink.url, "https://api.telegram.org/bot123:abc/sendMessage")


class TestTelegramSink(unittest.TestCase):
    def test_send_posts_message(self):
        session = MagicMock()
        sink = TelegramSink("123:abc", "42", timeout=5, session=session)
        sink.send("surah_loaded:1:Al-Fatihah")
        session.post.assert_called_with(
            "https://api.telegram.org/bot123:abc/sendMessage",
            data={"chat_id": "42", "text": "surah_loaded:1:Al-Fatihah"},
            timeout=5,
        )

    def test_send_logs_network_errors(self):
        session = MagicMock()
        session.post.side_effect = requests.exceptions.ConnectionError("offline")
        sink = TelegramSink("t", "c", session=session)
        sink.send("surah_loaded:1:Al-Fatihah")

    @patch("controllers.host_bridge.threading.Thread")
    def test_call_does_not_block(self, mock_thread):
        sink = TelegramSink("t", "c", session=MagicMock())
        sink("hello")
        mock_thread.assert_called_once_with(target=sink.send, args=("hello",), daemon=True)
        mock_thread.return_value.start.assert_called_once()


if __name__ == '__main__':
    unittest.main()
