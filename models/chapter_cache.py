import time


class ChapterCache:
    """
    Session cache of fetched chapter content, keyed by surah number.

    ``max_age`` (seconds) enables expiry based on ``fetched_at``; with the
    default of 0 entries stay valid until the application exits.
    """

    def __init__(self, max_age=0, clock=time.time):
        self.max_age = max_age
        self._clock = clock
        self._entries = {}

    def get(self, chapter_number):
        content = self._entries.get(chapter_number)
        if content is None:
            return None
        if self.max_age and self._clock() - content.fetched_at > self.max_age:
            return None
        return content

    def put(self, chapter_number, content):
        self._entries[chapter_number] = content

    def __contains__(self, chapter_number):
        return self.get(chapter_number) is not None

    def __len__(self):
        return sum(1 for number in self._entries if self.get(number) is not None)

    def clear(self):
        self._entries.clear()
