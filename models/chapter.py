import time
from dataclasses import dataclass, field
from enum import Enum


class RevelationType(Enum):
    MECCAN = "Meccan"
    MEDINAN = "Medinan"

    @classmethod
    def parse(cls, value):
        """Accept the API spelling as well as the Makki/Madani variants."""
        text = str(value).strip().lower()
        if text in ("meccan", "makki", "makkah", "mecca"):
            return cls.MECCAN
        if text in ("medinan", "madani", "madinah", "medina"):
            return cls.MEDINAN
        raise ValueError(f"Unknown revelation type: {value!r}")


@dataclass(frozen=True)
class Chapter:
    number: int
    native_name: str
    english_name: str
    english_translation: str
    ayah_count: int
    revelation_type: RevelationType

    @classmethod
    def from_api(cls, data):
        """Build a chapter from an entry of the ``/surah`` endpoint."""
        number = int(data["number"])
        ayah_count = int(data["numberOfAyahs"])
        if not 1 <= number <= 114:
            raise ValueError(f"Surah number out of range: {number}")
        if ayah_count <= 0:
            raise ValueError(f"Surah {number} has no ayahs")
        return cls(
            number=number,
            native_name=data["name"],
            english_name=data["englishName"],
            english_translation=data["englishNameTranslation"],
            ayah_count=ayah_count,
            revelation_type=RevelationType.parse(data["revelationType"]),
        )

    @property
    def display_name(self):
        return f"{self.english_name} ({self.english_translation})"

    @property
    def subtitle(self):
        return f"Surah {self.number} • {self.ayah_count} Ayahs"


@dataclass(frozen=True)
class ChapterContent:
    chapter_number: int
    full_text: str
    audio_url: str
    fetched_at: float = field(default_factory=time.time)
