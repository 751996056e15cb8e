from dataclasses import dataclass, field

from models.chapter_cache import ChapterCache
from models.chapter_catalog import ChapterCatalog


@dataclass
class PlaybackState:
    """
    Player-facing state. ``is_playing`` mirrors real player events only;
    position and duration are read from the player, never stored here.
    """
    current_chapter_index: int = 0
    is_playing: bool = False
    volume: float = 0.7


@dataclass
class AppState:
    catalog: ChapterCatalog = field(default_factory=ChapterCatalog)
    cache: ChapterCache = field(default_factory=ChapterCache)
    playback: PlaybackState = field(default_factory=PlaybackState)
    active_index: int = -1
