import logging
from enum import Enum

from PyQt5 import QtCore
from PyQt5.QtCore import QTimer, QUrl

from utils.helpers import clamp_fraction, volume_tier


class PlaybackPhase(Enum):
    IDLE = "idle"          # no source bound
    LOADING = "loading"    # source assigned, not ready yet
    PLAYING = "playing"
    PAUSED = "paused"


def create_media_player():
    from PyQt5.QtMultimedia import QMediaPlayer
    return QMediaPlayer()


def create_media_content(url):
    from PyQt5.QtMultimedia import QMediaContent
    return QMediaContent(QUrl(url))


class AudioController(QtCore.QObject):
    """
    Owns the single media player and the playback flags in PlaybackState.

    ``is_playing`` is only changed from the player's own state notifications,
    so the play/pause button always follows what the player really does.
    """
    playing_changed = QtCore.pyqtSignal(bool)
    position_changed = QtCore.pyqtSignal(int, int)     # position ms, duration ms
    volume_changed = QtCore.pyqtSignal(int, str)       # percent, tier
    source_changed = QtCore.pyqtSignal(object)         # Chapter
    track_finished = QtCore.pyqtSignal()
    playback_error = QtCore.pyqtSignal(str)

    def __init__(self, state, player=None, media_factory=None, resume_delay_ms=500, parent=None):
        super().__init__(parent)
        self.state = state
        self.player = player if player is not None else create_media_player()
        self.media_factory = media_factory or create_media_content
        self.resume_delay_ms = resume_delay_ms
        self.phase = PlaybackPhase.IDLE
        self.current_url = None
        self._play_intent = False
        self._continue_after_end = False
        self._switch_token = 0

        self.player.stateChanged.connect(self.on_state_changed)
        self.player.mediaStatusChanged.connect(self.on_media_status_changed)
        self.player.positionChanged.connect(self.on_position_changed)
        self.player.durationChanged.connect(self.on_duration_changed)
        self.player.error.connect(self.on_error)

    @property
    def play_intent(self):
        return self._play_intent

    def bind_source(self, audio_url, chapter):
        """
        Switch the player to ``audio_url``.

        If audio was playing before the switch, playback resumes on the new
        source after ``resume_delay_ms`` to give it time to buffer.
        """
        resume = self.state.playback.is_playing or self._continue_after_end
        self._continue_after_end = False
        self._switch_token += 1

        if self.phase == PlaybackPhase.PLAYING:
            self.player.pause()

        self.phase = PlaybackPhase.LOADING
        self.current_url = audio_url
        self.player.setMedia(self.media_factory(audio_url))
        self.source_changed.emit(chapter)

        if resume:
            self._play_intent = True
            token = self._switch_token
            QTimer.singleShot(self.resume_delay_ms, lambda: self._resume_after_switch(token))
        else:
            self._play_intent = False

    def _resume_after_switch(self, token):
        # A newer source or an explicit stop supersedes this resume.
        if token != self._switch_token or not self._play_intent:
            return
        self.player.play()

    def continue_on_next_source(self):
        """Keep playing when the next bind_source() happens (auto-advance)."""
        self._continue_after_end = True

    def play(self):
        if self.current_url is None:
            return False
        self._play_intent = True
        self.player.play()
        return True

    def pause(self):
        if self.current_url is None:
            return False
        self._play_intent = False
        self.player.pause()
        return True

    def toggle_play_pause(self):
        if self.state.playback.is_playing:
            return self.pause()
        return self.play()

    def stop(self):
        self._play_intent = False
        self._continue_after_end = False
        self._switch_token += 1
        if self.current_url is not None:
            self.player.stop()

    def seek(self, fraction):
        """Jump to ``fraction`` of the track; ignored while the duration is unknown."""
        duration = self.player.duration()
        if not duration or duration <= 0:
            return False
        self.player.setPosition(int(clamp_fraction(fraction) * duration))
        return True

    def set_volume(self, percent):
        percent = int(max(0, min(100, percent)))
        self.state.playback.volume = percent / 100
        self.player.setVolume(percent)
        tier = volume_tier(percent)
        self.volume_changed.emit(percent, tier)
        return tier

    @property
    def position_seconds(self):
        return self.player.position() / 1000

    @property
    def duration_seconds(self):
        duration = self.player.duration()
        if not duration or duration <= 0:
            return float("nan")
        return duration / 1000

    def on_state_changed(self, player_state):
        playback = self.state.playback
        was_playing = playback.is_playing

        if player_state == self.player.PlayingState:
            playback.is_playing = True
            self.phase = PlaybackPhase.PLAYING
        elif player_state == self.player.PausedState:
            playback.is_playing = False
            self.phase = PlaybackPhase.PAUSED
        else:
            playback.is_playing = False
            if self.current_url is None:
                self.phase = PlaybackPhase.IDLE
            elif self.phase != PlaybackPhase.LOADING:
                self.phase = PlaybackPhase.PAUSED

        if playback.is_playing != was_playing:
            self.playing_changed.emit(playback.is_playing)

    def on_media_status_changed(self, status):
        if status in (self.player.LoadedMedia, self.player.BufferedMedia):
            if self.phase == PlaybackPhase.LOADING:
                self.phase = PlaybackPhase.PAUSED
        elif status == self.player.EndOfMedia:
            self._play_intent = False
            self.phase = PlaybackPhase.PAUSED
            self.track_finished.emit()
        elif status == self.player.InvalidMedia:
            logging.warning(f"Invalid media: {self.current_url}")

    def on_position_changed(self, position):
        self.position_changed.emit(position, self.player.duration())

    def on_duration_changed(self, duration):
        self.position_changed.emit(self.player.position(), duration)

    def on_error(self, error):
        if error == self.player.NoError:
            return
        message = self.player.errorString() or "Playback failed"
        logging.warning(f"Playback prevented: {message}")
        self._play_intent = False
        if self.state.playback.is_playing:
            self.state.playback.is_playing = False
            self.playing_changed.emit(False)
        if self.phase == PlaybackPhase.LOADING:
            self.phase = PlaybackPhase.PAUSED
        self.playback_error.emit(message)
