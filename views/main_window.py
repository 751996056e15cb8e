import logging

from PyQt5 import QtWidgets, QtCore, QtGui

from controllers.reader_controller import ReaderController
from utils.helpers import format_time, progress_percent, VOLUME_MUTED, VOLUME_LOW, VOLUME_HIGH
from views.delegates import ChapterDelegate
from views.dialogs.compact_help import CompactHelpDialog
from views.widgets.seek_bar import SeekBar

VOLUME_ICONS = {
    VOLUME_MUTED: "🔇",
    VOLUME_LOW: "🔉",
    VOLUME_HIGH: "🔊",
}


# =============================================================================
# Main application window
# =============================================================================
class QuranReaderWindow(QtWidgets.QMainWindow):
    def __init__(self, config, settings, controller=None):
        super().__init__()
        self.setWindowIcon(QtGui.QIcon.fromTheme("audio-x-generic"))
        self.settings = settings
        self.controller = controller or ReaderController(config, parent=self)
        self.compact_help_dialog = None

        self.temporary_message_active = False
        self.message_timer = QtCore.QTimer(self)
        self.message_timer.setSingleShot(True)
        self.message_timer.timeout.connect(self.revert_status_message)
        self.loading_timer = QtCore.QTimer(self)
        self.loading_timer.setSingleShot(True)
        self.loading_timer.timeout.connect(self.hide_loading)

        self.init_ui()
        self.setup_connections()
        self.setup_shortcuts()
        self.load_settings()

    def init_ui(self):
        central = QtWidgets.QWidget()
        self.setCentralWidget(central)
        main_layout = QtWidgets.QHBoxLayout(central)
        main_layout.setContentsMargins(8, 8, 8, 8)

        # Surah list
        self.surah_view = QtWidgets.QListView()
        self.surah_view.setModel(self.controller.list_model)
        self.surah_view.setItemDelegate(ChapterDelegate(self.surah_view))
        self.surah_view.setMouseTracking(True)
        self.surah_view.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.surah_view.setFixedWidth(220)
        self.surah_view.setFocusPolicy(QtCore.Qt.NoFocus)
        main_layout.addWidget(self.surah_view)

        right = QtWidgets.QVBoxLayout()
        main_layout.addLayout(right, 1)

        # Surah header
        header = QtWidgets.QFrame()
        header.setObjectName("SurahHeader")
        header.setStyleSheet("#SurahHeader { background: #1a5fb4; border-radius: 6px; } "
                             "#SurahHeader QLabel { color: white; }")
        header_layout = QtWidgets.QGridLayout(header)
        self.surah_arabic = QtWidgets.QLabel("")
        self.surah_arabic.setFont(QtGui.QFont("Amiri", 24))
        self.surah_arabic.setAlignment(QtCore.Qt.AlignCenter)
        self.surah_name = QtWidgets.QLabel("")
        self.surah_name.setAlignment(QtCore.Qt.AlignCenter)
        self.surah_number = QtWidgets.QLabel("")
        self.ayah_count = QtWidgets.QLabel("")
        self.surah_type = QtWidgets.QLabel("")
        header_layout.addWidget(self.surah_arabic, 0, 0, 1, 3)
        header_layout.addWidget(self.surah_name, 1, 0, 1, 3)
        header_layout.addWidget(self.surah_number, 2, 0, QtCore.Qt.AlignCenter)
        header_layout.addWidget(self.ayah_count, 2, 1, QtCore.Qt.AlignCenter)
        header_layout.addWidget(self.surah_type, 2, 2, QtCore.Qt.AlignCenter)
        right.addWidget(header)

        # Loading indicator
        self.loading_label = QtWidgets.QLabel("")
        self.loading_label.setAlignment(QtCore.Qt.AlignCenter)
        self.loading_label.setStyleSheet("padding: 6px; color: #1a5fb4;")
        right.addWidget(self.loading_label)

        # Surah text
        self.quran_text = QtWidgets.QTextBrowser()
        self.quran_text.setLayoutDirection(QtCore.Qt.RightToLeft)
        self.quran_text.setFont(QtGui.QFont("Amiri", 18))
        # Space and the arrow keys belong to the window shortcuts.
        self.quran_text.setFocusPolicy(QtCore.Qt.NoFocus)
        right.addWidget(self.quran_text, 1)

        # Player
        player = QtWidgets.QFrame()
        player_layout = QtWidgets.QVBoxLayout(player)
        self.audio_title = QtWidgets.QLabel("")
        self.audio_title.setStyleSheet("font-weight: bold;")
        self.audio_surah = QtWidgets.QLabel("")
        player_layout.addWidget(self.audio_title)
        player_layout.addWidget(self.audio_surah)

        progress_row = QtWidgets.QHBoxLayout()
        self.current_time = QtWidgets.QLabel("0:00")
        self.progress_bar = SeekBar()
        self.duration = QtWidgets.QLabel("0:00")
        progress_row.addWidget(self.current_time)
        progress_row.addWidget(self.progress_bar, 1)
        progress_row.addWidget(self.duration)
        player_layout.addLayout(progress_row)

        controls = QtWidgets.QHBoxLayout()
        style = self.style()
        self.prev_btn = QtWidgets.QPushButton()
        self.prev_btn.setIcon(style.standardIcon(QtWidgets.QStyle.SP_MediaSkipBackward))
        self.play_pause_btn = QtWidgets.QPushButton()
        self.play_pause_btn.setIcon(style.standardIcon(QtWidgets.QStyle.SP_MediaPlay))
        self.next_btn = QtWidgets.QPushButton()
        self.next_btn.setIcon(style.standardIcon(QtWidgets.QStyle.SP_MediaSkipForward))
        for button in (self.prev_btn, self.play_pause_btn, self.next_btn):
            button.setFocusPolicy(QtCore.Qt.NoFocus)
        self.volume_icon = QtWidgets.QLabel(VOLUME_ICONS[VOLUME_HIGH])
        self.volume_slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.volume_slider.setRange(0, 100)
        self.volume_slider.setFixedWidth(120)
        self.volume_slider.setFocusPolicy(QtCore.Qt.NoFocus)

        controls.addWidget(self.prev_btn)
        controls.addWidget(self.play_pause_btn)
        controls.addWidget(self.next_btn)
        controls.addStretch()
        controls.addWidget(self.volume_icon)
        controls.addWidget(self.volume_slider)
        player_layout.addLayout(controls)
        right.addWidget(player)

        self.status_label = QtWidgets.QLabel("")
        self.original_style = self.status_label.styleSheet()
        self.statusBar().addWidget(self.status_label, 1)

    def setup_connections(self):
        controller = self.controller
        audio = controller.audio

        controller.status_changed.connect(self.handle_status_changed)
        controller.chapter_displayed.connect(self.display_chapter)
        controller.initialization_failed.connect(self.handle_initialization_failed)
        controller.ready.connect(self.handle_ready)
        controller.navigation.active_changed.connect(self.scroll_to_active)

        audio.playing_changed.connect(self.update_play_button)
        audio.position_changed.connect(self.update_progress)
        audio.volume_changed.connect(self.update_volume)
        audio.source_changed.connect(self.update_audio_info)
        audio.playback_error.connect(lambda message: self.showMessage(message, 3000, bg="red"))

        self.surah_view.clicked.connect(lambda index: controller.select_chapter(index.row()))
        self.prev_btn.clicked.connect(controller.previous_chapter)
        self.next_btn.clicked.connect(controller.next_chapter)
        self.play_pause_btn.clicked.connect(controller.toggle_play_pause)
        self.progress_bar.seek_requested.connect(audio.seek)
        self.volume_slider.valueChanged.connect(audio.set_volume)

    def setup_shortcuts(self):
        QtWidgets.QShortcut(QtGui.QKeySequence("Space"), self, activated=self.controller.toggle_play_pause)
        QtWidgets.QShortcut(QtGui.QKeySequence("Left"), self, activated=self.controller.previous_chapter)
        QtWidgets.QShortcut(QtGui.QKeySequence("Right"), self, activated=self.controller.next_chapter)
        QtWidgets.QShortcut(QtGui.QKeySequence("F1"), self, activated=self.show_compact_help)

    def load_settings(self):
        geometry = self.settings.value("geometry")
        if geometry:
            self.restoreGeometry(geometry)
        else:
            self.resize(900, 700)

    def start(self):
        self.show_loading("Loading Quran data...")
        self.controller.start()

    # ------------------------------------------------------------------
    # Loading indicator and status bar
    # ------------------------------------------------------------------
    def show_loading(self, text):
        self.loading_timer.stop()
        self.loading_label.setText(text)
        self.loading_label.show()
        self.quran_text.hide()

    def hide_loading(self):
        self.loading_label.hide()
        self.quran_text.show()

    def handle_status_changed(self, text):
        if text:
            self.show_loading(text)
        else:
            self.loading_timer.start(300)

    def handle_initialization_failed(self, message):
        self.loading_timer.stop()
        self.loading_label.setText(message)
        self.loading_label.setStyleSheet("padding: 6px; color: red;")
        self.loading_label.show()

    def handle_ready(self, count):
        self.showMessage(f"🕌 Quran App Loaded! All {count} Surahs Available", 4000)

    def showMessage(self, message, timeout=3000, bg="#4CAF50"):
        """Temporarily override the status label"""
        self.message_timer.stop()
        self.temporary_message_active = True
        self.status_label.setText(message)
        self.status_label.setStyleSheet(f"background: {bg}; color: white;")
        if timeout > 0:
            self.message_timer.start(timeout)

    def revert_status_message(self):
        self.temporary_message_active = False
        self.status_label.setText("")
        self.status_label.setStyleSheet(self.original_style)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def display_chapter(self, chapter, text):
        self.surah_arabic.setText(chapter.native_name)
        self.surah_name.setText(chapter.display_name)
        self.surah_number.setText(str(chapter.number))
        self.ayah_count.setText(str(chapter.ayah_count))
        self.surah_type.setText(chapter.revelation_type.value)
        self.quran_text.setPlainText(text)
        self.quran_text.verticalScrollBar().setValue(0)

    def update_audio_info(self, chapter):
        self.audio_title.setText(chapter.english_name)
        self.audio_surah.setText(chapter.subtitle)
        self.update_progress(0, 0)

    def update_play_button(self, is_playing):
        icon = QtWidgets.QStyle.SP_MediaPause if is_playing else QtWidgets.QStyle.SP_MediaPlay
        self.play_pause_btn.setIcon(self.style().standardIcon(icon))

    def update_progress(self, position, duration):
        self.progress_bar.set_percent(progress_percent(position, duration))
        self.current_time.setText(format_time(position / 1000))
        self.duration.setText(format_time(duration / 1000 if duration > 0 else float("nan")))

    def update_volume(self, percent, tier):
        self.volume_icon.setText(VOLUME_ICONS[tier])
        if self.volume_slider.value() != percent:
            self.volume_slider.blockSignals(True)
            self.volume_slider.setValue(percent)
            self.volume_slider.blockSignals(False)

    def scroll_to_active(self, index):
        model_index = self.controller.list_model.index(index)
        self.surah_view.scrollTo(model_index, QtWidgets.QAbstractItemView.PositionAtCenter)

    def show_compact_help(self):
        if self.compact_help_dialog is None:
            self.compact_help_dialog = CompactHelpDialog(self)
        self.compact_help_dialog.show()
        self.compact_help_dialog.raise_()

    def closeEvent(self, event):
        try:
            self.controller.shutdown()
        except Exception:
            logging.exception("Error stopping playback")
        self.settings.set("geometry", self.saveGeometry())
        event.accept()
