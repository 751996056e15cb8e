from PyQt5 import QtCore


class NavigationController(QtCore.QObject):
    """Previous/next moves clamped to the catalog, and the active list entry."""
    active_changed = QtCore.pyqtSignal(int)

    def __init__(self, state, loader, list_model=None, parent=None):
        super().__init__(parent)
        self.state = state
        self.loader = loader
        self.list_model = list_model

    @property
    def current_index(self):
        return self.state.playback.current_chapter_index

    def has_next(self):
        return self.current_index < self.state.catalog.last_index

    def has_previous(self):
        return self.current_index > 0

    def next(self):
        if not self.has_next():
            return False
        return self.loader.load_chapter(self.current_index + 1)

    def previous(self):
        if not self.has_previous():
            return False
        return self.loader.load_chapter(self.current_index - 1)

    def select(self, index):
        return self.loader.load_chapter(index)

    def set_active(self, index):
        if not self.state.catalog.is_valid_index(index):
            return
        self.state.active_index = index
        if self.list_model is not None:
            self.list_model.setActiveRow(index)
        self.active_changed.emit(index)
