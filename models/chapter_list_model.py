from PyQt5 import QtCore


class ChapterListModel(QtCore.QAbstractListModel):
    """List model over the chapter catalog; exactly one row can be active."""
    ActiveRole = QtCore.Qt.UserRole + 1

    def __init__(self, chapters=None, parent=None):
        super().__init__(parent)
        self.chapters = list(chapters or [])
        self._active_row = -1

    def data(self, index, role=QtCore.Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self.chapters):
            return None

        chapter = self.chapters[index.row()]

        if role == QtCore.Qt.DisplayRole:
            return f"{chapter.number}. {chapter.native_name}"
        elif role == QtCore.Qt.ToolTipRole:
            return chapter.display_name
        elif role == QtCore.Qt.UserRole:
            return chapter
        elif role == self.ActiveRole:
            return index.row() == self._active_row
        return None

    def rowCount(self, parent=QtCore.QModelIndex()):
        if parent.isValid():
            return 0
        return len(self.chapters)

    def updateChapters(self, chapters):
        self.beginResetModel()
        self.chapters = list(chapters)
        self._active_row = -1
        self.endResetModel()

    @property
    def active_row(self):
        return self._active_row

    def setActiveRow(self, row):
        if not 0 <= row < len(self.chapters) or row == self._active_row:
            return
        previous = self._active_row
        self._active_row = row
        for changed in (previous, row):
            if changed >= 0:
                model_index = self.index(changed)
                self.dataChanged.emit(model_index, model_index, [self.ActiveRole])
