from PyQt5 import QtWidgets, QtCore

from utils.helpers import fraction_from_position


class SeekBar(QtWidgets.QProgressBar):
    """Progress bar that reports click positions as a fraction of its width."""
    seek_requested = QtCore.pyqtSignal(float)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRange(0, 1000)
        self.setValue(0)
        self.setTextVisible(False)
        self.setFixedHeight(8)
        self.setCursor(QtCore.Qt.PointingHandCursor)

    def set_percent(self, percent):
        self.setValue(int(percent * 10))

    def mousePressEvent(self, event):
        if event.button() == QtCore.Qt.LeftButton:
            self.seek_requested.emit(fraction_from_position(event.x(), self.width()))
            event.accept()
            return
        super().mousePressEvent(event)
