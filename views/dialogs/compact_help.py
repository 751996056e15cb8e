from PyQt5 import QtWidgets, QtCore

SHORTCUTS = [
    ("Space", "Play / pause the recitation"),
    ("← Left", "Previous surah"),
    ("Right →", "Next surah"),
    ("F1", "Show this dialog"),
]


class CompactHelpDialog(QtWidgets.QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Keyboard shortcuts")
        self.resize(420, 240)
        self.init_ui()

    def init_ui(self):
        layout = QtWidgets.QVBoxLayout(self)

        self.table = QtWidgets.QTableWidget(len(SHORTCUTS), 2)
        self.table.setHorizontalHeaderLabels(["Shortcut", "Action"])
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.table.horizontalHeader().setSectionResizeMode(1, QtWidgets.QHeaderView.Stretch)

        for row, (shortcut, action) in enumerate(SHORTCUTS):
            item_short = QtWidgets.QTableWidgetItem(shortcut)
            item_short.setTextAlignment(QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter)
            self.table.setItem(row, 0, item_short)
            self.table.setItem(row, 1, QtWidgets.QTableWidgetItem(action))

        layout.addWidget(self.table)
        close_btn = QtWidgets.QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        layout.addWidget(close_btn)
