from PyQt5 import QtWidgets, QtCore, QtGui

from models.chapter_list_model import ChapterListModel


class ChapterDelegate(QtWidgets.QStyledItemDelegate):
    """Paints one chapter entry: number and native name, active entry highlighted."""
    def __init__(self, parent=None, active_color="#1a5fb4"):
        super().__init__(parent)
        self.active_color = QtGui.QColor(active_color)
        self.base_font_size = 14

    def paint(self, painter, option, index):
        painter.save()
        chapter = index.data(QtCore.Qt.UserRole)
        is_active = bool(index.data(ChapterListModel.ActiveRole))

        if is_active:
            painter.fillRect(option.rect, self.active_color)
            text_color = QtGui.QColor("white")
        elif option.state & QtWidgets.QStyle.State_MouseOver:
            painter.fillRect(option.rect, option.palette.alternateBase())
            text_color = option.palette.text().color()
        else:
            text_color = option.palette.text().color()

        rect = option.rect.adjusted(8, 0, -8, 0)
        painter.setPen(text_color)

        number_font = QtGui.QFont(option.font)
        number_font.setBold(True)
        painter.setFont(number_font)
        painter.drawText(rect, QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter, str(chapter.number))

        name_font = QtGui.QFont("Amiri", self.base_font_size)
        painter.setFont(name_font)
        painter.drawText(rect, QtCore.Qt.AlignRight | QtCore.Qt.AlignVCenter, chapter.native_name)
        painter.restore()

    def sizeHint(self, option, index):
        return QtCore.QSize(option.rect.width(), 40)
