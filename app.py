import logging
import sys

from PyQt5 import QtWidgets
from PyQt5.QtGui import QGuiApplication

from utils.settings import AppSettings, ReaderConfig
from views.main_window import QuranReaderWindow


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    app = QtWidgets.QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("QuranReader")
    app.setOrganizationName("MOSAID")
    settings = AppSettings()
    config = ReaderConfig.from_settings(settings)
    window = QuranReaderWindow(config, settings)
    window.setWindowTitle("Quran Reader")
    window.setWindowRole("QuranReader")
    window.show()
    window.start()
    QGuiApplication.instance().setApplicationDisplayName("QuranReader")
    sys.exit(app.exec_())

if __name__ == "__main__":
    main()
