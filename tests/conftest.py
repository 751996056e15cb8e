import sys

from PyQt5 import QtCore

# Signals, timers and queued cross-thread delivery need a core application object.
_app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication(sys.argv[:1])
