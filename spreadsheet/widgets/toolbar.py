from PySide6 import QtWidgets, QtGui

from ..application import Application
from ..utils.state import State


class Toolbar(QtWidgets.QToolBar):
    def __init__(self):
        super().__init__()

        self.application: Application = QtWidgets.QApplication.instance()
        self.state: State = self.application.state

        self.undo_action = QtGui.QAction("Undo", self)
        self.undo_action.setShortcut(QtGui.QKeySequence.StandardKey.Undo)
        self.undo_action.triggered.connect(self.state.undo)
        self.addAction(self.undo_action)

        self.redo_action = QtGui.QAction("Redo", self)
        self.redo_action.setShortcut(QtGui.QKeySequence.StandardKey.Redo)
        self.redo_action.triggered.connect(self.state.redo)
        self.addAction(self.redo_action)

        self.state.history_changed.connect(self.history_changed)
        self.history_changed(self.state.can_undo, self.state.can_redo)

    def history_changed(self, can_undo: bool, can_redo: bool) -> None:
        self.undo_action.setEnabled(can_undo)
        self.redo_action.setEnabled(can_redo)
