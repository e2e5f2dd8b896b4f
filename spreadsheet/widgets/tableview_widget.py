from PySide6 import QtWidgets, QtCore, QtGui


class TableView(QtWidgets.QTableView):
    def __init__(self, editable=True, column_width: int = None, row_height: int = None):
        super().__init__()

        self.editable = editable

        if not editable:
            self.setEditTriggers(QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers)

        # NOTE: fixed section sizes keep scrolling through a large grid cheap
        if column_width is not None:
            self.horizontalHeader().setSectionResizeMode(QtWidgets.QHeaderView.ResizeMode.Fixed)
            self.horizontalHeader().setDefaultSectionSize(column_width)

        if row_height is not None:
            self.verticalHeader().setSectionResizeMode(QtWidgets.QHeaderView.ResizeMode.Fixed)
            self.verticalHeader().setDefaultSectionSize(row_height)

    def clear_content(self, indexes: list[QtCore.QModelIndex]) -> None:
        # NOTE: every cleared cell is its own edit, so each one can be undone separately
        for index in indexes:
            if not self.model().flags(index) & QtCore.Qt.ItemFlag.ItemIsEditable:
                continue

            self.model().setData(index, "", QtCore.Qt.ItemDataRole.EditRole)

    def keyPressEvent(self, event: QtGui.QKeyEvent):
        # NOTE: undo and redo are toolbar shortcuts, they should not be eaten by the view
        if event.matches(QtGui.QKeySequence.StandardKey.Undo) or event.matches(QtGui.QKeySequence.StandardKey.Redo):
            event.ignore()
            return

        # DELETE
        if event.key() == QtCore.Qt.Key.Key_Delete and self.editable:
            if (indexes := self.selectedIndexes()):
                self.clear_content(indexes)
                return

        super().keyPressEvent(event)
