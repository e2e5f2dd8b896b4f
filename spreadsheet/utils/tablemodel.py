from enum import Enum

from PySide6 import QtCore, QtGui


class CellColor(Enum):
    GREY = QtGui.QBrush(QtGui.QColor(230, 230, 230))


class TableModel(QtCore.QAbstractTableModel):
    def get_value(self, row: int, col: int) -> str:
        raise NotImplementedError("Method not implemented")

    def is_header_row(self, row: int) -> bool:
        return False

    def data(self, index: QtCore.QModelIndex, role=QtCore.Qt.ItemDataRole.DisplayRole):
        if not index.isValid():
            return

        row, col = index.row(), index.column()

        if (
            role == QtCore.Qt.ItemDataRole.DisplayRole
            or role == QtCore.Qt.ItemDataRole.EditRole
        ):
            return self.get_value(row, col)

        elif role == QtCore.Qt.ItemDataRole.BackgroundRole:
            if self.is_header_row(row):
                return CellColor.GREY.value

        elif role == QtCore.Qt.ItemDataRole.FontRole:
            if self.is_header_row(row):
                font = QtGui.QFont()
                font.setBold(True)

                return font

    def flags(self, index):
        if not index.isValid():
            return QtCore.Qt.ItemFlag.NoItemFlags

        return (
            QtCore.Qt.ItemFlag.ItemIsSelectable
            | QtCore.Qt.ItemFlag.ItemIsEnabled
        )
