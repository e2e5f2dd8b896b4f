from PySide6 import QtCore

from .state import State
from .store import GridStoreException
from .tablemodel import TableModel


class GridTableModel(TableModel):
    """
    Exposes the whole grid of the state as an editable table.

    The view only ever asks for the cells it shows, so a 1000 x 1000 grid
    is never read in full.
    """

    def __init__(self, state: State):
        super().__init__()

        self.state = state

        self.state.cells_changed.connect(self.cells_changed_handler)

    def rowCount(self, *index):
        return self.state.rows

    def columnCount(self, *index):
        return self.state.columns

    def get_value(self, row: int, col: int) -> str:
        return self.state.get_cell(row, col)

    def is_header_row(self, row: int) -> bool:
        return row == 0

    def setData(self, index: QtCore.QModelIndex, value: str, role=QtCore.Qt.ItemDataRole.EditRole):
        if not index.isValid():
            return False

        if role != QtCore.Qt.ItemDataRole.EditRole:
            return False

        row, col = index.row(), index.column()
        value = "" if value is None else str(value)

        # NOTE: closing an editor without changing anything should not end up in the history
        if self.state.get_cell(row, col) == value:
            return False

        try:
            self.state.edit_cell(row, col, value)
        except GridStoreException:
            # NOTE: already logged by the state, the view keeps the old value
            return False

        # NOTE: dataChanged is emitted through cells_changed_handler
        return True

    def headerData(self, section, orientation, role):
        # section is the index of the column/row.
        if role == QtCore.Qt.ItemDataRole.DisplayRole:
            return str(section)

    def flags(self, index):
        if not index.isValid():
            return QtCore.Qt.ItemFlag.NoItemFlags

        return super().flags(index) | QtCore.Qt.ItemFlag.ItemIsEditable

    def cells_changed_handler(self, top: int, left: int, bottom: int, right: int) -> None:
        self.dataChanged.emit(self.index(top, left), self.index(bottom, right))
