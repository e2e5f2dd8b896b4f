from PySide6 import QtCore
import pandas as pd

from .state import State
from .tablemodel import TableModel


class SubmissionsModel(TableModel):
    """Read-only view on the submissions that match the current search term."""
    COLUMNS = ["Row", "Col", "Value"]

    def __init__(self, state: State):
        super().__init__()

        self.state = state
        self._entries = self.state.filtered_submissions()
        self._data = self._build_data()

        self.state.submissions_changed.connect(self.reload)

    def _build_data(self) -> pd.DataFrame:
        data = pd.DataFrame(
            [(s.row, s.column, s.value) for s in self._entries],
            columns=SubmissionsModel.COLUMNS,
        )

        return data.fillna("").astype(str).convert_dtypes()

    def reload(self) -> None:
        self.beginResetModel()
        self._entries = self.state.filtered_submissions()
        self._data = self._build_data()
        self.endResetModel()

    def data(self, index: QtCore.QModelIndex, role=QtCore.Qt.ItemDataRole.DisplayRole):
        if index.isValid() and role == QtCore.Qt.ItemDataRole.ToolTipRole:
            return self._entries[index.row()].get_label()

        return super().data(index, role)

    def rowCount(self, *index):
        return self._data.shape[0]

    def columnCount(self, *index):
        return self._data.shape[1]

    def get_value(self, row: int, col: int) -> str:
        return str(self._data.iloc[row, col])

    def headerData(self, section, orientation, role):
        # section is the index of the column/row.
        if role == QtCore.Qt.ItemDataRole.DisplayRole:
            if orientation == QtCore.Qt.Orientation.Horizontal:
                return str(self._data.columns[section])

            if orientation == QtCore.Qt.Orientation.Vertical:
                return str(section + 1)
