from PySide6 import QtWidgets, QtCore

from ..application import Application
from ..utils.pandasmodel import SubmissionsModel
from ..utils.state import State
from .tableview_widget import TableView


class SearchableListWidget(QtWidgets.QWidget):
    def __init__(self):
        super().__init__()

        self.application: Application = QtWidgets.QApplication.instance()
        self.state: State = self.application.state

        self.grid_layout = QtWidgets.QGridLayout()
        self.grid_layout.setAlignment(QtCore.Qt.AlignmentFlag.AlignTop)
        self.setLayout(self.grid_layout)

        title = QtWidgets.QLabel(text="Submitted Data")
        font = title.font()
        font.setBold(True)
        title.setFont(font)
        self.grid_layout.addWidget(title, 0, 0, 1, 2)

        # NOTE: filtering happens on every keystroke, the log is small compared to the grid
        self.searchbox = QtWidgets.QLineEdit()
        self.searchbox.setPlaceholderText("Search...")
        self.searchbox.textChanged.connect(self.state.set_search_term)
        self.grid_layout.addWidget(self.searchbox, 1, 0)

        self.count_label = QtWidgets.QLabel(text="0 / 0")
        self.grid_layout.addWidget(self.count_label, 1, 1)

        self.model = SubmissionsModel(self.state)

        self.table_view = TableView(editable=False)
        self.table_view.setModel(self.model)
        self.table_view.horizontalHeader().setStretchLastSection(True)
        self.grid_layout.addWidget(self.table_view, 2, 0, 1, 2)

        # NOTE: the model resets itself on the same signal, it was connected first
        self.state.submissions_changed.connect(self.reload_count)
        self.reload_count()

    def reload_count(self) -> None:
        self.count_label.setText(f"{self.model.rowCount()} / {self.state.submission_count}")
