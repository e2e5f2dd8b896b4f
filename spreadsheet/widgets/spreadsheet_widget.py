from PySide6 import QtWidgets, QtCore

from ..application import Application
from ..utils.gridmodel import GridTableModel
from ..utils.state import State
from .searchable_list_widget import SearchableListWidget
from .submit_form_widget import SubmitFormWidget
from .tableview_widget import TableView


class SpreadsheetWidget(QtWidgets.QWidget):
    def __init__(self, parent: QtWidgets.QWidget = None):
        super().__init__(parent)

        self.application: Application = QtWidgets.QApplication.instance()
        self.state: State = self.application.state

    def setup_ui(self) -> None:
        view = self.state.configuration.view

        grid_layout = QtWidgets.QGridLayout()
        self.setLayout(grid_layout)

        self.submit_form = SubmitFormWidget()

        self.grid_model = GridTableModel(self.state)
        self.grid_view = TableView(
            editable=True,
            column_width=view.column_width,
            row_height=view.row_height,
        )
        self.grid_view.setModel(self.grid_model)

        self.submitted_list = SearchableListWidget()

        splitter = QtWidgets.QSplitter(QtCore.Qt.Orientation.Horizontal)
        splitter.addWidget(self.grid_view)
        splitter.addWidget(self.submitted_list)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)

        grid_layout.addWidget(self.submit_form, 0, 0)
        grid_layout.addWidget(splitter, 1, 0)
        grid_layout.setRowStretch(1, 1)
