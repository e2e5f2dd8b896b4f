from PySide6 import QtWidgets

from ..application import Application
from ..utils.state import State
from ..utils.store import GridStoreException
from .warning_dialog import WarningDialog


class SubmitFormWidget(QtWidgets.QWidget):
    def __init__(self):
        super().__init__()

        self.application: Application = QtWidgets.QApplication.instance()
        self.state: State = self.application.state

        form_layout = QtWidgets.QFormLayout()
        self.setLayout(form_layout)

        self.row_input = QtWidgets.QLineEdit()
        self.row_input.setPlaceholderText(f"0 - {self.state.rows - 1}")

        self.col_input = QtWidgets.QLineEdit()
        self.col_input.setPlaceholderText(f"0 - {self.state.columns - 1}")

        self.value_input = QtWidgets.QLineEdit()

        self.submit_button = QtWidgets.QPushButton(text="Submit")
        self.submit_button.clicked.connect(self.submit_clicked)
        self.submit_button.setEnabled(False)

        for line_edit in (self.row_input, self.col_input, self.value_input):
            line_edit.textChanged.connect(self.inputs_changed)
            line_edit.returnPressed.connect(self.submit_clicked)

        form_layout.addRow("Row:", self.row_input)
        form_layout.addRow("Column:", self.col_input)
        form_layout.addRow("Value:", self.value_input)
        form_layout.addRow(self.submit_button)

    def inputs_changed(self) -> None:
        # NOTE: all three fields are required
        self.submit_button.setEnabled(
            all(
                line_edit.text() != ""
                for line_edit in (self.row_input, self.col_input, self.value_input)
            )
        )

    def submit_clicked(self) -> None:
        if not self.submit_button.isEnabled():
            return

        try:
            self.state.submit_text(
                self.row_input.text(),
                self.col_input.text(),
                self.value_input.text(),
            )
        except GridStoreException as e:
            WarningDialog(
                title="Submit failed",
                text=f"{e}",
            ).exec()
            return

        self.row_input.clear()
        self.col_input.clear()
        self.value_input.clear()
