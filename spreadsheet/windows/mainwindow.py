from PySide6 import QtWidgets

from spreadsheet.application import Application

from spreadsheet.widgets.spreadsheet_widget import SpreadsheetWidget
from spreadsheet.widgets.toolbar import Toolbar

from spreadsheet.utils.state import State


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self):
        super().__init__()

        self.application: Application = QtWidgets.QApplication.instance()
        self.state: State = self.application.state

        self.setWindowTitle("Spreadsheet App")

        # Toolbar
        self.toolbar = Toolbar()
        self.addToolBar(self.toolbar)

        self.central_widget = SpreadsheetWidget(self)
        self.central_widget.setup_ui()
        self.setCentralWidget(self.central_widget)

    def closeEvent(self, event):
        # NOTE: nothing is kept between sessions, closing the window ends the application
        event.accept()
        self.application.quit()
