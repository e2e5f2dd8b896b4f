import logging
from typing import Type

from PySide6 import QtWidgets, QtCore

from spreadsheet.controllers.config_controller import ConfigController
from spreadsheet.utils.logger import setup_logging
from spreadsheet.utils.state import State


logger = logging.getLogger(__name__)


class Application(QtWidgets.QApplication, QtCore.QObject):
    def __init__(self, mainwindow: Type[QtWidgets.QMainWindow], configuration_path: str = "configuration.json"):
        super().__init__()

        self.config_controller = ConfigController(configuration_path)
        self._configuration = self.config_controller.get_configuration()

        setup_logging(self._configuration.log_level)

        self.state = State(configuration_callback=self.get_configuration)

        logger.info(f"Starting with a {self.state.rows} x {self.state.columns} grid")

        self.ui = mainwindow()
        self.ui.resize(1200, 800)

    def get_configuration(self):
        # NOTE: read once at start-up, the grid size can not change afterwards
        return self._configuration

    def start(self) -> None:
        self.ui.show()
