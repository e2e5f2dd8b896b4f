import logging
import sys

from spreadsheet.application import Application

from spreadsheet.windows.mainwindow import MainWindow

from spreadsheet.widgets.warning_dialog import WarningDialog


logger = logging.getLogger("spreadsheet")


def excepthook(cls, exception, traceback):
    logger.error("Unexpected error", exc_info=(cls, exception, traceback))

    WarningDialog(
        title="An error occurred",
        text=f"{exception}"
    ).exec()


def main():
    sys.excepthook = excepthook
    app = Application(MainWindow)

    app.start()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
