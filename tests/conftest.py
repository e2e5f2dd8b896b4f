import os

# NOTE: must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6 import QtWidgets

from spreadsheet.utils.configuration import Configuration
from spreadsheet.utils.state import State
from spreadsheet.utils.store import GridStore


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance()

    if app is None:
        app = QtWidgets.QApplication([])

    yield app


@pytest.fixture
def store():
    return GridStore(rows=3, columns=3)


@pytest.fixture
def configuration():
    configuration = Configuration.get_default()
    configuration.rows = 5
    configuration.columns = 4

    return configuration


@pytest.fixture
def state(qapp, configuration):
    return State(configuration_callback=lambda: configuration)


@pytest.fixture
def recorder():
    """Collects the arguments of every emission of the signals it is connected to."""
    class Recorder:
        def __init__(self):
            self.calls = []

        def connect(self, signal, name):
            signal.connect(lambda *args: self.calls.append((name, args)))

        def names(self):
            return [name for name, _ in self.calls]

    return Recorder()


@pytest.fixture
def app_state(qapp, state, monkeypatch):
    """Makes the state reachable through QApplication.instance(), as the widgets expect."""
    monkeypatch.setattr(qapp, "state", state, raising=False)

    return state


@pytest.fixture
def dialogs(monkeypatch):
    """Records the titles of warning dialogs instead of showing them."""
    from spreadsheet.widgets.warning_dialog import WarningDialog

    titles = []
    monkeypatch.setattr(WarningDialog, "exec", lambda self: titles.append(self.windowTitle()))

    return titles
