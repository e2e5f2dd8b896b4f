import logging
from typing import Callable, List

from PySide6 import QtCore

from .configuration import Configuration
from .store import GridStore, GridStoreException, SubmissionLogEntry


logger = logging.getLogger(__name__)


class State(QtCore.QObject):
    cells_changed: QtCore.Signal = QtCore.Signal(
        *(int, int, int, int), arguments=["top", "left", "bottom", "right"]
    )
    history_changed: QtCore.Signal = QtCore.Signal(
        *(bool, bool), arguments=["can_undo", "can_redo"]
    )
    submissions_changed: QtCore.Signal = QtCore.Signal()

    def __init__(self, configuration_callback: Callable[[], Configuration]):
        super().__init__()

        self.configuration_callback = configuration_callback

        configuration = self.configuration

        self.store = GridStore(
            rows=configuration.rows,
            columns=configuration.columns,
            max_history=configuration.max_history_depth,
        )

    @property
    def configuration(self) -> Configuration:
        return self.configuration_callback()

    # Reading
    @property
    def rows(self) -> int:
        return self.store.rows

    @property
    def columns(self) -> int:
        return self.store.columns

    @property
    def search_term(self) -> str:
        return self.store.search_term

    @property
    def can_undo(self) -> bool:
        return self.store.can_undo

    @property
    def can_redo(self) -> bool:
        return self.store.can_redo

    @property
    def submission_count(self) -> int:
        return len(self.store.submissions)

    def get_cell(self, row: int, col: int) -> str:
        return self.store.get_cell(row, col)

    def filtered_submissions(self) -> List[SubmissionLogEntry]:
        return self.store.filtered_submissions()

    # Writing
    def edit_cell(self, row: int, col: int, value: str) -> None:
        try:
            self.store.edit_cell(row, col, value)
        except GridStoreException as e:
            logger.warning(f"Edit of cell ({row}, {col}) rejected: {e}")
            raise

        self.cells_changed.emit(row, col, row, col)
        self._emit_history_changed()

    def undo(self) -> None:
        if not self.store.undo():
            return

        self._emit_all_cells_changed()
        self._emit_history_changed()

    def redo(self) -> None:
        if not self.store.redo():
            return

        self._emit_all_cells_changed()
        self._emit_history_changed()

    def submit(self, row: int, col: int, value: str) -> SubmissionLogEntry:
        try:
            entry = self.store.submit(row, col, value)
        except GridStoreException as e:
            logger.warning(f"Submit to cell ({row}, {col}) rejected: {e}")
            raise

        self._emit_submitted(entry)
        return entry

    def submit_text(self, row_text: str, col_text: str, value: str) -> SubmissionLogEntry:
        try:
            entry = self.store.submit_text(row_text, col_text, value)
        except GridStoreException as e:
            logger.warning(f"Submit of '{row_text}', '{col_text}' rejected: {e}")
            raise

        self._emit_submitted(entry)
        return entry

    def set_search_term(self, term: str) -> None:
        if term == self.store.search_term:
            return

        self.store.set_search_term(term)
        self.submissions_changed.emit()

    # Signals
    def _emit_submitted(self, entry: SubmissionLogEntry) -> None:
        self.cells_changed.emit(entry.row, entry.column, entry.row, entry.column)
        self.submissions_changed.emit()

    def _emit_all_cells_changed(self) -> None:
        # NOTE: a snapshot can differ from the current grid anywhere
        self.cells_changed.emit(0, 0, self.rows - 1, self.columns - 1)

    def _emit_history_changed(self) -> None:
        self.history_changed.emit(self.can_undo, self.can_redo)
