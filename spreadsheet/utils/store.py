import logging
import re
import threading
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from .grid import Grid


logger = logging.getLogger(__name__)

DEFAULT_ROWS = 1000
DEFAULT_COLUMNS = 1000

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


class GridStoreException(Exception):
    pass

class OutOfRangeException(GridStoreException):
    pass

class InvalidInputException(GridStoreException):
    pass


@dataclass(frozen=True)
class SubmissionLogEntry:
    row: int
    column: int
    value: str

    def get_label(self) -> str:
        return f"Row {self.row}, Col {self.column}: {self.value}"


def parse_coordinate(text: str) -> int:
    """Strictly parses a row or column number typed by a user."""
    if not isinstance(text, str):
        raise InvalidInputException(f"Coordinate must be text, not '{type(text).__name__}'")

    stripped = text.strip()

    # NOTE: int() alone would also accept things like "1_000"
    if not _INTEGER_PATTERN.match(stripped):
        raise InvalidInputException(f"'{text}' is not a whole number")

    return int(stripped)


class GridStore:
    """
    Owns the cell grid, the undo/redo history, the submission log and the search term.

    History holds the grid as it was before each edit (most recent last),
    Future holds undone grids (most recently undone first).
    Submissions write to the grid but never touch History or Future.
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        columns: int = DEFAULT_COLUMNS,
        max_history: Optional[int] = None,
    ):
        for name, size in (("rows", rows), ("columns", columns)):
            if not _is_int(size) or size <= 0:
                raise InvalidInputException(f"Number of {name} must be a positive whole number, not '{size}'")

        if max_history is not None and (not _is_int(max_history) or max_history < 0):
            raise InvalidInputException(f"History depth must be empty or a non-negative whole number, not '{max_history}'")

        self.max_history = max_history

        self._grid = Grid.empty(rows, columns)
        self._history: List[Grid] = []
        self._future: Deque[Grid] = deque()
        self._submissions: List[SubmissionLogEntry] = []
        self._search_term = ""

        # NOTE: one writer at a time, readers only ever see a fully built grid
        self._lock = threading.RLock()

    # Read interface
    @property
    def rows(self) -> int:
        return self._grid.row_count

    @property
    def columns(self) -> int:
        return self._grid.column_count

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def can_undo(self) -> bool:
        return len(self._history) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._future) > 0

    @property
    def history_length(self) -> int:
        return len(self._history)

    @property
    def future_length(self) -> int:
        return len(self._future)

    @property
    def submissions(self) -> Tuple[SubmissionLogEntry, ...]:
        return tuple(self._submissions)

    def get_cell(self, row: int, col: int) -> str:
        self._check_coordinate(row, col)

        return self._grid.get_value(row, col)

    def get_range(self, top: int, left: int, bottom: int, right: int) -> List[List[str]]:
        """Values of the inclusive window [top, bottom] x [left, right]."""
        self._check_coordinate(top, left)
        self._check_coordinate(bottom, right)

        if bottom < top or right < left:
            raise InvalidInputException(f"Invalid range ({top}, {left}) - ({bottom}, {right})")

        grid = self._grid

        return [list(grid.get_row(r)[left:right + 1]) for r in range(top, bottom + 1)]

    def filtered_submissions(self) -> List[SubmissionLogEntry]:
        with self._lock:
            needle = self._search_term.lower()
            submissions = list(self._submissions)

        if needle == "":
            return submissions

        return [s for s in submissions if needle in s.value.lower()]

    # Write interface
    def edit_cell(self, row: int, col: int, value: str) -> None:
        self._check_coordinate(row, col)
        self._check_value(value)

        with self._lock:
            self._history.append(self._grid)
            self._future.clear()
            self._grid = self._grid.with_value(row, col, value)

            self._trim_history()

        logger.debug(f"Edited cell ({row}, {col}), history: {len(self._history)}")

    def undo(self) -> bool:
        """Returns whether anything was undone."""
        with self._lock:
            if not self._history:
                return False

            previous = self._history.pop()
            self._future.appendleft(self._grid)
            self._grid = previous

        logger.debug(f"Undo, history: {len(self._history)}, future: {len(self._future)}")
        return True

    def redo(self) -> bool:
        """Returns whether anything was redone."""
        with self._lock:
            if not self._future:
                return False

            following = self._future.popleft()
            self._history.append(self._grid)
            self._grid = following

            self._trim_history()

        logger.debug(f"Redo, history: {len(self._history)}, future: {len(self._future)}")
        return True

    def submit(self, row: int, col: int, value: str) -> SubmissionLogEntry:
        self._check_coordinate(row, col)
        self._check_value(value)

        entry = SubmissionLogEntry(row=row, column=col, value=value)

        with self._lock:
            self._grid = self._grid.with_value(row, col, value)
            self._submissions.append(entry)

        logger.debug(f"Submitted {entry}")
        return entry

    def submit_text(self, row_text: str, col_text: str, value: str) -> SubmissionLogEntry:
        # NOTE: parse both before submitting, so a bad column never leaves a half done submit
        row = parse_coordinate(row_text)
        col = parse_coordinate(col_text)

        return self.submit(row, col, value)

    def set_search_term(self, term: str) -> None:
        if not isinstance(term, str):
            raise InvalidInputException(f"Search term must be text, not '{type(term).__name__}'")

        with self._lock:
            self._search_term = term

    # Utils
    def _check_coordinate(self, row: int, col: int) -> None:
        if not _is_int(row) or not _is_int(col):
            raise InvalidInputException(f"Coordinate ({row!r}, {col!r}) must consist of whole numbers")

        if not self._grid.contains(row, col):
            raise OutOfRangeException(
                f"Cell ({row}, {col}) is outside the {self.rows} x {self.columns} grid"
            )

    def _check_value(self, value: str) -> None:
        if not isinstance(value, str):
            raise InvalidInputException(f"Cell value must be text, not '{type(value).__name__}'")

    def _trim_history(self) -> None:
        if self.max_history is None:
            return

        overflow = len(self._history) - self.max_history

        if overflow > 0:
            del self._history[:overflow]


def _is_int(value) -> bool:
    # NOTE: bool is a subclass of int, but True is not a coordinate
    return isinstance(value, int) and not isinstance(value, bool)
