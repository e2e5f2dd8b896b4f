from dataclasses import dataclass, field


Row = tuple[str, ...]


@dataclass(frozen=True)
class Grid:
    """
    Immutable 2D table of cell values.

    Writing a cell returns a new Grid which shares every untouched row
    with the grid it was derived from, so keeping older grids around
    (as undo snapshots) only costs the rows that were rewritten.
    """
    row_count: int
    column_count: int

    # 2D-tuple, indexed as data[row][column]
    data: tuple[Row, ...] = field(repr=False)

    @staticmethod
    def empty(row_count: int, column_count: int) -> "Grid":
        # NOTE: every row of a fresh grid is the very same tuple
        empty_row: Row = ("",) * column_count

        return Grid(
            row_count=row_count,
            column_count=column_count,
            data=(empty_row,) * row_count,
        )

    def contains(self, row: int, column: int) -> bool:
        return 0 <= row < self.row_count and 0 <= column < self.column_count

    def get_value(self, row: int, column: int) -> str:
        return self.data[row][column]

    def get_row(self, row: int) -> Row:
        return self.data[row]

    def with_value(self, row: int, column: int, value: str) -> "Grid":
        old_row = self.data[row]
        new_row = old_row[:column] + (value,) + old_row[column + 1:]

        return Grid(
            row_count=self.row_count,
            column_count=self.column_count,
            data=self.data[:row] + (new_row,) + self.data[row + 1:],
        )
