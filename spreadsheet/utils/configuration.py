from dataclasses import dataclass
from typing import Optional

from .store import DEFAULT_ROWS, DEFAULT_COLUMNS


@dataclass
class View:
    column_width: int
    row_height: int

    @staticmethod
    def get_default() -> "View":
        return View(
            column_width=100,
            row_height=40,
        )


@dataclass
class Configuration:
    rows: int
    columns: int
    max_history_depth: Optional[int]
    view: View
    log_level: str

    @staticmethod
    def get_default() -> "Configuration":
        return Configuration(
            rows=DEFAULT_ROWS,
            columns=DEFAULT_COLUMNS,
            max_history_depth=None,
            view=View.get_default(),
            log_level="INFO",
        )

    @staticmethod
    def from_json(json: dict) -> "Configuration":
        # NOTE: every section is optional, missing values fall back to the defaults
        default = Configuration.get_default()

        grid = json.get("grid", {})
        history = json.get("history", {})
        view = json.get("view", {})
        logging = json.get("logging", {})

        return Configuration(
            rows=grid.get("rows", default.rows),
            columns=grid.get("columns", default.columns),
            max_history_depth=history.get("max_depth", default.max_history_depth),
            view=View(
                column_width=view.get("column_width", default.view.column_width),
                row_height=view.get("row_height", default.view.row_height),
            ),
            log_level=logging.get("level", default.log_level).upper(),
        )

    def to_json(self) -> dict:
        return {
            "grid": {
                "rows": self.rows,
                "columns": self.columns,
            },
            "history": {
                "max_depth": self.max_history_depth,
            },
            "view": {
                "column_width": self.view.column_width,
                "row_height": self.view.row_height,
            },
            "logging": {
                "level": self.log_level,
            },
        }
