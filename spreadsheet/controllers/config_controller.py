import os
import json
import logging

from ..utils.configuration import Configuration


logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigController:
    def __init__(self, path: str):
        self.configuration_path = path

    def _verify_configuration(self, configuration: dict) -> bool:
        """Verifies the integrity of the configuration"""
        if not isinstance(configuration, dict):
            return False

        for section in ("grid", "history", "view", "logging"):
            if section in configuration and not isinstance(configuration[section], dict):
                return False

        grid = configuration.get("grid", {})

        for key in ("rows", "columns"):
            if key in grid and not _is_positive_int(grid[key]):
                return False

        history = configuration.get("history", {})

        if "max_depth" in history:
            max_depth = history["max_depth"]

            # NOTE: null means no cap, 0 means no undo at all
            if max_depth is not None and not (
                isinstance(max_depth, int)
                and not isinstance(max_depth, bool)
                and max_depth >= 0
            ):
                return False

        view = configuration.get("view", {})

        for key in ("column_width", "row_height"):
            if key in view and not _is_positive_int(view[key]):
                return False

        level = configuration.get("logging", {}).get("level", "INFO")

        if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
            return False

        return True

    def get_configuration(self) -> Configuration:
        if not os.path.exists(self.configuration_path):
            return Configuration.get_default()

        try:
            with open(self.configuration_path, "r", encoding="utf-8") as f:
                configuration = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Configuration '{self.configuration_path}' could not be read ({e}), using defaults")
            return Configuration.get_default()

        if not self._verify_configuration(configuration):
            logger.warning(f"Configuration '{self.configuration_path}' is invalid, using defaults")
            return Configuration.get_default()

        return Configuration.from_json(configuration)
