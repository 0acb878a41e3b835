"""
Configuration loader for parsing YAML roster configuration.
"""

import re
import yaml
from pathlib import Path
from typing import Dict, Any

from .models import RosterConfig, ShiftDefinition


class ConfigurationError(Exception):
    """Custom exception for configuration errors."""

    pass


class ConfigLoader:
    """Loads and validates roster configuration from YAML (or JSON) files."""

    DEFAULT_TITLE = "Roster"
    HOUR_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

    def __init__(self, config_path: str | Path):
        """
        Initialize the ConfigLoader with a configuration file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        self._raw_config: Dict[str, Any] | None = None
        self._config: RosterConfig | None = None

    def load(self) -> RosterConfig:
        """
        Load and parse the configuration file.

        Returns:
            RosterConfig object with all parsed data

        Raises:
            ConfigurationError: If configuration is invalid
        """
        with open(self.config_path, "r") as f:
            try:
                self._raw_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Unable to parse {self.config_path}: {e}"
                ) from e

        if not isinstance(self._raw_config, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got: {type(self._raw_config).__name__}"
            )

        self._config = self._parse_config()
        return self._config

    @property
    def config(self) -> RosterConfig:
        """
        Get the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    @property
    def raw_config(self) -> Dict[str, Any]:
        """
        Get the raw configuration dictionary.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._raw_config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._raw_config

    def _parse_config(self) -> RosterConfig:
        """Parse raw YAML data into RosterConfig object."""
        raw = self._raw_config

        return RosterConfig(
            title=str(raw.get("title", self.DEFAULT_TITLE)),
            shifts=self._parse_shifts(raw.get("shifts", [])),
            team_list=self._parse_team_list(raw.get("team_list")),
            roster_matrix=self._parse_roster_matrix(raw.get("roster_matrix")),
        )

    def _parse_shifts(self, shifts_raw: Any) -> list[ShiftDefinition]:
        """Parse the shift catalog, rejecting duplicate ids."""
        if not isinstance(shifts_raw, list):
            raise ConfigurationError("shifts must be a list")

        shifts = []
        seen_ids = set()

        for shift_data in shifts_raw:
            if not isinstance(shift_data, dict):
                raise ConfigurationError(f"Invalid shift entry: {shift_data!r}")

            shift_id = shift_data.get("id")
            if not isinstance(shift_id, int) or isinstance(shift_id, bool):
                raise ConfigurationError(
                    f"Shift id must be an integer, got: {shift_id!r}"
                )
            if shift_id in seen_ids:
                raise ConfigurationError(f"Duplicate shift id: {shift_id}")
            seen_ids.add(shift_id)

            hour_start = self._parse_hour(shift_data.get("hour_start"), shift_id)
            hour_end = self._parse_hour(shift_data.get("hour_end"), shift_id)

            shifts.append(
                ShiftDefinition(id=shift_id, hour_start=hour_start, hour_end=hour_end)
            )

        return shifts

    def _parse_hour(self, value: Any, shift_id: int) -> str:
        """Validate an HH:MM time string."""
        if not isinstance(value, str) or not self.HOUR_PATTERN.match(value):
            raise ConfigurationError(
                f"Hours of shift {shift_id} must be in HH:MM format, got: {value!r}. "
                f"Example: 06:00"
            )
        return value

    def _parse_team_list(self, team_raw: Any) -> list[str]:
        """Parse the ordered team list."""
        if not isinstance(team_raw, list) or not team_raw:
            raise ConfigurationError("team_list must be a non-empty list of names")

        for name in team_raw:
            if not isinstance(name, str) or not name:
                raise ConfigurationError(
                    f"Team member names must be non-empty strings, got: {name!r}"
                )

        return list(team_raw)

    def _parse_roster_matrix(self, matrix_raw: Any) -> list[list[int]]:
        """Parse the roster matrix (row shape is checked when pivoting)."""
        if not isinstance(matrix_raw, list):
            raise ConfigurationError("roster_matrix must be a list of rows")

        matrix = []
        for index, row in enumerate(matrix_raw):
            if not isinstance(row, list) or not all(
                isinstance(cell, int) and not isinstance(cell, bool) for cell in row
            ):
                raise ConfigurationError(
                    f"roster_matrix row {index} must be a list of shift ids, got: {row!r}"
                )
            matrix.append(list(row))

        return matrix

    def get_summary(self) -> str:
        """
        Get a summary of the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        config = self.config

        lines = [
            f"Configuration from: {self.config_path}",
            f"Title: {config.title}",
            f"Shifts: {len(config.shifts)}",
        ]

        for shift in sorted(config.shifts, key=lambda s: s.id):
            lines.append(f"  - {shift.label}")

        lines.append(f"Team Members: {len(config.team_list)}")
        lines.append(f"Week Length: {config.week_length} days")

        return "\n".join(lines)
