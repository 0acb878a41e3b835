"""
Export strategies for roster data.

This module implements the Strategy Pattern for exporting a weekly roster
to various formats. Each exporter encapsulates a specific output format.
"""

import csv
import html
from abc import ABC, abstractmethod

from .models import RosterWeek
from .reporter import (
    day_labels,
    person_view_frame,
    shift_catalog_frame,
    shift_view_frame,
)


class ExportStrategy(ABC):
    """Abstract base class for roster export strategies."""

    def __init__(self, roster: RosterWeek):
        """Initialize the export strategy.

        Args:
            roster: The weekly roster to export
        """
        self.roster = roster

    @abstractmethod
    def export(self, filepath: str) -> None:
        """Export roster to the specified file.

        Args:
            filepath: Path to the output file
        """
        pass

    def _build_header_row(self, first_column: str) -> list[str]:
        """Build a header row with a leading column and one column per day."""
        return [first_column] + day_labels(self.roster)


class PersonViewCSVExporter(ExportStrategy):
    """Exports the person view as a CSV matrix.

    Output format: Name, then the shift id for each day.
    """

    def export(self, filepath: str) -> None:
        rows: list[list[str]] = [self._build_header_row("Name")]

        for person in self.roster.person_rows:
            rows.append([person.name] + [str(s) for s in person.shifts_per_day])

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerows(rows)

        print(f"\n✓ Roster exported to {filepath} (person view)")


class ShiftViewCSVExporter(ExportStrategy):
    """Exports the shift view as a CSV matrix.

    Output format: Shift, then the names working it for each day.
    Co-assigned names stay separated by a line break inside the cell.
    """

    def export(self, filepath: str) -> None:
        rows: list[list[str]] = [self._build_header_row("Shift")]

        for shift_row in self.roster.shift_rows:
            rows.append([str(shift_row.shift_id)] + list(shift_row.names_per_day))

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerows(rows)

        print(f"\n✓ Roster exported to {filepath} (shift view)")


class HtmlExporter(ExportStrategy):
    """Exports the roster as a standalone HTML page.

    The page holds the week heading, the shift catalog, the person view
    and the shift view.
    """

    def export(self, filepath: str) -> None:
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.render())

        print(f"\n✓ Roster exported to {filepath} (html)")

    def render(self) -> str:
        """Render the full HTML document."""
        label = self.roster.week_label
        title = html.escape(self.roster.title)

        shift_view = shift_view_frame(self.roster).map(
            lambda cell: "<br>".join(html.escape(n) for n in cell.split("\n"))
        )

        parts = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{title}</title>",
            "</head>",
            "<body>",
            f"<h1>{title}</h1>",
            f"<h2>Week {label.week} of {label.year}: "
            f"{label.start_date} - {label.end_date}</h2>",
            "<h3>Shifts</h3>",
            shift_catalog_frame(self.roster).to_html(classes="shifts"),
            "<h3>By person</h3>",
            person_view_frame(self.roster).to_html(classes="by-person"),
            "<h3>By shift</h3>",
            shift_view.to_html(classes="by-shift", escape=False),
            "</body>",
            "</html>",
        ]
        return "\n".join(parts) + "\n"
