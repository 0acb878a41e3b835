"""
Main entry point for the weekly roster application.
"""

import sys
import argparse

from .config import ConfigLoader, ConfigurationError
from .errors import RosterError
from .exporters import HtmlExporter, PersonViewCSVExporter, ShiftViewCSVExporter
from .reporter import RosterReporter
from .roster import RosterBuilder

MIN_YEAR, MAX_YEAR = 2018, 2025
MIN_WEEK, MAX_WEEK = 1, 55


def validate_arguments(year: int, week: int) -> None:
    """Reject run parameters outside the supported ranges.

    Raises:
        ValueError: If year or week is out of range
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"year out of range ({MIN_YEAR}-{MAX_YEAR}), got {year}")
    if not MIN_WEEK <= week <= MAX_WEEK:
        raise ValueError(f"week out of range ({MIN_WEEK}-{MAX_WEEK}), got {week}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster-week",
        description="Render the weekly shift roster by person and by shift",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Roster for week 10 of 2024
  roster-week config/roster.yaml 2024 10

  # Header and shift list only
  roster-week config/roster.yaml 2024 10 --quiet

  # Write an HTML page
  roster-week config/roster.yaml 2024 10 --export-html output.html

  # Export the shift view to CSV
  roster-week config/roster.yaml 2024 10 --export-csv roster.csv --view shift
        """,
    )

    parser.add_argument("config", type=str, help="Path to YAML configuration file")
    parser.add_argument("year", type=int, help="Calendar year")
    parser.add_argument("week", type=int, help="ISO week number")
    parser.add_argument("--export-html", type=str, help="Export roster to HTML file")
    parser.add_argument("--export-csv", type=str, help="Export roster to CSV file")
    parser.add_argument(
        "--view",
        choices=["person", "shift"],
        default="person",
        help="Roster view written by --export-csv (default: person)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress the roster tables (only show header and shifts)",
    )
    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    try:
        validate_arguments(args.year, args.week)

        # Load configuration
        print(f"Loading configuration from: {args.config}")
        loader = ConfigLoader(args.config)
        config = loader.load()

        print("✓ Configuration loaded successfully")
        print(loader.get_summary())
        print()

        # Build roster
        builder = RosterBuilder(config)
        roster = builder.build(args.year, args.week)
        print("✓ Roster built")
        print(builder.get_summary())
        print()

        RosterReporter(roster).print_report(args.quiet)

        if args.export_html:
            HtmlExporter(roster).export(args.export_html)

        if args.export_csv:
            exporter_cls = (
                ShiftViewCSVExporter if args.view == "shift" else PersonViewCSVExporter
            )
            exporter_cls(roster).export(args.export_csv)

        sys.exit(0)

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)

    except RosterError as e:
        print(f"Roster Error: {e}", file=sys.stderr)
        sys.exit(1)

    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        sys.exit(1)

    except OSError as e:
        print(f"Output Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
