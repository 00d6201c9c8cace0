"""Command-line interface for the support roster formatter."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from supportroster.config import USAGE, RosterConfig
from supportroster.domain.models import load_schedule
from supportroster.domain.summary import summarize_schedule
from supportroster.errors import RosterError
from supportroster.output.message_generator import NotificationGenerator
from supportroster.output.pdf_generator import PDFGenerator
from supportroster.output.roster_generator import RosterGenerator

logger = logging.getLogger(__name__)


def setup_logging(verbosity: int = 0) -> None:
    """Send log records to stderr; -v for INFO, -vv for DEBUG."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(schedule_path: Path, config: RosterConfig) -> None:
    """Read a schedule and write the roster and notification artifacts.

    Args:
        schedule_path: Scheduler output JSON file.
        config: Output locations and layout options.
    """
    schedule = load_schedule(schedule_path)
    summary = summarize_schedule(schedule)

    RosterGenerator(legacy_columns=config.legacy_columns).generate(
        schedule, config.roster_path, summary
    )
    NotificationGenerator().generate(schedule, config.message_path, summary)

    print(f"Roster written to {config.roster_path}")
    print(f"Message written to {config.message_path}")

    if config.pdf_path:
        PDFGenerator().generate(schedule, config.pdf_path, summary)
        print(f"PDF written to {config.pdf_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beautify-schedule",
        description="Turn support shift scheduler output into a readable "
        "roster and a calendar-check message.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s schedule.json                      Write both text files here
  %(prog)s schedule.json --output-dir out     Write them into out/
  %(prog)s schedule.json --pdf roster.pdf     Also write a printable PDF
  %(prog)s schedule.json --legacy-columns     Five-column agents-per-day table
        """,
    )
    parser.add_argument(
        "schedule",
        nargs="*",
        help="Path to the support shift scheduler output JSON",
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=Path("."),
        help="Directory for the text files (default: current directory)",
    )
    parser.add_argument(
        "--pdf",
        type=Path,
        default=None,
        help="Also write a printable PDF roster to this path",
    )
    parser.add_argument(
        "--legacy-columns",
        action="store_true",
        help="Render exactly five day columns in the agents-per-day table",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.schedule) != 1:
        print(USAGE)
        return 1

    setup_logging(args.verbose)

    config = RosterConfig(
        output_dir=args.output_dir,
        legacy_columns=args.legacy_columns,
        pdf_path=args.pdf,
    )

    try:
        run(Path(args.schedule[0]), config)
    except RosterError as exc:
        logger.debug("Formatting failed", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
