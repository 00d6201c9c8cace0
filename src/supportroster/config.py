"""Output layout constants and run configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Artifact filenames, written to the output directory
ROSTER_FILENAME = "beautified-schedule.txt"
MESSAGE_FILENAME = "flowdock-message.txt"

# Hour buckets per epoch: 0-23 plus three overflow buckets
HOUR_BUCKETS = 27
HOURS_PER_DAY = 24

# Shift offsets are counted in half-hour units
UNITS_PER_HOUR = 2
HOURS_PER_UNIT = 0.5

# Column count of the original agents-per-day table
LEGACY_TABLE_COLUMNS = 5

ROLLCALL_SEPARATOR = "\n#rollcall\n\n"
SUPPORT_HOURS_HEADING = "Support hours\n-------------\n"
AGENTS_PER_DAY_HEADING = "\n\nAgents per day \n\n"
TABLE_SEPARATOR = "\t\t"

OPS_PING_HANDLE = "@@support_ops"

USAGE = "Usage: beautify-schedule <path-to-support-shift-scheduler-output.json>"


@dataclass
class RosterConfig:
    """Settings for a single formatting run.

    Attributes:
        output_dir: Directory that receives the text artifacts.
        roster_filename: Name of the roster text file.
        message_filename: Name of the notification text file.
        legacy_columns: Render the agents-per-day table with exactly five
            epoch columns, as earlier artifacts did.
        pdf_path: If set, also write a printable PDF roster here.
    """

    output_dir: Path = field(default_factory=Path)
    roster_filename: str = ROSTER_FILENAME
    message_filename: str = MESSAGE_FILENAME
    legacy_columns: bool = False
    pdf_path: Optional[Path] = None

    @property
    def roster_path(self) -> Path:
        return self.output_dir / self.roster_filename

    @property
    def message_path(self) -> Path:
        return self.output_dir / self.message_filename
