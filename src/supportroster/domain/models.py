"""Domain models for support shift schedules.

This module contains the data structures read from the scheduling
algorithm's output file: shifts, epochs, and the schedule that holds them.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Union

from supportroster.config import HOURS_PER_UNIT
from supportroster.errors import ScheduleLoadError

logger = logging.getLogger(__name__)

# Trailing contact annotation, e.g. "Jane Doe <jane@example.com>"
CONTACT_ANNOTATION = re.compile(r" <.*>")


def strip_contact(agent: str) -> str:
    """Remove the first bracketed contact annotation from an agent string."""
    return CONTACT_ANNOTATION.sub("", agent, count=1)


@dataclass(frozen=True)
class Shift:
    """A single agent's block of time within an epoch.

    Attributes:
        agent: Agent identifier, possibly with a contact annotation.
        start: First half-hour unit of the shift (inclusive).
        end: Last half-hour unit of the shift (exclusive).
    """

    agent: str
    start: int
    end: int

    @property
    def display_name(self) -> str:
        """Agent name with the contact annotation removed."""
        return strip_contact(self.agent)

    @property
    def unit_count(self) -> int:
        """Number of half-hour units covered."""
        return self.end - self.start

    @property
    def duration_hours(self) -> float:
        """Length of the shift in hours."""
        return self.unit_count * HOURS_PER_UNIT

    def units(self) -> range:
        """Half-hour unit indices covered by the shift."""
        return range(self.start, self.end)

    @classmethod
    def from_dict(cls, data: dict) -> "Shift":
        return cls(agent=data["agent"], start=data["start"], end=data["end"])


@dataclass
class Epoch:
    """One scheduling period, usually a single working day.

    Attributes:
        start_date: The start date exactly as written in the input file.
        shifts: Shifts in input order.
    """

    start_date: str
    shifts: list[Shift] = field(default_factory=list)

    @property
    def day(self) -> date:
        """Calendar date of the epoch, taken from the ISO string as written."""
        return datetime.fromisoformat(self.start_date).date()

    @property
    def total_hours(self) -> float:
        """Agent-hours scheduled in this epoch."""
        return sum(shift.duration_hours for shift in self.shifts)

    @classmethod
    def from_dict(cls, data: dict) -> "Epoch":
        return cls(
            start_date=data["start_date"],
            shifts=[Shift.from_dict(s) for s in data["shifts"]],
        )


@dataclass
class Schedule:
    """A full schedule: epochs in input order, normally a five-day week."""

    epochs: list[Epoch] = field(default_factory=list)

    @property
    def start_date(self) -> str:
        """Raw start date of the first epoch."""
        return self.epochs[0].start_date

    @property
    def num_epochs(self) -> int:
        return len(self.epochs)

    @classmethod
    def from_json(cls, data: list) -> "Schedule":
        """Build a schedule from the decoded JSON array."""
        return cls(epochs=[Epoch.from_dict(e) for e in data])


def load_schedule(path: Union[str, Path]) -> Schedule:
    """Read a schedule from a scheduler output JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed schedule.

    Raises:
        ScheduleLoadError: If the file cannot be read, is not UTF-8 JSON,
            or holds no epochs.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScheduleLoadError(f"cannot read schedule file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ScheduleLoadError(f"{path} is not UTF-8 text: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ScheduleLoadError(f"{path} is not valid JSON: {exc}") from exc

    schedule = Schedule.from_json(data)
    if not schedule.epochs:
        raise ScheduleLoadError(f"{path} contains no epochs")
    logger.info("Loaded %d epochs from %s", schedule.num_epochs, path)
    return schedule
