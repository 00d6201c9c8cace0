"""Readable roster text for a support schedule.

The roster lists every shift per day, then the support hours of each agent
for the week, then a table of how many agents cover each hour of each day.
"""

from pathlib import Path
from typing import Optional, Union

from supportroster.config import (
    AGENTS_PER_DAY_HEADING,
    HOUR_BUCKETS,
    LEGACY_TABLE_COLUMNS,
    ROLLCALL_SEPARATOR,
    SUPPORT_HOURS_HEADING,
    TABLE_SEPARATOR,
)
from supportroster.domain.models import Epoch, Schedule
from supportroster.domain.summary import (
    DailyHourHistogram,
    ScheduleSummary,
    summarize_schedule,
)
from supportroster.errors import LegacyLayoutError
from supportroster.output.artifacts import write_artifact
from supportroster.output.formatting import (
    format_number,
    hour_label,
    ping_handle,
    pretty_date,
    pretty_hour,
    weekday_abbrev,
)


class RosterGenerator:
    """Generates the beautified roster text.

    Example:
        >>> generator = RosterGenerator()
        >>> generator.generate(schedule, "beautified-schedule.txt")

    Args:
        legacy_columns: Render the agents-per-day table with exactly five
            epoch columns instead of one column per epoch.
    """

    def __init__(self, legacy_columns: bool = False):
        self.legacy_columns = legacy_columns

    def generate(
        self,
        schedule: Schedule,
        output_path: Union[str, Path],
        summary: Optional[ScheduleSummary] = None,
    ) -> str:
        """Generate the roster and save it to a file.

        Args:
            schedule: The schedule to render.
            output_path: Path to save the text file.
            summary: Precomputed summary of the schedule, if available.

        Returns:
            The generated text content.
        """
        content = self.generate_to_string(schedule, summary)
        write_artifact(output_path, content)
        return content

    def generate_to_string(
        self,
        schedule: Schedule,
        summary: Optional[ScheduleSummary] = None,
    ) -> str:
        """Generate the roster and return it as a string."""
        if summary is None:
            summary = summarize_schedule(schedule)

        parts = [self._format_epoch(epoch) for epoch in schedule.epochs]
        parts.append(ROLLCALL_SEPARATOR)
        parts.append(self._format_support_hours(summary))
        parts.append(AGENTS_PER_DAY_HEADING)
        parts.append(self._format_agents_per_day(summary.daily_agents))
        return "".join(parts)

    def _format_epoch(self, epoch: Epoch) -> str:
        lines = [f"\nShifts for {pretty_date(epoch.day)}\n"]
        for shift in epoch.shifts:
            lines.append(
                f"{pretty_hour(shift.start)} - {pretty_hour(shift.end)} "
                f"({format_number(shift.duration_hours)} hours) - "
                f"{shift.display_name}\n"
            )
        return "".join(lines)

    def _format_support_hours(self, summary: ScheduleSummary) -> str:
        lines = [SUPPORT_HOURS_HEADING]
        for agent, hours in summary.ranked_agents():
            lines.append(f"{ping_handle(agent)}: {format_number(hours)}\n")
        return "".join(lines)

    def _format_agents_per_day(self, daily_agents: list[DailyHourHistogram]) -> str:
        columns = daily_agents
        if self.legacy_columns:
            if len(daily_agents) < LEGACY_TABLE_COLUMNS:
                raise LegacyLayoutError(
                    f"legacy table needs {LEGACY_TABLE_COLUMNS} epochs, "
                    f"schedule has {len(daily_agents)}"
                )
            columns = daily_agents[:LEGACY_TABLE_COLUMNS]

        # The header names every epoch, even when the legacy layout drops columns
        header = " " + "".join(
            TABLE_SEPARATOR + weekday_abbrev(histogram.day) for histogram in daily_agents
        )

        rows = []
        for bucket in range(HOUR_BUCKETS):
            values = "".join(
                TABLE_SEPARATOR + format_number(histogram.buckets[bucket])
                for histogram in columns
            )
            rows.append(f"\n{hour_label(bucket)}{values}")

        return header + "".join(rows)
