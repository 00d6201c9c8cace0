"""Per-agent hour totals and per-day coverage histograms.

Both are derived from a schedule in a single pass and returned together in a
ScheduleSummary, so nothing accumulates between runs.
"""

import logging
from dataclasses import dataclass, field
from datetime import date

from supportroster.config import HOUR_BUCKETS, HOURS_PER_UNIT, UNITS_PER_HOUR
from supportroster.domain.models import Epoch, Schedule

logger = logging.getLogger(__name__)


@dataclass
class AgentHoursTally:
    """Total scheduled hours per agent display name.

    Agents are kept in order of first appearance.
    """

    hours: dict[str, float] = field(default_factory=dict)

    def add(self, agent: str, hours: float) -> None:
        self.hours[agent] = self.hours.get(agent, 0) + hours

    def ranked(self) -> list[tuple[str, float]]:
        """Agents ordered by descending hours.

        Sorts ascending (stable) and reverses the result, so agents with
        equal hours come out in reverse order of first appearance. Published
        rosters rely on this ordering.
        """
        ascending = sorted(self.hours.items(), key=lambda item: item[1])
        return list(reversed(ascending))

    @property
    def total_hours(self) -> float:
        return sum(self.hours.values())

    def __len__(self) -> int:
        return len(self.hours)


@dataclass
class DailyHourHistogram:
    """Fractional agent count per hour bucket for one epoch.

    Attributes:
        day: Calendar date of the epoch.
        buckets: Agent count per hour; indices past 23 hold overflow.
    """

    day: date
    buckets: list[float] = field(default_factory=lambda: [0] * HOUR_BUCKETS)

    def add_unit(self, unit: int) -> None:
        """Count one half-hour unit of coverage in its hour bucket."""
        bucket = unit // UNITS_PER_HOUR
        if bucket >= len(self.buckets):
            logger.debug("Dropping coverage past bucket %d on %s", bucket, self.day)
            return
        self.buckets[bucket] += HOURS_PER_UNIT

    @property
    def total(self) -> float:
        return sum(self.buckets)

    @property
    def peak(self) -> float:
        return max(self.buckets)

    @classmethod
    def for_epoch(cls, epoch: Epoch) -> "DailyHourHistogram":
        histogram = cls(day=epoch.day)
        for shift in epoch.shifts:
            for unit in shift.units():
                histogram.add_unit(unit)
        return histogram


@dataclass
class ScheduleSummary:
    """Hour tally and daily histograms for one schedule."""

    agent_hours: AgentHoursTally = field(default_factory=AgentHoursTally)
    daily_agents: list[DailyHourHistogram] = field(default_factory=list)

    def ranked_agents(self) -> list[tuple[str, float]]:
        return self.agent_hours.ranked()


def summarize_schedule(schedule: Schedule) -> ScheduleSummary:
    """Tally agent hours and build one coverage histogram per epoch."""
    summary = ScheduleSummary()

    for epoch in schedule.epochs:
        for shift in epoch.shifts:
            summary.agent_hours.add(shift.display_name, shift.duration_hours)
        summary.daily_agents.append(DailyHourHistogram.for_epoch(epoch))

    logger.debug(
        "Summarized %d agents, %s agent-hours over %d epochs",
        len(summary.agent_hours),
        summary.agent_hours.total_hours,
        len(summary.daily_agents),
    )
    return summary
