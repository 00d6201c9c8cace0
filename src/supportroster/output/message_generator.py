"""Chat message asking scheduled agents to check their calendars."""

from pathlib import Path
from typing import Optional, Union

from supportroster.config import OPS_PING_HANDLE
from supportroster.domain.models import Schedule
from supportroster.domain.summary import ScheduleSummary, summarize_schedule
from supportroster.output.artifacts import write_artifact


class NotificationGenerator:
    """Generates the calendar-check message that pings every scheduled agent.

    Agents are listed in the same order as the roster's support hours.
    """

    def __init__(self, ops_handle: str = OPS_PING_HANDLE):
        self.ops_handle = ops_handle

    def generate(
        self,
        schedule: Schedule,
        output_path: Union[str, Path],
        summary: Optional[ScheduleSummary] = None,
    ) -> str:
        """Generate the message, save it to a file and return it."""
        content = self.generate_to_string(schedule, summary)
        write_artifact(output_path, content)
        return content

    def generate_to_string(
        self,
        schedule: Schedule,
        summary: Optional[ScheduleSummary] = None,
    ) -> str:
        if summary is None:
            summary = summarize_schedule(schedule)

        lines = [
            "**Agents, please check your calendars for the support schedule "
            f"for next week (starting on {schedule.start_date}).**\n\n",
            f"Please ping `{self.ops_handle}` if you require any changes.\n\n",
        ]
        for agent, _ in summary.ranked_agents():
            lines.append(f"{agent}\n")
        return "".join(lines)
