"""Schedule models and derived summaries."""

from supportroster.domain.models import (
    Epoch,
    Schedule,
    Shift,
    load_schedule,
    strip_contact,
)
from supportroster.domain.summary import (
    AgentHoursTally,
    DailyHourHistogram,
    ScheduleSummary,
    summarize_schedule,
)

__all__ = [
    # Models
    "Epoch",
    "Schedule",
    "Shift",
    "load_schedule",
    "strip_contact",
    # Summary
    "AgentHoursTally",
    "DailyHourHistogram",
    "ScheduleSummary",
    "summarize_schedule",
]
