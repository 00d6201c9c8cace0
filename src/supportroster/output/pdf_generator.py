"""PDF generation for the support roster.

This module creates a printable version of the roster showing:
- Per-day shift timelines
- Support hours per agent
- Agents-per-hour coverage grid
"""

from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from supportroster.config import HOUR_BUCKETS, HOURS_PER_DAY
from supportroster.domain.models import Epoch, Schedule
from supportroster.domain.summary import ScheduleSummary, summarize_schedule
from supportroster.output.artifacts import write_artifact
from supportroster.output.formatting import (
    format_number,
    hour_label,
    ping_handle,
    pretty_date,
    pretty_hour,
    weekday_abbrev,
)

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    "shift": (0.4, 0.6, 0.8),  # Blue
    "off_shift": (0.95, 0.95, 0.95),  # Light gray
    "grid": (0.7, 0.7, 0.7),
}

# Support hours list layout
SUPPORT_LIST_OFFSET = 45  # Heading to first line
SUPPORT_ROW_HEIGHT = 14
SUPPORT_HANDLE_CHARS = 32  # Keeps handles clear of the grid


class PDFGenerator:
    """Generates a printable PDF roster.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate(schedule, "roster.pdf")
    """

    def __init__(
        self,
        page_width: float = 792,  # Letter landscape width (11")
        page_height: float = 612,  # Letter landscape height (8.5")
        margin: float = 36,  # 0.5 inch margins
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin

    def generate(
        self,
        schedule: Schedule,
        output_path: Union[str, Path],
        summary: Optional[ScheduleSummary] = None,
    ) -> None:
        """Generate the PDF roster and save it to a file.

        Args:
            schedule: The schedule to render.
            output_path: Path to save the PDF.
            summary: Precomputed summary of the schedule, if available.
        """
        buffer = self.generate_to_buffer(schedule, summary)
        write_artifact(output_path, buffer.getvalue())

    def generate_to_buffer(
        self,
        schedule: Schedule,
        summary: Optional[ScheduleSummary] = None,
    ) -> BytesIO:
        """Generate the PDF roster and return it as a bytes buffer."""
        try:
            from reportlab.lib.pagesizes import letter, landscape
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )

        if summary is None:
            summary = summarize_schedule(schedule)

        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=landscape(letter))

        for epoch in schedule.epochs:
            self._draw_epoch_page(c, epoch)
        self._draw_summary_page(c, summary)

        c.save()
        buffer.seek(0)
        return buffer

    def _draw_epoch_page(self, c, epoch: Epoch) -> None:
        """Draw one day's shifts as timeline rows."""
        c.setFont("Helvetica-Bold", 16)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 20,
            f"Shifts for {pretty_date(epoch.day)}",
        )
        c.setFont("Helvetica", 10)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 35,
            f"{len(epoch.shifts)} shifts, "
            f"{format_number(epoch.total_hours)} agent-hours",
        )

        row_height = 22
        timeline_left = self.margin + 200
        timeline_width = self.page_width - self.margin - timeline_left
        hour_width = timeline_width / HOURS_PER_DAY

        # Time axis
        axis_y = self.page_height - self.margin - 50
        c.setFont("Helvetica", 8)
        c.setStrokeColorRGB(*COLORS["grid"])
        for hour in range(0, HOURS_PER_DAY + 1, 2):
            x = timeline_left + hour * hour_width
            c.line(x, axis_y, x, axis_y - 5)
            c.drawCentredString(x, axis_y + 5, f"{hour:02d}")

        y = axis_y - 10
        for shift in epoch.shifts:
            y -= row_height
            if y < self.margin:
                c.showPage()
                y = self.page_height - self.margin - row_height

            c.setFillColorRGB(0, 0, 0)
            c.setFont("Helvetica", 9)
            c.drawString(self.margin, y + 6, shift.display_name[:30])
            c.setFont("Helvetica", 7)
            c.drawString(
                self.margin + 140,
                y + 6,
                f"{pretty_hour(shift.start)}-{pretty_hour(shift.end)}",
            )

            c.setFillColorRGB(*COLORS["off_shift"])
            c.rect(timeline_left, y, timeline_width, row_height - 4, fill=1, stroke=0)

            # Half-hour units map straight onto the 24-hour axis
            c.setFillColorRGB(*COLORS["shift"])
            start_x = timeline_left + shift.start * hour_width / 2
            c.rect(
                start_x,
                y,
                shift.unit_count * hour_width / 2,
                row_height - 4,
                fill=1,
                stroke=0,
            )

        c.showPage()

    @property
    def support_rows_per_page(self) -> int:
        """Support hours lines that fit between the heading and the bottom margin."""
        top = self.page_height - self.margin - SUPPORT_LIST_OFFSET
        return int((top - self.margin) // SUPPORT_ROW_HEIGHT) + 1

    def paginate_support_hours(
        self, ranked: list[tuple[str, float]]
    ) -> list[list[tuple[str, float]]]:
        """Split the ranked agent list into per-page chunks."""
        per_page = self.support_rows_per_page
        return [ranked[i : i + per_page] for i in range(0, len(ranked), per_page)] or [[]]

    def _draw_summary_page(self, c, summary: ScheduleSummary) -> None:
        """Draw the agents-per-day grid and the support hours list."""
        self._draw_agents_grid(c, summary)

        for page, entries in enumerate(self.paginate_support_hours(summary.ranked_agents())):
            if page > 0:
                c.showPage()
            heading = "Support hours" if page == 0 else "Support hours (continued)"
            c.setFillColorRGB(0, 0, 0)
            c.setFont("Helvetica-Bold", 16)
            c.drawString(self.margin, self.page_height - self.margin - 20, heading)

            y = self.page_height - self.margin - SUPPORT_LIST_OFFSET
            c.setFont("Helvetica", 10)
            for agent, hours in entries:
                handle = ping_handle(agent)[:SUPPORT_HANDLE_CHARS]
                c.drawString(self.margin + 20, y, f"{handle}: {format_number(hours)}")
                y -= SUPPORT_ROW_HEIGHT

        c.showPage()

    def _draw_agents_grid(self, c, summary: ScheduleSummary) -> None:
        """Draw the agents-per-day grid, right of the support hours list."""
        grid_left = self.margin + 260
        col_width = 60
        row_height = 17
        top = self.page_height - self.margin - 20

        def column_x(col: int) -> float:
            return grid_left + 40 + col * col_width + col_width / 2

        c.setFont("Helvetica-Bold", 12)
        c.drawString(grid_left, top, "Agents per day")

        top -= 25
        c.setFont("Helvetica-Bold", 9)
        for col, histogram in enumerate(summary.daily_agents):
            c.drawCentredString(column_x(col), top, weekday_abbrev(histogram.day))

        c.setFont("Helvetica", 8)
        for bucket in range(HOUR_BUCKETS):
            row_y = top - (bucket + 1) * row_height
            c.drawRightString(grid_left + 30, row_y, hour_label(bucket))
            for col, histogram in enumerate(summary.daily_agents):
                c.drawCentredString(
                    column_x(col), row_y, format_number(histogram.buckets[bucket])
                )

        row_y = top - (HOUR_BUCKETS + 1) * row_height
        c.setFont("Helvetica-Bold", 8)
        c.drawRightString(grid_left + 30, row_y, "Peak")
        for col, histogram in enumerate(summary.daily_agents):
            c.drawCentredString(column_x(col), row_y, format_number(histogram.peak))
