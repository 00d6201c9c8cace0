"""Output generation for schedules (roster text, chat message, PDF)."""

from supportroster.output.message_generator import NotificationGenerator
from supportroster.output.pdf_generator import PDFGenerator
from supportroster.output.roster_generator import RosterGenerator

__all__ = [
    "NotificationGenerator",
    "PDFGenerator",
    "RosterGenerator",
]
