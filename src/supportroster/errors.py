"""Exceptions raised while loading schedules and writing artifacts."""


class RosterError(Exception):
    """Base class for all roster formatting errors."""


class ScheduleLoadError(RosterError):
    """The schedule file could not be read or is not valid JSON."""


class OutputWriteError(RosterError, OSError):
    """An output artifact could not be written."""


class LegacyLayoutError(RosterError, ValueError):
    """The fixed five-column table was requested for fewer than five epochs."""
