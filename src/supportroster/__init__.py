"""Support Roster - readable rosters and ping lists from shift schedules."""

__version__ = "0.1.0"
