"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"

# Work-log status meaning the worker did not show up that day.
ABSENCE_STATUS = "Falta"
# Value placed in a payroll day instead of an amount when the worker was absent.
ABSENCE_MARKER = "FALTA"

DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 6
