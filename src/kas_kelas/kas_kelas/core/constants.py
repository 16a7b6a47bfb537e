"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

DEFAULT_DAILY_EPOCH = date(1970, 1, 1)
DEFAULT_SERIES_MONTHS = 6
DEFAULT_OVERDUE_TOP_N = 10
DEFAULT_LABEL_OPTION_MONTHS = 6
SEMESTER_SPLIT_MONTH = 7

KAS_CATEGORY = "Kas Kelas"
