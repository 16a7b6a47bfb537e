import os

# Locale used for period labels ("Januari 2026"); stored payments depend on it
LABEL_LOCALE = os.getenv("LABEL_LOCALE", "id")

# label_match (observed behaviour) or advance_coverage
SETTLEMENT_MODE = os.getenv("SETTLEMENT_MODE", "label_match")

# Epoch for "every N days" cadences without their own anchor date
DAILY_EPOCH = os.getenv("DAILY_EPOCH", "1970-01-01")

MONTHLY_SERIES_MONTHS = int(os.getenv("MONTHLY_SERIES_MONTHS", "6"))
OVERDUE_TOP_N = int(os.getenv("OVERDUE_TOP_N", "10"))

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
