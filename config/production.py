import os

LABEL_LOCALE = os.getenv("LABEL_LOCALE", "id")
SETTLEMENT_MODE = os.getenv("SETTLEMENT_MODE", "label_match")
DAILY_EPOCH = os.getenv("DAILY_EPOCH", "1970-01-01")

MONTHLY_SERIES_MONTHS = int(os.getenv("MONTHLY_SERIES_MONTHS", "6"))
OVERDUE_TOP_N = int(os.getenv("OVERDUE_TOP_N", "10"))

EXPORT_DIR = os.getenv("EXPORT_DIR", "/var/lib/kas-kelas/exports")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
