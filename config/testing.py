import os

LABEL_LOCALE = "id"
SETTLEMENT_MODE = os.getenv("SETTLEMENT_MODE", "label_match")
DAILY_EPOCH = "1970-01-01"

MONTHLY_SERIES_MONTHS = 6
OVERDUE_TOP_N = 10

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"
