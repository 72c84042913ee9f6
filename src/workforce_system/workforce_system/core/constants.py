"""Defaults shared by the engine, the services and the settings loader."""

DEFAULT_BATCH_NAME = "Full Time"
DEFAULT_WORK_START = "09:00"
DEFAULT_WORK_END = "19:00"
DEFAULT_LUNCH_FROM = "12:00"
DEFAULT_LUNCH_TO = "13:00"

DEFAULT_PERMISSION_MINUTES = 15
DEFAULT_DEDUCTION_PER_BREAK = 10

DEFAULT_REQUIRED_HOURS = 8
DEFAULT_HOLIDAY_NAME = "Public Holiday"
DEFAULT_ADVANCE_DESCRIPTION = "Advance Voucher"
DEFAULT_DEDUCTION_DESCRIPTION = "Partial deduction"

CURRENCY_SYMBOL = "₹"

MIN_REPORT_YEAR = 2020
MAX_REPORT_YEAR = 2100
