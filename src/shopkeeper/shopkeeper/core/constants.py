"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Payroll normalization: every month pays over 30 days of 9 working hours.
PAYABLE_DAYS_PER_MONTH = 30
WORKING_HOURS_PER_DAY = 9

# Store collection keys (same names as the browser storage of the first version).
EMPLOYEES_KEY = "shopkeeper_employees"
ATTENDANCE_KEY = "shopkeeper_attendance"

# Overtime input nudging for the HTTP layer.
MAX_OVERTIME_HOURS = 12
OVERTIME_STEP_HOURS = 0.5

DEFAULT_ASSISTANT_MODEL = "gemini-2.5-flash"
DEFAULT_ASSISTANT_TIMEOUT_SECONDS = 30
