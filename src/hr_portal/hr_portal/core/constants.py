"""Constants and defaults.

Note: shared numeric defaults and fixed labels.
"""

ASSISTANT_ATTENDANCE_LIMIT = 5
ASSISTANT_SALARY_LIMIT = 2
AUDIT_LOG_PAGE_SIZE = 100

DEFAULT_ANNUAL_LEAVE = 15
DEFAULT_SICK_LEAVE = 10

DEFAULT_POINTS_FOR_PUNCTUALITY = 10
DEFAULT_POINTS_FOR_PERFECT_WEEK = 50

DEFAULT_TEAM = "Unassigned"
UNKNOWN_EMPLOYEE_NAME = "Unknown"

EMPLOYEE_CSV_HEADER = ("ID", "Name", "Email", "Role", "Team", "Join Date")
