"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_API_BASE_URL = "http://localhost:8082/api"
DEFAULT_REPORT_DAYS = 30

STUDENT_MIN_AGE = 5
STUDENT_MAX_AGE = 25

GRADES = tuple(str(g) for g in range(1, 13))
SECTIONS = ("A", "B", "C", "D")

EXCELLENT_THRESHOLD = 90
GOOD_THRESHOLD = 75
AVERAGE_THRESHOLD = 60
AT_RISK_THRESHOLD = 75

REPORT_CSV_HEADER = ["Name", "Email", "Roll No", "Total Days", "Present", "Absent", "Late", "Attendance %"]
