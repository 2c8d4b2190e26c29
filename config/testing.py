SECRET_KEY = "test-secret"

API_BASE_URL = "http://api.test/api"
API_TIMEOUT = 1.0

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ATTENDANCE_BACKEND = "simulated"
REPORT_SOURCE = "random"
DEFAULT_REPORT_DAYS = 30
