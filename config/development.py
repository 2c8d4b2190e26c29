import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# External attendance API (students, classes, attendance)
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8082/api")
# Seconds; empty means wait forever
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10")) if os.getenv("API_TIMEOUT", "10") else None

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "simulated" keeps saves in the log only; "http" uses PUT/GET /attendance
ATTENDANCE_BACKEND = os.getenv("ATTENDANCE_BACKEND", "simulated")
# "random" for demo statistics; "http" counts saved attendance
REPORT_SOURCE = os.getenv("REPORT_SOURCE", "random")
DEFAULT_REPORT_DAYS = int(os.getenv("DEFAULT_REPORT_DAYS", "30"))
