import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8082/api")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10")) if os.getenv("API_TIMEOUT", "10") else None

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ATTENDANCE_BACKEND = os.getenv("ATTENDANCE_BACKEND", "http")
REPORT_SOURCE = os.getenv("REPORT_SOURCE", "http")
DEFAULT_REPORT_DAYS = int(os.getenv("DEFAULT_REPORT_DAYS", "30"))
