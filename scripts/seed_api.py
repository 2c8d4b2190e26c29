"""Populate the attendance API with demo classes and students.

Note: The API must already be running (see API_BASE_URL in config).
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.core.exceptions import ApiError, ValidationError

DEMO_CLASSES = [
    {"name": "Mathematics Advanced", "grade": "10", "section": "A", "teacher_name": "Dr. Sarah Johnson"},
    {"name": "Computer Science Fundamentals", "grade": "11", "section": "B", "teacher_name": "Prof. Michael Chen"},
    {"name": "Physics Laboratory", "grade": "12", "section": "C", "teacher_name": "Dr. Emily Rodriguez"},
]

DEMO_STUDENTS = [
    {"name": "Alice Johnson", "email": "alice.johnson@school.edu", "age": "16", "roll_no": "MA001"},
    {"name": "Bob Smith", "email": "bob.smith@school.edu", "age": "17", "roll_no": "CS002"},
    {"name": "Carol Davis", "email": "carol.davis@school.edu", "age": "16", "roll_no": "PH003"},
    {"name": "David Wilson", "email": "david.wilson@school.edu", "age": "18", "roll_no": "MA004"},
    {"name": "Emma Brown", "email": "emma.brown@school.edu", "age": "17", "roll_no": "CS005"},
    {"name": "Frank Miller", "email": "frank.miller@school.edu", "age": "16", "roll_no": "PH006"},
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_base_url=settings.API_BASE_URL, api_timeout=settings.API_TIMEOUT)

    failures = 0
    for fields in DEMO_CLASSES:
        try:
            container.class_service.save(**fields)
            print(f"OK: class {fields['name']}")
        except (ApiError, ValidationError) as e:
            failures += 1
            print(f"FAILED: class {fields['name']}: {e}")

    for fields in DEMO_STUDENTS:
        try:
            container.student_service.save(**fields)
            print(f"OK: student {fields['name']}")
        except (ApiError, ValidationError) as e:
            failures += 1
            print(f"FAILED: student {fields['name']}: {e}")

    if failures:
        raise SystemExit(f"{failures} demo records could not be created at {settings.API_BASE_URL}")


if __name__ == "__main__":
    main()
