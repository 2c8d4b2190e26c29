from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.school_attendance.school_attendance.attendance.model import AttendanceEntry
from src.school_attendance.school_attendance.classes.model import ClassDraft, SchoolClass
from src.school_attendance.school_attendance.container import build_services
from src.school_attendance.school_attendance.core.exceptions import ApiTransportError
from src.school_attendance.school_attendance.students.model import Student, StudentDraft


class InMemoryStudents:
    def __init__(self, students=None):
        self.students: list[Student] = list(students or [])
        self.calls: list[tuple] = []
        self.fail = False
        self._next_id = max([s.student_id for s in self.students], default=0) + 1

    def _check(self):
        if self.fail:
            raise ApiTransportError("Could not reach the attendance API")

    def list_all(self):
        self.calls.append(("list",))
        self._check()
        return list(self.students)

    def create(self, draft: StudentDraft) -> None:
        self.calls.append(("create", draft))
        self._check()
        self.students.append(
            Student(
                student_id=self._next_id,
                name=draft.name,
                email=draft.email,
                age=draft.age,
                class_id=draft.class_id,
                roll_no=draft.roll_no,
            )
        )
        self._next_id += 1

    def update(self, student_id: int, draft: StudentDraft) -> None:
        self.calls.append(("update", student_id, draft))
        self._check()
        self.students = [
            Student(student_id, draft.name, draft.email, draft.age, draft.class_id, draft.roll_no)
            if s.student_id == student_id
            else s
            for s in self.students
        ]

    def delete(self, student_id: int) -> None:
        self.calls.append(("delete", student_id))
        self._check()
        self.students = [s for s in self.students if s.student_id != student_id]

    def mutations(self) -> list[tuple]:
        return [c for c in self.calls if c[0] != "list"]


class InMemoryClasses:
    def __init__(self, classes=None):
        self.classes: list[SchoolClass] = list(classes or [])
        self.calls: list[tuple] = []
        self.fail = False
        self._next_id = max([c.class_id for c in self.classes], default=0) + 1

    def _check(self):
        if self.fail:
            raise ApiTransportError("Could not reach the attendance API")

    def list_all(self):
        self.calls.append(("list",))
        self._check()
        return list(self.classes)

    def create(self, draft: ClassDraft) -> None:
        self.calls.append(("create", draft))
        self._check()
        self.classes.append(SchoolClass(self._next_id, draft.name, draft.grade, draft.section, draft.teacher_name))
        self._next_id += 1

    def update(self, class_id: int, draft: ClassDraft) -> None:
        self.calls.append(("update", class_id, draft))
        self._check()
        self.classes = [
            SchoolClass(class_id, draft.name, draft.grade, draft.section, draft.teacher_name) if c.class_id == class_id else c
            for c in self.classes
        ]

    def delete(self, class_id: int) -> None:
        self.calls.append(("delete", class_id))
        self._check()
        self.classes = [c for c in self.classes if c.class_id != class_id]

    def mutations(self) -> list[tuple]:
        return [c for c in self.calls if c[0] != "list"]


class InMemoryAttendance:
    """Upserts by (student, class, date) like the real endpoint."""

    def __init__(self):
        self.entries: dict[tuple[int, int, date], AttendanceEntry] = {}
        self.saves: list[dict] = []
        self.fail = False

    def save_day(self, *, class_id, work_date, records) -> None:
        if self.fail:
            raise ApiTransportError("Could not reach the attendance API")
        self.saves.append({"class_id": class_id, "work_date": work_date, "records": list(records)})
        for r in records:
            self.entries[(r.student_id, class_id, work_date)] = AttendanceEntry(
                student_id=r.student_id,
                class_id=class_id,
                work_date=work_date,
                status=r.status,
                remarks=r.remarks,
            )

    def list_range(self, *, start_date, end_date, class_id: Optional[int] = None):
        return [
            e
            for e in self.entries.values()
            if start_date <= e.work_date <= end_date and (class_id is None or e.class_id == class_id)
        ]


@pytest.fixture
def sample_classes():
    return [
        SchoolClass(1, "Mathematics Advanced", "10", "A", "Dr. Sarah Johnson"),
        SchoolClass(2, "Physics Laboratory", "12", "C", "Dr. Emily Rodriguez"),
    ]


@pytest.fixture
def sample_students():
    return [
        Student(1, "Alice Johnson", "alice@school.edu", 16, class_id=1, roll_no="MA001"),
        Student(2, "Bob Smith", "bob@school.edu", 17, class_id=2, roll_no="PH002"),
        Student(3, "Carol Davis", "carol@example.org", 16, class_id=None),
    ]


@pytest.fixture
def students_repo(sample_students):
    return InMemoryStudents(sample_students)


@pytest.fixture
def classes_repo(sample_classes):
    return InMemoryClasses(sample_classes)


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def container(students_repo, classes_repo, attendance_repo):
    return build_services(students_repo=students_repo, classes_repo=classes_repo, attendance_repo=attendance_repo)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.school_attendance.school_attendance.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
