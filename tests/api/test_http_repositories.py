from __future__ import annotations

import json as jsonlib
from datetime import date

import pytest
import requests

from src.school_attendance.school_attendance.api.connection import ApiConfig, ApiConnection
from src.school_attendance.school_attendance.attendance.http_attendance_repository import HttpAttendanceRepository
from src.school_attendance.school_attendance.attendance.model import AttendanceRecord
from src.school_attendance.school_attendance.classes.http_class_repository import HttpClassRepository
from src.school_attendance.school_attendance.classes.model import ClassDraft
from src.school_attendance.school_attendance.core.enums import AttendanceStatus
from src.school_attendance.school_attendance.core.exceptions import ApiStatusError, ApiTransportError
from src.school_attendance.school_attendance.students.http_student_repository import HttpStudentRepository
from src.school_attendance.school_attendance.students.model import StudentDraft

BASE = "http://api.test/api"


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        if text is None:
            text = "" if body is None else jsonlib.dumps(body)
        self.text = text
        self.content = text.encode("utf-8")

    def json(self):
        return jsonlib.loads(self.text)


class FakeSession:
    """Records every request and answers from a queue of responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[dict] = []
        self.error: Exception | None = None

    def request(self, method, url, json=None, params=None, timeout=None):
        self.requests.append({"method": method, "url": url, "json": json, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else FakeResponse(200)


def _conn(session, timeout=5.0):
    return ApiConnection(ApiConfig(base_url=BASE, timeout=timeout), session=session)


def test_list_students_maps_wire_fields():
    session = FakeSession(
        FakeResponse(
            body=[
                {"id": 1, "name": "Alice", "email": "a@school.edu", "age": 16, "class_id": 2, "roll_no": "MA001"},
                {"id": 2, "name": "Bob", "email": "b@school.edu", "age": 17, "class_id": 0, "roll_no": ""},
            ]
        )
    )

    students = HttpStudentRepository(_conn(session)).list_all()

    assert session.requests[0]["method"] == "GET"
    assert session.requests[0]["url"] == f"{BASE}/students"
    assert session.requests[0]["timeout"] == 5.0
    assert (students[0].class_id, students[0].roll_no) == (2, "MA001")
    assert (students[1].class_id, students[1].roll_no) == (None, None)


def test_null_list_body_is_empty():
    session = FakeSession(FakeResponse(text="null"))

    assert HttpClassRepository(_conn(session)).list_all() == []


def test_student_mutations_use_rest_verbs():
    session = FakeSession()
    repo = HttpStudentRepository(_conn(session))
    draft = StudentDraft(name="Alice", email="a@school.edu", age=16, roll_no=None, class_id=3)

    repo.create(draft)
    repo.update(7, draft)
    repo.delete(7)

    assert [(r["method"], r["url"]) for r in session.requests] == [
        ("POST", f"{BASE}/students"),
        ("PUT", f"{BASE}/students/7"),
        ("DELETE", f"{BASE}/students/7"),
    ]
    assert session.requests[0]["json"] == {
        "name": "Alice",
        "email": "a@school.edu",
        "age": 16,
        "roll_no": "",
        "class_id": 3,
    }


def test_class_payload_keeps_grade_as_text():
    session = FakeSession()

    HttpClassRepository(_conn(session)).create(ClassDraft(name="Maths", grade="10", section="A", teacher_name="Dr. Lee"))

    assert session.requests[0]["json"] == {"name": "Maths", "grade": "10", "section": "A", "teacher_name": "Dr. Lee"}


def test_non_2xx_raises_status_error():
    session = FakeSession(FakeResponse(status_code=500, text='{"error": "boom"}'))

    with pytest.raises(ApiStatusError) as exc:
        HttpStudentRepository(_conn(session)).delete(1)

    assert exc.value.status_code == 500


def test_mutation_success_with_plain_text_body():
    session = FakeSession(FakeResponse(status_code=200, text="Deleted"), FakeResponse(status_code=201, text="Created"))
    repo = HttpStudentRepository(_conn(session))

    repo.delete(1)
    repo.create(StudentDraft(name="Alice", email="a@school.edu", age=16))

    assert [r["method"] for r in session.requests] == ["DELETE", "POST"]


@pytest.mark.parametrize(
    "body",
    [
        {"id": 1, "name": "Alice"},
        [{"name": "no id", "email": "x@school.edu", "age": 16}],
        [{"id": 1, "name": "Alice", "email": "a@school.edu", "age": "sixteen"}],
        ["not an object"],
    ],
)
def test_unreadable_student_list_raises_status_error(body):
    session = FakeSession(FakeResponse(body=body))

    with pytest.raises(ApiStatusError) as exc:
        HttpStudentRepository(_conn(session)).list_all()

    assert exc.value.status_code == 200


def test_unknown_attendance_status_raises_status_error():
    session = FakeSession(
        FakeResponse(body=[{"student_id": 1, "class_id": 4, "date": "2026-03-02", "status": "present"}])
    )

    with pytest.raises(ApiStatusError):
        HttpAttendanceRepository(_conn(session)).list_range(start_date=date(2026, 3, 2), end_date=date(2026, 3, 2))


def test_unreachable_api_raises_transport_error():
    session = FakeSession()
    session.error = requests.ConnectionError("refused")

    with pytest.raises(ApiTransportError):
        HttpClassRepository(_conn(session)).list_all()


def test_save_day_puts_one_record_per_student():
    session = FakeSession()
    repo = HttpAttendanceRepository(_conn(session))

    repo.save_day(
        class_id=4,
        work_date=date(2026, 3, 2),
        records=[AttendanceRecord(1), AttendanceRecord(2, AttendanceStatus.LATE, "bus")],
    )

    [req] = session.requests
    assert (req["method"], req["url"]) == ("PUT", f"{BASE}/attendance")
    assert req["json"]["class_id"] == 4
    assert req["json"]["date"] == "2026-03-02T00:00:00Z"
    assert req["json"]["records"][1] == {
        "student_id": 2,
        "class_id": 4,
        "date": "2026-03-02T00:00:00Z",
        "status": "Late",
        "remarks": "bus",
    }


def test_list_range_sends_window_and_parses_timestamps():
    session = FakeSession(
        FakeResponse(
            body=[
                {"student_id": 1, "class_id": 4, "date": "2026-03-02T00:00:00Z", "status": "Absent", "remarks": ""},
            ]
        )
    )

    entries = HttpAttendanceRepository(_conn(session)).list_range(
        start_date=date(2026, 3, 1), end_date=date(2026, 3, 2), class_id=4
    )

    assert session.requests[0]["params"] == {"start_date": "2026-03-01", "end_date": "2026-03-02", "class_id": 4}
    assert entries[0].work_date == date(2026, 3, 2)
    assert entries[0].status == AttendanceStatus.ABSENT


def test_base_url_trailing_slash_is_ignored():
    conn = ApiConnection(ApiConfig(base_url=BASE + "/"), session=FakeSession())

    assert conn.url("/students") == f"{BASE}/students"


@pytest.fixture
def http_attendance_client(monkeypatch, students_repo, classes_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.school_attendance.school_attendance.container import build_services
    from src.school_attendance.school_attendance.main import create_app

    session = FakeSession(FakeResponse(body=[{"student_id": 1, "class_id": 1, "date": "2026-03-02", "status": "present"}]))
    container = build_services(
        students_repo=students_repo,
        classes_repo=classes_repo,
        attendance_repo=HttpAttendanceRepository(_conn(session)),
    )
    return create_app(container).test_client()


def test_bad_attendance_rows_do_not_break_the_page(http_attendance_client):
    resp = http_attendance_client.get("/attendance?class_id=1&date=2026-03-02")

    assert resp.status_code == 200
    assert "The attendance API sent an unreadable response (GET /attendance)" in resp.get_data(as_text=True)
