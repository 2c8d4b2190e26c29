from __future__ import annotations

from typing import Any, Dict, Sequence

from ..api.connection import ApiConnection
from ..api.http_base import api_request, fetch_list, optional_id, optional_str
from .model import Student, StudentDraft
from .repository import StudentRepository


def student_from_json(row: Dict[str, Any]) -> Student:
    return Student(
        student_id=int(row["id"]),
        name=row.get("name") or "",
        email=row.get("email") or "",
        age=int(row.get("age") or 0),
        class_id=optional_id(row.get("class_id")),
        roll_no=optional_str(row.get("roll_no")),
    )


class HttpStudentRepository(StudentRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self) -> Sequence[Student]:
        return fetch_list(self._conn, "/students", student_from_json)

    def create(self, draft: StudentDraft) -> None:
        api_request(self._conn, "POST", "/students", json=draft.to_payload(), expect_body=False)

    def update(self, student_id: int, draft: StudentDraft) -> None:
        api_request(self._conn, "PUT", f"/students/{int(student_id)}", json=draft.to_payload(), expect_body=False)

    def delete(self, student_id: int) -> None:
        api_request(self._conn, "DELETE", f"/students/{int(student_id)}", expect_body=False)
