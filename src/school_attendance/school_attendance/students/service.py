from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.validators import optional_int, require_email, require_int_in_range, require_non_empty, validate_all
from ..core.constants import STUDENT_MAX_AGE, STUDENT_MIN_AGE
from ..core.exceptions import ValidationError
from .model import Student, StudentDraft
from .repository import StudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentListing:
    """What the directory screen shows: the full list and the filtered subset."""

    students: Sequence[Student]
    visible: Sequence[Student]
    query: str


def filter_students(students: Sequence[Student], query: str) -> list[Student]:
    return [s for s in students if s.matches(query)]


class StudentService:
    """Use cases of the Student Directory screen."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def listing(self, query: str = "") -> StudentListing:
        students = list(self._students.list_all())
        query = query or ""
        return StudentListing(students=students, visible=filter_students(students, query), query=query)

    def get(self, student_id: int) -> Optional[Student]:
        for s in self._students.list_all():
            if s.student_id == int(student_id):
                return s
        return None

    def build_draft(
        self,
        *,
        name: Optional[str],
        email: Optional[str],
        age: Optional[str],
        roll_no: Optional[str] = None,
        class_id: Optional[str] = None,
    ) -> StudentDraft:
        values = validate_all(
            {
                "name": lambda: require_non_empty(name, "name"),
                "email": lambda: require_email(email, "email"),
                "age": lambda: require_int_in_range(age, "age", STUDENT_MIN_AGE, STUDENT_MAX_AGE),
            }
        )
        return StudentDraft(
            name=values["name"],
            email=values["email"],
            age=values["age"],
            roll_no=(roll_no or "").strip() or None,
            class_id=optional_int(class_id),
        )

    def save(self, *, student_id: Optional[int] = None, **fields) -> StudentDraft:
        """Create when student_id is None, otherwise update. Exactly one request is sent."""
        draft = self.build_draft(**fields)
        if student_id is None:
            self._students.create(draft)
            logger.info("Created student %s", draft.email)
        else:
            if int(student_id) <= 0:
                raise ValidationError("Student does not exist")
            self._students.update(int(student_id), draft)
            logger.info("Updated student %s", student_id)
        return draft

    def delete(self, student_id: int) -> None:
        if int(student_id) <= 0:
            raise ValidationError("Student does not exist")
        self._students.delete(int(student_id))
        logger.info("Deleted student %s", student_id)
