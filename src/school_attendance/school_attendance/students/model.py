from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    Note: A transient copy of what the API owns; no persistence code here.
    """

    student_id: int
    name: str
    email: str
    age: int
    class_id: Optional[int] = None
    roll_no: Optional[str] = None

    @property
    def initial(self) -> str:
        return self.name[:1].upper()

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name OR email."""
        if not query or not query.strip():
            return True
        needle = query.lower()
        return needle in self.name.lower() or needle in self.email.lower()


@dataclass(frozen=True)
class StudentDraft:
    """Validated form values ready to send on create/update."""

    name: str
    email: str
    age: int
    roll_no: Optional[str] = None
    class_id: Optional[int] = None

    def to_payload(self) -> dict:
        payload = {
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "roll_no": self.roll_no or "",
        }
        if self.class_id:
            payload["class_id"] = self.class_id
        return payload
