from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SchoolClass:
    """Domain entity: a class (grade + section) with its teacher."""

    class_id: int
    name: str
    grade: str
    section: str
    teacher_name: str

    @property
    def label(self) -> str:
        return f"Grade {self.grade} - Section {self.section}"


@dataclass(frozen=True)
class ClassDraft:
    name: str
    grade: str
    section: str
    teacher_name: str

    def to_payload(self) -> dict:
        return {
            "name": self.name,
            "grade": self.grade,
            "section": self.section,
            "teacher_name": self.teacher_name,
        }
