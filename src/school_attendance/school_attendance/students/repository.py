from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student, StudentDraft


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note (DIP): the service depends on this interface, not on the HTTP client.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def create(self, draft: StudentDraft) -> None:
        raise NotImplementedError

    def update(self, student_id: int, draft: StudentDraft) -> None:
        raise NotImplementedError

    def delete(self, student_id: int) -> None:
        raise NotImplementedError
