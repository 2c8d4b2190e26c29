from __future__ import annotations

from typing import Protocol, Sequence

from .model import ClassDraft, SchoolClass


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[SchoolClass]:
        raise NotImplementedError

    def create(self, draft: ClassDraft) -> None:
        raise NotImplementedError

    def update(self, class_id: int, draft: ClassDraft) -> None:
        raise NotImplementedError

    def delete(self, class_id: int) -> None:
        raise NotImplementedError
