from __future__ import annotations

from typing import Any, Dict, Sequence

from ..api.connection import ApiConnection
from ..api.http_base import api_request, fetch_list
from .model import ClassDraft, SchoolClass
from .repository import ClassRepository


def class_from_json(row: Dict[str, Any]) -> SchoolClass:
    return SchoolClass(
        class_id=int(row["id"]),
        name=row.get("name") or "",
        grade=str(row.get("grade") or ""),
        section=row.get("section") or "",
        teacher_name=row.get("teacher_name") or "",
    )


class HttpClassRepository(ClassRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self) -> Sequence[SchoolClass]:
        return fetch_list(self._conn, "/classes", class_from_json)

    def create(self, draft: ClassDraft) -> None:
        api_request(self._conn, "POST", "/classes", json=draft.to_payload(), expect_body=False)

    def update(self, class_id: int, draft: ClassDraft) -> None:
        api_request(self._conn, "PUT", f"/classes/{int(class_id)}", json=draft.to_payload(), expect_body=False)

    def delete(self, class_id: int) -> None:
        api_request(self._conn, "DELETE", f"/classes/{int(class_id)}", expect_body=False)
