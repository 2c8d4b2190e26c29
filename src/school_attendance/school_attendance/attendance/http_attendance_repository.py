from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..api.connection import ApiConnection
from ..api.http_base import api_request, fetch_list, optional_id
from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus
from .model import AttendanceEntry, AttendanceRecord
from .repository import AttendanceRepository


def entry_from_json(row: Dict[str, Any]) -> AttendanceEntry:
    # Dates may arrive as RFC 3339 timestamps; only the day matters here.
    return AttendanceEntry(
        student_id=int(row["student_id"]),
        class_id=optional_id(row.get("class_id")),
        work_date=parse_iso_date(str(row["date"])[:10]),
        status=AttendanceStatus(row["status"]),
        remarks=row.get("remarks") or "",
    )


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def save_day(self, *, class_id: int, work_date: date, records: Sequence[AttendanceRecord]) -> None:
        # the API decodes RFC 3339 timestamps, not bare dates
        day = f"{work_date.isoformat()}T00:00:00Z"
        payload = {
            "class_id": int(class_id),
            "date": day,
            "records": [
                {
                    "student_id": r.student_id,
                    "class_id": int(class_id),
                    "date": day,
                    "status": r.status.value,
                    "remarks": r.remarks,
                }
                for r in records
            ],
        }
        api_request(self._conn, "PUT", "/attendance", json=payload, expect_body=False)

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        class_id: Optional[int] = None,
    ) -> Sequence[AttendanceEntry]:
        params: Dict[str, Any] = {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()}
        if class_id:
            params["class_id"] = int(class_id)
        return fetch_list(self._conn, "/attendance", entry_from_json, params=params)
