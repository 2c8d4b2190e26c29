from __future__ import annotations

import csv
import io
from datetime import date
from typing import Sequence

from ..core.constants import REPORT_CSV_HEADER
from .model import StudentReport


def report_filename(start: date, end: date) -> str:
    return f"attendance-report-{start.isoformat()}-to-{end.isoformat()}.csv"


def rows_to_csv(rows: Sequence[StudentReport]) -> str:
    """Serialize report rows; header first, then one line per student."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(REPORT_CSV_HEADER)
    for r in rows:
        writer.writerow(
            [
                r.student.name,
                r.student.email,
                r.student.roll_no or "",
                r.stats.total_days,
                r.stats.present_days,
                r.stats.absent_days,
                r.stats.late_days,
                f"{r.stats.attendance_percentage}%",
            ]
        )
    return out.getvalue()
