from __future__ import annotations

import logging
import random
from datetime import date
from typing import Optional, Sequence

from ..attendance.sheet import build_roster
from ..classes.model import SchoolClass
from ..classes.repository import ClassRepository
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from .model import ClassSummary, ReportData, StudentReport
from .sources.base import StatisticsSource
from .statistics import average_percentage, summarize

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(
        self,
        students: StudentRepository,
        classes: ClassRepository,
        source: StatisticsSource,
    ):
        self._students = students
        self._classes = classes
        self._source = source

    def list_classes(self) -> Sequence[SchoolClass]:
        return list(self._classes.list_all())

    def build_report(
        self,
        *,
        start: date,
        end: date,
        class_id: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> ReportData:
        if end < start:
            raise ValidationError("End date must not be before start date", {"end": "before start"})

        if seed is None:
            seed = random.randrange(1, 2**31)

        students = build_roster(self._students.list_all(), class_id)
        classes = list(self._classes.list_all())
        stats = self._source.stats_for(students, start=start, end=end, class_id=class_id, seed=seed)

        rows = [StudentReport(student=s, stats=stats[s.student_id]) for s in students if s.student_id in stats]
        logger.info("Report %s..%s class=%s: %d students", start, end, class_id, len(rows))

        return ReportData(
            start=start,
            end=end,
            class_id=class_id,
            seed=seed,
            rows=rows,
            summary=summarize(rows),
            class_summaries=self.class_summaries(classes, rows),
        )

    @staticmethod
    def class_summaries(classes: Sequence[SchoolClass], rows: Sequence[StudentReport]) -> list[ClassSummary]:
        out: list[ClassSummary] = []
        for c in classes:
            members = [r for r in rows if r.student.class_id == c.class_id]
            out.append(
                ClassSummary(
                    school_class=c,
                    student_count=len(members),
                    average_attendance=average_percentage(members) if members else None,
                )
            )
        return out
