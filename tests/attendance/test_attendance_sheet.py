from __future__ import annotations

from datetime import date

from src.school_attendance.school_attendance.attendance.model import AttendanceEntry
from src.school_attendance.school_attendance.attendance.sheet import AttendanceSheet, build_roster
from src.school_attendance.school_attendance.core.enums import AttendanceStatus

DAY = date(2026, 3, 2)


def test_new_sheet_has_one_present_record_per_student(sample_students):
    sheet = AttendanceSheet(roster=sample_students, work_date=DAY, class_id=1)

    assert len(sheet.records) == len(sample_students)
    assert {r.student_id for r in sheet.records} == {s.student_id for s in sample_students}
    assert all(r.status == AttendanceStatus.PRESENT for r in sheet.records)
    assert all(r.remarks == "" for r in sheet.records)


def test_empty_roster_gives_empty_summary():
    sheet = AttendanceSheet(roster=[], work_date=DAY)

    assert sheet.records == []
    s = sheet.summary()
    assert (s.total, s.present, s.absent, s.late) == (0, 0, 0, 0)


def test_mark_all_overwrites_status_and_keeps_remarks(sample_students):
    sheet = AttendanceSheet(roster=sample_students, work_date=DAY)
    sheet.set_status(1, AttendanceStatus.LATE)
    sheet.set_remarks(2, "bus delay")

    sheet.mark_all(AttendanceStatus.ABSENT)

    assert all(r.status == AttendanceStatus.ABSENT for r in sheet.records)
    assert sheet.record(2).remarks == "bus delay"

    sheet.mark_all(AttendanceStatus.PRESENT)
    assert all(r.status == AttendanceStatus.PRESENT for r in sheet.records)
    assert sheet.record(2).remarks == "bus delay"


def test_summary_counts_add_up_to_total(sample_students):
    sheet = AttendanceSheet(roster=sample_students, work_date=DAY)
    sheet.set_status(1, AttendanceStatus.ABSENT)
    sheet.set_status(2, AttendanceStatus.LATE)

    s = sheet.summary()

    assert (s.total, s.present, s.absent, s.late) == (3, 1, 1, 1)
    assert s.present + s.absent + s.late == s.total


def test_unknown_student_is_ignored(sample_students):
    sheet = AttendanceSheet(roster=sample_students, work_date=DAY)

    sheet.set_status(99, AttendanceStatus.ABSENT)

    assert len(sheet.records) == 3
    assert sheet.summary().present == 3


def test_apply_draft_restores_posted_values_and_skips_bad_ones(sample_students):
    sheet = AttendanceSheet(roster=sample_students, work_date=DAY)

    sheet.apply_draft(
        {
            "status-1": "Late",
            "remarks-1": "  overslept ",
            "status-2": "Sleeping",
            "status-99": "Absent",
        }
    )

    assert sheet.record(1).status == AttendanceStatus.LATE
    assert sheet.record(1).remarks == "overslept"
    assert sheet.record(2).status == AttendanceStatus.PRESENT
    assert len(sheet.records) == 3


def test_apply_entries_prefills_only_the_sheet_day(sample_students):
    sheet = AttendanceSheet(roster=sample_students, work_date=DAY, class_id=1)

    sheet.apply_entries(
        [
            AttendanceEntry(student_id=1, class_id=1, work_date=DAY, status=AttendanceStatus.ABSENT, remarks="sick"),
            AttendanceEntry(student_id=3, class_id=1, work_date=date(2026, 3, 1), status=AttendanceStatus.LATE),
        ]
    )

    assert sheet.record(1).status == AttendanceStatus.ABSENT
    assert sheet.record(1).remarks == "sick"
    assert sheet.record(3).status == AttendanceStatus.PRESENT


def test_roster_for_class_includes_members_and_unassigned(sample_students):
    assert [s.student_id for s in build_roster(sample_students, 1)] == [1, 3]
    assert [s.student_id for s in build_roster(sample_students, 2)] == [2, 3]
    assert [s.student_id for s in build_roster(sample_students, None)] == [1, 2, 3]
