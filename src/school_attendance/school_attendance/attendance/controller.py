from __future__ import annotations

from typing import Optional

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_iso_date_field, today_local
from ..common.validators import optional_int
from ..container import Container
from ..core.enums import AttendanceStatus
from ..core.exceptions import ApiError, PreconditionError, ValidationError
from .sheet import AttendanceSheet, remarks_field, status_field


def register(app: Flask, container: Container) -> None:
    def _render(sheet: Optional[AttendanceSheet], *, class_id: Optional[int], work_date, alert: Optional[str] = None):
        try:
            classes = container.attendance_service.list_classes()
        except ApiError as e:
            flash(str(e), "danger")
            classes = []

        selected = next((c for c in classes if c.class_id == class_id), None)
        return render_template(
            "attendance/index.html",
            sheet=sheet,
            summary=sheet.summary() if sheet else None,
            classes=classes,
            selected_class=selected,
            class_id=class_id,
            work_date=work_date.isoformat(),
            statuses=list(AttendanceStatus),
            status_field=status_field,
            remarks_field=remarks_field,
            alert=alert,
            active_page="attendance",
        )

    def _read_context(source):
        class_id = optional_int(source.get("class_id"))
        work_date = parse_iso_date_field(source.get("date"), "date", default=today_local())
        return class_id, work_date

    @app.route("/attendance", methods=["GET"], endpoint="attendance")
    def attendance():
        try:
            class_id, work_date = _read_context(request.args)
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("attendance"))

        try:
            sheet = container.attendance_service.open_sheet(work_date=work_date, class_id=class_id)
        except ApiError as e:
            flash(str(e), "danger")
            sheet = None
        return _render(sheet, class_id=class_id, work_date=work_date)

    @app.route("/attendance", methods=["POST"], endpoint="attendance_action")
    def attendance_action():
        try:
            class_id, work_date = _read_context(request.form)
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("attendance"))

        try:
            sheet = container.attendance_service.open_sheet(work_date=work_date, class_id=class_id, draft=request.form)
        except ApiError as e:
            flash(str(e), "danger")
            return _render(None, class_id=class_id, work_date=work_date)

        action = request.form.get("action", "")
        kind, _, arg = action.partition(":")

        try:
            if kind == "set":
                student_id, _, status = arg.partition(":")
                sheet.set_status(int(student_id), AttendanceStatus(status))
            elif kind == "mark_all":
                sheet.mark_all(AttendanceStatus(arg))
            elif kind == "save":
                container.attendance_service.save(sheet)
                flash(f"Attendance saved for {work_date.isoformat()}!", "success")
                return redirect(url_for("attendance", class_id=class_id, date=work_date.isoformat()))
        except PreconditionError as e:
            return _render(sheet, class_id=class_id, work_date=work_date, alert=str(e))
        except ApiError as e:
            flash(f"Error saving attendance: {e}", "danger")
        except ValueError:
            flash("Unknown attendance action", "warning")

        return _render(sheet, class_id=class_id, work_date=work_date)
