from __future__ import annotations

from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_iso_date_field, today_local
from ..common.validators import optional_int
from ..container import Container
from ..core.enums import ReportView
from ..core.exceptions import ApiError, ValidationError
from .export import report_filename, rows_to_csv


def register(app: Flask, container: Container) -> None:
    def _read_params():
        today = today_local()
        default_start = today - timedelta(days=int(app.config.get("DEFAULT_REPORT_DAYS", 30)))
        start = parse_iso_date_field(request.args.get("start"), "start", default=default_start)
        end = parse_iso_date_field(request.args.get("end"), "end", default=today)
        class_id = optional_int(request.args.get("class_id"))
        seed = request.args.get("seed", type=int)
        return start, end, class_id, seed

    def _write_report_csv(*, data):
        csv_bytes = rows_to_csv(data.rows).encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={report_filename(data.start, data.end)}"},
        )

    @app.route("/reports", methods=["GET"], endpoint="reports")
    def reports():
        try:
            view = ReportView(request.args.get("view") or ReportView.OVERVIEW.value)
        except ValueError:
            view = ReportView.OVERVIEW

        try:
            start, end, class_id, seed = _read_params()
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("reports"))

        try:
            classes = container.report_service.list_classes()
        except ApiError as e:
            flash(str(e), "danger")
            classes = []

        data = None
        if request.args.get("generate"):
            try:
                data = container.report_service.build_report(start=start, end=end, class_id=class_id, seed=seed)
            except ValidationError as e:
                flash(str(e), "warning")
            except ApiError as e:
                flash(str(e), "danger")

        params = {"class_id": class_id or "", "start": start.isoformat(), "end": end.isoformat()}
        if data:
            params.update(seed=data.seed, generate=1)

        return render_template(
            "reports/index.html",
            data=data,
            params=params,
            classes=classes,
            class_id=class_id,
            start=start.isoformat(),
            end=end.isoformat(),
            view=view.value,
            views=list(ReportView),
            active_page="reports",
        )

    @app.route("/reports/export.csv", methods=["GET"], endpoint="reports_export_csv")
    def reports_export_csv():
        try:
            start, end, class_id, seed = _read_params()
            data = container.report_service.build_report(start=start, end=end, class_id=class_id, seed=seed)
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("reports"))
        except ApiError as e:
            flash(str(e), "danger")
            return redirect(url_for("reports"))

        return _write_report_csv(data=data)
