from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..container import Container
from ..core.enums import Tab

TABS = [
    {"id": Tab.STUDENTS.value, "label": "Students", "description": "Manage student records", "endpoint": "students"},
    {"id": Tab.CLASSES.value, "label": "Classes", "description": "Organize classes", "endpoint": "classes"},
    {"id": Tab.ATTENDANCE.value, "label": "Attendance", "description": "Track daily attendance", "endpoint": "attendance"},
    {"id": Tab.REPORTS.value, "label": "Reports", "description": "View analytics", "endpoint": "reports"},
]


def resolve_tab(value: str | None) -> Tab:
    try:
        return Tab(value or Tab.STUDENTS.value)
    except ValueError:
        return Tab.STUDENTS


def register(app: Flask, container: Container) -> None:
    # Every template gets the tab bar; `active_page` picks the highlighted one.
    @app.context_processor
    def inject_tabs():
        return dict(tabs=TABS)

    @app.route("/", endpoint="index")
    def index():
        tab = resolve_tab(request.args.get("tab"))
        endpoint = next(t["endpoint"] for t in TABS if t["id"] == tab.value)
        return redirect(url_for(endpoint))

    @app.errorhandler(404)
    def not_found(e):
        return render_template("404.html", active_page=None), 404
