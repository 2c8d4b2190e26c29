from __future__ import annotations

from typing import Optional

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import GRADES, SECTIONS
from ..core.exceptions import ApiError, ValidationError

FORM_FIELDS = ("name", "grade", "section", "teacher_name")


def register(app: Flask, container: Container) -> None:
    def _render(*, form: Optional[dict] = None, errors: Optional[dict] = None, editing_id: Optional[int] = None):
        try:
            classes = container.class_service.list_classes()
        except ApiError as e:
            flash(str(e), "danger")
            classes = []

        return render_template(
            "classes/index.html",
            classes=classes,
            grades=GRADES,
            sections=SECTIONS,
            show_form=form is not None,
            form=form or {},
            errors=errors or {},
            editing_id=editing_id,
            active_page="classes",
        )

    def _form_values() -> dict:
        return {f: request.form.get(f, "") for f in FORM_FIELDS}

    @app.route("/classes", methods=["GET"], endpoint="classes")
    def classes():
        edit_id = request.args.get("edit", type=int)
        if edit_id:
            try:
                school_class = container.class_service.get(edit_id)
            except ApiError as e:
                flash(str(e), "danger")
                return redirect(url_for("classes"))
            if not school_class:
                flash("Class not found", "warning")
                return redirect(url_for("classes"))
            form = {
                "name": school_class.name,
                "grade": school_class.grade,
                "section": school_class.section,
                "teacher_name": school_class.teacher_name,
            }
            return _render(form=form, editing_id=school_class.class_id)

        if request.args.get("new"):
            return _render(form={})
        return _render()

    @app.route("/classes", methods=["POST"], endpoint="create_class")
    def create_class():
        form = _form_values()
        try:
            container.class_service.save(**form)
            flash("Class added.", "success")
            return redirect(url_for("classes"))
        except ValidationError as e:
            flash(str(e), "warning")
            return _render(form=form, errors=e.errors)
        except ApiError as e:
            flash(str(e), "danger")
            return _render(form=form)

    @app.route("/classes/<int:class_id>", methods=["POST"], endpoint="update_class")
    def update_class(class_id: int):
        form = _form_values()
        try:
            container.class_service.save(class_id=class_id, **form)
            flash("Class updated.", "success")
            return redirect(url_for("classes"))
        except ValidationError as e:
            flash(str(e), "warning")
            return _render(form=form, errors=e.errors, editing_id=class_id)
        except ApiError as e:
            flash(str(e), "danger")
            return _render(form=form, editing_id=class_id)

    @app.route("/classes/<int:class_id>/delete", methods=["GET", "POST"], endpoint="delete_class")
    def delete_class(class_id: int):
        if request.method == "GET":
            try:
                school_class = container.class_service.get(class_id)
            except ApiError as e:
                flash(str(e), "danger")
                return redirect(url_for("classes"))
            if not school_class:
                abort(404)
            return render_template(
                "confirm_delete.html",
                title="Delete class",
                message=f"Are you sure you want to delete {school_class.name} ({school_class.label})?",
                action=url_for("delete_class", class_id=class_id),
                cancel=url_for("classes"),
                active_page="classes",
            )

        if request.form.get("confirm") != "yes":
            return redirect(url_for("classes"))

        try:
            container.class_service.delete(class_id)
            flash("Class deleted.", "success")
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        return redirect(url_for("classes"))
