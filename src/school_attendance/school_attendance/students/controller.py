from __future__ import annotations

from typing import Optional

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import ApiError, ValidationError

FORM_FIELDS = ("name", "email", "age", "roll_no", "class_id")


def register(app: Flask, container: Container) -> None:
    def _render(*, form: Optional[dict] = None, errors: Optional[dict] = None, editing_id: Optional[int] = None):
        query = request.args.get("q", "")
        try:
            listing = container.student_service.listing(query)
            students, visible = listing.students, listing.visible
        except ApiError as e:
            flash(str(e), "danger")
            students, visible = [], []

        try:
            classes = container.class_service.list_classes()
        except ApiError:
            classes = []

        return render_template(
            "students/index.html",
            students=students,
            visible=visible,
            query=query,
            classes=classes,
            show_form=form is not None,
            form=form or {},
            errors=errors or {},
            editing_id=editing_id,
            active_page="students",
        )

    def _form_values() -> dict:
        return {f: request.form.get(f, "") for f in FORM_FIELDS}

    @app.route("/students", methods=["GET"], endpoint="students")
    def students():
        edit_id = request.args.get("edit", type=int)
        if edit_id:
            try:
                student = container.student_service.get(edit_id)
            except ApiError as e:
                flash(str(e), "danger")
                return redirect(url_for("students"))
            if not student:
                flash("Student not found", "warning")
                return redirect(url_for("students"))
            form = {
                "name": student.name,
                "email": student.email,
                "age": str(student.age),
                "roll_no": student.roll_no or "",
                "class_id": str(student.class_id or ""),
            }
            return _render(form=form, editing_id=student.student_id)

        if request.args.get("new"):
            return _render(form={})
        return _render()

    @app.route("/students", methods=["POST"], endpoint="create_student")
    def create_student():
        form = _form_values()
        try:
            container.student_service.save(**form)
            flash("Student added.", "success")
            return redirect(url_for("students"))
        except ValidationError as e:
            flash(str(e), "warning")
            return _render(form=form, errors=e.errors)
        except ApiError as e:
            flash(str(e), "danger")
            return _render(form=form)

    @app.route("/students/<int:student_id>", methods=["POST"], endpoint="update_student")
    def update_student(student_id: int):
        form = _form_values()
        try:
            container.student_service.save(student_id=student_id, **form)
            flash("Student updated.", "success")
            return redirect(url_for("students"))
        except ValidationError as e:
            flash(str(e), "warning")
            return _render(form=form, errors=e.errors, editing_id=student_id)
        except ApiError as e:
            flash(str(e), "danger")
            return _render(form=form, editing_id=student_id)

    @app.route("/students/<int:student_id>/delete", methods=["GET", "POST"], endpoint="delete_student")
    def delete_student(student_id: int):
        if request.method == "GET":
            try:
                student = container.student_service.get(student_id)
            except ApiError as e:
                flash(str(e), "danger")
                return redirect(url_for("students"))
            if not student:
                abort(404)
            return render_template(
                "confirm_delete.html",
                title="Delete student",
                message=f"Are you sure you want to delete {student.name}?",
                action=url_for("delete_student", student_id=student_id),
                cancel=url_for("students"),
                active_page="students",
            )

        if request.form.get("confirm") != "yes":
            return redirect(url_for("students"))

        try:
            container.student_service.delete(student_id)
            flash("Student deleted.", "success")
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        return redirect(url_for("students"))
