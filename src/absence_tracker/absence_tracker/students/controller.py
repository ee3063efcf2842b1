from __future__ import annotations

import csv
import io
import logging
from typing import Mapping, Optional

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from .workflow import RosterWorkflow

logger = logging.getLogger(__name__)


class FormPrompts:
    """RosterPrompts answered from the submitted form.

    The page asks for the id and the confirmation in the browser; by the time
    the request arrives the answers are already form fields.
    """

    def __init__(self, form: Mapping[str, str]):
        self._form = form

    def ask_student_id(self) -> Optional[str]:
        value = self._form.get("student_id")
        return None if value is None else str(value)

    def confirm(self, message: str) -> bool:
        return str(self._form.get("confirm", "")).lower() in {"1", "true", "yes", "on"}


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    def _workflow() -> RosterWorkflow:
        return RosterWorkflow(roster, FormPrompts(request.form))

    def _back():
        q = request.values.get("q", "")
        return redirect(url_for("index", q=q) if q else url_for("index"))

    def _system_error(action: str, e: Exception) -> None:
        logger.exception("Unexpected error while %s", action)
        if bool(app.config.get("DEBUG", False)):
            flash(f"Error del sistema al {action}: {e}", "danger")
        else:
            flash(f"Error del sistema al {action}", "danger")

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        roster.set_filter(request.args.get("q", ""))
        return render_template("index.html", view=roster.view())

    @app.route("/students", methods=["POST"], endpoint="add_student")
    def add_student():
        try:
            student = _workflow().add_student(request.form.get("name", ""))
            if student is None:
                flash("Registro cancelado.", "info")
            else:
                flash(f'Alumno "{student.name}" registrado.', "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception as e:
            _system_error("registrar el alumno", e)
        return _back()

    @app.route("/students/absences", methods=["POST"], endpoint="update_absences")
    def update_absences():
        student_id = request.form.get("student_id", "")
        action = request.form.get("action", "set")
        try:
            if action == "increment":
                roster.increment_absences(student_id)
            elif action == "decrement":
                roster.decrement_absences(student_id)
            elif action == "reset":
                roster.reset_absences(student_id)
            elif action == "set":
                roster.update_absences(student_id, request.form.get("value"))
            else:
                flash("Acción no válida.", "warning")
        except Exception as e:
            _system_error("actualizar las faltas", e)
        return _back()

    @app.route("/students/delete", methods=["POST"], endpoint="delete_student")
    def delete_student():
        student_id = request.form.get("student_id", "")
        try:
            student = _workflow().delete_student(student_id)
            if student is None:
                flash("Eliminación cancelada.", "info")
            else:
                flash(f'Alumno "{student.name}" eliminado.', "success")
        except DomainError as e:
            flash(str(e), "warning")
        except Exception as e:
            _system_error("eliminar el alumno", e)
        return _back()

    @app.route("/students/clear", methods=["POST"], endpoint="clear_students")
    def clear_students():
        try:
            if _workflow().clear_all():
                flash("Se borraron todos los alumnos.", "success")
        except Exception as e:
            _system_error("borrar los alumnos", e)
        return _back()

    @app.route("/api/students", methods=["GET"], endpoint="api_students")
    def api_students():
        roster.set_filter(request.args.get("q", roster.filter))
        return jsonify(roster.view().to_dict())

    @app.route("/api/students/name-check", methods=["GET"], endpoint="check_student_name")
    def check_student_name():
        try:
            name = roster.validate_new_name(request.args.get("name", ""))
        except ValidationError as e:
            return jsonify({"ok": False, "message": str(e)})
        return jsonify({"ok": True, "name": name})

    @app.route("/students.csv", methods=["GET"], endpoint="students_csv")
    def students_csv():
        roster.set_filter(request.args.get("q", roster.filter))
        view = roster.view()

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["id", "name", "absences", "status"])
        writer.writeheader()
        for row in view.rows:
            writer.writerow(
                {
                    "id": row.id,
                    "name": row.name,
                    "absences": row.absences_display,
                    "status": row.status.value,
                }
            )

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=faltas.csv"},
        )
