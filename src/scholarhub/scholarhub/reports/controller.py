from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.http import to_dict
from ..common.validators import parse_positive_int, require_iso_date
from ..container import Container
from ..core.constants import DEFAULT_DASHBOARD_DAYS


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    @app.route("/api/reports/summary", methods=["GET"], endpoint="reports_summary")
    def reports_summary():
        date_range = container.attendance_service.parse_range(request.args.get("start"), request.args.get("end"))
        return jsonify(to_dict(service.build_report(date_range)))

    @app.route("/api/reports/dashboard", methods=["GET"], endpoint="reports_dashboard")
    def reports_dashboard():
        as_of = request.args.get("as_of")
        today = parse_iso_date(require_iso_date(as_of, "as_of")) if as_of else now_local().date()
        days = parse_positive_int(request.args.get("days", DEFAULT_DASHBOARD_DAYS), "days")
        return jsonify(to_dict(service.build_dashboard(today, days=days)))

    @app.route("/api/reports/students/<int:student_id>", methods=["GET"], endpoint="reports_student")
    def reports_student(student_id: int):
        return jsonify(to_dict(service.student_summary(student_id)))
