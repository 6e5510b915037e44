from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, require_confirmation, to_dict
from ..common.validators import parse_positive_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        day = request.args.get("date")
        student_id = request.args.get("student_id")
        if day:
            return jsonify(to_dict(service.get_by_date(day)))
        if student_id:
            return jsonify(to_dict(service.get_by_student(parse_positive_int(student_id, "student_id"))))
        return jsonify(to_dict(service.list_all()))

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark():
        data = json_body()
        record = service.mark_attendance(
            data.get("student_id"),
            data.get("date"),
            data.get("status"),
            data.get("notes", ""),
        )
        return jsonify(to_dict(record))

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    def attendance_stats():
        day = request.args.get("date")
        if day:
            return jsonify(to_dict(service.get_daily_stats(day)))
        date_range = service.parse_range(request.args.get("start"), request.args.get("end"))
        return jsonify(to_dict(service.get_stats(date_range)))

    @app.route("/api/attendance/<int:record_id>", methods=["DELETE"], endpoint="attendance_delete")
    def attendance_delete(record_id: int):
        require_confirmation()
        return jsonify(to_dict(service.delete(record_id)))
