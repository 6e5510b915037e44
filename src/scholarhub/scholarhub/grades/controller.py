from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, require_confirmation, to_dict
from ..common.validators import parse_positive_int
from ..container import Container
from ..core.constants import SUGGESTED_SUBJECTS
from ..core.enums import Term


def register(app: Flask, container: Container) -> None:
    service = container.grade_service

    @app.route("/api/grades", methods=["GET"], endpoint="grades_list")
    def grades_list():
        student_id = request.args.get("student_id")
        subject = request.args.get("subject")
        if student_id:
            return jsonify(to_dict(service.get_by_student(parse_positive_int(student_id, "student_id"))))
        if subject:
            return jsonify(to_dict(service.get_by_subject(subject)))
        return jsonify(to_dict(service.list_all()))

    @app.route("/api/grades/options", methods=["GET"], endpoint="grades_options")
    def grades_options():
        return jsonify({"subjects": list(SUGGESTED_SUBJECTS), "terms": [t.value for t in Term]})

    @app.route("/api/grades/stats", methods=["GET"], endpoint="grades_stats")
    def grades_stats():
        return jsonify(to_dict(service.get_stats()))

    @app.route("/api/grades", methods=["POST"], endpoint="grades_create")
    def grades_create():
        return jsonify(to_dict(service.create(json_body()))), 201

    @app.route("/api/grades/<int:grade_id>", methods=["GET"], endpoint="grades_detail")
    def grades_detail(grade_id: int):
        return jsonify(to_dict(service.get(grade_id)))

    @app.route("/api/grades/<int:grade_id>", methods=["PUT", "PATCH"], endpoint="grades_update")
    def grades_update(grade_id: int):
        return jsonify(to_dict(service.update(grade_id, json_body())))

    @app.route("/api/grades/<int:grade_id>", methods=["DELETE"], endpoint="grades_delete")
    def grades_delete(grade_id: int):
        require_confirmation()
        return jsonify(to_dict(service.delete(grade_id)))
