from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, require_confirmation, to_dict
from ..common.validators import parse_bool
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    def students_list():
        if parse_bool(request.args.get("active", "")):
            return jsonify(to_dict(service.list_active()))
        return jsonify(to_dict(service.search(request.args.get("q", ""))))

    @app.route("/api/students", methods=["POST"], endpoint="students_create")
    def students_create():
        return jsonify(to_dict(service.create(json_body()))), 201

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="students_detail")
    def students_detail(student_id: int):
        return jsonify(to_dict(service.get(student_id)))

    @app.route("/api/students/<int:student_id>", methods=["PUT", "PATCH"], endpoint="students_update")
    def students_update(student_id: int):
        return jsonify(to_dict(service.update(student_id, json_body())))

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="students_delete")
    def students_delete(student_id: int):
        require_confirmation()
        return jsonify(to_dict(service.delete(student_id)))
