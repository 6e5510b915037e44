from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, require_confirmation, to_dict
from ..common.validators import parse_positive_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.parent_service

    @app.route("/api/parents", methods=["GET"], endpoint="parents_list")
    def parents_list():
        student_id = request.args.get("student_id")
        if student_id:
            return jsonify(to_dict(service.get_by_student_id(parse_positive_int(student_id, "student_id"))))
        return jsonify(to_dict(service.search(request.args.get("q", ""))))

    @app.route("/api/parents", methods=["POST"], endpoint="parents_create")
    def parents_create():
        return jsonify(to_dict(service.create(json_body()))), 201

    @app.route("/api/parents/<int:parent_id>", methods=["GET"], endpoint="parents_detail")
    def parents_detail(parent_id: int):
        return jsonify(to_dict(service.get(parent_id)))

    @app.route("/api/parents/<int:parent_id>", methods=["PUT", "PATCH"], endpoint="parents_update")
    def parents_update(parent_id: int):
        return jsonify(to_dict(service.update(parent_id, json_body())))

    @app.route("/api/parents/<int:parent_id>", methods=["DELETE"], endpoint="parents_delete")
    def parents_delete(parent_id: int):
        require_confirmation()
        return jsonify(to_dict(service.delete(parent_id)))
