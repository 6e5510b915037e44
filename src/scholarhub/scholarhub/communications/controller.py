from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, require_confirmation, to_dict
from ..common.validators import parse_positive_int
from ..container import Container
from ..core.constants import DEFAULT_TEACHER_ID


def register(app: Flask, container: Container) -> None:
    service = container.communication_service

    @app.route("/api/parents/<int:parent_id>/communications", methods=["GET"], endpoint="communications_for_parent")
    def communications_for_parent(parent_id: int):
        container.parent_service.get(parent_id)
        return jsonify(to_dict(service.get_by_parent_id(parent_id)))

    @app.route("/api/parents/<int:parent_id>/communications", methods=["POST"], endpoint="communications_create")
    def communications_create(parent_id: int):
        data = json_body()
        data["parent_id"] = parent_id
        data.setdefault("teacher_id", DEFAULT_TEACHER_ID)
        return jsonify(to_dict(service.create(data))), 201

    @app.route("/api/communications", methods=["GET"], endpoint="communications_for_student")
    def communications_for_student():
        student_id = parse_positive_int(request.args.get("student_id"), "student_id")
        return jsonify(to_dict(service.get_by_student_id(student_id)))

    @app.route("/api/communications/<int:communication_id>", methods=["GET"], endpoint="communications_detail")
    def communications_detail(communication_id: int):
        return jsonify(to_dict(service.get(communication_id)))

    @app.route("/api/communications/<int:communication_id>", methods=["PUT", "PATCH"], endpoint="communications_update")
    def communications_update(communication_id: int):
        return jsonify(to_dict(service.update(communication_id, json_body())))

    @app.route("/api/communications/<int:communication_id>", methods=["DELETE"], endpoint="communications_delete")
    def communications_delete(communication_id: int):
        require_confirmation()
        return jsonify(to_dict(service.delete(communication_id)))
