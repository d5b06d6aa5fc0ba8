from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, json_body, json_errors, login_required, pick
from ..container import Container
from .model import ServiceType

FIELDS = {"nome": "name", "preco": "price", "ativo": "is_active"}


def service_to_json(service: ServiceType) -> dict:
    return {
        "id": service.service_id,
        "nome": service.name,
        "preco": service.price,
        "ativo": service.is_active,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/servicos", methods=["GET"], endpoint="list_services")
    @login_required
    @json_errors
    def list_services():
        return jsonify([service_to_json(s) for s in container.service_type_service.list_all()])

    @app.route("/api/servicos", methods=["POST"], endpoint="create_service")
    @admin_required
    @json_errors
    def create_service():
        data = pick(json_body(), FIELDS)
        data.setdefault("name", "")
        data.setdefault("price", None)
        service = container.service_type_service.create(**data)
        return jsonify(service_to_json(service)), 201

    @app.route("/api/servicos/<int:service_id>", methods=["PUT"], endpoint="update_service")
    @admin_required
    @json_errors
    def update_service(service_id: int):
        service = container.service_type_service.update(service_id, **pick(json_body(), FIELDS))
        return jsonify(service_to_json(service))

    @app.route("/api/servicos/<int:service_id>", methods=["DELETE"], endpoint="delete_service")
    @admin_required
    @json_errors
    def delete_service(service_id: int):
        return jsonify(service_to_json(container.service_type_service.delete(service_id)))
