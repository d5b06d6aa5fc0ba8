from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, json_body, json_errors, login_required, pick
from ..container import Container
from .model import Farm

FIELDS = {"nome": "name", "proprietario": "owner", "cidade": "city", "ativa": "is_active"}


def farm_to_json(farm: Farm) -> dict:
    return {
        "id": farm.farm_id,
        "nome": farm.name,
        "proprietario": farm.owner,
        "cidade": farm.city,
        "ativa": farm.is_active,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/fazendas", methods=["GET"], endpoint="list_farms")
    @login_required
    @json_errors
    def list_farms():
        return jsonify([farm_to_json(f) for f in container.farm_service.list_all()])

    @app.route("/api/fazendas", methods=["POST"], endpoint="create_farm")
    @admin_required
    @json_errors
    def create_farm():
        data = pick(json_body(), FIELDS)
        data.setdefault("name", "")
        farm = container.farm_service.create(**data)
        return jsonify(farm_to_json(farm)), 201

    @app.route("/api/fazendas/<int:farm_id>", methods=["PUT"], endpoint="update_farm")
    @admin_required
    @json_errors
    def update_farm(farm_id: int):
        farm = container.farm_service.update(farm_id, **pick(json_body(), FIELDS))
        return jsonify(farm_to_json(farm))

    @app.route("/api/fazendas/<int:farm_id>", methods=["DELETE"], endpoint="delete_farm")
    @admin_required
    @json_errors
    def delete_farm(farm_id: int):
        return jsonify(farm_to_json(container.farm_service.delete(farm_id)))
