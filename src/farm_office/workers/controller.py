from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, json_body, json_errors, login_required, pick
from ..container import Container
from .model import Worker

FIELDS = {
    "nome": "name",
    "ativo": "is_active",
    "registrado": "is_registered",
    "dataRegistro": "registration_date",
    "numeroFilhos": "number_of_dependents",
}


def worker_to_json(worker: Worker) -> dict:
    return {
        "id": worker.worker_id,
        "nome": worker.name,
        "ativo": worker.is_active,
        "registrado": worker.is_registered,
        "dataRegistro": worker.registration_date.isoformat() if worker.registration_date else None,
        "numeroFilhos": worker.number_of_dependents,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/trabalhadores", methods=["GET"], endpoint="list_workers")
    @login_required
    @json_errors
    def list_workers():
        return jsonify([worker_to_json(w) for w in container.worker_service.list_all()])

    @app.route("/api/trabalhadores", methods=["POST"], endpoint="create_worker")
    @admin_required
    @json_errors
    def create_worker():
        data = pick(json_body(), FIELDS)
        data.setdefault("name", "")
        worker = container.worker_service.create(**data)
        return jsonify(worker_to_json(worker)), 201

    @app.route("/api/trabalhadores/<int:worker_id>", methods=["PUT"], endpoint="update_worker")
    @admin_required
    @json_errors
    def update_worker(worker_id: int):
        worker = container.worker_service.update(worker_id, **pick(json_body(), FIELDS))
        return jsonify(worker_to_json(worker))

    @app.route("/api/trabalhadores/<int:worker_id>", methods=["DELETE"], endpoint="delete_worker")
    @admin_required
    @json_errors
    def delete_worker(worker_id: int):
        return jsonify(worker_to_json(container.worker_service.delete(worker_id)))
