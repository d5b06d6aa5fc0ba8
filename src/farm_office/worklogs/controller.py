from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.http import fail, json_errors, login_required
from ..common.validators import optional_number, optional_text
from ..container import Container
from ..core.exceptions import ValidationError
from .model import WorkLogEntry

CSV_FIELDS = ["data", "nome", "status", "detalhes", "fazenda", "producao", "preco"]


def entry_from_json(payload: dict) -> WorkLogEntry:
    return WorkLogEntry(
        date=str(payload.get("data") or ""),
        worker_name=str(payload.get("nome") or ""),
        status=optional_text(payload.get("status")),
        details=optional_text(payload.get("detalhes")),
        farm=optional_text(payload.get("fazenda")),
        production_quantity=optional_number(payload.get("producao"), "Produção"),
        unit_price=optional_number(payload.get("preco"), "Preço"),
    )


def entry_to_json(entry: WorkLogEntry) -> dict:
    return {
        "id": entry.entry_id,
        "data": entry.date,
        "nome": entry.worker_name,
        "status": entry.status,
        "detalhes": entry.details,
        "fazenda": entry.farm,
        "producao": entry.production_quantity,
        "preco": entry.unit_price,
        "timestamp": entry.created_at.isoformat() if entry.created_at else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/registros", methods=["POST"], endpoint="create_work_logs")
    @login_required
    @json_errors
    def create_work_logs():
        payload = request.get_json(silent=True)
        if not isinstance(payload, list):
            return fail("Envie uma lista de registros.", 400)
        if not all(isinstance(item, dict) for item in payload):
            raise ValidationError("Registros inválidos.")

        saved = container.work_log_service.record_many([entry_from_json(item) for item in payload])
        return jsonify([entry_to_json(e) for e in saved]), 201

    @app.route("/api/registros/por-mes", methods=["GET"], endpoint="work_logs_by_month")
    @login_required
    @json_errors
    def work_logs_by_month():
        entries = container.work_log_service.list_by_month(
            year=request.args.get("ano"),
            month=request.args.get("mes"),
        )
        return jsonify([entry_to_json(e) for e in entries])

    @app.route("/api/registros", methods=["GET"], endpoint="work_logs_in_range")
    @login_required
    @json_errors
    def work_logs_in_range():
        entries = container.work_log_service.list_in_range(
            start=request.args.get("startDate"),
            end=request.args.get("endDate"),
        )
        return jsonify([entry_to_json(e) for e in entries])

    @app.route("/api/registros.csv", methods=["GET"], endpoint="work_logs_csv")
    @login_required
    @json_errors
    def work_logs_csv():
        start = request.args.get("startDate")
        end = request.args.get("endDate")
        entries = container.work_log_service.list_in_range(start=start, end=end)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for e in entries:
            writer.writerow(entry_to_json(e))

        filename = f"registros_{start.replace('-', '')}_{end.replace('-', '')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
