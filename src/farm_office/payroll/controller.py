from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/relatorios/folha", methods=["GET"], endpoint="payroll_report")
    @login_required
    @json_errors
    def payroll_report():
        service = container.payroll_report_service
        payroll = service.build_payroll(
            start=request.args.get("startDate"),
            end=request.args.get("endDate"),
            category_filter=request.args.get("categoryFilter"),
        )
        return jsonify(service.to_json(payroll))
