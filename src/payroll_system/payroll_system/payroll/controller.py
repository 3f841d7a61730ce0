from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import date_param, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/payroll", methods=["GET"], endpoint="monthly_payroll")
    @json_endpoint
    def monthly_payroll():
        """Payroll sheet for a zero-based month (0 = January)."""
        sheet = service.build_monthly_payroll(
            month=request.args.get("month"),
            year=request.args.get("year"),
            as_of=date_param(request.args.get("as_of")),
            include_inactive=request.args.get("include_inactive", "0").lower() in {"1", "true", "yes"},
        )
        return jsonify({"success": True, "payroll": sheet.to_dict()})

    @app.route("/api/workers/<worker_id>/salary", methods=["GET"], endpoint="worker_salary")
    @json_endpoint
    def worker_salary(worker_id: str):
        result = service.salary_for_worker(
            worker_id,
            month=request.args.get("month"),
            year=request.args.get("year"),
            as_of=date_param(request.args.get("as_of")),
        )
        return jsonify({"success": True, "salary": result.to_dict()})
