from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import date_param, json_body, json_endpoint
from ..container import Container
from .model import Worker


def worker_to_json(w: Worker) -> dict:
    return {
        "worker_id": w.worker_id,
        "name": w.name,
        "employee_id": w.employee_id,
        "gender": w.gender.value,
        "base_salary": float(w.base_salary) if w.base_salary is not None else None,
        "default_overtime": w.default_overtime,
        "department": w.department,
        "position": w.position,
        "is_packer": w.is_packer,
        "is_cleaner": w.is_cleaner,
        "is_active": w.is_active,
        "inactive_date": w.inactive_date.isoformat() if w.inactive_date else None,
        "advance_current_month": float(w.advance_current_month),
        "advance_last_month": float(w.advance_last_month),
        "advance_deduction": float(w.advance_deduction),
    }


def register(app: Flask, container: Container) -> None:
    service = container.worker_service

    @app.route("/api/workers", methods=["GET"], endpoint="list_workers")
    @json_endpoint
    def list_workers():
        active_only = request.args.get("active_only", "0").lower() in {"1", "true", "yes"}
        workers = service.list(active_only=active_only)
        return jsonify({"success": True, "workers": [worker_to_json(w) for w in workers]})

    @app.route("/api/workers", methods=["POST"], endpoint="create_worker")
    @json_endpoint
    def create_worker():
        data = json_body()
        worker = service.register_worker(
            name=data.get("name", ""),
            employee_id=data.get("employee_id", ""),
            gender=data.get("gender", ""),
            base_salary=data.get("base_salary"),
            default_overtime=data.get("default_overtime"),
            department=data.get("department"),
            position=data.get("position"),
            is_packer=bool(data.get("is_packer", False)),
            is_cleaner=bool(data.get("is_cleaner", False)),
        )
        return jsonify({"success": True, "worker": worker_to_json(worker)}), 201

    @app.route("/api/workers/<worker_id>", methods=["GET"], endpoint="get_worker")
    @json_endpoint
    def get_worker(worker_id: str):
        return jsonify({"success": True, "worker": worker_to_json(service.get(worker_id))})

    @app.route("/api/workers/<worker_id>", methods=["DELETE"], endpoint="delete_worker")
    @json_endpoint
    def delete_worker(worker_id: str):
        service.delete(worker_id)
        return jsonify({"success": True})

    @app.route("/api/workers/<worker_id>/salary-rate", methods=["PUT"], endpoint="update_worker_salary")
    @json_endpoint
    def update_worker_salary(worker_id: str):
        worker = service.update_salary(worker_id, json_body().get("base_salary"))
        return jsonify({"success": True, "worker": worker_to_json(worker)})

    @app.route("/api/workers/<worker_id>/default-overtime", methods=["PUT"], endpoint="set_default_overtime")
    @json_endpoint
    def set_default_overtime(worker_id: str):
        worker = service.set_default_overtime(worker_id, json_body().get("default_overtime"))
        return jsonify({"success": True, "worker": worker_to_json(worker)})

    @app.route("/api/workers/<worker_id>/deactivate", methods=["POST"], endpoint="deactivate_worker")
    @json_endpoint
    def deactivate_worker(worker_id: str):
        on_date = date_param(json_body().get("date"))
        worker = service.deactivate(worker_id, on_date=on_date)
        return jsonify({"success": True, "worker": worker_to_json(worker)})

    @app.route("/api/workers/<worker_id>/activate", methods=["POST"], endpoint="activate_worker")
    @json_endpoint
    def activate_worker(worker_id: str):
        return jsonify({"success": True, "worker": worker_to_json(service.reactivate(worker_id))})

    @app.route("/api/workers/<worker_id>/packer", methods=["POST"], endpoint="toggle_packer")
    @json_endpoint
    def toggle_packer(worker_id: str):
        return jsonify({"success": True, "worker": worker_to_json(service.toggle_packer(worker_id))})

    @app.route("/api/workers/<worker_id>/advances", methods=["POST"], endpoint="record_advance")
    @json_endpoint
    def record_advance(worker_id: str):
        worker = service.record_advance(worker_id, json_body().get("amount"))
        return jsonify({"success": True, "worker": worker_to_json(worker)})

    @app.route("/api/workers/<worker_id>/advance-deduction", methods=["PUT"], endpoint="set_advance_deduction")
    @json_endpoint
    def set_advance_deduction(worker_id: str):
        worker = service.set_advance_deduction(worker_id, json_body().get("amount"))
        return jsonify({"success": True, "worker": worker_to_json(worker)})

    @app.route("/api/workers/advances/roll", methods=["POST"], endpoint="roll_advances")
    @json_endpoint
    def roll_advances():
        return jsonify({"success": True, "rolled": service.roll_advances()})
