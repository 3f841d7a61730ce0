from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import date_param, json_body, json_endpoint
from ..common.validators import require_month_index, require_year
from ..container import Container
from .model import AttendanceRecord


def record_to_json(r: AttendanceRecord) -> dict:
    return {
        "record_id": r.record_id,
        "worker_id": r.worker_id,
        "date": r.work_date.isoformat(),
        "status": r.status.value,
        "overtime": "yes" if r.overtime else "no",
        "late_minutes": r.late_minutes,
        "notes": r.notes,
        "check_in_time": r.check_in_time,
        "check_out_time": r.check_out_time,
    }


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_for_date")
    @json_endpoint
    def attendance_for_date():
        work_date = date_param(request.args.get("date"))
        records = service.attendance_for_date(work_date)
        return jsonify({"success": True, "date": work_date.isoformat(), "records": [record_to_json(r) for r in records]})

    @app.route("/api/attendance", methods=["PUT"], endpoint="mark_attendance")
    @json_endpoint
    def mark_attendance():
        data = json_body()
        record = service.mark(
            str(data.get("worker_id", "")),
            date_param(data.get("date")),
            status=data.get("status", ""),
            overtime=data.get("overtime", "no"),
            late_minutes=data.get("late_minutes", 0),
            notes=data.get("notes"),
            check_in_time=data.get("check_in_time"),
            check_out_time=data.get("check_out_time"),
        )
        return jsonify({"success": True, "record": record_to_json(record)})

    @app.route("/api/attendance/overtime/toggle", methods=["POST"], endpoint="toggle_overtime")
    @json_endpoint
    def toggle_overtime():
        data = json_body()
        record = service.toggle_overtime(str(data.get("worker_id", "")), date_param(data.get("date")))
        return jsonify({"success": True, "record": record_to_json(record)})

    @app.route("/api/attendance/packers", methods=["GET"], endpoint="present_packers")
    @json_endpoint
    def present_packers():
        work_date = date_param(request.args.get("date"))
        packers = service.present_packers(work_date)
        return jsonify(
            {
                "success": True,
                "date": work_date.isoformat(),
                "packers": [{"worker_id": w.worker_id, "name": w.name} for w in packers],
            }
        )

    @app.route("/api/workers/<worker_id>/attendance-summary", methods=["GET"], endpoint="attendance_summary")
    @json_endpoint
    def attendance_summary(worker_id: str):
        summary = service.monthly_summary(
            worker_id,
            month=require_month_index(request.args.get("month")),
            year=require_year(request.args.get("year")),
            as_of=date_param(request.args.get("as_of")),
        )
        return jsonify(
            {
                "success": True,
                "summary": {
                    "worker_id": summary.worker_id,
                    "present_days": summary.present_days,
                    "half_days": summary.half_days,
                    "absent_days": summary.absent_days,
                    "unrecorded_days": summary.unrecorded_days,
                    "overtime_days": summary.overtime_days,
                    "late_minutes": summary.late_minutes,
                },
            }
        )
