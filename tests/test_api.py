from __future__ import annotations

import pytest

from src.payroll_system.payroll_system.main import create_app


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()


def _create_worker(client, **overrides):
    payload = {"name": "Ravi", "employee_id": "E1", "gender": "male", "base_salary": 31000}
    payload.update(overrides)
    resp = client.post("/api/workers", json=payload)
    assert resp.status_code == 201
    return resp.get_json()["worker"]


def test_health_reports_memory_backend(client):
    resp = client.get("/api/health")

    assert resp.get_json() == {"success": True, "storage": "memory"}


def test_salary_flow(client):
    worker = _create_worker(client)

    resp = client.put(
        "/api/attendance",
        json={"worker_id": worker["worker_id"], "date": "2025-01-02", "status": "absent"},
    )
    assert resp.status_code == 200
    assert resp.get_json()["record"]["overtime"] == "no"

    resp = client.get(f"/api/workers/{worker['worker_id']}/salary?month=0&year=2025&as_of=2025-02-01")
    salary = resp.get_json()["salary"]

    assert salary["base_salary"] == 30000.0
    assert salary["bonus"] == 500.0
    assert salary["total_salary"] == 30500.0
    assert salary["has_bonus"] is True


def test_payroll_sheet_with_advance(client):
    worker = _create_worker(client)
    client.put(f"/api/workers/{worker['worker_id']}/advance-deduction", json={"amount": 1000})

    resp = client.get("/api/payroll?month=0&year=2025&as_of=2025-02-01")
    payroll = resp.get_json()["payroll"]

    assert payroll["lines"][0]["net_payable"] == 31000.0
    assert payroll["totals"]["total_salary"] == 32000.0


def test_payroll_requires_month(client):
    resp = client.get("/api/payroll?year=2025")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_unknown_worker_is_404(client):
    assert client.get("/api/workers/missing").status_code == 404
    assert client.get("/api/workers/missing/salary?month=0&year=2025").status_code == 404


def test_invalid_worker_payload_is_400(client):
    resp = client.post("/api/workers", json={"name": "", "employee_id": "E9", "gender": "male"})

    assert resp.status_code == 400


def test_toggle_overtime_and_packers(client):
    worker = _create_worker(client, is_packer=True)

    resp = client.post("/api/attendance/overtime/toggle", json={"worker_id": worker["worker_id"], "date": "2025-01-02"})
    assert resp.get_json()["record"]["overtime"] == "yes"

    resp = client.get("/api/attendance/packers?date=2025-01-02")
    assert [p["worker_id"] for p in resp.get_json()["packers"]] == [worker["worker_id"]]


def test_deactivate_worker_stops_salary(client):
    worker = _create_worker(client)
    resp = client.post(f"/api/workers/{worker['worker_id']}/deactivate", json={"date": "2025-01-11"})
    assert resp.get_json()["worker"]["is_active"] is False

    resp = client.get(f"/api/workers/{worker['worker_id']}/salary?month=0&year=2025&as_of=2025-02-01")

    assert resp.get_json()["salary"]["base_salary"] == 10000.0


def test_bad_date_is_400(client):
    worker = _create_worker(client)

    resp = client.put("/api/attendance", json={"worker_id": worker["worker_id"], "date": "02/01/2025", "status": "present"})

    assert resp.status_code == 400


def test_infinite_late_minutes_is_400(client):
    worker = _create_worker(client)

    resp = client.put(
        "/api/attendance",
        json={"worker_id": worker["worker_id"], "date": "2025-01-02", "status": "present", "late_minutes": 1e999},
    )

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_default_overtime_setting_drives_salary(client):
    worker = _create_worker(client)

    resp = client.put(f"/api/workers/{worker['worker_id']}/default-overtime", json={"default_overtime": "yes"})
    assert resp.get_json()["worker"]["default_overtime"] is True

    resp = client.get(f"/api/workers/{worker['worker_id']}/salary?month=0&year=2025&as_of=2025-02-01")

    # 27 non-Tuesdays, one overtime hour each at double the 100/h rate
    assert resp.get_json()["salary"]["overtime_compensation"] == 5400.0


def test_default_overtime_for_unknown_worker_is_404(client):
    resp = client.put("/api/workers/missing/default-overtime", json={"default_overtime": "yes"})

    assert resp.status_code == 404
