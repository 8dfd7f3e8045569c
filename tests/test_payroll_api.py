from __future__ import annotations

import pytest

from src.flexwork_payroll.flexwork_payroll.core.enums import NightOverlapMode
from src.flexwork_payroll.flexwork_payroll.main import create_app
from src.flexwork_payroll.flexwork_payroll.rules.model import PayRules


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(rules=PayRules())
    return app.test_client()


def _body(**extra):
    body = {
        "periodStart": "2024-01-01",
        "periodEnd": "2024-01-14",
        "records": [
            {
                "date": "2024-01-01",
                "checkIn": "2024-01-01T09:00:00",
                "checkOut": "2024-01-01T23:00:00",
                "breakMinutes": 60,
                "ptMinutes": 0,
                "isHoliday": False,
                "substituteLeaveGranted": False,
            }
        ],
    }
    body.update(extra)
    return body


def test_calculate_returns_payroll(client):
    res = client.post("/api/payroll/calculate", json=_body(hourlyWage=10000))

    assert res.status_code == 200
    data = res.get_json()
    assert data["success"] is True
    assert data["data"]["totalWorkMinutes"] == 780
    assert data["data"]["nightMinutes"] == 56
    assert data["data"]["nightPay"] == 4667
    assert data["summary"]["night_pay"] == "₩4,667"


def test_biweekly_returns_buckets_only(client):
    res = client.post("/api/payroll/biweekly", json=_body())

    assert res.status_code == 200
    data = res.get_json()["data"]
    assert data["regularMinutes"] == 780
    assert "regularPay" not in data


@pytest.mark.parametrize(
    "body",
    [
        _body(),
        _body(hourlyWage=-1),
        _body(hourlyWage=10000, periodStart="last monday"),
        _body(hourlyWage=10000, records="none"),
        _body(hourlyWage=10000, records=[{"checkIn": "2024-01-01T09:00", "checkOut": "2024-01-01T18:00", "isHoliday": "false"}]),
    ],
)
def test_calculate_rejects_bad_input(client, body):
    res = client.post("/api/payroll/calculate", json=body)

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_non_json_body_is_rejected(client):
    res = client.post("/api/payroll/biweekly", data="not json", content_type="text/plain")

    assert res.status_code == 400


def test_rules_endpoint_reports_active_rules(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(rules=PayRules(night_mode=NightOverlapMode.EXACT))

    data = app.test_client().get("/api/payroll/rules").get_json()

    assert data["standardMinutes"] == 4800
    assert data["nightMode"] == "EXACT"
    assert data["multipliers"]["nightOvertime"] == 2.0
