from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    def _read_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("request body must be a JSON object")
        return data

    @app.route("/api/payroll/biweekly", methods=["POST"], endpoint="api_payroll_biweekly")
    def api_payroll_biweekly():
        try:
            data = _read_body()
            records = service.records_from_payload(data.get("records"))
            calc = service.calculate_biweekly(records, data.get("periodStart"), data.get("periodEnd"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "data": calc.to_dict(), "summary": service.build_summary(calc)})

    @app.route("/api/payroll/calculate", methods=["POST"], endpoint="api_payroll_calculate")
    def api_payroll_calculate():
        try:
            data = _read_body()
            if "hourlyWage" not in data:
                raise ValidationError("hourlyWage is required")
            records = service.records_from_payload(data.get("records"))
            calc = service.calculate_payroll(
                records,
                data.get("periodStart"),
                data.get("periodEnd"),
                data["hourlyWage"],
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "data": calc.to_dict(), "summary": service.build_summary(calc)})

    @app.route("/api/payroll/rules", methods=["GET"], endpoint="api_payroll_rules")
    def api_payroll_rules():
        rules = container.rules
        m = rules.multipliers
        return jsonify(
            {
                "standardMinutes": rules.standard_minutes,
                "nightStartHour": rules.night_start_hour,
                "nightEndHour": rules.night_end_hour,
                "sampleStepMinutes": rules.sample_step_minutes,
                "substituteHalfDayMinutes": rules.substitute_half_day_minutes,
                "substituteFullDayMinutes": rules.substitute_full_day_minutes,
                "nightMode": rules.night_mode.value,
                "overtimeAllocation": rules.overtime_allocation.value,
                "multipliers": {
                    "regular": m.regular,
                    "overtime": m.overtime,
                    "night": m.night,
                    "nightOvertime": m.night_overtime,
                    "holiday": m.holiday,
                },
            }
        )
