from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.web import admin_required, error_response, server_error
from ..core.exceptions import DomainError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_get")
    @admin_required
    def attendance_get():
        try:
            presence = container.attendance_service.get_day_presence(request.args.get("date", ""))
            return jsonify({"attendance": presence})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("attendance_get")

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_save")
    @admin_required
    def attendance_save():
        try:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                raise ValidationError("Invalid JSON body")
            if not data.get("date") or data.get("attendance") is None:
                raise ValidationError("Date and attendance data are required")

            result = container.attendance_service.save_day(data["date"], data["attendance"])
            message = "Attendance saved successfully" if result.total else "No employees found; nothing to save"
            return jsonify({"success": True, "message": message, "counts": result.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("attendance_save")

    @app.route("/api/attendance-dates", methods=["GET"], endpoint="attendance_dates")
    @admin_required
    def attendance_dates():
        try:
            dates = container.attendance_service.get_dates_with_data(request.args.get("month", ""))
            return jsonify({"dates": sorted(d.isoformat() for d in dates)})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("attendance_dates")

    @app.route("/api/employee-attendance", methods=["GET"], endpoint="employee_attendance")
    @admin_required
    def employee_attendance():
        try:
            history = container.attendance_service.get_employee_history(request.args.get("userId", ""))
            return jsonify(
                {
                    "attendance": [asdict(r) for r in history.records],
                    "total": history.total,
                    "present": history.present,
                    "absent": history.absent,
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("employee_attendance")
