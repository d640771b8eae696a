from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, error_response, server_error
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/insights", methods=["GET"], endpoint="insights")
    @admin_required
    def insights():
        try:
            return jsonify(container.report_service.get_insights_report().to_dict())
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("insights")

    @app.route("/api/employee-stats", methods=["GET"], endpoint="employee_stats")
    @admin_required
    def employee_stats():
        try:
            return jsonify(container.report_service.get_employee_stats_report().to_dict())
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("employee_stats")
