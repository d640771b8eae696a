from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.web import admin_required, error_response, server_error
from ..core.exceptions import DomainError, ValidationError
from ..container import Container


def register(app: Flask, container: Container, *, session_days: int) -> None:
    def _payload() -> dict:
        # create-user accepts multipart/form fields or a JSON body
        if request.is_json:
            data = request.get_json(silent=True)
            return data if isinstance(data, dict) else {}
        return request.form.to_dict()

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = _payload()
        try:
            s_user = container.auth_service.authenticate(str(data.get("username", "")), str(data.get("password", "")))
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("login")

        session.clear()
        session.permanent = bool(data.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=session_days)
        session["user_id"] = s_user.user_id
        session["name"] = s_user.username
        session["role"] = s_user.role.value
        return jsonify({"ok": True, "user": {"id": s_user.user_id, "username": s_user.username}})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"ok": True})

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @admin_required
    def employees_list():
        try:
            employees = container.employee_service.list_employees()
            return jsonify({"employees": [e.to_public_dict() for e in employees], "total": len(employees)})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("employees_list")

    @app.route("/api/create-user", methods=["POST"], endpoint="create_user")
    @admin_required
    def create_user():
        data = _payload()
        try:
            employee = container.employee_service.create_employee(
                username=str(data.get("username") or ""),
                password=str(data.get("password") or ""),
                email=data.get("email"),
                phone=data.get("phone"),
                address=data.get("address"),
                cnic_no=data.get("cnic_no"),
            )
            return jsonify(
                {
                    "ok": True,
                    "user": {"id": employee.user_id, "email": employee.email, "username": employee.username},
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("create_user")

    @app.route("/api/delete-user", methods=["POST"], endpoint="delete_user")
    @admin_required
    def delete_user():
        data = request.get_json(silent=True)
        try:
            if not isinstance(data, dict):
                raise ValidationError("Invalid JSON body")
            user_id = data.get("userId")
            if user_id == session.get("user_id"):
                raise ValidationError("Cannot delete your own account")
            container.employee_service.delete_employee(user_id)
            return jsonify({"success": True})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("delete_user")
