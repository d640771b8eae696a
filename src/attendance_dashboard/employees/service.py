from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    username: str
    role: Role


class AuthService:
    """Use case: authenticate the dashboard admin (login)."""

    def __init__(self, users: EmployeeRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        username = (username or "").strip().lower()
        user = self._users.get_by_username(username) if username else None
        if not user:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password")

        if user.role != Role.ADMIN:
            raise AuthorizationError("Only administrators can sign in to the dashboard")

        return SessionUser(user_id=user.user_id, username=user.username, role=user.role)


def _optional(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


class EmployeeService:
    """Use case: manage employee records (admin)."""

    def __init__(self, users: EmployeeRepository, *, id_factory: Callable[[], str] | None = None):
        self._users = users
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def list_employees(self) -> Sequence[Employee]:
        return self._users.list_employees()

    def create_employee(
        self,
        *,
        username: str,
        password: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        cnic_no: Optional[str] = None,
    ) -> Employee:
        username = require_non_empty(username, "Username").lower()
        password = (password or "").strip()
        require_non_empty(password, "Password")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        employee = self._users.create_employee(
            user_id=self._id_factory(),
            username=username,
            password_hash=generate_password_hash(password),
            role=Role.EMPLOYEE,
            email=_optional(email),
            phone=_optional(phone),
            address=_optional(address),
            cnic_no=_optional(cnic_no),
        )
        logger.info("Created employee %s (%s)", employee.username, employee.user_id)
        return employee

    def delete_employee(self, user_id: str) -> None:
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValidationError("User ID is required")

        user = self._users.get_by_id(user_id.strip())
        if not user:
            raise NotFoundError("Employee not found")
        if user.role == Role.ADMIN:
            raise ValidationError("Cannot delete an admin account")

        if not self._users.delete_by_id(user.user_id):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s (%s)", user.username, user.user_id)
