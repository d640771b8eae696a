from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee


class EmployeeRepository(Protocol):
    """Roster provider interface.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_employees(self) -> Sequence[Employee]:
        """Users with the employee role, oldest registration first. Admins are never listed."""
        raise NotImplementedError

    def list_registered_since(self, start: datetime) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Employee]:
        raise NotImplementedError

    def create_employee(
        self,
        *,
        user_id: str,
        username: str,
        password_hash: str,
        role: Role,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        cnic_no: Optional[str] = None,
    ) -> Employee:
        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> bool:
        raise NotImplementedError
