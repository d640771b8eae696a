from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: a user account (employee roster member or admin).

    Plain data object, no DB access code.
    """

    user_id: str
    username: str
    role: Role
    created_at: datetime
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    cnic_no: Optional[str] = None
    password_hash: str = ""

    def to_public_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "username": self.username,
            "email": self.email,
            "role": self.role.value,
            "phone": self.phone,
            "address": self.address,
            "cnic_no": self.cnic_no,
            "created_at": self.created_at.isoformat(),
        }
