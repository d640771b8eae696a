"""Create (or reset) the dashboard admin account.

Usage: ADMIN_USERNAME=admin ADMIN_PASSWORD=... python scripts/seed_db.py
"""
from __future__ import annotations

import os

from dotenv import load_dotenv

from attendance_dashboard.config.settings import load_settings
from attendance_dashboard.database.bootstrap import ensure_admin_user
from attendance_dashboard.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    db_config = settings.db_config

    username = os.getenv("ADMIN_USERNAME", "admin").strip().lower()
    password = os.getenv("ADMIN_PASSWORD", "")
    if len(password) < 6:
        raise SystemExit("Set ADMIN_PASSWORD (at least 6 characters) before seeding.")

    user_id = ensure_admin_user(DatabaseConnection(DBConfig.from_dict(db_config)), username=username, password=password)
    print(
        f"OK: Admin '{username}' ({user_id}) ready -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
