from __future__ import annotations

from dotenv import load_dotenv

from attendance_dashboard.config.settings import load_settings
from attendance_dashboard.database.bootstrap import apply_schema, list_tables
from attendance_dashboard.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    db_config = settings.db_config
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    apply_schema(conn)
    tables = list_tables(conn)
    print(
        "OK: Applied schema.sql -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
