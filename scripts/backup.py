"""Backup database.

Note: requires `mysqldump` on PATH. Otherwise back up with MySQL Workbench or similar.
"""

from __future__ import annotations

import subprocess
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from attendance_dashboard.config.settings import load_settings


def main() -> None:
    load_dotenv(override=False)
    db = load_settings().db_config

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{db['database']}_{ts}.sql"

    cmd = [
        "mysqldump",
        f"-h{db['host']}",
        f"-P{db.get('port', 3306)}",
        f"-u{db['user']}",
        f"-p{db.get('password', '')}",
        "--single-transaction",
        db["database"],
        "users",
        "attendance",
    ]

    try:
        with out_file.open("wb") as f:
            subprocess.run(cmd, stdout=f, stderr=subprocess.PIPE, check=True)
        print(f"OK: Backup created: {out_file}")
    except FileNotFoundError:
        raise SystemExit("`mysqldump` not found. Install the MySQL client tools or back up with Workbench.")


if __name__ == "__main__":
    main()
