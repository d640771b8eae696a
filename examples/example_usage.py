"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the reporting logic lives in the services.
"""

from dotenv import load_dotenv

from attendance_dashboard.config.settings import load_settings
from attendance_dashboard.container import build_container


def main():
    load_dotenv(override=False)
    container = build_container(load_settings())
    print(container.report_service.get_employee_stats_report().to_dict())


if __name__ == "__main__":
    main()
