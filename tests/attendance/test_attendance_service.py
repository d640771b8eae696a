from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from attendance_dashboard.attendance.model import AttendanceEvent
from attendance_dashboard.attendance.reconciler import DayReconciler
from attendance_dashboard.attendance.service import AttendanceService
from attendance_dashboard.core.exceptions import ValidationError

TZ = ZoneInfo("Asia/Karachi")
NOW = datetime(2025, 10, 19, 10, 0, tzinfo=TZ)


def _service(log, roster, **kw):
    return AttendanceService(
        log,
        DayReconciler(log, roster, tz=TZ),
        tz=TZ,
        max_presence_entries=kw.pop("max_presence_entries", 50),
        clock=kw.pop("clock", lambda: NOW),
    )


def test_save_day_example_counts(roster_abc, attendance_log):
    result = _service(attendance_log, roster_abc).save_day("2025-10-08", {"A": True})

    assert result.to_dict() == {"total": 3, "present": 1, "absent": 2}


def test_save_day_rejects_malformed_day_before_store_access(roster_abc, attendance_log):
    with pytest.raises(ValidationError):
        _service(attendance_log, roster_abc).save_day("2024-13-40", {"A": True})

    assert attendance_log.calls == []
    assert roster_abc.list_calls == 0


@pytest.mark.parametrize("payload", [None, ["A"], "A", 3])
def test_save_day_rejects_non_object_presence(roster_abc, attendance_log, payload):
    with pytest.raises(ValidationError):
        _service(attendance_log, roster_abc).save_day("2025-10-08", payload)

    assert attendance_log.calls == []


def test_save_day_rejects_oversized_payload(roster_abc, attendance_log):
    svc = _service(attendance_log, roster_abc, max_presence_entries=2)

    with pytest.raises(ValidationError):
        svc.save_day("2025-10-08", {"A": True, "B": True, "C": True})

    assert attendance_log.calls == []


def test_day_presence_after_save_matches_map(roster_abc, attendance_log):
    svc = _service(attendance_log, roster_abc)
    svc.save_day("2025-10-08", {"B": True})

    assert svc.get_day_presence("2025-10-08") == {"A": False, "B": True, "C": False}
    assert svc.get_day_presence("2025-10-09") == {}


def test_day_presence_rejects_bad_date(roster_abc, attendance_log):
    with pytest.raises(ValidationError):
        _service(attendance_log, roster_abc).get_day_presence("08-10-2025")


def test_dates_with_data_uses_local_days(roster_abc, make_log):
    log = make_log(
        [
            # 20:00 UTC on the 7th is already the 8th in Karachi
            AttendanceEvent("A", datetime(2025, 10, 7, 20, 0, tzinfo=timezone.utc), True),
            AttendanceEvent("B", datetime(2025, 10, 15, 7, 0, tzinfo=timezone.utc), False),
            AttendanceEvent("C", datetime(2025, 9, 30, 7, 0, tzinfo=timezone.utc), True),
        ]
    )

    dates = _service(log, roster_abc).get_dates_with_data("2025-10")

    assert dates == {date(2025, 10, 8), date(2025, 10, 15)}


def test_dates_with_data_future_month_skips_store(roster_abc, attendance_log):
    svc = _service(attendance_log, roster_abc)

    assert svc.get_dates_with_data("2099-01") == set()
    assert svc.get_dates_with_data("2025-11") == set()
    assert attendance_log.calls == []


def test_dates_with_data_current_month_is_queried(roster_abc, attendance_log):
    _service(attendance_log, roster_abc).get_dates_with_data("2025-10")

    assert attendance_log.calls == ["query"]


def test_dates_with_data_current_month_follows_local_zone(roster_abc, attendance_log):
    # 20:00 UTC on Oct 31 is already Nov 1 in Karachi
    utc_clock = lambda: datetime(2025, 10, 31, 20, 0, tzinfo=timezone.utc)
    svc = _service(attendance_log, roster_abc, clock=utc_clock)

    svc.get_dates_with_data("2025-11")

    assert attendance_log.calls == ["query"]


def test_dates_with_data_store_failure_degrades_to_empty(roster_abc, attendance_log):
    attendance_log.fail_query = True

    assert _service(attendance_log, roster_abc).get_dates_with_data("2025-10") == set()


def test_dates_with_data_rejects_malformed_month(roster_abc, attendance_log):
    with pytest.raises(ValidationError):
        _service(attendance_log, roster_abc).get_dates_with_data("2025-13")

    assert attendance_log.calls == []


def test_employee_history_is_enriched_and_newest_first(roster_abc, make_log):
    log = make_log(
        [
            AttendanceEvent("A", datetime(2025, 10, 7, 7, 0, tzinfo=timezone.utc), True, note="on site"),
            AttendanceEvent("A", datetime(2025, 10, 8, 7, 0, tzinfo=timezone.utc), False),
            AttendanceEvent("B", datetime(2025, 10, 8, 7, 0, tzinfo=timezone.utc), True),
        ]
    )

    history = _service(log, roster_abc).get_employee_history("A")

    assert (history.total, history.present, history.absent) == (2, 1, 1)
    first, second = history.records
    assert (first.date, first.time, first.status) == ("2025-10-08", "12:00:00", "Absent")
    assert (second.date, second.status, second.note) == ("2025-10-07", "Present", "on site")


def test_employee_history_requires_id(roster_abc, attendance_log):
    with pytest.raises(ValidationError):
        _service(attendance_log, roster_abc).get_employee_history("  ")
