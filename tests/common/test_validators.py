import pytest

from attendance_dashboard.common.validators import require_min_length, require_non_empty, require_presence_map
from attendance_dashboard.core.exceptions import ValidationError


def test_presence_map_returns_plain_copy():
    assert require_presence_map({"a": True, "b": False}, max_entries=10) == {"a": True, "b": False}


@pytest.mark.parametrize("payload", [None, [], ["a"], "a=true", 1])
def test_presence_map_rejects_non_objects(payload):
    with pytest.raises(ValidationError):
        require_presence_map(payload, max_entries=10)


def test_presence_map_rejects_non_boolean_values():
    with pytest.raises(ValidationError):
        require_presence_map({"a": "yes"}, max_entries=10)


def test_presence_map_rejects_oversized_payload():
    with pytest.raises(ValidationError):
        require_presence_map({str(i): True for i in range(11)}, max_entries=10)


def test_require_non_empty_strips():
    assert require_non_empty("  bob ", "Username") == "bob"


def test_require_min_length():
    with pytest.raises(ValidationError):
        require_min_length("12345", "Password", 6)
