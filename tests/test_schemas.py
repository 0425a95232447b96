import pytest
from pydantic import ValidationError

from status_exchange.core.schemas import FIXED_STATUS, ProblemDetails, StatusPayload


def test_fixed_status_fields():
    assert FIXED_STATUS.test == "NO"
    assert FIXED_STATUS.date == "2013-08-16T15:31:20+10:00"
    assert FIXED_STATUS.count == 1000


def test_status_payload_json_round_trip():
    restored = StatusPayload.model_validate_json(FIXED_STATUS.model_dump_json())
    assert restored == FIXED_STATUS
    assert list(restored.model_dump()) == ["test", "date", "count"]


def test_marker_is_optional():
    payload = StatusPayload.model_validate({"date": "2013-08-16T15:31:20+10:00", "count": 0})
    assert payload.test is None
    assert payload.count == 0


@pytest.mark.parametrize("count", [-1, "1000", 10.5, True])
def test_count_must_be_non_negative_integer(count):
    with pytest.raises(ValidationError):
        StatusPayload.model_validate({"test": "NO", "date": "2013-08-16T15:31:20+10:00", "count": count})


def test_problem_details_defaults():
    problem = ProblemDetails(title="Invalid valid_date", status=400)
    assert problem.type == "about:blank"
    assert problem.errorCode is None
