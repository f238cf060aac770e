import datetime as dt

import pytest
from pydantic import ValidationError

from lingam.app.schemas.appointments import AppointmentCreate, AppointmentPurpose, to_calendar_date

BASE = {
    "name": "A",
    "email": "a@x.com",
    "phone": "1",
    "date": "2025-06-01",
    "time": "10:00",
    "purpose": "general-viewing",
}


def test_parses_plain_date():
    payload = AppointmentCreate.model_validate(BASE)
    assert payload.date == dt.date(2025, 6, 1)
    assert payload.purpose is AppointmentPurpose.GENERAL_VIEWING
    assert payload.message is None


def test_full_timestamp_is_truncated_to_utc_date():
    payload = AppointmentCreate.model_validate({**BASE, "date": "2025-06-01T00:00:00.000Z"})
    assert payload.date == dt.date(2025, 6, 1)

    shifted = AppointmentCreate.model_validate({**BASE, "date": "2025-06-01T22:00:00-05:00"})
    assert shifted.date == dt.date(2025, 6, 2)


def test_status_in_request_is_dropped():
    payload = AppointmentCreate.model_validate({**BASE, "status": "confirmed"})
    assert "status" not in payload.model_dump()


@pytest.mark.parametrize("field,value", [
    ("time", "10am"),
    ("time", "25:00"),
    ("purpose", "repair"),
    ("name", ""),
])
def test_rejects_malformed_requests(field, value):
    with pytest.raises(ValidationError):
        AppointmentCreate.model_validate({**BASE, field: value})


def test_to_calendar_date_passes_dates_through():
    assert to_calendar_date(dt.date(2025, 1, 2)) == dt.date(2025, 1, 2)
    assert to_calendar_date(dt.datetime(2025, 1, 2, 23, 59)) == dt.date(2025, 1, 2)
