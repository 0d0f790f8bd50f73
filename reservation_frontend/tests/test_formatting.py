import pytest

from reservation_frontend.app.services.models import Reservation
from reservation_frontend.app.services.formatting import format_reservation_time


def _reservation(**fields) -> Reservation:
    return Reservation(id=1, name="Taro", **fields)


@pytest.mark.parametrize(
    ("fields", "locale", "expected"),
    [
        ({"datetime": "2024-05-01T14:30:00"}, "ja", "2024/5/1 14:30:00"),
        ({"datetime": "2024-12-24T09:05:00"}, "ja", "2024/12/24 9:05:00"),
        ({"datetime": "2024-05-01T14:30:00"}, "en", "5/1/2024, 2:30:00 PM"),
        ({"datetime": "2024-05-01T00:15:00"}, "en", "5/1/2024, 12:15:00 AM"),
        ({"date": "2024-05-03", "time": "18:00"}, "ja", "2024/5/3 18:00"),
        ({"date": "2024-05-03", "time": "18:00"}, "en", "5/3/2024 18:00"),
        ({"datetime": "tomorrow evening"}, "ja", "tomorrow evening"),
        ({"date": "someday", "time": "18:00"}, "ja", "someday 18:00"),
    ],
)
def test_format_reservation_time(fields, locale, expected):
    assert format_reservation_time(_reservation(**fields), locale) == expected


def test_combined_datetime_takes_precedence():
    reservation = _reservation(datetime="2024-05-01T14:30:00", date="1999-01-01", time="00:00")

    assert format_reservation_time(reservation, "ja") == "2024/5/1 14:30:00"
