import re
from datetime import date, datetime

from booking_core.utils.constants import DATE_FORMAT

ISO_DATE_REGEX = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def from_iso_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Date must be a string in {DATE_FORMAT} format")
    value = value.strip()
    if ISO_DATE_REGEX.fullmatch(value):
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            pass
    raise ValueError(f"Invalid date '{value}', expected {DATE_FORMAT}")
