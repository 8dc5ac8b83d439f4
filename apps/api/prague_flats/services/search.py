"""Check-in/check-out validation for the listings search form."""
from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.config import settings
from ..schemas.listings import SearchDates

MISSING_DATES_MESSAGE = "Please select both check-in and check-out dates."
INVALID_DATES_MESSAGE = "Please enter dates as YYYY-MM-DD."
ORDER_MESSAGE = "Check-out date must be after check-in date."


def current_date() -> date:
    return date.today()


class SearchValidationError(ValueError):
    """Raised when a search date pair cannot be used."""


def _is_missing(value: date | str | None) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _coerce(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise SearchValidationError(INVALID_DATES_MESSAGE) from exc


def validate_search(check_in: date | str | None, check_out: date | str | None) -> SearchDates:
    """Return the parsed date pair or raise ``SearchValidationError``.

    Both dates are required and check-in must fall strictly before check-out.
    """

    if _is_missing(check_in) or _is_missing(check_out):
        raise SearchValidationError(MISSING_DATES_MESSAGE)
    check_in_date = _coerce(check_in)
    check_out_date = _coerce(check_out)
    if check_in_date >= check_out_date:
        raise SearchValidationError(ORDER_MESSAGE)
    return SearchDates(check_in=check_in_date, check_out=check_out_date)


def default_search_dates(today: date | None = None, stay_days: int | None = None) -> SearchDates:
    """Today through roughly six months out; check-in may not be earlier than today."""

    start = today or current_date()
    days = settings.default_stay_days if stay_days is None else stay_days
    return SearchDates(check_in=start, check_out=start + timedelta(days=days), check_in_min=start)
