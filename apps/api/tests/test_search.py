from datetime import date

import pytest

from prague_flats.services.search import (
    INVALID_DATES_MESSAGE,
    MISSING_DATES_MESSAGE,
    ORDER_MESSAGE,
    SearchValidationError,
    default_search_dates,
    validate_search,
)


@pytest.mark.parametrize(
    ("check_in", "check_out"),
    [("2025-06-10", "2025-06-10"), ("2025-06-15", "2025-06-10")],
)
def test_rejects_equal_or_reversed_dates(check_in, check_out) -> None:
    with pytest.raises(SearchValidationError) as exc:
        validate_search(check_in, check_out)

    assert str(exc.value) == ORDER_MESSAGE


def test_accepts_next_day_checkout() -> None:
    dates = validate_search("2025-06-10", "2025-06-11")

    assert dates.check_in == date(2025, 6, 10)
    assert dates.check_out == date(2025, 6, 11)


@pytest.mark.parametrize(
    ("check_in", "check_out"),
    [(None, "2025-06-11"), ("2025-06-10", None), ("", ""), ("  ", "2025-06-11")],
)
def test_missing_dates(check_in, check_out) -> None:
    with pytest.raises(SearchValidationError) as exc:
        validate_search(check_in, check_out)

    assert str(exc.value) == MISSING_DATES_MESSAGE


def test_missing_date_reported_before_unparsable_one() -> None:
    with pytest.raises(SearchValidationError) as exc:
        validate_search("garbage", None)

    assert str(exc.value) == MISSING_DATES_MESSAGE


def test_unparsable_date() -> None:
    with pytest.raises(SearchValidationError) as exc:
        validate_search("10/06/2025", "2025-06-11")

    assert str(exc.value) == INVALID_DATES_MESSAGE


def test_accepts_date_objects() -> None:
    dates = validate_search(date(2025, 1, 1), date(2025, 2, 1))

    assert (dates.check_out - dates.check_in).days == 31


def test_default_dates_span_180_days() -> None:
    dates = default_search_dates(date(2025, 1, 1))

    assert dates.check_in == date(2025, 1, 1)
    assert dates.check_out == date(2025, 6, 30)
    assert dates.check_in_min == date(2025, 1, 1)
