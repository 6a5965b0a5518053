from datetime import date

import pytest

from pdecrypt.core.generator import (
    BirthdatePasswordGenerator,
    EraDate,
    generate_candidates,
    parse_date_of_birth,
    parse_national_id,
    shift_years,
)
from pdecrypt.utils.exceptions import (
    InvalidDateError,
    InvalidInputError,
    InvalidNationalIDError,
)

from conftest import NATIONAL_ID


@pytest.mark.parametrize("text", ["0000000000000", "1234567890123", NATIONAL_ID])
def test_parse_national_id_accepts_13_digits(text):
    assert parse_national_id(text) == text


@pytest.mark.parametrize(
    "text",
    [
        "",
        "123456789012",
        "12345678901234",
        "12345678901a3",
        "1234567890 23",
        "-123456789012",
        "١٢٣٤٥٦٧٨٩٠١٢٣",  # Arabic-Indic digits are not ASCII
    ],
)
def test_parse_national_id_rejects_bad_values(text):
    with pytest.raises(InvalidNationalIDError):
        parse_national_id(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("15/01/2000", date(2000, 1, 15)),
        ("1/1/1999", date(1999, 1, 1)),
        ("29/02/2000", date(2000, 2, 29)),
        ("31/12/2566", date(2566, 12, 31)),
        ("1/1/999", date(999, 1, 1)),
        ("01/01/9500", date(9500, 1, 1)),
    ],
)
def test_parse_date_of_birth(text, expected):
    assert parse_date_of_birth(text) == expected


@pytest.mark.parametrize(
    "text", [
        "31/04/2000",
        "29/02/2001",
        "00/01/2000",
        "15/13/2000",
        "2000-01-15",
        "15/01/00",
        "15/01/20000",
        " 15/01/2000",
        "15/01/2000\n",
        "abc",
    ]
)
def test_parse_date_of_birth_rejects_invalid_dates(text):
    with pytest.raises(InvalidDateError):
        parse_date_of_birth(text)


def test_validation_errors_are_value_errors():
    assert issubclass(InvalidDateError, ValueError)
    assert issubclass(InvalidNationalIDError, InvalidInputError)


def test_generate_candidates_order():
    candidates = generate_candidates(date(2000, 1, 15), NATIONAL_ID)

    assert candidates == (
        NATIONAL_ID,
        "15012543",
        "150143",
        "15Jan2543",
        "15Jan43",
        "15012000",
        "150100",
        "15Jan2000",
        "15Jan00",
    )


def test_generate_candidates_is_deterministic():
    dob = date(1994, 12, 27)
    first = generate_candidates(dob, NATIONAL_ID)
    second = generate_candidates(dob, NATIONAL_ID)

    assert first == second
    assert len(first) == 9
    assert first[0] == NATIONAL_ID
    assert isinstance(first, tuple)


def test_generate_pads_day_and_month():
    candidates = generate_candidates(date(1999, 3, 5), NATIONAL_ID)

    assert "05031999" in candidates
    assert "050399" in candidates
    assert "05Mar1999" in candidates
    assert "05Mar99" in candidates
    assert "05032542" in candidates


def test_generate_rejects_invalid_national_id():
    with pytest.raises(InvalidNationalIDError):
        generate_candidates(date(2000, 1, 15), "123")


def test_leap_day_is_clamped_in_shifted_era():
    assert shift_years(date(2000, 2, 29), 543) == EraDate(28, 2, 2543)
    assert shift_years(date(2000, 2, 29), 0) == EraDate(29, 2, 2000)

    candidates = generate_candidates(date(2000, 2, 29), NATIONAL_ID)
    assert candidates[1] == "28022543"
    assert candidates[5] == "29022000"


def test_policy_tables_are_configurable():
    generator = BirthdatePasswordGenerator(
        era_offsets=(0,),
        date_formats=(lambda d: f"{d.year}-{d.month:02d}-{d.day:02d}",),
    )

    assert generator.generate(date(2000, 1, 15), NATIONAL_ID) == (NATIONAL_ID, "2000-01-15")
    assert generator.get_total_count() == 2
    assert BirthdatePasswordGenerator().get_total_count() == 9


def test_late_years_render_past_the_last_calendar_year():
    candidates = generate_candidates(parse_date_of_birth("01/01/9500"), NATIONAL_ID)

    assert candidates == (
        NATIONAL_ID,
        "010110043",
        "010143",
        "01Jan10043",
        "01Jan43",
        "01019500",
        "010100",
        "01Jan9500",
        "01Jan00",
    )


def test_latest_leap_day_is_clamped_past_the_last_calendar_year():
    candidates = generate_candidates(date(9996, 2, 29), NATIONAL_ID)

    assert candidates[1] == "280210539"
    assert candidates[5] == "29029996"


def test_short_years_are_zero_padded():
    candidates = generate_candidates(parse_date_of_birth("1/1/999"), NATIONAL_ID)

    assert candidates[1] == "01011542"
    assert candidates[5] == "01010999"
    assert candidates[6] == "010199"
