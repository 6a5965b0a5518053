"""
Candidate password generation for pdecrypt.

Statement PDFs sent by banks and insurers are commonly locked with either the
recipient's 13-digit national ID or their date of birth. The date can be
written with a Gregorian year or with a Buddhist Era year (Gregorian + 543),
and in a handful of layouts. This module turns a birthday and an ID into the
short, fixed list of passwords worth trying.
"""

import calendar
import re
import string
from datetime import date
from typing import Callable, NamedTuple, Sequence, Tuple

from pdecrypt.utils.exceptions import InvalidDateError, InvalidNationalIDError

NATIONAL_ID_LENGTH = 13
DATE_OF_BIRTH_PATTERN = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{1,4})")
BUDDHIST_ERA_OFFSET = 543

# Locale independent, strftime("%b") would follow LC_TIME
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class EraDate(NamedTuple):
    """Day, month and year of a birthday in some era

    The year is a plain integer, so it may lie past ``date.max``.
    """

    day: int
    month: int
    year: int


CandidateList = Tuple[str, ...]
DateFormatter = Callable[[EraDate], str]


def _ddmmyyyy(d: EraDate) -> str:
    return f"{d.day:02d}{d.month:02d}{d.year:04d}"


def _ddmmyy(d: EraDate) -> str:
    return f"{d.day:02d}{d.month:02d}{d.year % 100:02d}"


def _ddmonyyyy(d: EraDate) -> str:
    return f"{d.day:02d}{MONTH_ABBREVIATIONS[d.month - 1]}{d.year:04d}"


def _ddmonyy(d: EraDate) -> str:
    return f"{d.day:02d}{MONTH_ABBREVIATIONS[d.month - 1]}{d.year % 100:02d}"


# Year offsets, in the order the renderings are emitted
ERA_OFFSETS: Tuple[int, ...] = (BUDDHIST_ERA_OFFSET, 0)

# e.g. 27121996, 271296, 27Dec1996, 27Dec96
DATE_FORMATS: Tuple[DateFormatter, ...] = (
    _ddmmyyyy,
    _ddmmyy,
    _ddmonyyyy,
    _ddmonyy,
)


def parse_date_of_birth(text: str) -> date:
    """Parse a ``day/month/year`` date of birth

    Day and month take one or two digits, the year one to four digits.
    Surrounding whitespace is rejected.

    Args:
        text: Date such as ``27/12/1996``, ``1/1/1999`` or ``1/1/999``

    Returns:
        The parsed date

    Raises:
        InvalidDateError: If the text is not a real calendar date in that form
    """
    match = DATE_OF_BIRTH_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise InvalidDateError(f"Invalid date of birth {text!r}, expected dd/mm/yyyy")

    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date of birth {text!r}: {e}")


def parse_national_id(text: str) -> str:
    """Validate a 13-digit national ID and return it unchanged

    Raises:
        InvalidNationalIDError: On wrong length or any non ASCII digit
    """
    if not isinstance(text, str) or len(text) != NATIONAL_ID_LENGTH:
        raise InvalidNationalIDError(
            f"Invalid national ID {text!r}: must be exactly {NATIONAL_ID_LENGTH} digits"
        )
    if not all(c in string.digits for c in text):
        raise InvalidNationalIDError(f"Invalid national ID {text!r}: must contain digits only")
    return text


def shift_years(d: date, years: int) -> EraDate:
    """Move a date by whole years, keeping day and month

    29 February lands on 28 February when the target year is not a leap year.
    """
    year = d.year + years
    day = d.day
    if d.month == 2 and day == 29 and not calendar.isleap(year):
        day = 28
    return EraDate(day, d.month, year)


class BirthdatePasswordGenerator:
    """Generator for passwords derived from a national ID and a date of birth"""

    def __init__(self, era_offsets: Sequence[int] = ERA_OFFSETS,
                 date_formats: Sequence[DateFormatter] = DATE_FORMATS):
        """Initialize with the era and format policy tables

        Args:
            era_offsets: Year offsets applied to the birthday, in output order
            date_formats: Functions rendering a date as a password, in output order
        """
        self.era_offsets = tuple(era_offsets)
        self.date_formats = tuple(date_formats)

    def date_renderings(self, dob: date) -> CandidateList:
        """Render the birthday for every era and format"""
        renderings = []
        for offset in self.era_offsets:
            shifted = shift_years(dob, offset)
            for fmt in self.date_formats:
                renderings.append(fmt(shifted))
        return tuple(renderings)

    def generate(self, dob: date, national_id: str) -> CandidateList:
        """Generate the ordered candidate list, national ID first

        Renderings that happen to coincide are kept, the list is never
        deduplicated.
        """
        national_id = parse_national_id(national_id)
        return (national_id,) + self.date_renderings(dob)

    def get_total_count(self) -> int:
        """Get the number of candidates every call to generate returns"""
        return 1 + len(self.era_offsets) * len(self.date_formats)


def generate_candidates(dob: date, national_id: str) -> CandidateList:
    """Generate the default candidate list for a birthday and national ID"""
    return BirthdatePasswordGenerator().generate(dob, national_id)
