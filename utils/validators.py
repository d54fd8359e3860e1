from datetime import date

from models.enums import NameRole, PassportError
from utils.script import has_only_allowed_chars

_ASCII_DIGITS = frozenset("0123456789")

_SERIES_LENGTH = 4
_NUMBER_LENGTH = 6
_ISSUER_CODE_LENGTH = 6
_ISSUER_CODE_SEPARATOR = "-"

# Современный бланк паспорта появился в 1997 году
BLANK_INTRODUCTION_YEAR = 1997
# Когда квота заканчивается, бланки печатают в счёт будущих лет
SERIES_YEAR_TOLERANCE = 5


def _is_ascii_digits(value: str, length: int) -> bool:
    return len(value) == length and all(char in _ASCII_DIGITS for char in value)


def validate_name(value: str, role: NameRole) -> PassportError | None:
    if not value:
        if role.is_required:
            return PassportError.EMPTY_FIELD
        return None

    if not has_only_allowed_chars(value):
        return PassportError.NON_ALLOWED_SCRIPT

    return None


def validate_last_name(value: str) -> PassportError | None:
    return validate_name(value, NameRole.LAST_NAME)


def validate_first_name(value: str) -> PassportError | None:
    return validate_name(value, NameRole.FIRST_NAME)


def validate_middle_name(value: str) -> PassportError | None:
    return validate_name(value, NameRole.MIDDLE_NAME)


def resolve_series_year(series: str, check_date: date) -> int:
    """Resolve the 2-digit year in a series to a full year.

    '4617' checked in 2024 → 2017, '4699' → 1999. Years up to
    check_year % 100 + 5 belong to the current century.
    """
    two_digit_year = int(series[-2:])
    if two_digit_year <= check_date.year % 100 + SERIES_YEAR_TOLERANCE:
        return 2000 + two_digit_year
    return 1900 + two_digit_year


def validate_series(value: str, check_date: date) -> PassportError | None:
    if not value:
        return PassportError.EMPTY_FIELD

    if not _is_ascii_digits(value, _SERIES_LENGTH):
        return PassportError.WRONG_FORMAT

    issue_year = resolve_series_year(value, check_date)
    if not BLANK_INTRODUCTION_YEAR <= issue_year <= check_date.year + SERIES_YEAR_TOLERANCE:
        return PassportError.IMPLAUSIBLE_ISSUE_YEAR

    return None


def validate_number(value: str) -> PassportError | None:
    if not value:
        return PassportError.EMPTY_FIELD

    if not _is_ascii_digits(value, _NUMBER_LENGTH):
        return PassportError.WRONG_FORMAT

    return None


def validate_issuer_code(value: str) -> PassportError | None:
    """Issuer code is 'NNNNNN' or 'NNN-NNN'."""
    if not value:
        return PassportError.EMPTY_FIELD

    half = _ISSUER_CODE_LENGTH // 2
    if len(value) == _ISSUER_CODE_LENGTH + 1 and value[half] == _ISSUER_CODE_SEPARATOR:
        digits = value[:half] + value[half + 1:]
    else:
        digits = value

    if not _is_ascii_digits(digits, _ISSUER_CODE_LENGTH):
        return PassportError.WRONG_FORMAT

    return None
