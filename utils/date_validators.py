from datetime import MAXYEAR, MINYEAR, date, timedelta

from models.enums import PassportError
from utils.time import add_years, as_date, to_date

AGE_FLOOR_AT_ISSUE = 14
ADULT_AGE = 18
# Паспорт подлежит замене при достижении 20 и 45 лет
REPLACEMENT_AGES: tuple[int, ...] = (20, 45)
# После дня рождения старый паспорт действителен ещё 91 день
GRACE_PERIOD_DAYS = 91

_EXPIRY_ERRORS: dict[int, PassportError] = {
    20: PassportError.EXPIRED_AT_AGE_20,
    45: PassportError.EXPIRED_AT_AGE_45,
}


def expiry_date(birth_date: date, replacement_age: int) -> date | None:
    """Last day a passport issued before `replacement_age` is still valid.

    None when that day falls after date.max: the passport cannot expire.
    """
    if birth_date.year + replacement_age > MAXYEAR:
        return None

    milestone = add_years(birth_date, replacement_age)
    if milestone > date.max - timedelta(days=GRACE_PERIOD_DAYS):
        return None

    return milestone + timedelta(days=GRACE_PERIOD_DAYS)


def validate_issue_date(
    issue_date: date | None,
    birth_date: date | None,
    check_date: date,
) -> PassportError | None:
    """Validate issue date against birth date and check date.

    Age at issue is the difference of calendar years, not an exact age:
    born 2010-12-31 and issued 2024-01-01 counts as 14.
    """
    issue_date = as_date(issue_date)
    birth_date = as_date(birth_date)
    check_date = to_date(check_date)

    if issue_date is None:
        return PassportError.EMPTY_FIELD

    if birth_date is None:
        return PassportError.EMPTY_FIELD

    age_at_issue = issue_date.year - birth_date.year
    if age_at_issue < AGE_FLOOR_AT_ISSUE:
        return PassportError.ISSUED_BEFORE_AGE_FLOOR

    if issue_date > check_date:
        return PassportError.ISSUED_IN_FUTURE

    for replacement_age in REPLACEMENT_AGES:
        if age_at_issue >= replacement_age:
            continue
        expires = expiry_date(birth_date, replacement_age)
        if expires is not None and check_date > expires:
            return _EXPIRY_ERRORS[replacement_age]

    return None


def validate_birth_date(
    birth_date: date | None, check_date: date,
) -> PassportError | None:
    birth_date = as_date(birth_date)
    check_date = to_date(check_date)

    if birth_date is None:
        return PassportError.INVALID_BIRTH_DATE

    if birth_date > check_date:
        return PassportError.INVALID_BIRTH_DATE

    # Раньше 19 года 18 лет исполниться не могло
    if check_date.year - ADULT_AGE < MINYEAR:
        return PassportError.INVALID_BIRTH_DATE

    if birth_date > add_years(check_date, -ADULT_AGE):
        return PassportError.INVALID_BIRTH_DATE

    return None
