from enum import StrEnum


class PassportError(StrEnum):
    EMPTY_FIELD = "empty_field"
    NON_ALLOWED_SCRIPT = "non_allowed_script"
    WRONG_FORMAT = "wrong_format"
    IMPLAUSIBLE_ISSUE_YEAR = "implausible_issue_year"
    ISSUED_BEFORE_AGE_FLOOR = "issued_before_age_floor"
    ISSUED_IN_FUTURE = "issued_in_future"
    EXPIRED_AT_AGE_20 = "expired_at_age_20"
    EXPIRED_AT_AGE_45 = "expired_at_age_45"
    INVALID_BIRTH_DATE = "invalid_birth_date"


class NameRole(StrEnum):
    LAST_NAME = "last_name"
    FIRST_NAME = "first_name"
    MIDDLE_NAME = "middle_name"

    @property
    def is_required(self) -> bool:
        # Отчества может не быть
        return self is not NameRole.MIDDLE_NAME
