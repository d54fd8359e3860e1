import logging
from collections.abc import Callable
from datetime import date

from config import Settings, get_settings
from models.enums import PassportError
from models.passport import (
    PassportCheckResult,
    PassportRecord,
    PassportValidationError,
)
from utils.date_validators import validate_birth_date, validate_issue_date
from utils.normalizers import normalize_issued_by, normalize_place_of_birth
from utils.time import get_today
from utils.validators import (
    validate_first_name,
    validate_issuer_code,
    validate_last_name,
    validate_middle_name,
    validate_number,
    validate_series,
)

logger = logging.getLogger(__name__)

FieldCheck = Callable[[PassportRecord, date], PassportError | None]

# Порядок совпадает с FIELD_ORDER
_FIELD_CHECKS: tuple[tuple[str, FieldCheck], ...] = (
    ("last_name", lambda r, _: validate_last_name(r.last_name)),
    ("first_name", lambda r, _: validate_first_name(r.first_name)),
    ("middle_name", lambda r, _: validate_middle_name(r.middle_name)),
    ("series", lambda r, d: validate_series(r.series, d)),
    ("number", lambda r, _: validate_number(r.number)),
    ("issuer_code", lambda r, _: validate_issuer_code(r.issuer_code)),
    ("birth_date", lambda r, d: validate_birth_date(r.birth_date, d)),
    ("issue_date", lambda r, d: validate_issue_date(r.issue_date, r.birth_date, d)),
)


class PassportService:
    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def check(self, record: PassportRecord, check_date: date) -> PassportCheckResult:
        """Run every field validator; each failing field keeps its first error.

        check_date is always supplied by the caller.
        """
        result = PassportCheckResult()
        for field_name, field_check in _FIELD_CHECKS:
            error = field_check(record, check_date)
            if error is not None:
                result.errors[field_name] = error

        # Значения полей не логируем: персональные данные
        if result.is_valid:
            logger.debug("Passport record valid, check_date=%s", check_date)
        else:
            logger.info(
                "Passport record invalid: %s",
                ", ".join(f"{name}={error}" for name, error in result.errors.items()),
            )
        return result

    def ensure_valid(self, record: PassportRecord, check_date: date) -> PassportRecord:
        """Return the record unchanged or raise PassportValidationError."""
        result = self.check(record, check_date)
        if not result.is_valid:
            raise PassportValidationError(result)
        return record

    def normalize(self, record: PassportRecord) -> PassportRecord:
        return record.model_copy(
            update={
                "place_of_birth": normalize_place_of_birth(record.place_of_birth),
                "issued_by": normalize_issued_by(record.issued_by),
            },
        )

    def today(self) -> date:
        """Current date in the configured timezone, for use as check_date."""
        return get_today(self._settings.timezone)
