"""Тесты для models/."""
from datetime import date

import pytest
from pydantic import ValidationError

from models.enums import NameRole, PassportError
from models.passport import (
    FIELD_ORDER,
    PassportCheckResult,
    PassportRecord,
    PassportValidationError,
)
from tests.conftest import make_record


class TestPassportError:
    """Тесты для PassportError."""

    def test_is_str(self):
        assert PassportError.WRONG_FORMAT == "wrong_format"
        assert str(PassportError.EMPTY_FIELD) == "empty_field"

    def test_closed_set(self):
        assert len(PassportError) == 9


class TestNameRole:
    """Тесты для NameRole."""

    def test_required_roles(self):
        assert NameRole.LAST_NAME.is_required
        assert NameRole.FIRST_NAME.is_required

    def test_middle_name_optional(self):
        assert not NameRole.MIDDLE_NAME.is_required


class TestPassportRecord:
    """Тесты для PassportRecord."""

    def test_parses_iso_dates(self):
        record = make_record(birth_date="1997-02-20", issue_date="2017-02-20")
        assert record.birth_date == date(1997, 2, 20)
        assert record.issue_date == date(2017, 2, 20)

    def test_defaults(self):
        record = PassportRecord(
            last_name="Маск",
            first_name="Илон",
            series="4617",
            number="657482",
            issuer_code="500159",
        )
        assert record.middle_name == ""
        assert record.issued_by == ""
        assert record.place_of_birth == ""
        assert record.birth_date is None
        assert record.issue_date is None

    def test_text_not_stripped(self):
        record = make_record(last_name="  Маск ")
        assert record.last_name == "  Маск "

    def test_invalid_date_string(self):
        with pytest.raises(ValidationError):
            make_record(birth_date="31.02.1997")


class TestPassportCheckResult:
    """Тесты для PassportCheckResult."""

    def test_empty_is_valid(self):
        result = PassportCheckResult()
        assert result.is_valid
        assert result.first_error() is None

    def test_first_error_follows_field_order(self):
        result = PassportCheckResult(
            errors={
                "issue_date": PassportError.EXPIRED_AT_AGE_20,
                "series": PassportError.WRONG_FORMAT,
            },
        )
        assert not result.is_valid
        assert result.first_error() == ("series", PassportError.WRONG_FORMAT)

    def test_field_order(self):
        assert FIELD_ORDER[0] == "last_name"
        assert FIELD_ORDER[-1] == "issue_date"


class TestPassportValidationError:
    """Тесты для PassportValidationError."""

    def test_carries_result(self):
        result = PassportCheckResult(errors={"number": PassportError.EMPTY_FIELD})
        error = PassportValidationError(result)
        assert error.result is result

    def test_message_lists_codes(self):
        result = PassportCheckResult(
            errors={
                "number": PassportError.EMPTY_FIELD,
                "birth_date": PassportError.INVALID_BIRTH_DATE,
            },
        )
        assert str(PassportValidationError(result)) == (
            "Passport record is invalid: number=empty_field, birth_date=invalid_birth_date"
        )
