from dataclasses import dataclass, field
from datetime import date

from pydantic import BaseModel

from models.enums import PassportError

FIELD_ORDER: tuple[str, ...] = (
    "last_name",
    "first_name",
    "middle_name",
    "series",
    "number",
    "issuer_code",
    "birth_date",
    "issue_date",
)


class PassportRecord(BaseModel):
    last_name: str
    first_name: str
    middle_name: str = ""
    series: str
    number: str
    issuer_code: str
    issued_by: str = ""
    place_of_birth: str = ""
    birth_date: date | None = None
    issue_date: date | None = None


@dataclass
class PassportCheckResult:
    errors: dict[str, PassportError] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def first_error(self) -> tuple[str, PassportError] | None:
        """First failing field in FIELD_ORDER, or None when the record is valid."""
        for name in FIELD_ORDER:
            if name in self.errors:
                return name, self.errors[name]
        return None


class PassportValidationError(Exception):
    """Raised by PassportService.ensure_valid when a record has failing fields."""

    def __init__(self, result: PassportCheckResult) -> None:
        self.result = result
        details = ", ".join(
            f"{name}={error}" for name, error in result.errors.items()
        )
        super().__init__(f"Passport record is invalid: {details}")
