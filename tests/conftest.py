"""
Test configuration and shared fixtures.

Provides fixtures for:
- Settings (ENV=test, no .env file required)
- Reference check date used across validator tests
- Record factory for service tests
"""
import os

os.environ.setdefault("ENV", "test")

from datetime import date

import pytest

from config import Settings, get_settings
from models.passport import PassportRecord


# =============================================================================
# BASE FIXTURES
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings from environment (cache reset per test)."""
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def check_date() -> date:
    """Reference date the validators are evaluated against."""
    return date(2024, 2, 27)


# =============================================================================
# TEST DATA HELPERS
# =============================================================================


def make_record(**overrides) -> PassportRecord:
    defaults = {
        "last_name": "Иванова",
        "first_name": "Мария",
        "middle_name": "Петровна",
        "series": "4617",
        "number": "657482",
        "issuer_code": "500-159",
        "issued_by": "ОУФМС России по МО",
        "place_of_birth": "гор. Москва",
        "birth_date": date(1997, 2, 20),
        "issue_date": date(2017, 2, 20),
    }
    defaults.update(overrides)
    return PassportRecord(**defaults)


@pytest.fixture
def record() -> PassportRecord:
    return make_record()
