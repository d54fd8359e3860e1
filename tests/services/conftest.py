"""Fixtures for service unit tests."""
import pytest

from config import Settings
from services.passport_service import PassportService


@pytest.fixture
def service_settings() -> Settings:
    return Settings(log_level="DEBUG", timezone="Europe/Moscow")


@pytest.fixture
def service(service_settings) -> PassportService:
    return PassportService(service_settings)
