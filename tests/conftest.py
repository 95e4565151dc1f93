"""Shared test fixtures."""
import pytest
from date_entry.config import Settings
from date_entry.international.locale_resolver import resolve


@pytest.fixture
def test_settings():
    """Settings with explicit values so the environment cannot leak in."""
    return Settings(
        default_locale="pt-BR",
        commit_on="change",
        log_level="DEBUG",
        cors_origins=["http://testserver"],
    )


@pytest.fixture
def pt_br():
    return resolve("pt-BR")


@pytest.fixture
def en_us():
    return resolve("en-US")


@pytest.fixture
def de_de():
    return resolve("de-DE")
