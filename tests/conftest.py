"""Shared fixtures for form tests."""

import pytest

from formwrx.config import Config
from formwrx.form.builder import FormBuilder

from .fakes import RecordingCountryBuilder


@pytest.fixture(autouse=True)
def reset_config(monkeypatch: pytest.MonkeyPatch):
    """Give every test a fresh shared configuration."""
    monkeypatch.delenv(Config.environmentVariable, raising=False)
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def builder() -> RecordingCountryBuilder:
    return RecordingCountryBuilder("user")


@pytest.fixture
def plain_builder() -> FormBuilder:
    return FormBuilder("user")
