"""
Module: conftest.py
Description: Shared pytest fixtures for SQS sender tests.

Provides queue URLs, message configurations, test settings and a
mocked submitter so the validation and reporting layers can be tested
without any network access.
"""

import os

import pytest
from unittest.mock import AsyncMock
from pydantic import Field
from pydantic_settings import SettingsConfigDict

from sqs_sender.config.settings import Settings
from sqs_sender.models.message import MessageConfig
from sqs_sender.models.result import SendResult

STANDARD_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/orders"
FIFO_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/q.fifo"


class TestSettings(Settings):
    """Test settings that ignore the environment and .env files."""

    model_config = SettingsConfigDict(
        env_file=None,
        case_sensitive=False,
        extra="ignore"
    )

    app_version: str = Field(default="0.0.0-test", description="Application version")
    log_level: str = Field(default="DEBUG", description="Logging level")
    aws_region: str = Field(default="us-east-1", description="AWS region")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings
    ):
        """Only use values passed to the constructor."""
        return (init_settings,)


@pytest.fixture(autouse=True)
def clean_input_env(monkeypatch):
    """Remove step inputs and runner variables leaking in from the host."""
    for name in list(os.environ):
        if name.upper().startswith("INPUT_") or name.upper() == "GITHUB_OUTPUT":
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_settings():
    """Provide test configuration settings."""
    return TestSettings()


@pytest.fixture
def standard_queue_url():
    """URL of a standard queue."""
    return STANDARD_QUEUE_URL


@pytest.fixture
def fifo_queue_url():
    """URL of a FIFO queue."""
    return FIFO_QUEUE_URL


@pytest.fixture
def message_config():
    """Minimal valid configuration for a standard queue."""
    return MessageConfig(
        queue_url=STANDARD_QUEUE_URL,
        message_body='{"order_id": "12345"}'
    )


@pytest.fixture
def success_result():
    """Successful send result as SQS returns it for a FIFO queue."""
    return SendResult(
        success=True,
        message_id="5fea7756-0ea4-451a-a703-a558b933e274",
        sequence_number="18849496460467696128",
        md5_of_body="fafb00f5732ab283681e124bf8747ed1",
        md5_of_attributes="3ae8f24a165a8cedc005670c81a27295"
    )


@pytest.fixture
def mock_submitter(success_result):
    """Submitter whose submit() returns success_result."""
    submitter = AsyncMock()
    submitter.submit.return_value = success_result
    return submitter
