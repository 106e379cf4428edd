"""
Module: inputs.py
Description: Named step inputs loaded from the environment.

The automation runner exposes each step input as an environment
variable named INPUT_<NAME>, with the input name upper-cased and its
hyphens kept. ActionInputs reads them with pydantic-settings and
load_message_config() turns them into a MessageConfig.

Key Components:
- ActionInputs: Raw text inputs
- load_message_config(): Builds a MessageConfig, parsing delay-seconds
"""

import re
from typing import Optional

from pydantic import AliasChoices, Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqs_sender.errors import FormatError, MissingRequiredFieldError
from sqs_sender.models.message import MessageConfig

DELAY_SECONDS_PATTERN = re.compile(r'-?[0-9]+', re.ASCII)


def _input_alias(name: str) -> AliasChoices:
    """Accept INPUT_QUEUE-URL as well as INPUT_QUEUE_URL."""
    upper = name.upper()
    return AliasChoices(f"INPUT_{upper}", f"INPUT_{upper.replace('-', '_')}")


def _input_name(loc) -> str:
    """Map a validation error location back to the step input name."""
    name = str(loc).lower()
    if name.startswith('input_'):
        name = name[len('input_'):]
    return name.replace('_', '-')


class ActionInputs(BaseSettings):
    """Step inputs as text, None when not supplied."""

    model_config = SettingsConfigDict(
        env_file=None,
        case_sensitive=False,
        extra="ignore"
    )

    queue_url: str = Field(..., validation_alias=_input_alias("queue-url"))
    message_body: str = Field(..., validation_alias=_input_alias("message-body"))
    message_attributes: Optional[str] = Field(
        default=None,
        validation_alias=_input_alias("message-attributes")
    )
    delay_seconds: Optional[str] = Field(
        default=None,
        validation_alias=_input_alias("delay-seconds")
    )
    message_group_id: Optional[str] = Field(
        default=None,
        validation_alias=_input_alias("message-group-id")
    )
    message_deduplication_id: Optional[str] = Field(
        default=None,
        validation_alias=_input_alias("message-deduplication-id")
    )
    system_attributes: Optional[str] = Field(
        default=None,
        validation_alias=_input_alias("system-attributes")
    )

    @field_validator('*', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        """The runner passes unset inputs as empty strings."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('*', mode='before')
    @classmethod
    def reject_invalid_utf8(cls, v, info: ValidationInfo):
        """Undecodable bytes in the environment arrive as lone surrogates."""
        if isinstance(v, str):
            try:
                v.encode('utf-8')
            except UnicodeEncodeError as e:
                raise ValueError(
                    f"{info.field_name.replace('_', '-')} is not valid UTF-8 text"
                ) from e
        return v

    @field_validator(
        'queue_url',
        'delay_seconds',
        'message_group_id',
        'message_deduplication_id'
    )
    @classmethod
    def strip_whitespace(cls, v: Optional[str]) -> Optional[str]:
        """Trim surrounding whitespace from single-line inputs."""
        return v.strip() if v is not None else v


def parse_delay_seconds(text: Optional[str]) -> Optional[int]:
    """
    Parse delay-seconds input text.

    Raises:
        FormatError: If the text is not an optionally negative run of ASCII digits
    """
    if text is None:
        return None
    if not DELAY_SECONDS_PATTERN.fullmatch(text):
        raise FormatError(
            f'Invalid delay-seconds value: "{text}". Must be a number.'
        )
    return int(text)


def load_message_config() -> MessageConfig:
    """
    Load step inputs from the environment into a MessageConfig.

    Returns:
        MessageConfig built from the supplied inputs

    Raises:
        MissingRequiredFieldError: If queue-url or message-body is missing
        FormatError: If delay-seconds is not an integer or an input is not valid text
    """
    try:
        inputs = ActionInputs()
    except ValidationError as e:
        errors = e.errors()
        # Empty inputs become None, so a None input also means not supplied
        missing = [
            _input_name(error['loc'][0]) for error in errors
            if error['type'] == 'missing' or error.get('input') is None
        ]
        if missing:
            raise MissingRequiredFieldError(
                f"Input required and not supplied: {', '.join(missing)}"
            ) from e
        invalid = [
            f"{_input_name(error['loc'][0])} ({error['msg']})" for error in errors
        ]
        raise FormatError(f"Invalid input: {'; '.join(invalid)}") from e

    return MessageConfig(
        queue_url=inputs.queue_url,
        message_body=inputs.message_body,
        message_attributes=inputs.message_attributes,
        delay_seconds=parse_delay_seconds(inputs.delay_seconds),
        message_group_id=inputs.message_group_id,
        message_deduplication_id=inputs.message_deduplication_id,
        system_attributes=inputs.system_attributes,
    )
