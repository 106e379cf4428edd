"""
Module: builder.py
Description: Validation and request construction for SQS sends.

Checks a MessageConfig against the SQS SendMessage constraints and
builds the normalized SendRequest. Validation is fail-fast: the first
violated rule raises and no request is produced.

Key Components:
- validate_queue_url(): Syntactic queue URL check
- validate_message_body(): 256 KiB body cap
- validate_delay_seconds(): 0-900 delay range
- validate_fifo_queue(): Group ID requirement for FIFO queues
- build_request(): Runs all checks in order and builds the request

Dependencies: re, logger
"""

import re
from typing import Optional

from sqs_sender.errors import (
    FormatError,
    MissingRequiredFieldError,
    RangeError,
    SizeLimitError,
)
from sqs_sender.models.message import MessageConfig
from sqs_sender.models.request import SendRequest
from sqs_sender.utils.logger import get_logger
from sqs_sender.validation.attributes import parse_attributes

logger = get_logger(__name__)

QUEUE_URL_PATTERN = re.compile(
    r'^https://sqs\.[a-z0-9-]+\.amazonaws\.com(\.cn)?/\d+/[^/]+$'
)
MAX_MESSAGE_BODY_BYTES = 256 * 1024
MIN_DELAY_SECONDS = 0
MAX_DELAY_SECONDS = 900


def validate_queue_url(queue_url: str) -> None:
    """
    Validate queue URL format.

    Raises:
        FormatError: If the URL does not look like an SQS queue URL
    """
    if not isinstance(queue_url, str) or not QUEUE_URL_PATTERN.fullmatch(queue_url):
        raise FormatError(
            f'Invalid queue URL format: "{queue_url}". '
            'Expected format: https://sqs.{region}.amazonaws.com/{account-id}/{queue-name}'
        )


def validate_message_body(message_body: str) -> int:
    """
    Validate message body size (max 256 KiB of UTF-8).

    Returns:
        Body size in bytes

    Raises:
        FormatError: If the body cannot be encoded as UTF-8
        SizeLimitError: If the encoded body is too large
    """
    try:
        size_in_bytes = len(message_body.encode('utf-8'))
    except UnicodeEncodeError as e:
        raise FormatError(
            f"Message body is not valid UTF-8 text (invalid character at position {e.start})"
        ) from e
    if size_in_bytes > MAX_MESSAGE_BODY_BYTES:
        raise SizeLimitError(
            f"Message body size ({size_in_bytes} bytes) exceeds maximum allowed size "
            f"({MAX_MESSAGE_BODY_BYTES} bytes / 256 KB)"
        )
    return size_in_bytes


def validate_delay_seconds(delay_seconds: Optional[int]) -> None:
    """Validate delay seconds (0-900) when one is given."""
    if delay_seconds is None:
        return
    if not MIN_DELAY_SECONDS <= delay_seconds <= MAX_DELAY_SECONDS:
        raise RangeError(
            f"delay-seconds must be between {MIN_DELAY_SECONDS} and "
            f"{MAX_DELAY_SECONDS} (got {delay_seconds})"
        )


def validate_fifo_queue(queue_url: str, message_group_id: Optional[str]) -> None:
    """
    Validate FIFO queue requirements.

    A group ID on a standard queue only produces a warning; it is still
    forwarded and SQS decides what to do with it.

    Raises:
        MissingRequiredFieldError: If a FIFO queue has no group ID
    """
    is_fifo = queue_url.endswith('.fifo')

    if is_fifo and not message_group_id:
        raise MissingRequiredFieldError(
            'message-group-id is required for FIFO queues (queue URL ends with .fifo)'
        )

    if not is_fifo and message_group_id:
        logger.warning(
            "message-group-id is provided but queue URL does not end with .fifo. "
            "This parameter will be ignored for standard queues.",
            queue_url=queue_url,
            message_group_id=message_group_id
        )


def build_request(config: MessageConfig) -> SendRequest:
    """
    Validate a message configuration and build the SendMessage request.

    Checks run in order: queue URL, body size, delay range, FIFO group ID,
    message attributes, system attributes.

    Args:
        config: Caller-supplied message configuration

    Returns:
        SendRequest with unsupplied optional fields left unset

    Raises:
        SendMessageError: The first rule the configuration violates
    """
    validate_queue_url(config.queue_url)
    body_size = validate_message_body(config.message_body)
    validate_delay_seconds(config.delay_seconds)
    validate_fifo_queue(config.queue_url, config.message_group_id)

    message_attributes = None
    if config.message_attributes:
        message_attributes = parse_attributes(
            config.message_attributes,
            label="message attributes"
        )

    system_attributes = None
    if config.system_attributes:
        system_attributes = parse_attributes(
            config.system_attributes,
            label="system attributes"
        )

    logger.info("Sending message to queue", queue_url=config.queue_url)
    logger.info("Message body size", body_size_bytes=body_size)

    # A zero delay is the queue default, so it is never sent explicitly
    delay_seconds = config.delay_seconds if config.delay_seconds else None
    if delay_seconds is not None:
        logger.info("Delay", delay_seconds=delay_seconds)
    if message_attributes is not None:
        logger.info("Message attributes", attribute_count=len(message_attributes))
    if system_attributes is not None:
        logger.info("System attributes", attribute_count=len(system_attributes))
    if config.message_group_id:
        logger.info("Message group ID", message_group_id=config.message_group_id)
    if config.message_deduplication_id:
        logger.info(
            "Message deduplication ID",
            message_deduplication_id=config.message_deduplication_id
        )

    return SendRequest(
        queue_url=config.queue_url,
        message_body=config.message_body,
        delay_seconds=delay_seconds,
        message_attributes=message_attributes,
        message_system_attributes=system_attributes,
        message_group_id=config.message_group_id or None,
        message_deduplication_id=config.message_deduplication_id or None,
    )
