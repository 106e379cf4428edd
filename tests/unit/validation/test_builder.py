"""
Module: test_builder.py
Description: Unit tests for request validation and building.

Covers queue URL format, body size limits, delay range, FIFO group ID
rules, validation order and the shape of the built request.
"""

import pytest
from unittest.mock import patch

from sqs_sender.errors import (
    ErrorKind,
    FormatError,
    MissingRequiredFieldError,
    RangeError,
    SchemaError,
    SizeLimitError,
)
from sqs_sender.models.message import MessageConfig
from sqs_sender.validation.builder import (
    MAX_MESSAGE_BODY_BYTES,
    build_request,
    validate_delay_seconds,
    validate_fifo_queue,
    validate_message_body,
    validate_queue_url,
)


class TestValidateQueueUrl:
    """Test cases for queue URL format validation."""

    @pytest.mark.parametrize("url", [
        "https://sqs.us-east-1.amazonaws.com/123456789012/orders",
        "https://sqs.eu-west-2.amazonaws.com/000000000000/my-queue.fifo",
        "https://sqs.cn-north-1.amazonaws.com.cn/123456789012/orders",
        "https://sqs.ap-southeast-2.amazonaws.com/1/q_1",
    ])
    def test_valid_urls(self, url):
        """Test well-formed SQS queue URLs pass."""
        validate_queue_url(url)

    @pytest.mark.parametrize("url", [
        "http://sqs.us-east-1.amazonaws.com/123456789012/orders",
        "https://sqs.us-east-1.amazonaws.com/orders",
        "https://sqs.us-east-1.amazonaws.com/123456789012/",
        "https://sqs.us-east-1.amazonaws.com/123456789012",
        "https://sqs.us-east-1.amazonaws.com/abc/orders",
        "https://sqs.US-EAST-1.amazonaws.com/123456789012/orders",
        "https://sns.us-east-1.amazonaws.com/123456789012/orders",
        "https://sqs.us-east-1.amazonaws.com/123456789012/orders/extra",
        "https://sqs.us-east-1.amazonaws.com/123456789012/orders\n",
        "",
    ])
    def test_invalid_urls(self, url):
        """Test malformed URLs fail with FormatError."""
        with pytest.raises(FormatError, match="Invalid queue URL format") as exc_info:
            validate_queue_url(url)

        assert exc_info.value.kind == ErrorKind.FORMAT


class TestValidateMessageBody:
    """Test cases for message body size validation."""

    def test_body_at_limit(self):
        """Test a body of exactly 256 KiB passes."""
        assert validate_message_body("a" * 262144) == 262144

    def test_body_over_limit(self):
        """Test a body one byte over the limit fails."""
        with pytest.raises(SizeLimitError, match="262145 bytes"):
            validate_message_body("a" * 262145)

    def test_size_counts_utf8_bytes(self):
        """Test multi-byte characters count by encoded size."""
        # 3 bytes per character in UTF-8
        body = "€" * (MAX_MESSAGE_BODY_BYTES // 3 + 1)
        assert len(body) < MAX_MESSAGE_BODY_BYTES

        with pytest.raises(SizeLimitError):
            validate_message_body(body)

    def test_empty_body(self):
        """Test an empty body has size zero."""
        assert validate_message_body("") == 0

    def test_unencodable_body(self):
        """Test a lone surrogate in the body fails with FormatError."""
        with pytest.raises(FormatError, match="not valid UTF-8") as exc_info:
            validate_message_body("a\udcff")

        assert exc_info.value.kind == ErrorKind.FORMAT

    def test_unencodable_body_in_build_request(self, standard_queue_url):
        """Test build_request reports an unencodable body as a validation error."""
        config = MessageConfig(queue_url=standard_queue_url, message_body="a\udcff")

        with pytest.raises(FormatError):
            build_request(config)


class TestValidateDelaySeconds:
    """Test cases for delay range validation."""

    @pytest.mark.parametrize("delay", [None, 0, 1, 450, 900])
    def test_valid_delays(self, delay):
        """Test delays within range and absent delays pass."""
        validate_delay_seconds(delay)

    @pytest.mark.parametrize("delay", [-1, 901, 3600])
    def test_invalid_delays(self, delay):
        """Test delays outside 0-900 fail with RangeError."""
        with pytest.raises(RangeError, match="between 0 and 900"):
            validate_delay_seconds(delay)


class TestValidateFifoQueue:
    """Test cases for FIFO group ID requirements."""

    def test_fifo_without_group_id(self, fifo_queue_url):
        """Test FIFO queue without group ID fails."""
        with pytest.raises(MissingRequiredFieldError, match="message-group-id is required"):
            validate_fifo_queue(fifo_queue_url, None)

    def test_fifo_with_empty_group_id(self, fifo_queue_url):
        """Test an empty group ID counts as missing."""
        with pytest.raises(MissingRequiredFieldError):
            validate_fifo_queue(fifo_queue_url, "")

    def test_fifo_with_group_id(self, fifo_queue_url):
        """Test FIFO queue with group ID passes without warning."""
        with patch("sqs_sender.validation.builder.logger") as mock_logger:
            validate_fifo_queue(fifo_queue_url, "g1")

        mock_logger.warning.assert_not_called()

    def test_standard_queue_with_group_id_warns(self, standard_queue_url):
        """Test group ID on a standard queue only warns."""
        with patch("sqs_sender.validation.builder.logger") as mock_logger:
            validate_fifo_queue(standard_queue_url, "g1")

        mock_logger.warning.assert_called_once()
        assert "does not end with .fifo" in mock_logger.warning.call_args[0][0]

    def test_standard_queue_without_group_id(self, standard_queue_url):
        """Test standard queue without group ID is silent."""
        with patch("sqs_sender.validation.builder.logger") as mock_logger:
            validate_fifo_queue(standard_queue_url, None)

        mock_logger.warning.assert_not_called()


class TestBuildRequest:
    """Test cases for build_request orchestration."""

    def test_minimal_request_has_no_optional_fields(self, message_config):
        """Test unsupplied optional fields stay unset."""
        request = build_request(message_config)

        assert request.queue_url == message_config.queue_url
        assert request.message_body == message_config.message_body
        assert request.delay_seconds is None
        assert request.message_attributes is None
        assert request.message_system_attributes is None
        assert request.message_group_id is None
        assert request.message_deduplication_id is None
        assert request.to_sqs_kwargs() == {
            'QueueUrl': message_config.queue_url,
            'MessageBody': message_config.message_body,
        }

    def test_fifo_request(self, fifo_queue_url):
        """Test FIFO config with group ID builds a request carrying it."""
        config = MessageConfig(
            queue_url=fifo_queue_url,
            message_body="hi",
            message_group_id="g1"
        )

        request = build_request(config)

        assert request.message_group_id == "g1"
        assert request.delay_seconds is None
        assert request.message_attributes is None
        assert request.message_system_attributes is None
        assert 'DelaySeconds' not in request.to_sqs_kwargs()

    def test_fifo_request_without_group_id(self, fifo_queue_url):
        """Test FIFO config without group ID fails."""
        config = MessageConfig(queue_url=fifo_queue_url, message_body="hi")

        with pytest.raises(MissingRequiredFieldError):
            build_request(config)

    def test_zero_delay_is_omitted(self, standard_queue_url):
        """Test an explicit zero delay is not sent."""
        config = MessageConfig(
            queue_url=standard_queue_url,
            message_body="hi",
            delay_seconds=0
        )

        request = build_request(config)

        assert request.delay_seconds is None
        assert 'DelaySeconds' not in request.to_sqs_kwargs()

    def test_all_optional_fields(self, fifo_queue_url):
        """Test every supplied optional input reaches the request."""
        config = MessageConfig(
            queue_url=fifo_queue_url,
            message_body="hi",
            delay_seconds=900,
            message_group_id="g1",
            message_deduplication_id="dedup-1",
            message_attributes='{"Author": {"DataType": "String", "StringValue": "octocat"}}',
            system_attributes=(
                '{"AWSTraceHeader": {"DataType": "String", '
                '"StringValue": "Root=1-5759e988-bd862e3fe1be46a994272793"}}'
            )
        )

        kwargs = build_request(config).to_sqs_kwargs()

        assert kwargs['DelaySeconds'] == 900
        assert kwargs['MessageGroupId'] == "g1"
        assert kwargs['MessageDeduplicationId'] == "dedup-1"
        assert kwargs['MessageAttributes'] == {
            'Author': {'DataType': 'String', 'StringValue': 'octocat'}
        }
        assert kwargs['MessageSystemAttributes']['AWSTraceHeader']['DataType'] == 'String'

    def test_group_id_forwarded_on_standard_queue(self, standard_queue_url):
        """Test group ID is kept for standard queues despite the warning."""
        config = MessageConfig(
            queue_url=standard_queue_url,
            message_body="hi",
            message_group_id="g1"
        )

        with patch("sqs_sender.validation.builder.logger") as mock_logger:
            request = build_request(config)

        mock_logger.warning.assert_called_once()
        assert request.message_group_id == "g1"

    def test_dedup_id_on_standard_queue_is_silent(self, standard_queue_url):
        """Test deduplication ID on a standard queue is forwarded without warning."""
        config = MessageConfig(
            queue_url=standard_queue_url,
            message_body="hi",
            message_deduplication_id="dedup-1"
        )

        with patch("sqs_sender.validation.builder.logger") as mock_logger:
            request = build_request(config)

        mock_logger.warning.assert_not_called()
        assert request.message_deduplication_id == "dedup-1"

    def test_url_checked_before_body(self):
        """Test the queue URL error wins over a body size error."""
        config = MessageConfig(queue_url="not-a-url", message_body="a" * 262145)

        with pytest.raises(FormatError):
            build_request(config)

    def test_body_checked_before_delay(self, standard_queue_url):
        """Test the body size error wins over a delay error."""
        config = MessageConfig(
            queue_url=standard_queue_url,
            message_body="a" * 262145,
            delay_seconds=901
        )

        with pytest.raises(SizeLimitError):
            build_request(config)

    def test_fifo_checked_before_attributes(self, fifo_queue_url):
        """Test the FIFO error wins over an attribute schema error."""
        config = MessageConfig(
            queue_url=fifo_queue_url,
            message_body="hi",
            message_attributes="not json"
        )

        with pytest.raises(MissingRequiredFieldError):
            build_request(config)

    def test_system_attribute_errors_name_namespace(self, standard_queue_url):
        """Test system attribute errors mention system attributes."""
        config = MessageConfig(
            queue_url=standard_queue_url,
            message_body="hi",
            system_attributes="[]"
        )

        with pytest.raises(SchemaError, match="system attributes"):
            build_request(config)
