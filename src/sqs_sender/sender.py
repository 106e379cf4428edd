"""
Module: sender.py
Description: Validate-then-submit orchestration for one message.

Runs the request builder and, only when validation passes, hands the
request to the submitter. Every failure comes back as a failed
SendResult carrying its error kind.
"""

from sqs_sender.errors import SendMessageError
from sqs_sender.models.message import MessageConfig
from sqs_sender.models.result import SendResult
from sqs_sender.sqs_queue.sqs import MessageSubmitter
from sqs_sender.utils.logger import get_logger
from sqs_sender.validation.builder import build_request

logger = get_logger(__name__)


async def send_message(submitter: MessageSubmitter, config: MessageConfig) -> SendResult:
    """
    Validate a message configuration and send it.

    Args:
        submitter: Submission client used for the SendMessage call
        config: Caller-supplied message configuration

    Returns:
        Successful SendResult, or a failed one with error and error_kind set
    """
    try:
        request = build_request(config)
        result = await submitter.submit(request)
    except SendMessageError as e:
        logger.error(
            "Failed to send message",
            error=e.message,
            error_kind=e.kind.value
        )
        return SendResult.failure(e)

    logger.info("Message sent successfully", message_id=result.message_id)
    return result
