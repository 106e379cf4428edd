"""
Module: main.py
Description: Entry point for the SQS send-message step.

Loads step inputs, validates and sends one message, then reports the
outputs. The process exits non-zero on any failure.
"""

import asyncio
import sys
from typing import Optional

from sqs_sender.config.inputs import load_message_config
from sqs_sender.config.settings import Settings, settings
from sqs_sender.errors import SendMessageError
from sqs_sender.models.result import SendResult
from sqs_sender.reporting.outputs import OutputWriter, report_result
from sqs_sender.sender import send_message
from sqs_sender.sqs_queue.sqs import MessageSubmitter, SQSSubmitter
from sqs_sender.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


async def run(
    app_settings: Optional[Settings] = None,
    submitter: Optional[MessageSubmitter] = None,
    writer: Optional[OutputWriter] = None
) -> int:
    """
    Run one send from environment inputs.

    Args:
        app_settings: Settings to use (defaults to the global settings)
        submitter: Submission client (defaults to an SQSSubmitter)
        writer: Output writer (defaults to one on the configured output file)

    Returns:
        Process exit code
    """
    app_settings = app_settings or settings
    writer = writer or OutputWriter(app_settings.github_output)

    logger.info("AWS SQS Send Message", version=app_settings.app_version)

    try:
        config = load_message_config()
    except SendMessageError as e:
        return report_result(SendResult.failure(e), writer)

    logger.info("Queue URL", queue_url=config.queue_url, fifo=config.is_fifo)

    if submitter is None:
        submitter = SQSSubmitter(
            region_name=app_settings.aws_region,
            endpoint_url=app_settings.aws_endpoint_url
        )

    result = await send_message(submitter, config)
    return report_result(result, writer)


def main() -> None:
    """Console script entry point."""
    configure_logging(settings.log_level)
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
