"""
Module: outputs.py
Description: Step outputs and terminal status reporting.

Writes the fields of a successful SendResult to the runner's output
file and logs a summary. On failure, emits the error annotation the
runner shows as the step's failure reason.

Key Components:
- OutputWriter: Appends name=value outputs to the GITHUB_OUTPUT file
- report_result(): Maps a SendResult to outputs and an exit code
"""

import sys
import uuid
from typing import Optional, TextIO

from sqs_sender.models.result import SendResult
from sqs_sender.utils.logger import get_logger

logger = get_logger(__name__)

# Output name -> SendResult attribute
OUTPUT_FIELDS = (
    ("message-id", "message_id"),
    ("sequence-number", "sequence_number"),
    ("md5-of-body", "md5_of_body"),
    ("md5-of-attributes", "md5_of_attributes"),
)


def _escape_command_data(value: str) -> str:
    """Escape a workflow command payload."""
    return value.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


class OutputWriter:
    """
    Writer for named step outputs.

    Outputs are appended to the file at output_path. Without a path the
    outputs are only logged.
    """

    def __init__(self, output_path: Optional[str] = None, stream: Optional[TextIO] = None):
        """
        Initialize output writer.

        Args:
            output_path: Path of the runner's output file, if any
            stream: Stream for workflow commands (defaults to stdout)
        """
        self.output_path = output_path
        self.stream = stream if stream is not None else sys.stdout

    def set_output(self, name: str, value: str) -> None:
        """Record a single named output."""
        logger.info("Setting output", name=name, value=value)

        if not self.output_path:
            return

        if '\n' in value or '\r' in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            line = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
        else:
            line = f"{name}={value}\n"

        with open(self.output_path, 'a', encoding='utf-8') as f:
            f.write(line)

    def set_failed(self, message: str) -> None:
        """Emit the error annotation for a failed step."""
        self.stream.write(f"::error::{_escape_command_data(message)}\n")
        self.stream.flush()


def report_result(result: SendResult, writer: OutputWriter) -> int:
    """
    Report a send result as step outputs.

    Args:
        result: Outcome of the send
        writer: Destination for outputs and failure annotations

    Returns:
        Process exit code: 0 on success, 1 on failure
    """
    if not result.success:
        message = result.error or 'Failed to send message'
        logger.error(
            "Step failed",
            error=message,
            error_kind=result.error_kind.value if result.error_kind else None
        )
        writer.set_failed(message)
        return 1

    for output_name, field_name in OUTPUT_FIELDS:
        value = getattr(result, field_name)
        if value:
            writer.set_output(output_name, value)

    summary = {"message_id": result.message_id}
    if result.sequence_number:
        summary["sequence_number"] = result.sequence_number
    logger.info("Message sent successfully", **summary)

    return 0
