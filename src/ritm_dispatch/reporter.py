"""
Outcome Reporter — work notes and log entries for a dispatch attempt.

Every path through the flow ends here: the note overwrites the record's
``work_notes`` and exactly one log record is emitted.
"""

import logging
from typing import Protocol

from ritm_dispatch.classifier import RequestArchetype
from ritm_dispatch.config import PAT_PROPERTY
from ritm_dispatch.models.dispatch import DispatchOutcome, Failure
from ritm_dispatch.models.record import RecordSnapshot
from ritm_dispatch.payload import derive_workload_types
from ritm_dispatch.variables import RequestVariables

logger = logging.getLogger(__name__)

LOG_PREFIX = "[Research Computing]"
SUCCESS_BANNER = "Provisioning workflow triggered successfully!"


class RecordWriter(Protocol):
    def write_work_notes(self, sys_id: str, message: str) -> None:
        """Overwrite the work notes of a requested item."""
        ...


def format_success_message(archetype: RequestArchetype, variables: RequestVariables) -> str:
    lines = [SUCCESS_BANNER, "", "Request Details:"]
    if archetype is RequestArchetype.PHI_AVE:
        lines += [
            "- Type: Secure PHI Research (AVE)",
            f"- Project: {variables.get('project_name', 'N/A')}",
            f"- IRB: {variables.get('irb_number', 'N/A')}",
            f"- Access: {variables.get('access_method', 'N/A')}",
            "",
            "Security Level: HIPAA Compliant",
            "Expected provisioning time: 15-30 minutes",
            "You will receive email updates throughout the process.",
        ]
    else:
        lines += [
            "- Type: Standard Research Computing",
            f"- Project: {variables.get('project_name', 'N/A')}",
            f"- Department: {variables.get('department', 'N/A')}",
            f"- Workloads: {derive_workload_types(variables)}",
            "",
            "Expected provisioning time: 10-15 minutes",
            "You will receive an email when your environment is ready.",
        ]
    return "\n".join(lines)


def format_failure_message(outcome: Failure) -> str:
    return (
        "ERROR: Failed to trigger provisioning.\n"
        f"GitHub {outcome.reason}.\n"
        f"HTTP {outcome.status}: {outcome.body}"
    )


def format_config_error_message() -> str:
    return "ERROR: GitHub integration not configured. Contact IT administrator."


def format_exception_message(exc: BaseException) -> str:
    return f"ERROR: Exception during provisioning trigger.\n{exc}"


class OutcomeReporter:
    def __init__(self, writer: RecordWriter):
        self._writer = writer

    def report(
        self,
        record: RecordSnapshot,
        archetype: RequestArchetype,
        variables: RequestVariables,
        outcome: DispatchOutcome,
    ) -> str:
        """Write the outcome note and log it. Returns the note."""
        extra = {"ticket": record.number, "request_type": archetype.value}
        if isinstance(outcome, Failure):
            message = format_failure_message(outcome)
            self._writer.write_work_notes(record.sys_id, message)
            logger.error(
                f"{LOG_PREFIX} GitHub trigger failed for {record.number}: "
                f"{outcome.reason} (HTTP {outcome.status}): {outcome.body}",
                extra={**extra, "status": outcome.status},
            )
        else:
            message = format_success_message(archetype, variables)
            self._writer.write_work_notes(record.sys_id, message)
            logger.info(
                f"{LOG_PREFIX} GitHub workflow triggered successfully for {record.number}",
                extra={**extra, "status": "success"},
            )
        return message

    def report_config_error(self, record: RecordSnapshot) -> str:
        message = format_config_error_message()
        self._writer.write_work_notes(record.sys_id, message)
        logger.error(
            f"{LOG_PREFIX} GitHub PAT not configured. Set system property: {PAT_PROPERTY}",
            extra={"ticket": record.number, "status": "config_error"},
        )
        return message

    def report_exception(self, record: RecordSnapshot, exc: BaseException) -> str:
        message = format_exception_message(exc)
        self._writer.write_work_notes(record.sys_id, message)
        logger.error(
            f"{LOG_PREFIX} Exception in GitHub trigger for {record.number}: {exc}",
            extra={"ticket": record.number, "status": "exception"},
        )
        return message
