"""
Principal-investigator email resolution.

Three sources are tried in order: the PI variable looked up in the user
directory, the requester's email, then a fixed sentinel. Each source
returns None instead of raising.
"""

import logging
from collections.abc import Callable
from typing import Optional, Protocol

from ritm_dispatch.models.record import RecordSnapshot
from ritm_dispatch.variables import RequestVariables

logger = logging.getLogger(__name__)

UNKNOWN_EMAIL = "unknown@umich.edu"
PI_VARIABLE = "principal_investigator"


class UserDirectory(Protocol):
    def email_for(self, user_id: str) -> Optional[str]:
        """Email of a sys_user record, or None if there is none."""
        ...


def directory_email(directory: UserDirectory, user_id: str) -> Optional[str]:
    if not user_id:
        return None
    try:
        return directory.email_for(user_id) or None
    except Exception as e:
        logger.warning(f"Could not get PI email: {e}")
        return None


def resolve_pi_email(
    variables: RequestVariables,
    record: RecordSnapshot,
    directory: UserDirectory,
) -> str:
    lookups: list[Callable[[], Optional[str]]] = [
        lambda: directory_email(directory, variables.get(PI_VARIABLE)),
        lambda: record.requested_for_email or None,
    ]
    for lookup in lookups:
        email = lookup()
        if email:
            return email
    return UNKNOWN_EMAIL
