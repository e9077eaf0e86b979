"""
repository_dispatch models — request body and call outcome.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator

# GitHub rejects a client_payload with more than 10 top-level properties.
MAX_CLIENT_PAYLOAD_FIELDS = 10


class DispatchPayload(BaseModel):
    """POST /repos/{owner}/{repo}/dispatches body"""

    event_type: str
    client_payload: dict[str, str]

    @field_validator("client_payload")
    @classmethod
    def _within_field_limit(cls, value: dict[str, str]) -> dict[str, str]:
        if len(value) > MAX_CLIENT_PAYLOAD_FIELDS:
            raise ValueError(
                f"client_payload has {len(value)} fields, limit is {MAX_CLIENT_PAYLOAD_FIELDS}"
            )
        return value


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def reason(self) -> str:
        if self.status == 401:
            return "authentication failed"
        if self.status == 404:
            return "repository not found"
        return "request rejected"


DispatchOutcome = Union[Success, Failure]
