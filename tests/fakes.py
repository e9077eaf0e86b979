"""Fakes for the ServiceNow and GitHub sides of the flow."""

from typing import Optional

import httpx

from ritm_dispatch.config import DispatchConfig
from ritm_dispatch.models.record import ItemOption
from ritm_dispatch.transport.http import DispatchClient


class FakeVariableSource:
    def __init__(self, variables: Optional[dict[str, str]] = None, error: Optional[Exception] = None):
        self.options = [ItemOption(variable_name=k, value=v) for k, v in (variables or {}).items()]
        self.error = error
        self.calls: list[str] = []

    def item_options(self, request_item_id: str) -> list[ItemOption]:
        self.calls.append(request_item_id)
        if self.error:
            raise self.error
        return self.options

class FakeDirectory:
    def __init__(self, emails: Optional[dict[str, str]] = None, error: Optional[Exception] = None):
        self.emails = emails or {}
        self.error = error

    def email_for(self, user_id: str) -> Optional[str]:
        if self.error:
            raise self.error
        return self.emails.get(user_id)

class FakeWriter:
    def __init__(self):
        self.notes: dict[str, str] = {}
        self.writes = 0

    def write_work_notes(self, sys_id: str, message: str) -> None:
        self.notes[sys_id] = message
        self.writes += 1

class GitHubStub:
    """Records dispatch requests and answers with a fixed status."""

    def __init__(self, status: int = 204, body: str = ""):
        self.status = status
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, text=self.body)

    def factory(self, config: DispatchConfig) -> DispatchClient:
        return DispatchClient(config, transport=httpx.MockTransport(self))

class TableStub:
    """Answers Table API requests from a path -> (status, json) map."""

    def __init__(self, routes):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"error": {"message": "No Record found"}}))
        return httpx.Response(status, json=body)
