"""
GitHub repository_dispatch client.

One synchronous POST per call, no retries. A non-success status is
returned as a ``Failure``; only transport faults raise.
"""

from typing import Optional

import httpx

from ritm_dispatch.config import DispatchConfig
from ritm_dispatch.errors import ConfigurationError, TransportError
from ritm_dispatch.models.dispatch import DispatchOutcome, DispatchPayload, Failure, Success

SUCCESS_STATUSES = (200, 204)


class DispatchClient:
    def __init__(self, config: DispatchConfig, transport: Optional[httpx.BaseTransport] = None):
        if not config.is_configured:
            raise ConfigurationError("GitHub PAT not configured")
        self._config = config
        self._client = httpx.Client(
            base_url=f"https://{config.api_host}",
            headers={
                "Accept": "application/vnd.github.v3+json",
                "Authorization": f"token {config.github_pat}",
                "Content-Type": "application/json",
                "User-Agent": config.user_agent,
            },
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def path(self) -> str:
        return f"/repos/{self._config.github_owner}/{self._config.github_repo}/dispatches"

    def dispatch(self, payload: DispatchPayload) -> DispatchOutcome:
        try:
            resp = self._client.post(self.path, json=payload.model_dump())
        except httpx.HTTPError as e:
            raise TransportError(f"Dispatch to {self._config.dispatch_url} failed: {e}") from e
        if resp.status_code in SUCCESS_STATUSES:
            return Success()
        return Failure(status=resp.status_code, body=resp.text)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "DispatchClient":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()
