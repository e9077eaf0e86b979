"""
ServiceNow Table API client.

Implements the collaborators the dispatch flow needs: the property bag,
the variable source, the user directory, the record reader and the
work-notes writer.
"""

from collections.abc import Iterable
from typing import Any, Optional

import httpx

from ritm_dispatch.errors import ServiceNowError
from ritm_dispatch.models.record import ItemOption, RecordSnapshot

OPTION_NAME_FIELD = "sc_item_option.item_option_new.name"
OPTION_VALUE_FIELD = "sc_item_option.value"
RECORD_FIELDS = ("sys_id", "number", "state", "cat_item.name", "request.requested_for.email")


class ServiceNowClient:
    def __init__(
        self,
        instance_url: str,
        username: str,
        password: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._base_url = instance_url.rstrip("/")
        if not self._base_url.startswith(("http://", "https://")):
            self._base_url = f"https://{self._base_url}"
        self._client = httpx.Client(
            base_url=f"{self._base_url}/api/now",
            auth=(username, password),
            headers={"User-Agent": "ritm-dispatch/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @staticmethod
    def _unwrap(json_data: Any) -> Any:
        """Unwrap the Table API response: { "result": <records> }"""
        if isinstance(json_data, dict) and "result" in json_data:
            return json_data["result"]
        return json_data

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise ServiceNowError(f"{method} {path} failed: {e}", code="servicenow_unreachable") from e

    def _check(self, resp: httpx.Response) -> Any:
        if resp.status_code >= 400:
            raise ServiceNowError(
                f"HTTP {resp.status_code}: {resp.text[:200]}",
                details={"status": resp.status_code},
            )
        return self._unwrap(resp.json())

    def get(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        return self._check(self._request("GET", path, params=params))

    def patch(self, path: str, body: dict[str, Any]) -> Any:
        return self._check(self._request("PATCH", path, json=body))

    def properties(self, names: Iterable[str]) -> dict[str, str]:
        """System property values by name. Missing properties are absent."""
        rows = self.get("/table/sys_properties", {
            "sysparm_query": "nameIN" + ",".join(names),
            "sysparm_fields": "name,value",
        })
        return {row["name"]: row.get("value") or "" for row in rows}

    def item_options(self, request_item_id: str) -> list[ItemOption]:
        rows = self.get("/table/sc_item_option_mtom", {
            "sysparm_query": f"request_item={request_item_id}",
            "sysparm_fields": f"{OPTION_NAME_FIELD},{OPTION_VALUE_FIELD}",
        })
        return [
            ItemOption(variable_name=row.get(OPTION_NAME_FIELD), value=row.get(OPTION_VALUE_FIELD))
            for row in rows
        ]

    def email_for(self, user_id: str) -> Optional[str]:
        resp = self._request("GET", f"/table/sys_user/{user_id}", params={"sysparm_fields": "email"})
        if resp.status_code == 404:
            return None
        row = self._check(resp)
        return row.get("email") or None

    def get_record(self, request_item_id: str) -> RecordSnapshot:
        row = self.get(f"/table/sc_req_item/{request_item_id}", {
            "sysparm_fields": ",".join(RECORD_FIELDS),
        })
        return RecordSnapshot(
            sys_id=row.get("sys_id") or request_item_id,
            number=row.get("number", ""),
            state=int(row.get("state") or 0),
            cat_item_name=row.get("cat_item.name", ""),
            requested_for_email=row.get("request.requested_for.email") or None,
        )

    def write_work_notes(self, sys_id: str, message: str) -> None:
        self.patch(f"/table/sc_req_item/{sys_id}", {"work_notes": message})

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ServiceNowClient":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()
