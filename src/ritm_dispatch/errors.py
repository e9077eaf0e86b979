"""
ritm-dispatch error types.

Only faults the flow cannot model as data are raised. A rejected dispatch
(non-2xx from GitHub) is a ``Failure`` outcome, not an exception.
"""

from typing import Any, Optional


class RitmDispatchError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ConfigurationError(RitmDispatchError):
    def __init__(self, message: str, code: str = "config_error"):
        super().__init__(code, message)


class TransportError(RitmDispatchError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("transport_error", message, details)


class ServiceNowError(RitmDispatchError):
    def __init__(self, message: str, code: str = "servicenow_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)
