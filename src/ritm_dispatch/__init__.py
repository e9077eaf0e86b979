"""
ritm-dispatch — ServiceNow approval to GitHub repository_dispatch adapter.

When a research-computing requested item is approved, build a bounded
client_payload from its catalog variables, trigger the provisioning
workflow, and write the outcome back to the item's work notes.
"""

from ritm_dispatch.classifier import RequestArchetype, classify
from ritm_dispatch.config import DispatchConfig
from ritm_dispatch.errors import RitmDispatchError, ConfigurationError, TransportError, ServiceNowError
from ritm_dispatch.models.dispatch import DispatchPayload, Success, Failure
from ritm_dispatch.models.record import RecordSnapshot, TriggerEvent
from ritm_dispatch.payload import build_payload, derive_workload_types
from ritm_dispatch.transport.http import DispatchClient
from ritm_dispatch.transport.servicenow import ServiceNowClient
from ritm_dispatch.trigger import handle_approval, on_state_change, qualifies
from ritm_dispatch.variables import RequestVariables

__version__ = "0.1.0"
__all__ = [
    "RequestArchetype",
    "classify",
    "DispatchConfig",
    "RitmDispatchError",
    "ConfigurationError",
    "TransportError",
    "ServiceNowError",
    "DispatchPayload",
    "Success",
    "Failure",
    "RecordSnapshot",
    "TriggerEvent",
    "build_payload",
    "derive_workload_types",
    "DispatchClient",
    "ServiceNowClient",
    "handle_approval",
    "on_state_change",
    "qualifies",
    "RequestVariables",
]
