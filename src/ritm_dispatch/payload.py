"""
Payload Builder — the repository_dispatch body for a requested item.

GitHub accepts at most 10 top-level properties in ``client_payload``. The
layout is a versioned schema rather than a hand-counted dict:

    tier 1   six fields common to every archetype
    tier 2   archetype fields placed at top level while slots remain
    extra    one ``extra_data`` field holding a JSON document with the
             folded fields and ``schema_version``

One slot is always reserved for ``extra_data``. A field that does not fit
in the remaining top-level slots is folded instead of dropped, so adding
fields to a schema can never break the limit. The provisioning workflow
reads the same layout; bump ``PAYLOAD_SCHEMA_VERSION`` when it changes.
"""

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from ritm_dispatch.classifier import RequestArchetype
from ritm_dispatch.config import DispatchConfig
from ritm_dispatch.models.dispatch import MAX_CLIENT_PAYLOAD_FIELDS, DispatchPayload
from ritm_dispatch.models.record import RecordSnapshot
from ritm_dispatch.variables import RequestVariables

PAYLOAD_SCHEMA_VERSION = 2
EXTRA_DATA_FIELD = "extra_data"

# Checkbox variable -> label, in the order labels are reported.
WORKLOAD_FLAGS = (
    ("workload_statistical", "statistical"),
    ("workload_imaging", "imaging"),
    ("workload_ml", "ml"),
    ("workload_data_prep", "data_prep"),
    ("workload_unsure", "recommend"),
)
DEFAULT_WORKLOAD = "general"


def derive_workload_types(variables: RequestVariables) -> str:
    """Comma-joined workload labels, or "general" when no flag is "true"."""
    labels = [label for flag, label in WORKLOAD_FLAGS if variables.flag(flag)]
    return ",".join(labels) or DEFAULT_WORKLOAD


@dataclass(frozen=True)
class PayloadContext:
    archetype: RequestArchetype
    variables: RequestVariables
    record: RecordSnapshot
    pi_email: str


@dataclass(frozen=True)
class PayloadField:
    name: str
    resolve: Callable[[PayloadContext], str]
    folded: bool = False


def variable(name: str, default: str = "", *, folded: bool = False) -> PayloadField:
    """Field copied from the catalog variable of the same name."""
    return PayloadField(name, lambda ctx: ctx.variables.get(name, default), folded)


def constant(name: str, value: str, *, folded: bool = False) -> PayloadField:
    return PayloadField(name, lambda ctx: value, folded)


COMMON_FIELDS: tuple[PayloadField, ...] = (
    PayloadField("ticket_number", lambda ctx: ctx.record.number),
    PayloadField("request_type", lambda ctx: ctx.archetype.value),
    variable("project_name", "research-project"),
    PayloadField("principal_investigator", lambda ctx: ctx.pi_email),
    variable("department", "research"),
    PayloadField("cost_center", lambda ctx: ctx.variables.first("grant_code", "funding_source")),
)

STANDARD_RESEARCH_FIELDS: tuple[PayloadField, ...] = (
    PayloadField("workload_types", lambda ctx: derive_workload_types(ctx.variables)),
    constant("environment", "dev"),
    variable("data_type", "non_phi", folded=True),
    variable("expected_end_date", folded=True),
    variable("additional_users", folded=True),
    constant("security_level", "standard", folded=True),
)

PHI_AVE_FIELDS: tuple[PayloadField, ...] = (
    variable("irb_number"),
    variable("access_method", "both"),
    constant("environment", "prod"),
    variable("irb_status", folded=True),
    variable("expected_duration", "6_months", folded=True),
    variable("data_retention", "90_days", folded=True),
    constant("security_level", "hipaa", folded=True),
    constant("data_classification", "phi", folded=True),
)

SCHEMAS: Mapping[RequestArchetype, Sequence[PayloadField]] = {
    RequestArchetype.STANDARD_RESEARCH: COMMON_FIELDS + STANDARD_RESEARCH_FIELDS,
    RequestArchetype.PHI_AVE: COMMON_FIELDS + PHI_AVE_FIELDS,
}


def build_client_payload(fields: Sequence[PayloadField], ctx: PayloadContext) -> dict[str, str]:
    top_level_slots = MAX_CLIENT_PAYLOAD_FIELDS - 1  # extra_data
    client_payload: dict[str, str] = {}
    extra: dict[str, object] = {"schema_version": PAYLOAD_SCHEMA_VERSION}

    for field in fields:
        value = field.resolve(ctx)
        if not field.folded and len(client_payload) < top_level_slots:
            client_payload[field.name] = value
        else:
            extra[field.name] = value

    client_payload[EXTRA_DATA_FIELD] = json.dumps(extra)
    return client_payload


def build_payload(
    archetype: RequestArchetype,
    variables: RequestVariables,
    record: RecordSnapshot,
    pi_email: str,
    config: DispatchConfig,
    schemas: Mapping[RequestArchetype, Sequence[PayloadField]] = SCHEMAS,
) -> DispatchPayload:
    ctx = PayloadContext(archetype=archetype, variables=variables, record=record, pi_email=pi_email)
    return DispatchPayload(
        event_type=config.event_type,
        client_payload=build_client_payload(schemas[archetype], ctx),
    )
