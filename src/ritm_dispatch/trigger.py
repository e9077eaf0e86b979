"""
Approval trigger — one dispatch per qualifying sc_req_item update.

An update qualifies when the item enters Work in Progress from another
state and its catalog item is one of the research-computing offerings.
Each invocation is independent: configuration is read once by the caller
and passed in, and nothing outlives the call except the work note.
"""

import logging
from collections.abc import Callable, Collection
from typing import Optional

from ritm_dispatch.classifier import classify
from ritm_dispatch.collector import VariableSource, collect_variables
from ritm_dispatch.config import CATALOG_ITEMS, WORK_IN_PROGRESS, DispatchConfig
from ritm_dispatch.identity import UserDirectory, resolve_pi_email
from ritm_dispatch.models.dispatch import DispatchOutcome
from ritm_dispatch.models.record import RecordSnapshot, TriggerEvent
from ritm_dispatch.payload import build_payload
from ritm_dispatch.reporter import OutcomeReporter, RecordWriter
from ritm_dispatch.transport.http import DispatchClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[DispatchConfig], DispatchClient]


def qualifies(event: TriggerEvent, catalog_items: Collection[str] = CATALOG_ITEMS) -> bool:
    return (
        event.current.state == WORK_IN_PROGRESS
        and event.previous.state != WORK_IN_PROGRESS
        and event.current.cat_item_name in catalog_items
    )


def handle_approval(
    record: RecordSnapshot,
    config: DispatchConfig,
    variable_source: VariableSource,
    directory: UserDirectory,
    writer: RecordWriter,
    client_factory: ClientFactory = DispatchClient,
) -> Optional[DispatchOutcome]:
    """Dispatch one approved requested item and write the outcome back.

    Returns the dispatch outcome, or None when the invocation stopped early
    (missing PAT or an exception). Never raises for dispatch failures; the
    record's work notes always say what happened.
    """
    reporter = OutcomeReporter(writer)
    if not config.is_configured:
        reporter.report_config_error(record)
        return None

    try:
        archetype = classify(record.cat_item_name)
        logger.info(f"Processing {archetype.value} request: {record.number}")

        variables = collect_variables(record.sys_id, variable_source)
        pi_email = resolve_pi_email(variables, record, directory)
        payload = build_payload(archetype, variables, record, pi_email, config)
        logger.debug(f"Dispatch payload for {record.number}: {payload.model_dump_json()}")

        with client_factory(config) as client:
            outcome = client.dispatch(payload)
    except Exception as e:
        reporter.report_exception(record, e)
        return None

    reporter.report(record, archetype, variables, outcome)
    return outcome


def on_state_change(
    event: TriggerEvent,
    config: DispatchConfig,
    variable_source: VariableSource,
    directory: UserDirectory,
    writer: RecordWriter,
    client_factory: ClientFactory = DispatchClient,
    catalog_items: Collection[str] = CATALOG_ITEMS,
) -> Optional[DispatchOutcome]:
    """Entry point for an after-update event. Non-qualifying updates are ignored."""
    if not qualifies(event, catalog_items):
        logger.debug(f"Ignoring update to {event.current.number}: not an approval transition")
        return None
    return handle_approval(event.current, config, variable_source, directory, writer, client_factory)
