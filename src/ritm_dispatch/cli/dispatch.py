"""CLI: ritm-dispatch preview, ritm-dispatch trigger"""

import json
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from ritm_dispatch.classifier import classify
from ritm_dispatch.config import PROPERTY_NAMES, DispatchConfig
from ritm_dispatch.identity import UNKNOWN_EMAIL
from ritm_dispatch.models.dispatch import Failure
from ritm_dispatch.models.record import RecordSnapshot, TriggerEvent
from ritm_dispatch.payload import build_payload
from ritm_dispatch.transport.http import DispatchClient
from ritm_dispatch.trigger import on_state_change, qualifies
from ritm_dispatch.variables import RequestVariables

console = Console()


def _get_servicenow():
    from ritm_dispatch.cli.main import _get_servicenow
    return _get_servicenow()


@click.command("preview")
@click.argument("variables_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--label", default="Start Research Computing", help="Catalog item name")
@click.option("--number", default="RITM0000000", help="Requested item number")
@click.option("--email", default=None, help="PI email to place in the payload")
def preview_cmd(variables_file: Path, label: str, number: str, email: Optional[str]):
    """Build the dispatch payload for a JSON object of catalog variables."""
    try:
        raw = json.loads(variables_file.read_text())
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="VARIABLES_FILE")
    if not isinstance(raw, dict):
        raise click.BadParameter("expected a JSON object of name -> value", param_hint="VARIABLES_FILE")

    variables = RequestVariables({str(k): "" if v is None else str(v) for k, v in raw.items()})
    record = RecordSnapshot(sys_id="preview", number=number, cat_item_name=label)
    archetype = classify(label)
    payload = build_payload(archetype, variables, record, email or UNKNOWN_EMAIL, DispatchConfig())

    console.print(f"[dim]request_type: {archetype.value} | {len(payload.client_payload)} fields[/dim]")
    click.echo(json.dumps(payload.model_dump(), indent=2))


@click.command("trigger")
@click.argument("sys_id")
@click.option("--previous-state", default=1, show_default=True, help="State the item is moving from")
def trigger_cmd(sys_id: str, previous_state: int):
    """Run the approval flow for one requested item."""
    with _get_servicenow() as snow:
        with console.status("Reading requested item..."):
            record = snow.get_record(sys_id)
            config = DispatchConfig.from_properties(snow.properties(PROPERTY_NAMES))
        event = TriggerEvent(current=record, previous=record.model_copy(update={"state": previous_state}))
        if not qualifies(event):
            console.print(
                f"[yellow]{record.number}: not an approval of a research computing item "
                f"(state {record.state}, catalog item '{record.cat_item_name}')[/yellow]"
            )
            raise SystemExit(1)

        with console.status(f"Dispatching {record.number}..."):
            outcome = on_state_change(event, config, snow, snow, snow, client_factory=DispatchClient)

    if outcome is None:
        console.print(f"[yellow]{record.number}: no dispatch made. See the item's work notes.[/yellow]")
        raise SystemExit(1)
    if isinstance(outcome, Failure):
        console.print(f"[red]{record.number}: GitHub {outcome.reason} (HTTP {outcome.status})[/red]")
        raise SystemExit(1)
    console.print(f"[green]{record.number}: provisioning workflow triggered.[/green]")
