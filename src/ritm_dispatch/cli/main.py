"""
ritm-dispatch CLI — `ritm-dispatch` command.

Commands:
  ritm-dispatch config set|show        ServiceNow connection settings
  ritm-dispatch preview <vars.json>    Build a dispatch payload offline
  ritm-dispatch trigger <ritm-sys-id>  Run the approval flow for one item
"""

import json
import logging
import os
from pathlib import Path

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install ritm-dispatch[cli]")

from ritm_dispatch.transport.servicenow import ServiceNowClient

console = Console()
CONFIG_FILE = Path.home() / ".ritm-dispatch" / "config.json"
ENV_OVERRIDES = {
    "instance": "RITM_DISPATCH_INSTANCE",
    "user": "RITM_DISPATCH_USER",
    "password": "RITM_DISPATCH_PASSWORD",
}


def _read_config_file() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _load_config() -> dict:
    """Saved settings with environment overrides applied. Never write this back."""
    cfg = _read_config_file()
    for key, env in ENV_OVERRIDES.items():
        if os.environ.get(env):
            cfg[key] = os.environ[env]
    return cfg


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _get_servicenow() -> ServiceNowClient:
    cfg = _load_config()
    if not cfg.get("instance") or not cfg.get("user"):
        console.print("[red]No ServiceNow instance configured. Run `ritm-dispatch config set` first.[/red]")
        raise SystemExit(1)
    return ServiceNowClient(cfg["instance"], cfg["user"], cfg.get("password", ""))


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def main(verbose: bool):
    """ritm-dispatch — trigger GitHub provisioning from approved requested items."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


# Register subcommands from separate modules
from ritm_dispatch.cli.config import config
from ritm_dispatch.cli.dispatch import preview_cmd, trigger_cmd

main.add_command(config)
main.add_command(preview_cmd)
main.add_command(trigger_cmd)


if __name__ == "__main__":
    main()
