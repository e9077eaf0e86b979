"""CLI: ritm-dispatch config set|show"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _read_config_file() -> dict:
    from ritm_dispatch.cli.main import _read_config_file
    return _read_config_file()


def _load_config() -> dict:
    from ritm_dispatch.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from ritm_dispatch.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """ServiceNow connection settings."""


@config.command("set")
@click.option("--instance", default=None, help="Instance host, e.g. umm.service-now.com")
@click.option("--user", default=None, help="Integration user")
@click.option("--password", default=None, help="Integration user password")
def config_set(instance: Optional[str], user: Optional[str], password: Optional[str]):
    """Save connection settings to ~/.ritm-dispatch/config.json."""
    cfg = _read_config_file()
    if instance:
        cfg["instance"] = instance
    if user:
        cfg["user"] = user
    # A password supplied through the environment is used as is and never saved.
    if password is None and not _load_config().get("password"):
        password = click.prompt("Password", hide_input=True)
    if password:
        cfg["password"] = password
    _save_config(cfg)
    console.print("[green]Saved.[/green]")


@config.command("show")
def config_show():
    """Show current connection settings."""
    cfg = _load_config()
    if not cfg.get("instance"):
        console.print("[yellow]Not configured. Run `ritm-dispatch config set`.[/yellow]")
        return
    console.print(f"instance: {cfg['instance']}")
    console.print(f"user:     {cfg.get('user', '')}")
    console.print(f"password: {'********' if cfg.get('password') else '(not set)'}")
