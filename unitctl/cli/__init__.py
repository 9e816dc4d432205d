import click

from unitctl.cli.commands.control import (
    control_commands,
    daemon_reload,
    is_active,
)
from unitctl.cli.commands.list_units import list_units
from unitctl.cli.commands.status import status
from unitctl.cli.commands.tui import tui
from unitctl.config import SYSTEMCTL_PATH, SystemctlSettings
from unitctl.systemd import SystemCtl


@click.group()
@click.option(
    '--user',
    is_flag=True,
    help='Talk to the service manager of the calling user.',
)
@click.option(
    '--systemctl-path',
    default=SYSTEMCTL_PATH,
    show_default=True,
    help='Path to the systemctl binary.',
)
@click.option(
    '--timeout',
    type=float,
    default=None,
    help='Seconds to wait for each systemctl call.',
)
@click.pass_context
def cli(
    ctx: click.Context,
    user: bool,
    systemctl_path: str,
    timeout: float | None,
) -> None:
    """unitctl - Inspect and control systemd units.
    """
    settings = SystemctlSettings(
        path=systemctl_path,
        additional_args=['--user'] if user else [],
        timeout=timeout,
    )
    if ctx.obj is None:
        ctx.obj = SystemCtl(settings)


cli.add_command(list_units)
cli.add_command(status)
cli.add_command(is_active)
cli.add_command(daemon_reload)
cli.add_command(tui)
for command in control_commands():
    cli.add_command(command)


def run_cli() -> None:
    """Run the CLI interface.
    """
    cli()


__all__ = [
    'cli',
    'run_cli',
]
