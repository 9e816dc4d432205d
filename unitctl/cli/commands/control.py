import asyncio
from collections.abc import Awaitable, Callable

import click

from unitctl.systemd import RunResult, SystemCtl, SystemctlError

ControlCall = Callable[[SystemCtl, str], Awaitable[RunResult]]

CONTROL_COMMANDS: dict[str, tuple[ControlCall, str]] = {
    'start': (SystemCtl.start, 'Start a unit.'),
    'stop': (SystemCtl.stop, 'Stop a unit.'),
    'restart': (SystemCtl.restart, 'Restart a unit.'),
    'reload': (SystemCtl.reload, 'Reload the configuration of a unit.'),
    'reload-or-restart': (
        SystemCtl.reload_or_restart,
        'Reload a unit if supported, restart it otherwise.',
    ),
    'clean': (SystemCtl.clean, 'Remove runtime, cache and state data.'),
    'enable': (SystemCtl.enable, 'Enable a unit to start at boot.'),
    'disable': (SystemCtl.disable, 'Disable a unit from starting at boot.'),
    'isolate': (SystemCtl.isolate, 'Start a unit and stop all others.'),
    'freeze': (SystemCtl.freeze, 'Freeze a unit.'),
    'thaw': (SystemCtl.unfreeze, 'Thaw a frozen unit.'),
}


def make_control_command(
    name: str,
    call: ControlCall,
    help_text: str,
) -> click.Command:
    """Build a click command running one unit control verb.
    """
    @click.command(name, help=help_text)
    @click.argument('unit')
    @click.pass_obj
    def command(manager: SystemCtl, unit: str) -> None:
        try:
            result = asyncio.run(call(manager, unit))
        except SystemctlError as e:
            raise click.ClickException(str(e)) from e

        output = (result.stdout + result.stderr).strip()
        if output:
            click.echo(output)

    return command


def control_commands() -> list[click.Command]:
    """Commands for every unit control verb.
    """
    return [
        make_control_command(name, call, help_text)
        for name, (call, help_text) in CONTROL_COMMANDS.items()
    ]


@click.command('daemon-reload')
@click.pass_obj
def daemon_reload(manager: SystemCtl) -> None:
    """Reload all unit files.
    """
    try:
        asyncio.run(manager.daemon_reload())
    except SystemctlError as e:
        raise click.ClickException(str(e)) from e


@click.command('is-active')
@click.argument('unit')
@click.pass_obj
def is_active(manager: SystemCtl, unit: str) -> None:
    """Print whether a unit is active. Exits with 3 when it is not.
    """
    try:
        active = asyncio.run(manager.is_active(unit))
    except SystemctlError as e:
        raise click.ClickException(str(e)) from e

    click.echo('active' if active else 'inactive')
    if not active:
        click.get_current_context().exit(3)
