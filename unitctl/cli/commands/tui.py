import click

from unitctl.systemd import SystemCtl
from unitctl.tui.app import UnitctlApp


@click.command('tui')
@click.pass_obj
def tui(manager: SystemCtl) -> None:
    """Browse unit files in a terminal UI.
    """
    UnitctlApp(manager).run()
