import asyncio

import click

from unitctl.systemd import SystemCtl, SystemctlError, UnitList


def format_vendor_preset(vendor_preset: bool | None) -> str:
    """Format a vendor preset for display in the unit table.
    """
    if vendor_preset is None:
        return '-'
    return 'enabled' if vendor_preset else 'disabled'


def format_units_table(
    units: list[UnitList],
    show_full: bool = False,
) -> str:
    """Format unit files into a simple table.
    """
    if not units:
        return 'No unit files found.'

    # Calculate column widths
    name_width = max(len('UNIT FILE'), max(len(u.unit_file) for u in units))
    state_width = max(len('STATE'), max(len(u.state) for u in units))

    if show_full:
        header = (
            f'{"UNIT FILE":<{name_width}} '
            f'{"STATE":<{state_width}} '
            f'VENDOR PRESET'
        )
    else:
        header = (
            f'{"UNIT FILE":<{name_width}} '
            f'{"STATE":<{state_width}}'
        )

    lines = [header, '-' * len(header)]

    for unit in units:
        row = (
            f'{unit.unit_file:<{name_width}} '
            f'{unit.state:<{state_width}}'
        )
        if show_full:
            row += f' {format_vendor_preset(unit.vendor_preset)}'
        lines.append(row.rstrip())

    lines.append('')
    lines.append(f'{len(units)} unit files listed.')

    return '\n'.join(lines)


@click.command('list-units')
@click.option(
    '--type',
    'type_filter',
    help='Only list units of this type.',
)
@click.option(
    '--state',
    'state_filter',
    help='Only list units in this state.',
)
@click.option(
    '--full',
    is_flag=True,
    help='Show the vendor preset column.',
)
@click.argument('pattern', required=False)
@click.pass_obj
def list_units(
    manager: SystemCtl,
    type_filter: str | None,
    state_filter: str | None,
    full: bool,
    pattern: str | None,
) -> None:
    """List unit files known to systemd.
    """
    try:
        units = asyncio.run(
            manager.list_units_full(type_filter, state_filter, pattern)
        )
    except SystemctlError as e:
        raise click.ClickException(str(e)) from e

    click.echo(format_units_table(units, show_full=full))
