import asyncio

import click

from unitctl.systemd import SystemCtl, SystemctlError, Unit


def format_list(values: list[str] | None) -> str:
    """Format a directive list for display.
    """
    if not values:
        return 'N/A'
    return ' '.join(values)


def format_unit(unit: Unit) -> str:
    """Format a unit as aligned `label: value` lines.
    """
    docs = [doc.as_man() or doc.as_url() or '' for doc in unit.docs or []]
    fields = [
        ('Unit', unit.unit_file),
        ('Description', unit.description or 'N/A'),
        ('Loaded', unit.state.value),
        ('Unit file', unit.script or 'N/A'),
        ('Auto start', unit.auto_start.value),
        ('Vendor preset', 'enabled' if unit.preset else 'disabled'),
        ('Active', 'yes' if unit.active else 'no'),
        ('Transient', 'yes' if unit.transient else 'no'),
        ('Main PID', 'N/A' if unit.pid is None else str(unit.pid)),
        ('Process', unit.process or 'N/A'),
        ('Memory', unit.memory or 'N/A'),
        ('CPU', unit.cpu or 'N/A'),
        ('Docs', format_list(docs)),
        ('Wants', format_list(unit.wants)),
        ('WantedBy', format_list(unit.wanted_by)),
        ('Before', format_list(unit.before)),
        ('After', format_list(unit.after)),
        ('ExecStart', unit.exec_start or 'N/A'),
        ('Restart', unit.restart_policy or 'N/A'),
    ]

    if unit.mounted or unit.mountpoint:
        fields.append(('What', unit.mounted or 'N/A'))
        fields.append(('Where', unit.mountpoint or 'N/A'))

    label_width = max(len(label) for label, _ in fields)
    return '\n'.join(
        f'{label:>{label_width}}: {value}' for label, value in fields
    )


@click.command('status')
@click.option(
    '--json',
    'as_json',
    is_flag=True,
    help='Print the whole unit record as JSON.',
)
@click.argument('name')
@click.pass_obj
def status(manager: SystemCtl, as_json: bool, name: str) -> None:
    """Show the parsed status of a unit.
    """
    async def _status() -> Unit:
        return await manager.create_unit(name)

    try:
        unit = asyncio.run(_status())
    except SystemctlError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(unit.model_dump_json(indent=2))
    else:
        click.echo(format_unit(unit))
