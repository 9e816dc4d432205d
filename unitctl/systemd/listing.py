import logging

from unitctl.systemd.errors import MalformedDescriptorError
from unitctl.systemd.models import UnitList

logger = logging.getLogger(__name__)

MIN_COLUMNS = 3

VENDOR_PRESETS: dict[str, bool | None] = {
    '-': None,
    'enabled': True,
    'disabled': False,
}


def is_unit_row(line: str) -> bool:
    """Check if a line is a unit row rather than table decoration.

    Header and the `N unit files listed.` footer have no dotted first
    column.
    """
    columns = line.split()
    if not columns:
        return False
    return '.' in columns[0] and not columns[0].endswith('.')


def parse_unit_list(output: str) -> list[UnitList]:
    """Parse `systemctl list-unit-files` output.

    Args:
        output: Captured stdout of `systemctl list-unit-files`

    Returns:
        Unit rows in output order

    Raises:
        MalformedDescriptorError: If a unit row has fewer than three
            columns
    """
    rows = []
    for line in output.splitlines():
        if not is_unit_row(line):
            continue

        columns = line.split()
        if len(columns) < MIN_COLUMNS:
            raise MalformedDescriptorError(
                f'Malformed unit list row: {line!r}'
            )

        rows.append(UnitList(
            unit_file=columns[0],
            state=columns[1],
            vendor_preset=VENDOR_PRESETS.get(columns[2]),
        ))

    logger.debug('Parsed %d unit list rows', len(rows))
    return rows
