import logging
from typing import Any

from unitctl.systemd.constants import DirectiveKey

LIST_DIRECTIVES: dict[str, str] = {
    DirectiveKey.WANTS: 'wants',
    DirectiveKey.WANTED_BY: 'wanted_by',
    DirectiveKey.ALSO: 'also',
    DirectiveKey.BEFORE: 'before',
    DirectiveKey.AFTER: 'after',
}

SCALAR_DIRECTIVES: dict[str, str] = {
    DirectiveKey.EXEC_START: 'exec_start',
    DirectiveKey.EXEC_RELOAD: 'exec_reload',
    DirectiveKey.RESTART: 'restart_policy',
    DirectiveKey.KILL_MODE: 'kill_mode',
}


class DirectiveParser:
    """Parser for the `Key=Value` dump of `systemctl cat`.
    """

    def __init__(self) -> None:
        """Initialize the parser.
        """
        self._logger = logging.getLogger(__name__)

    def parse(self, dump: str) -> dict[str, Any]:
        """Extract the directives a Unit keeps.

        Lines without exactly one `=` (section headers, comments,
        values that contain `=` themselves) are skipped, as are keys
        that are not captured.

        Args:
            dump: Captured stdout of `systemctl cat`

        Returns:
            Unit field values keyed by field name, lists in file order
        """
        fields: dict[str, Any] = {}

        for line in dump.splitlines():
            if line.count('=') != 1:
                continue

            key, value = (part.strip() for part in line.split('='))

            if key in LIST_DIRECTIVES:
                fields.setdefault(LIST_DIRECTIVES[key], []).append(value)
            elif key in SCALAR_DIRECTIVES:
                fields[SCALAR_DIRECTIVES[key]] = value

        self._logger.debug('Parsed directives: %s', sorted(fields))
        return fields
