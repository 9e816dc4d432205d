import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from unitctl.systemd.constants import (
    DESCRIPTION_DELIMITER,
    PRESET_ENABLED_MARKER,
    TRANSIENT_YES,
    StatusPrefix,
)
from unitctl.systemd.docs import parse_docs
from unitctl.systemd.errors import DecodeFailureError
from unitctl.systemd.models import Doc
from unitctl.systemd.types import (
    LoadState,
    ScanState,
    decode_auto_start,
    decode_load_state,
    decode_unit_type,
)


@dataclass
class StatusScan:
    """Working state of one status block scan.
    """

    fields: dict[str, Any] = field(default_factory=dict)
    docs: list[Doc] = field(default_factory=list)
    state: ScanState = ScanState.SCANNING
    indent: int = 0
    docs_indent: int = 0


Handler = Callable[[str, StatusScan], None]


class StatusParser:
    """Parser for the text block printed by `systemctl status`.

    The first line is the unit header. Every following line is matched
    against an ordered table of prefixes; the first match handles the
    line and lines that match nothing are ignored, so fields added by
    newer systemd releases never break parsing. The only state carried
    between lines is the `Docs:` block, whose continuation lines have
    no prefix of their own.
    """

    def __init__(self) -> None:
        """Initialize the parser and its prefix table.
        """
        self._logger = logging.getLogger(__name__)

        self._handlers: list[tuple[str, Handler]] = [
            (StatusPrefix.LOADED, self._handle_loaded),
            (StatusPrefix.TRANSIENT, self._handle_transient),
            (StatusPrefix.ACTIVE, self._ignore),
            (StatusPrefix.DOCS, self._handle_docs),
            (StatusPrefix.WHAT, self._handle_what),
            (StatusPrefix.WHERE, self._handle_where),
            (StatusPrefix.MAIN_PID, self._handle_pid),
            (StatusPrefix.CNTRL_PID, self._handle_pid),
            (StatusPrefix.PROCESS, self._ignore),
            (StatusPrefix.CGROUP, self._ignore),
            (StatusPrefix.TASKS, self._ignore),
            (StatusPrefix.MEMORY, self._handle_memory),
            (StatusPrefix.CPU, self._handle_cpu),
        ]

    def parse(self, status: str) -> dict[str, Any]:
        """Extract Unit field values from a status block.

        Args:
            status: Captured stdout of `systemctl status <unit>`

        Returns:
            Unit field values keyed by field name

        Raises:
            DecodeFailureError: If the header is missing or the unit
                type cannot be decoded
        """
        lines = status.splitlines()
        while lines and not lines[0].strip():
            lines.pop(0)

        if not lines:
            raise DecodeFailureError('Status output has no unit header')

        scan = StatusScan(fields=self.parse_header(lines[0]))
        for line in lines[1:]:
            self._scan_line(line, scan)

        if scan.docs:
            scan.fields['docs'] = scan.docs
        return scan.fields

    def parse_header(self, header: str) -> dict[str, Any]:
        """Parse `<glyph> <name>.<type> - <description>`.

        Raises:
            DecodeFailureError: If the name has no known type suffix
        """
        tokens = header.split()
        if tokens and self._is_state_glyph(tokens[0]):
            tokens = tokens[1:]

        if not tokens:
            raise DecodeFailureError(f'Malformed unit header: {header!r}')

        name_raw, rest = tokens[0], tokens[1:]
        name, dot, suffix = name_raw.rpartition('.')
        if not dot or not name:
            raise DecodeFailureError(
                f'Unit is missing a type: {name_raw!r}'
            )

        fields: dict[str, Any] = {
            'name': name,
            'utype': decode_unit_type(suffix),
        }
        if rest and rest[0] == DESCRIPTION_DELIMITER:
            fields['description'] = ' '.join(rest[1:])
        return fields

    def _is_state_glyph(self, token: str) -> bool:
        """Check if a token is the state glyph (●, ○, ×, *) of a header.
        """
        return len(token) == 1 and not token.isalnum()

    def _scan_line(self, line: str, scan: StatusScan) -> None:
        """Dispatch one line to its handler.
        """
        stripped = line.strip()
        if not stripped:
            scan.state = ScanState.SCANNING
            return

        scan.indent = len(line) - len(line.lstrip())

        for prefix, handler in self._handlers:
            if stripped.startswith(prefix):
                scan.state = ScanState.SCANNING
                handler(stripped.removeprefix(prefix).strip(), scan)
                return

        if scan.state is ScanState.IN_DOCS and \
            scan.indent > scan.docs_indent:
            scan.docs.extend(parse_docs([stripped]))
            return

        scan.state = ScanState.SCANNING

    def _ignore(self, value: str, scan: StatusScan) -> None:
        pass

    def _handle_loaded(self, value: str, scan: StatusScan) -> None:
        """Handle `Loaded: loaded (<script>; <auto start>; <preset>)`.
        """
        token, _, details = value.partition(' ')
        try:
            load_state = decode_load_state(token)
        except DecodeFailureError as e:
            self._logger.debug('Ignoring load state: %s', e)
            return

        if load_state is LoadState.MASKED:
            scan.fields['state'] = LoadState.MASKED
            scan.fields.pop('script', None)
            return

        details = details.strip()
        if not (details.startswith('(') and details.endswith(')')):
            self._logger.debug('Malformed Loaded line: %r', value)
            return

        items = details[1:-1].split(';')
        script = items[0].strip()
        if not script:
            self._logger.debug('Loaded line without unit file: %r', value)
            return

        scan.fields['state'] = LoadState.LOADED
        scan.fields['script'] = script
        if len(items) > 1:
            scan.fields['auto_start'] = decode_auto_start(items[1])
        if len(items) > 2:
            scan.fields['preset'] = items[2].strip().endswith(
                PRESET_ENABLED_MARKER
            )

    def _handle_transient(self, value: str, scan: StatusScan) -> None:
        scan.fields['transient'] = value == TRANSIENT_YES

    def _handle_docs(self, value: str, scan: StatusScan) -> None:
        scan.state = ScanState.IN_DOCS
        scan.docs_indent = scan.indent
        scan.docs.extend(parse_docs([value]))

    def _handle_what(self, value: str, scan: StatusScan) -> None:
        scan.fields['mounted'] = value

    def _handle_where(self, value: str, scan: StatusScan) -> None:
        scan.fields['mountpoint'] = value

    def _handle_pid(self, value: str, scan: StatusScan) -> None:
        """Handle `Main PID: 787 (gpm)` and `Cntrl PID: ...`.
        """
        parts = value.split(maxsplit=1)
        if not parts:
            return

        pid = parts[0]
        scan.fields['pid'] = int(pid) \
            if pid.isascii() and pid.isdigit() else 0
        if len(parts) > 1:
            scan.fields['process'] = parts[1].replace('(', '').replace(
                ')',
                '',
            )

    def _handle_memory(self, value: str, scan: StatusScan) -> None:
        scan.fields['memory'] = value

    def _handle_cpu(self, value: str, scan: StatusScan) -> None:
        scan.fields['cpu'] = value
