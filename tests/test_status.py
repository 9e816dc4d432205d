"""Tests for unitctl.systemd.status."""

import pytest

from tests._fixtures import outputs
from unitctl.systemd.errors import DecodeFailureError
from unitctl.systemd.models import ManDoc, UrlDoc
from unitctl.systemd.status import StatusParser
from unitctl.systemd.types import AutoStartStatus, LoadState, UnitType


@pytest.fixture
def parser() -> StatusParser:
    return StatusParser()


def test_header_with_description(parser: StatusParser) -> None:
    fields = parser.parse_header('● cron.service - Periodic command scheduler')

    assert fields == {
        'name': 'cron',
        'utype': UnitType.SERVICE,
        'description': 'Periodic command scheduler',
    }


def test_header_without_description(parser: StatusParser) -> None:
    fields = parser.parse_header('○ foo.service')

    assert fields['name'] == 'foo'
    assert 'description' not in fields


def test_header_splits_on_last_dot(parser: StatusParser) -> None:
    fields = parser.parse_header('● systemd-fsck@dev-disk.by.uuid.service')

    assert fields['name'] == 'systemd-fsck@dev-disk.by.uuid'
    assert fields['utype'] is UnitType.SERVICE


def test_header_of_root_mount(parser: StatusParser) -> None:
    fields = parser.parse_header('● -.mount - Root Mount')

    assert fields['name'] == '-'
    assert fields['utype'] is UnitType.MOUNT
    assert fields['description'] == 'Root Mount'


def test_header_without_glyph(parser: StatusParser) -> None:
    fields = parser.parse_header('cron.service - Periodic command scheduler')

    assert fields['name'] == 'cron'


def test_header_description_whitespace_is_collapsed(
    parser: StatusParser,
) -> None:
    fields = parser.parse_header('● a.timer -   Daily    cleanup ')

    assert fields['description'] == 'Daily cleanup'


def test_unknown_unit_type_fails(parser: StatusParser) -> None:
    with pytest.raises(DecodeFailureError):
        parser.parse('● foo.widget - Something\n')


def test_name_without_suffix_fails(parser: StatusParser) -> None:
    with pytest.raises(DecodeFailureError):
        parser.parse('● foo - Something\n')


def test_empty_status_fails(parser: StatusParser) -> None:
    with pytest.raises(DecodeFailureError):
        parser.parse('\n\n')


def test_loaded_line(parser: StatusParser) -> None:
    fields = parser.parse(
        '● cron.service - Periodic command scheduler\n'
        '     Loaded: loaded (/lib/systemd/system/cron.service; enabled; '
        'vendor preset: enabled)\n'
    )

    assert fields['state'] is LoadState.LOADED
    assert fields['script'] == '/lib/systemd/system/cron.service'
    assert fields['auto_start'] is AutoStartStatus.ENABLED
    assert fields['preset'] is True


def test_loaded_line_with_disabled_preset(parser: StatusParser) -> None:
    fields = parser.parse(
        '● bar.service - Bar\n'
        '     Loaded: loaded (/lib/systemd/system/bar.service; disabled; '
        'preset: disabled)\n'
    )

    assert fields['auto_start'] is AutoStartStatus.DISABLED
    assert fields['preset'] is False


def test_loaded_line_without_preset(parser: StatusParser) -> None:
    fields = parser.parse(outputs.HOME_MOUNT_STATUS)

    assert fields['script'] == '/etc/fstab'
    assert fields['auto_start'] is AutoStartStatus.GENERATED
    assert 'preset' not in fields


def test_loaded_line_with_unknown_auto_start(parser: StatusParser) -> None:
    fields = parser.parse(
        '● a.service - A\n'
        '     Loaded: loaded (/etc/systemd/system/a.service; quantum-enabled)\n'
    )

    assert fields['state'] is LoadState.LOADED
    assert fields['auto_start'] is AutoStartStatus.DISABLED


def test_malformed_loaded_line_is_ignored(parser: StatusParser) -> None:
    fields = parser.parse(
        '● a.service - A\n'
        '     Loaded: loaded /etc/systemd/system/a.service\n'
    )

    assert 'state' not in fields
    assert 'script' not in fields


def test_not_found_load_state_is_ignored(parser: StatusParser) -> None:
    fields = parser.parse(
        '○ gone.service\n'
        '     Loaded: not-found (Reason: Unit gone.service not found.)\n'
    )

    assert 'state' not in fields


def test_masked_unit(parser: StatusParser) -> None:
    fields = parser.parse(outputs.MASKED_STATUS)

    assert fields['state'] is LoadState.MASKED
    assert 'script' not in fields


def test_cron_status_block(parser: StatusParser) -> None:
    fields = parser.parse(outputs.CRON_STATUS)

    assert fields['docs'] == [ManDoc(reference='cron')]
    assert fields['pid'] == 612
    assert fields['process'] == 'cron'
    assert fields['memory'] == '1.2M'
    assert fields['cpu'] == '35ms'
    assert 'tasks' not in fields


def test_docs_continuation_lines(parser: StatusParser) -> None:
    fields = parser.parse(outputs.SSH_STATUS)

    assert fields['docs'] == [
        ManDoc(reference='sshd'),
        ManDoc(reference='sshd_config'),
        UrlDoc(address='https://www.openssh.com/manual.html'),
    ]
    assert fields['pid'] == 787
    assert fields['process'] == 'sshd'


def test_malformed_first_doc_keeps_continuation(
    parser: StatusParser,
) -> None:
    fields = parser.parse(
        '● a.service - A\n'
        '       Docs: info:a\n'
        '             man:a(8)\n'
    )

    assert fields['docs'] == [ManDoc(reference='a')]


def test_docs_block_ends_at_next_prefix(parser: StatusParser) -> None:
    fields = parser.parse(
        '● a.service - A\n'
        '       Docs: man:a(8)\n'
        '     Memory: 1.0M\n'
        '             man:b(8)\n'
    )

    assert fields['docs'] == [ManDoc(reference='a')]
    assert fields['memory'] == '1.0M'


def test_docs_block_ends_at_blank_line(parser: StatusParser) -> None:
    fields = parser.parse(
        '● a.service - A\n'
        '       Docs: man:a(8)\n'
        '\n'
        '             man:b(8)\n'
    )

    assert fields['docs'] == [ManDoc(reference='a')]


def test_continuation_needs_deeper_indent(parser: StatusParser) -> None:
    fields = parser.parse(
        '● a.service - A\n'
        '       Docs: man:a(8)\n'
        'man:b(8)\n'
        '             man:c(8)\n'
    )

    assert fields['docs'] == [ManDoc(reference='a')]


def test_no_docs_leaves_field_unset(parser: StatusParser) -> None:
    fields = parser.parse(outputs.MASKED_STATUS)

    assert 'docs' not in fields


def test_mount_fields(parser: StatusParser) -> None:
    fields = parser.parse(outputs.HOME_MOUNT_STATUS)

    assert fields['utype'] is UnitType.MOUNT
    assert fields['mounted'] == '/dev/sda2'
    assert fields['mountpoint'] == '/home'
    assert fields['docs'] == [
        ManDoc(reference='fstab'),
        ManDoc(reference='systemd-fstab-generator'),
    ]


def test_transient_scope(parser: StatusParser) -> None:
    fields = parser.parse(outputs.SESSION_SCOPE_STATUS)

    assert fields['utype'] is UnitType.SCOPE
    assert fields['transient'] is True
    assert fields['auto_start'] is AutoStartStatus.TRANSIENT


@pytest.mark.parametrize(
    ('line', 'pid', 'process'),
    [
        ('   Main PID: 787 (gpm)', 787, 'gpm'),
        ('  Cntrl PID: 1203 (mount)', 1203, 'mount'),
        ('   Main PID: abc (gpm)', 0, 'gpm'),
        ('   Main PID: 99 (code=exited, status=0/SUCCESS)', 99,
         'code=exited, status=0/SUCCESS'),
    ],
)
def test_pid_lines(
    parser: StatusParser,
    line: str,
    pid: int,
    process: str,
) -> None:
    fields = parser.parse(f'● a.service - A\n{line}\n')

    assert fields['pid'] == pid
    assert fields['process'] == process


def test_pid_without_process_name(parser: StatusParser) -> None:
    fields = parser.parse('● a.service - A\n   Main PID: 42\n')

    assert fields['pid'] == 42
    assert 'process' not in fields


def test_unknown_and_discarded_lines_are_ignored(
    parser: StatusParser,
) -> None:
    fields = parser.parse(
        '● a.service - A\n'
        '     Active: failed (Result: exit-code)\n'
        '    Process: 12 ExecStart=/bin/false (code=exited, status=1/FAILURE)\n'
        '      Tasks: 3 (limit: 100)\n'
        '     CGroup: /system.slice/a.service\n'
        '             └─12 /bin/a\n'
        '    TriggeredBy: ● a.socket\n'
        '    IP: 1.2K in, 300B out\n'
    )

    assert fields == {
        'name': 'a',
        'utype': UnitType.SERVICE,
        'description': 'A',
    }


def test_parsing_is_idempotent(parser: StatusParser) -> None:
    assert parser.parse(outputs.SSH_STATUS) == \
        parser.parse(outputs.SSH_STATUS)
