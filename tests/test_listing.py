"""Tests for unitctl.systemd.listing."""

import pytest

from tests._fixtures import outputs
from unitctl.systemd.errors import MalformedDescriptorError
from unitctl.systemd.listing import is_unit_row, parse_unit_list
from unitctl.systemd.models import UnitList


def test_single_row() -> None:
    rows = parse_unit_list(
        'cron.service          enabled         enabled\n'
    )

    assert rows == [
        UnitList(unit_file='cron.service', state='enabled', vendor_preset=True),
    ]


def test_full_listing_keeps_order_and_skips_decoration() -> None:
    rows = parse_unit_list(outputs.LIST_UNIT_FILES)

    assert [row.unit_file for row in rows] == [
        'cron.service',
        'ssh.service',
        'systemd-fsck@.service',
        'rescue.target',
        'foo.service',
        'bar.service',
    ]
    assert [row.vendor_preset for row in rows] == [
        True,
        True,
        None,
        None,
        True,
        False,
    ]
    assert rows[4].state == 'masked'


def test_unknown_vendor_preset_token() -> None:
    rows = parse_unit_list('a.service enabled ignored\n')

    assert rows[0].vendor_preset is None


def test_empty_listing() -> None:
    assert parse_unit_list(outputs.EMPTY_LIST_UNIT_FILES) == []
    assert parse_unit_list('') == []


def test_short_row_fails_the_whole_listing() -> None:
    with pytest.raises(MalformedDescriptorError):
        parse_unit_list(
            'cron.service enabled enabled\n'
            'broken.service enabled\n'
        )


@pytest.mark.parametrize(
    ('line', 'expected'),
    [
        ('cron.service enabled enabled', True),
        ('UNIT FILE STATE VENDOR PRESET', False),
        ('6 unit files listed.', False),
        ('listed. x y', False),
        ('', False),
    ],
)
def test_is_unit_row(line: str, expected: bool) -> None:
    assert is_unit_row(line) is expected
