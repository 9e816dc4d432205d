"""Tests for unitctl.config and the docstring-driven base model."""

import pytest
from pydantic import ValidationError

from unitctl.config import SYSTEMCTL_PATH, SystemctlSettings
from unitctl.utils import parse_docstring_args


def test_default_settings() -> None:
    settings = SystemctlSettings()

    assert settings.path == SYSTEMCTL_PATH
    assert settings.additional_args == []
    assert settings.timeout is None
    assert settings.command('status', 'cron') == [
        '/usr/bin/systemctl',
        'status',
        'cron',
    ]


def test_additional_args_come_before_the_verb() -> None:
    settings = SystemctlSettings(additional_args=['--user', '--no-pager'])

    assert settings.command('is-active', 'a.service') == [
        SYSTEMCTL_PATH,
        '--user',
        '--no-pager',
        'is-active',
        'a.service',
    ]


@pytest.mark.parametrize(
    'kwargs',
    [
        {'path': ''},
        {'timeout': 0},
        {'timeout': -1.0},
        {'additional_args': ['  ']},
    ],
)
def test_invalid_settings(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        SystemctlSettings(**kwargs)


def test_settings_are_frozen() -> None:
    settings = SystemctlSettings()

    with pytest.raises(ValidationError):
        settings.path = '/bin/systemctl'  # type: ignore[misc]


def test_settings_field_descriptions() -> None:
    assert SystemctlSettings.model_fields['path'].description == \
        'Path to the systemctl binary'
    assert SystemctlSettings.model_fields['additional_args'].description == \
        'Global arguments passed before every verb, e.g. `--user`'


def test_parse_docstring_args() -> None:
    docstring = """Something.

    Args:
        first: The first
            argument
        second: The second

    Returns:
        Nothing
    """

    assert parse_docstring_args(docstring) == {
        'first': 'The first argument',
        'second': 'The second',
    }
    assert parse_docstring_args(None) == {}
    assert parse_docstring_args('No arguments here.') == {}
