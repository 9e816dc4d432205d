import pytest

from tests._fixtures import outputs
from tests._fixtures.runner import FakeRunner
from unitctl.config import SystemctlSettings
from unitctl.systemd import SystemCtl


@pytest.fixture
def cron_runner() -> FakeRunner:
    """Runner for a system where cron.service exists and is active."""
    return FakeRunner({
        ('list-unit-files', 'cron.service'): (
            outputs.CRON_LIST_UNIT_FILES,
            0,
        ),
        ('status', 'cron.service'): (outputs.CRON_STATUS, 0),
        ('cat', 'cron.service'): (outputs.CRON_CAT, 0),
        ('is-active', 'cron.service'): ('active\n', 0),
        ('list-unit-files',): (outputs.LIST_UNIT_FILES, 0),
    })


@pytest.fixture
def cron_manager(cron_runner: FakeRunner) -> SystemCtl:
    return SystemCtl(SystemctlSettings(), runner=cron_runner)
