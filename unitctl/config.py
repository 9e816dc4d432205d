import logging
from typing import Final

from pydantic import Field, field_validator

from unitctl.utils import BaseModel

SYSTEMCTL_PATH: Final[str] = '/usr/bin/systemctl'
SYSLOG_IDENTIFIER: Final[str] = 'unitctl'


def setup_logger() -> None:
    """Configure logging to use systemd journal.
    """
    from systemd.journal import JournalHandler

    app_logger = logging.getLogger('unitctl')
    app_logger.setLevel(logging.DEBUG)

    journal_handler = JournalHandler(SYSLOG_IDENTIFIER=SYSLOG_IDENTIFIER)

    app_logger.addHandler(journal_handler)


class SystemctlSettings(BaseModel):
    """How systemctl is invoked.

    Args:
        path: Path to the systemctl binary
        additional_args: Global arguments passed before every verb,
            e.g. `--user`
        timeout: Seconds to wait for one invocation, no limit when unset
    """
    model_config = {'frozen': True}

    path: str = Field(SYSTEMCTL_PATH, min_length=1)
    additional_args: list[str] = Field(default_factory=list)
    timeout: float | None = Field(None, gt=0)

    @field_validator('additional_args')
    @classmethod
    def validate_additional_args(cls, v: list[str]) -> list[str]:
        for arg in v:
            if not arg.strip():
                raise ValueError('Additional arguments cannot be empty')
        return v

    def command(self, *args: str) -> list[str]:
        """Build the full argument vector for one invocation.
        """
        return [self.path, *self.additional_args, *args]
