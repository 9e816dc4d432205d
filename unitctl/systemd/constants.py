from enum import StrEnum
from typing import Final


class SystemctlVerb(StrEnum):
    """Systemctl verbs issued by the manager.
    """

    # Unit control
    START = 'start'
    STOP = 'stop'
    RESTART = 'restart'
    RELOAD = 'reload'
    RELOAD_OR_RESTART = 'reload-or-restart'
    CLEAN = 'clean'
    ISOLATE = 'isolate'
    FREEZE = 'freeze'
    THAW = 'thaw'

    # Unit files
    ENABLE = 'enable'
    DISABLE = 'disable'
    DAEMON_RELOAD = 'daemon-reload'

    # Queries
    STATUS = 'status'
    CAT = 'cat'
    IS_ACTIVE = 'is-active'
    LIST_UNIT_FILES = 'list-unit-files'


class StatusPrefix(StrEnum):
    """Line prefixes of a `systemctl status` block.
    """

    LOADED = 'Loaded:'
    TRANSIENT = 'Transient:'
    ACTIVE = 'Active:'
    DOCS = 'Docs:'
    WHAT = 'What:'
    WHERE = 'Where:'
    MAIN_PID = 'Main PID:'
    CNTRL_PID = 'Cntrl PID:'
    PROCESS = 'Process:'
    CGROUP = 'CGroup:'
    TASKS = 'Tasks:'
    MEMORY = 'Memory:'
    CPU = 'CPU:'


class DirectiveKey(StrEnum):
    """Unit file directives captured from `systemctl cat`.
    """

    # Appended, file order kept
    WANTS = 'Wants'
    WANTED_BY = 'WantedBy'
    ALSO = 'Also'
    BEFORE = 'Before'
    AFTER = 'After'

    # Last one wins
    EXEC_START = 'ExecStart'
    EXEC_RELOAD = 'ExecReload'
    RESTART = 'Restart'
    KILL_MODE = 'KillMode'


class ExitCodes:
    """Exit codes returned by systemctl.
    """

    SUCCESS: Final[int] = 0
    NOT_FOUND_OR_EMPTY: Final[int] = 1
    INACTIVE: Final[int] = 3
    NO_PERMISSION_OR_UNKNOWN_UNIT: Final[int] = 4


ACTIVE_STATE: Final[str] = 'active'
DESCRIPTION_DELIMITER: Final[str] = '-'
PRESET_ENABLED_MARKER: Final[str] = 'enabled'
TRANSIENT_YES: Final[str] = 'yes'
