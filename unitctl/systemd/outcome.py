import logging
from enum import StrEnum

from unitctl.systemd.constants import ExitCodes
from unitctl.systemd.errors import (
    KilledBySignalError,
    PermissionOrAmbiguousError,
    UnknownExitCodeError,
)

logger = logging.getLogger(__name__)


class ExitOutcome(StrEnum):
    """What a systemctl exit code means to the caller.
    """

    SUCCESS = 'success'
    # Codes 1 and 3: the output still has to be parsed
    EMPTY_RESULT = 'empty-result'
    PERMISSION_OR_NOT_FOUND = 'permission-or-not-found'
    UNKNOWN_FAILURE = 'unknown-failure'
    KILLED_BY_SIGNAL = 'killed-by-signal'


def normalize_returncode(returncode: int | None) -> int | None:
    """Map a negative POSIX return code (signal death) to None.
    """
    if returncode is None or returncode < 0:
        return None
    return returncode


def classify_exit_code(code: int | None) -> ExitOutcome:
    """Classify a systemctl exit code.

    Args:
        code: Exit code, or None when the process was killed by a signal

    Returns:
        The matching ExitOutcome
    """
    if code is None:
        return ExitOutcome.KILLED_BY_SIGNAL
    if code == ExitCodes.SUCCESS:
        return ExitOutcome.SUCCESS
    if code in (ExitCodes.NOT_FOUND_OR_EMPTY, ExitCodes.INACTIVE):
        return ExitOutcome.EMPTY_RESULT
    if code == ExitCodes.NO_PERMISSION_OR_UNKNOWN_UNIT:
        return ExitOutcome.PERMISSION_OR_NOT_FOUND
    return ExitOutcome.UNKNOWN_FAILURE


def check_exit_code(code: int | None) -> ExitOutcome:
    """Classify an exit code and raise for the failure outcomes.

    Args:
        code: Exit code, or None when the process was killed by a signal

    Returns:
        ExitOutcome.SUCCESS or ExitOutcome.EMPTY_RESULT

    Raises:
        PermissionOrAmbiguousError: On exit code 4
        KilledBySignalError: When there is no exit code
        UnknownExitCodeError: On any other non-zero exit code
    """
    outcome = classify_exit_code(code)

    if outcome is ExitOutcome.PERMISSION_OR_NOT_FOUND:
        raise PermissionOrAmbiguousError()
    if outcome is ExitOutcome.KILLED_BY_SIGNAL:
        raise KilledBySignalError()
    if outcome is ExitOutcome.UNKNOWN_FAILURE:
        raise UnknownExitCodeError(code)  # type: ignore[arg-type]

    if outcome is ExitOutcome.EMPTY_RESULT:
        logger.debug('systemctl exited with %s, parsing output anyway', code)
    return outcome
