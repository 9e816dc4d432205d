class SystemctlError(Exception):
    """Base class for every failure surfaced by unitctl.
    """


class UnitNotFoundError(SystemctlError):
    """The requested unit is not known to systemd.
    """

    def __init__(self, unit: str) -> None:
        super().__init__(f'Unit or service "{unit}" does not exist')
        self.unit = unit


class PermissionOrAmbiguousError(SystemctlError):
    """Exit code 4: missing privileges or an unknown unit.

    Systemctl uses the same code for both, so they cannot be told apart.
    """

    def __init__(
        self,
        message: str = 'Missing privileges or unit not found',
    ) -> None:
        super().__init__(message)


class KilledBySignalError(SystemctlError):
    """Systemctl was terminated by a signal and left no exit code.
    """

    def __init__(self, message: str = 'Process terminated by signal') -> None:
        super().__init__(message)


class UnknownExitCodeError(SystemctlError):
    """Systemctl exited with a code that has no defined meaning here.
    """

    def __init__(self, code: int) -> None:
        super().__init__(f'Process exited with code: {code}')
        self.code = code


class SystemctlTimeoutError(SystemctlError):
    """Systemctl did not finish within the configured timeout.
    """


class MalformedDescriptorError(SystemctlError, ValueError):
    """A doc descriptor or listing row does not have its minimal shape.
    """


class DecodeFailureError(SystemctlError, ValueError):
    """A token could not be decoded into its closed enumeration.
    """
