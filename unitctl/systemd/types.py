import logging
from enum import StrEnum

from unitctl.systemd.errors import DecodeFailureError

logger = logging.getLogger(__name__)


class AutoStartStatus(StrEnum):
    """Boot-time enablement policy of a unit.
    """

    STATIC = 'static'
    ENABLED = 'enabled'
    ENABLED_RUNTIME = 'enabled-runtime'
    DISABLED = 'disabled'
    GENERATED = 'generated'
    INDIRECT = 'indirect'
    TRANSIENT = 'transient'


class UnitType(StrEnum):
    """Unit type, taken from the unit file suffix.
    """

    AUTOMOUNT = 'automount'
    MOUNT = 'mount'
    SERVICE = 'service'
    SCOPE = 'scope'
    SOCKET = 'socket'
    SLICE = 'slice'
    TIMER = 'timer'
    PATH = 'path'
    TARGET = 'target'


class LoadState(StrEnum):
    """Load state reported on the `Loaded:` line.
    """

    MASKED = 'masked'
    LOADED = 'loaded'


class ScanState(StrEnum):
    """Position of the status scanner relative to a `Docs:` block.
    """

    SCANNING = 'scanning'
    IN_DOCS = 'in-docs'


def decode_auto_start(token: str) -> AutoStartStatus:
    """Decode an auto-start token.

    Systemd grows new tokens from time to time, so anything unknown
    degrades to `AutoStartStatus.DISABLED` instead of failing.
    """
    try:
        return AutoStartStatus(token.strip())
    except ValueError:
        logger.debug(
            'Unknown auto-start token %r, assuming disabled',
            token,
        )
        return AutoStartStatus.DISABLED


def decode_unit_type(token: str) -> UnitType:
    """Decode a unit file suffix.

    Raises:
        DecodeFailureError: If the suffix is not a known unit type
    """
    try:
        return UnitType(token.strip())
    except ValueError:
        raise DecodeFailureError(f'Unknown unit type: {token!r}') from None


def decode_load_state(token: str) -> LoadState:
    """Decode a load state token.

    Raises:
        DecodeFailureError: If the token is not a known load state
    """
    try:
        return LoadState(token.strip())
    except ValueError:
        raise DecodeFailureError(f'Unknown load state: {token!r}') from None
