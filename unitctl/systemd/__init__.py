from unitctl.systemd.errors import (
    DecodeFailureError,
    KilledBySignalError,
    MalformedDescriptorError,
    PermissionOrAmbiguousError,
    SystemctlError,
    SystemctlTimeoutError,
    UnitNotFoundError,
    UnknownExitCodeError,
)
from unitctl.systemd.extractor import UnitFieldExtractor, extract_unit
from unitctl.systemd.manager import SystemCtl
from unitctl.systemd.models import (
    Doc,
    ManDoc,
    RunResult,
    Unit,
    UnitList,
    UrlDoc,
)
from unitctl.systemd.outcome import (
    ExitOutcome,
    check_exit_code,
    classify_exit_code,
)
from unitctl.systemd.types import (
    AutoStartStatus,
    LoadState,
    UnitType,
    decode_auto_start,
    decode_load_state,
    decode_unit_type,
)

__all__ = [
    'AutoStartStatus',
    'DecodeFailureError',
    'Doc',
    'ExitOutcome',
    'KilledBySignalError',
    'LoadState',
    'MalformedDescriptorError',
    'ManDoc',
    'PermissionOrAmbiguousError',
    'RunResult',
    'SystemCtl',
    'SystemctlError',
    'SystemctlTimeoutError',
    'Unit',
    'UnitFieldExtractor',
    'UnitList',
    'UnitNotFoundError',
    'UnitType',
    'UnknownExitCodeError',
    'UrlDoc',
    'check_exit_code',
    'classify_exit_code',
    'decode_auto_start',
    'decode_load_state',
    'decode_unit_type',
    'extract_unit',
]
