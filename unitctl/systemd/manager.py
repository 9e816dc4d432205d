import logging

from unitctl.config import SystemctlSettings
from unitctl.systemd.constants import ACTIVE_STATE, SystemctlVerb
from unitctl.systemd.errors import SystemctlError, UnitNotFoundError
from unitctl.systemd.extractor import UnitFieldExtractor
from unitctl.systemd.listing import parse_unit_list
from unitctl.systemd.models import RunResult, Unit, UnitList
from unitctl.systemd.outcome import check_exit_code, normalize_returncode
from unitctl.systemd.runner import CommandRunner, SubprocessRunner


class SystemCtl:
    """Manager for systemd units through the systemctl CLI.

    This is the main interface of the package. Every query spawns a
    fresh systemctl process and returns a new snapshot; nothing is
    cached between calls.
    """

    def __init__(
        self,
        settings: SystemctlSettings | None = None,
        runner: CommandRunner | None = None,
        extractor: UnitFieldExtractor | None = None,
    ) -> None:
        """Initialize the manager with optional dependencies.
        """
        self._logger = logging.getLogger(__name__)

        self._settings = settings or SystemctlSettings()
        self._runner = runner or SubprocessRunner()
        self._extractor = extractor or UnitFieldExtractor()

    async def daemon_reload(self) -> RunResult:
        """Reload all unit files.
        """
        return await self._capture(SystemctlVerb.DAEMON_RELOAD)

    async def start(self, unit: str) -> RunResult:
        """Start a unit.
        """
        return await self._capture(SystemctlVerb.START, unit)

    async def stop(self, unit: str) -> RunResult:
        """Stop a unit.
        """
        return await self._capture(SystemctlVerb.STOP, unit)

    async def restart(self, unit: str) -> RunResult:
        """Restart a unit, starting it if it is not running.
        """
        return await self._capture(SystemctlVerb.RESTART, unit)

    async def reload(self, unit: str) -> RunResult:
        """Ask a unit to reload its configuration.
        """
        return await self._capture(SystemctlVerb.RELOAD, unit)

    async def reload_or_restart(self, unit: str) -> RunResult:
        """Reload a unit if it supports it, restart it otherwise.
        """
        return await self._capture(SystemctlVerb.RELOAD_OR_RESTART, unit)

    async def clean(self, unit: str) -> RunResult:
        """Remove the runtime, cache and state data of a unit.
        """
        return await self._capture(SystemctlVerb.CLEAN, unit)

    async def enable(self, unit: str) -> RunResult:
        """Enable a unit to start at boot.
        """
        return await self._capture(SystemctlVerb.ENABLE, unit)

    async def disable(self, unit: str) -> RunResult:
        """Disable a unit from starting at boot.
        """
        return await self._capture(SystemctlVerb.DISABLE, unit)

    async def isolate(self, unit: str) -> RunResult:
        """Start a unit and its dependencies, stopping all others.
        """
        return await self._capture(SystemctlVerb.ISOLATE, unit)

    async def freeze(self, unit: str) -> RunResult:
        """Freeze (halt) a unit. Not every unit supports this.
        """
        return await self._capture(SystemctlVerb.FREEZE, unit)

    async def unfreeze(self, unit: str) -> RunResult:
        """Thaw a frozen unit.
        """
        return await self._capture(SystemctlVerb.THAW, unit)

    async def status(self, unit: str) -> RunResult:
        """Raw output of `systemctl status <unit>`.
        """
        return await self._capture(SystemctlVerb.STATUS, unit)

    async def cat(self, unit: str) -> RunResult:
        """Raw output of `systemctl cat <unit>`.
        """
        return await self._capture(SystemctlVerb.CAT, unit)

    async def is_active(self, unit: str) -> bool:
        """Check if a unit is actively running.
        """
        result = await self._capture(SystemctlVerb.IS_ACTIVE, unit)
        return result.stdout.rstrip() == ACTIVE_STATE

    async def exists(self, unit: str) -> bool:
        """Check if a unit file is known to systemd.
        """
        units = await self.list_units(glob=unit)
        return bool(units)

    async def list_units_full(
        self,
        type_filter: str | None = None,
        state_filter: str | None = None,
        glob: str | None = None,
    ) -> list[UnitList]:
        """List unit files.

        Args:
            type_filter: Optional `--type` filter
            state_filter: Optional `--state` filter
            glob: Optional unit name pattern

        Returns:
            Unit rows in systemctl order

        Raises:
            MalformedDescriptorError: If the listing cannot be parsed
        """
        args: list[str] = [SystemctlVerb.LIST_UNIT_FILES]
        if type_filter:
            args.extend(['--type', type_filter])
        if state_filter:
            args.extend(['--state', state_filter])
        if glob:
            args.append(glob)

        result = await self._capture(*args)
        return parse_unit_list(result.stdout)

    async def list_units(
        self,
        type_filter: str | None = None,
        state_filter: str | None = None,
        glob: str | None = None,
    ) -> list[str]:
        """List unit file names.
        """
        units = await self.list_units_full(type_filter, state_filter, glob)
        return [unit.unit_file for unit in units]

    async def list_enabled_services(self) -> list[str]:
        """List services declared as enabled.
        """
        return await self.list_units('service', 'enabled')

    async def list_disabled_services(self) -> list[str]:
        """List services declared as disabled.
        """
        return await self.list_units('service', 'disabled')

    async def create_unit(self, name: str) -> Unit:
        """Build a Unit from `status`, `cat` and `is-active` queries.

        Args:
            name: Unit name, with or without its type suffix

        Returns:
            The populated Unit

        Raises:
            UnitNotFoundError: If the unit does not exist
            DecodeFailureError: If the unit type cannot be decoded
        """
        if not await self.exists(name):
            raise UnitNotFoundError(name)

        status = await self.status(name)

        try:
            directives = (await self.cat(name)).stdout
        except SystemctlError as e:
            self._logger.warning(
                'Failed to read unit file of %s, skipping directives: %s',
                name,
                e,
            )
            directives = ''

        active = await self.is_active(name)
        return self._extractor.extract(status.stdout, directives, active)

    async def _capture(self, *args: str) -> RunResult:
        """Run systemctl, capture its output and classify the exit code.

        Raises:
            PermissionOrAmbiguousError: On exit code 4
            KilledBySignalError: If systemctl was killed by a signal
            UnknownExitCodeError: On any other failing exit code
        """
        command = self._settings.command(*args)
        output = await self._runner.run(command, self._settings.timeout)
        returncode = normalize_returncode(output.returncode)

        try:
            outcome = check_exit_code(returncode)
        except SystemctlError as e:
            self._logger.error(
                'systemctl %s failed: %s %s',
                ' '.join(args),
                e,
                output.stderr.strip(),
            )
            raise

        return RunResult(
            args=output.args,
            stdout=output.stdout,
            stderr=output.stderr,
            returncode=returncode,
            outcome=outcome,
        )
