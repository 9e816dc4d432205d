from typing import Annotated, Literal, Self

from pydantic import Field, model_validator

from unitctl.systemd.outcome import ExitOutcome
from unitctl.systemd.types import AutoStartStatus, LoadState, UnitType
from unitctl.utils import BaseModel


class ManDoc(BaseModel):
    """Man page reference from a `Docs:` line.

    Args:
        kind: Variant tag
        reference: Man page name without the section annotation
    """
    model_config = {'frozen': True}

    kind: Literal['man'] = 'man'
    reference: str = Field(...)

    def as_man(self) -> str | None:
        return self.reference

    def as_url(self) -> str | None:
        return None


class UrlDoc(BaseModel):
    """Web page reference from a `Docs:` line.

    Args:
        kind: Variant tag
        address: Full URL including its scheme
    """
    model_config = {'frozen': True}

    kind: Literal['url'] = 'url'
    address: str = Field(...)

    def as_man(self) -> str | None:
        return None

    def as_url(self) -> str | None:
        return self.address


Doc = Annotated[ManDoc | UrlDoc, Field(discriminator='kind')]


class UnitList(BaseModel):
    """One row of `systemctl list-unit-files`.

    Args:
        unit_file: Unit file name, `name.type`
        state: Unit file state as printed by systemctl
        vendor_preset: Vendor preset, None when unknown
    """
    model_config = {'frozen': True}

    unit_file: str = Field(...)
    state: str = Field(...)
    vendor_preset: bool | None = Field(None)


class ProcessOutput(BaseModel):
    """Raw output of a finished process, before classification.

    Args:
        args: Full argument vector that was executed
        stdout: Drained standard output
        stderr: Drained standard error
        returncode: Exit code as reported by the OS, negative when
            killed by a signal
    """
    model_config = {'frozen': True}

    args: list[str] = Field(default_factory=list)
    stdout: str = Field('')
    stderr: str = Field('')
    returncode: int | None = Field(None)


class RunResult(BaseModel):
    """Captured output of one systemctl invocation.

    Args:
        args: Full argument vector that was executed
        stdout: Drained standard output
        stderr: Drained standard error
        returncode: Exit code, None when killed by a signal
        outcome: Classified exit code
    """
    model_config = {'frozen': True}

    args: list[str] = Field(default_factory=list)
    stdout: str = Field('')
    stderr: str = Field('')
    returncode: int | None = Field(None)
    outcome: ExitOutcome = Field(ExitOutcome.SUCCESS)


class Unit(BaseModel):
    """A systemd unit as reported by `status` and `cat`.

    Args:
        name: Unit name without its type suffix
        utype: Unit type
        description: Optional unit description
        state: Current load state
        auto_start: Auto start policy
        active: Whether the unit is actively running
        preset: Whether the vendor preset enables the unit, meaning it
            has to be disabled manually not to start automatically
        script: Unit file loaded when starting this unit
        restart_policy: Restart policy
        kill_mode: Kill mode
        process: Name of the main process
        pid: Main process ID
        tasks: Number of running tasks
        cpu: CPU consumption
        memory: Memory consumption
        mounted: Mounted device (`What`) of a mount or automount unit
        mountpoint: Mount point (`Where`) of a mount or automount unit
        docs: Documentation available for this unit
        wants: Units this unit wants
        wanted_by: Units that want this unit
        also: Units installed or removed together with this unit
        before: Units ordered after this unit
        after: Units ordered before this unit
        exec_start: Command line executed on start
        exec_reload: Command line executed on reload
        transient: Whether the unit was created at runtime
    """
    model_config = {'frozen': True}

    name: str = Field(..., min_length=1)
    utype: UnitType = Field(UnitType.SERVICE)
    description: str | None = Field(None)
    state: LoadState = Field(LoadState.MASKED)
    auto_start: AutoStartStatus = Field(AutoStartStatus.DISABLED)
    active: bool = Field(False)
    preset: bool = Field(False)
    script: str | None = Field(None)
    restart_policy: str | None = Field(None)
    kill_mode: str | None = Field(None)
    process: str | None = Field(None)
    pid: int | None = Field(None, ge=0)
    tasks: int | None = Field(None, ge=0)
    cpu: str | None = Field(None)
    memory: str | None = Field(None)
    mounted: str | None = Field(None)
    mountpoint: str | None = Field(None)
    docs: list[Doc] | None = Field(None)
    wants: list[str] | None = Field(None)
    wanted_by: list[str] | None = Field(None)
    also: list[str] | None = Field(None)
    before: list[str] | None = Field(None)
    after: list[str] | None = Field(None)
    exec_start: str | None = Field(None)
    exec_reload: str | None = Field(None)
    transient: bool = Field(False)

    @model_validator(mode='after')
    def validate_script_matches_state(self) -> Self:
        if self.state == LoadState.LOADED and self.script is None:
            raise ValueError('A loaded unit must have a unit file')
        if self.state == LoadState.MASKED and self.script is not None:
            raise ValueError('A masked unit cannot have a unit file')
        return self

    @property
    def unit_file(self) -> str:
        """Full unit name, `name.type`.
        """
        return f'{self.name}.{self.utype.value}'
