import asyncio
import contextlib
import logging
from abc import ABC, abstractmethod

from unitctl.systemd.errors import SystemctlError, SystemctlTimeoutError
from unitctl.systemd.models import ProcessOutput


def kill_process(process: asyncio.subprocess.Process) -> None:
    """Kill a process that may already have exited.
    """
    with contextlib.suppress(ProcessLookupError):
        process.kill()


class CommandRunner(ABC):
    """Abstract interface for running a command to completion.
    """

    @abstractmethod
    async def run(
        self,
        args: list[str],
        timeout: float | None = None,
    ) -> ProcessOutput:
        """Run a command and drain both of its output streams.
        """


class SubprocessRunner(CommandRunner):
    """Runs commands with asyncio subprocesses.
    """

    def __init__(self) -> None:
        """Initialize the runner.
        """
        self._logger = logging.getLogger(__name__)

    async def run(
        self,
        args: list[str],
        timeout: float | None = None,
    ) -> ProcessOutput:
        """Run a command and drain both of its output streams.

        Args:
            args: Full argument vector, executable first
            timeout: Seconds to wait before killing the process

        Returns:
            ProcessOutput with decoded stdout and stderr

        Raises:
            SystemctlError: If the executable cannot be started
            SystemctlTimeoutError: If the timeout expires
        """
        self._logger.debug('Running %s', ' '.join(args))

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            self._logger.error('Failed to start %s: %s', args[0], e)
            raise SystemctlError(f'Failed to start {args[0]}: {e}') from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout,
            )
        except asyncio.CancelledError:
            kill_process(process)
            raise
        except TimeoutError:
            kill_process(process)
            await process.wait()
            self._logger.warning(
                'Timed out after %s seconds: %s',
                timeout,
                ' '.join(args),
            )
            raise SystemctlTimeoutError(
                f'{" ".join(args)} timed out after {timeout} seconds'
            ) from None

        return ProcessOutput(
            args=args,
            stdout=stdout.decode('utf-8', errors='replace'),
            stderr=stderr.decode('utf-8', errors='replace'),
            returncode=process.returncode,
        )
