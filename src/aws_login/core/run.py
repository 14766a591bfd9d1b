"""Runs third-party command line applications.

Every external program (``aws``, ``docker``) is invoked through ``Run``, an
immutable description of the program and its arguments. Arguments are always
passed as an argv vector and never interpreted by a shell.

Usage:
    account = (
        Run("aws")
        .with_aws_options(context)
        .arg("sts")
        .arg("get-caller-identity")
        .output()
    )

    Run("aws").arg("sso").arg("login").pass_through(context)
"""

import shutil
import subprocess
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import BinaryIO, Dict, List, Tuple

from .context import Context
from .errors import AppError
from .logging import get_logger

log = get_logger("run")

# Maximum bytes relayed from a pipe per read.
CHUNK_SIZE = 4096


class ProgramCache:
    """Remembers whether programs could be found in PATH.

    Each program is looked up once and the answer reused for the lifetime
    of the cache. The lock is held only for a single lookup-or-insert.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._found: Dict[str, bool] = {}

    def in_path(self, program: str) -> bool:
        with self._lock:
            found = self._found.get(program)
            if found is None:
                found = shutil.which(program) is not None
                self._found[program] = found
                log.debug("Looked up %s in PATH: %s", program, found)
            return found

    def seed(self, program: str, found: bool) -> None:
        """Record an answer without searching PATH."""
        with self._lock:
            self._found[program] = found

    def clear(self) -> None:
        with self._lock:
            self._found.clear()

    def __contains__(self, program: str) -> bool:
        with self._lock:
            return program in self._found


# Shared by every Run that is not given its own cache.
PROGRAM_CACHE = ProgramCache()


def _status(returncode: int) -> int:
    # Negative codes mean the child was killed by a signal.
    return returncode if returncode > 0 else 1


def _relay(source: BinaryIO, target: BinaryIO) -> None:
    """Copy a pipe into a stream as data arrives."""
    try:
        while True:
            chunk = source.read1(CHUNK_SIZE)
            if not chunk:
                break
            target.write(chunk)
            target.flush()
    except OSError as error:
        raise AppError(1, str(error)) from error
    finally:
        source.close()


@dataclass(frozen=True)
class Run:
    """An invocation of a program, finalized when it is executed."""

    program: str
    args: Tuple[str, ...] = ()
    cache: ProgramCache = field(default=PROGRAM_CACHE, repr=False, compare=False)

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]

    def arg(self, value: str) -> "Run":
        """Return a new invocation with ``value`` appended to the arguments."""
        return replace(self, args=self.args + (str(value),))

    def with_aws_options(self, context: Context) -> "Run":
        """Pass the ``--profile`` and ``--region`` overrides on to the AWS CLI."""
        run = self
        if context.profile is not None:
            run = run.arg("--profile").arg(context.profile)
        if context.region is not None:
            run = run.arg("--region").arg(context.region)
        return run

    def output(self) -> str:
        """Run the program to completion and return its standard output.

        Raises:
            AppError: The program is not in PATH, its output is not valid
                UTF-8, or it exited with a non-zero status. In the last case
                the message is the captured error output and the status is
                the exit code of the program.
        """
        self._check_path()
        log.debug("Capturing output of %s (%d arguments)", self.program, len(self.args))

        try:
            process = subprocess.run(
                self.argv, stdout=subprocess.PIPE, stderr=subprocess.PIPE
            )
        except OSError as error:
            raise AppError.from_os_error(error) from error

        if process.returncode != 0:
            try:
                message = process.stderr.decode("utf-8")
            except UnicodeDecodeError:
                message = f"The error output of, {self.program}, is not valid UTF-8."
            raise AppError(_status(process.returncode), message)

        try:
            return process.stdout.decode("utf-8")
        except UnicodeDecodeError as error:
            raise AppError(
                1, f"The output of, {self.program}, is not valid UTF-8."
            ) from error

    def pass_through(self, context: Context) -> None:
        """Run the program while relaying its output into the context streams.

        Standard input is inherited. Standard output and error are copied
        into ``context.output`` and ``context.error`` as they are produced.
        The call returns once the program has exited and both pipes have
        been drained.

        Raises:
            AppError: The program is not in PATH, a pipe could not be read,
                or it exited with a non-zero status (status only, since the
                error output was already relayed).
        """
        self._check_path()
        log.debug("Passing through %s (%d arguments)", self.program, len(self.args))

        output, error = context.output, context.error

        try:
            process = subprocess.Popen(
                self.argv, stdout=subprocess.PIPE, stderr=subprocess.PIPE
            )
        except OSError as exc:
            raise AppError.from_os_error(exc) from exc

        with ThreadPoolExecutor(max_workers=3) as pool:
            relays = [
                pool.submit(_relay, process.stdout, output),
                pool.submit(_relay, process.stderr, error),
            ]
            waiting = pool.submit(process.wait)

        for relay in relays:
            relay.result()

        returncode = waiting.result()
        log.debug("%s exited with %d", self.program, returncode)

        if returncode != 0:
            raise AppError(_status(returncode))

    def _check_path(self) -> None:
        if not self.cache.in_path(self.program):
            raise AppError(1, f"The program, {self.program}, could not be found in PATH.")


def aws(context: Context) -> Run:
    """Begin an AWS CLI invocation that inherits the context overrides."""
    return Run("aws").with_aws_options(context)
