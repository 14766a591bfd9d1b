"""Application context handed to every subcommand.

The context carries the global ``--profile`` and ``--region`` overrides and
the streams that subcommands (and the processes they run) write to. Two
variants exist: ``LiveContext`` for the real process streams and
``BufferContext`` for in-memory buffers used in tests.
"""

import io
import sys
from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

from rich.console import Console


class Context(ABC):
    """Options and output streams for a single invocation."""

    def __init__(self, profile: Optional[str] = None, region: Optional[str] = None):
        self.profile = profile
        self.region = region

    @property
    @abstractmethod
    def output(self) -> BinaryIO:
        """The standard output stream."""

    @property
    @abstractmethod
    def error(self) -> BinaryIO:
        """The error output stream."""

    def outputln(self, message: str = "") -> None:
        self._writeln(self.output, message)

    def errorln(self, message: str = "") -> None:
        self._writeln(self.error, message)

    @staticmethod
    def _writeln(stream: BinaryIO, message: str) -> None:
        stream.write(f"{message}\n".encode("utf-8"))
        stream.flush()


class LiveContext(Context):
    """Context bound to the stdout and stderr of this process."""

    def __init__(self, profile: Optional[str] = None, region: Optional[str] = None):
        super().__init__(profile, region)
        self._console = Console(stderr=True, soft_wrap=True)

    @property
    def output(self) -> BinaryIO:
        sys.stdout.flush()
        return sys.stdout.buffer

    @property
    def error(self) -> BinaryIO:
        sys.stderr.flush()
        return sys.stderr.buffer

    def errorln(self, message: str = "") -> None:
        self._console.print(message, style="red", markup=False, highlight=False)


class BufferContext(Context):
    """Context that collects everything written into memory."""

    def __init__(self, profile: Optional[str] = None, region: Optional[str] = None):
        super().__init__(profile, region)
        self._output = io.BytesIO()
        self._error = io.BytesIO()

    @property
    def output(self) -> BinaryIO:
        return self._output

    @property
    def error(self) -> BinaryIO:
        return self._error

    def output_as_string(self) -> str:
        return self._output.getvalue().decode("utf-8")

    def error_as_string(self) -> str:
        return self._error.getvalue().decode("utf-8")
