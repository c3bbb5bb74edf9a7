"""Error types raised by the HDFS client.

Every error derives from HdfsError, which is a RuntimeError so that callers
written against the plain subprocess wrapper keep working.
"""


class HdfsError(RuntimeError):
    """Base class for all HDFS client failures."""


class HadoopUnavailableError(HdfsError):
    """The hadoop executable could not be resolved or did not answer `version`."""


class InvocationError(HdfsError):
    """The subprocess could not be launched at all."""


class HdfsCommandError(HdfsError):
    """A hadoop command ran but reported failure."""


class ProcessResultError(HdfsError):
    """One of the joined subprocess signals (status, stdout, stderr) failed.

    Attributes:
        signal: Which signal failed: "status", "stdout" or "stderr"
        reason: Failure text, or "discarded" when the signal was cancelled
    """

    def __init__(self, message: str, *, signal: str, reason: str) -> None:
        super().__init__(message)
        self.signal = signal
        self.reason = reason


class UnexpectedResultError(HdfsError):
    """The process finished but its status matched no known outcome."""

    def __init__(self, message: str, *, status: int | None, stdout: str, stderr: str) -> None:
        super().__init__(message)
        self.status = status
        self.stdout = stdout
        self.stderr = stderr


class FormatError(HdfsError):
    """Command output did not have the expected shape."""

    def __init__(self, message: str, *, output: str) -> None:
        super().__init__(message)
        self.output = output


class PreconditionError(HdfsError):
    """A local precondition failed before any command was run."""
