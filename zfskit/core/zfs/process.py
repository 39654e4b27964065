import abc
import enum
import logging
import os
import shutil
import subprocess
import typing

import zfskit
import zfskit.core
import zfskit.core.configuration
import zfskit.core.zfs

ENCODING = "utf-8"

_logger = logging.getLogger(__name__)


class Binary(enum.Enum):
    ZFS = "zfs"
    ZPOOL = "zpool"

    def __str__(self):
        return self.value


class Command(enum.Enum):
    CREATE = "create"
    CLONE = "clone"
    DESTROY = "destroy"
    PROMOTE = "promote"
    LIST = "list"
    SET = "set"
    GET = "get"
    SNAPSHOT = "snapshot"

    def __str__(self):
        return self.value


class InvocationError(zfskit.core.zfs.Error):
    def __init__(self, binary: "Binary", error: OSError):
        super().__init__("Could not run {}: {}".format(binary, error))
        self.binary = binary


class DecodeError(zfskit.core.zfs.Error):
    def __init__(self, binary: "Binary", error: UnicodeDecodeError):
        super().__init__("Output of {} is not valid text: {}".format(binary, error))
        self.binary = binary


class ProcessError(zfskit.core.zfs.Error):
    _label = "process"

    def __init__(self, stderr: str, returncode: typing.Optional[int] = None):
        super().__init__("{} failed: {}".format(self._label, stderr))
        self.stderr = stderr
        self.returncode = returncode


class ZfsProcessError(ProcessError):
    _label = "zfs process"


class ZpoolProcessError(ProcessError):
    _label = "zpool process"


_PROCESS_ERRORS = {
    Binary.ZFS: ZfsProcessError,
    Binary.ZPOOL: ZpoolProcessError,
}


class Completed(typing.NamedTuple):
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""


class Runner(abc.ABC):
    @abc.abstractmethod
    def run(
        self,
        binary: Binary,
        command: Command,
        arguments: typing.Sequence[str],
    ) -> Completed:
        pass


class SubprocessRunner(Runner):
    """
    Runs the tools as child processes with an empty environment.

    Since the child sees no ``PATH``, bare binary names are looked up in the
    configured search path before the child is started.
    """

    def __init__(
        self,
        binaries: typing.Optional[typing.Mapping[str, str]] = None,
        search_path: typing.Optional[typing.Sequence[str]] = None,
    ):
        if binaries is None:
            binaries = {}

        if search_path is None:
            search_path = zfskit.core.configuration.DEFAULT_SEARCH_PATH

        self.__binaries = dict(binaries)
        self.__search_path = list(search_path)

    def executable(self, binary: Binary) -> str:
        name = self.__binaries.get(binary.value, binary.value)

        if os.sep in name:
            return name

        found = shutil.which(name, path=os.pathsep.join(self.__search_path))
        if found is None:
            return name

        return found

    def run(self, binary, command, arguments):
        try:
            result = subprocess.run(
                [self.executable(binary), command.value, *arguments],
                check=False,
                env={},
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as error:
            raise InvocationError(binary, error) from error

        return Completed(result.returncode, result.stdout, result.stderr)


class ScriptedRunner(Runner):
    """
    Answers invocations with prepared results instead of running a tool.

    ``responses`` maps a ``Command`` (or a ``(Binary, Command)`` pair) to a
    ``Completed`` value or to a callable receiving the argument list and
    returning one. Commands without a response succeed with empty output.
    Every invocation is recorded in ``calls``.
    """

    def __init__(self, responses=None):
        if responses is None:
            responses = {}

        self.__responses = dict(responses)
        self.__calls: typing.List[
            typing.Tuple[Binary, Command, typing.List[str]]
        ] = []

    @property
    def calls(self) -> typing.List[typing.Tuple[Binary, Command, typing.List[str]]]:
        return list(self.__calls)

    def respond(self, key, response):
        self.__responses[key] = response

    def run(self, binary, command, arguments):
        arguments = [*arguments]
        self.__calls.append((binary, command, arguments))

        response = self.__responses.get(
            (binary, command),
            self.__responses.get(command, Completed(0)),
        )

        if callable(response):
            response = response(arguments)

        return response


def default() -> Runner:
    return zfskit.core.configuration.runner(zfskit.core.configuration.load())


def _decode(binary: Binary, data: bytes) -> str:
    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError as error:
        raise DecodeError(binary, error) from error


def execute(
    runner: typing.Optional[Runner],
    binary: Binary,
    command: Command,
    arguments: typing.Sequence[str],
) -> str:
    if runner is None:
        runner = default()

    arguments = [*map(str, arguments)]
    _logger.debug("Running %s %s %s", binary, command, " ".join(arguments))

    completed = runner.run(binary, command, arguments)

    if completed.returncode != 0:
        stderr = _decode(binary, completed.stderr)
        _logger.debug(
            "%s %s exited with status %d", binary, command, completed.returncode
        )
        raise _PROCESS_ERRORS[binary](stderr, completed.returncode)

    return _decode(binary, completed.stdout)
