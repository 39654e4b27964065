"""
Request submission: every function here serializes one request, runs a
single zfs subcommand and turns the output into a handle or a value.
"""
import typing

import zfskit
import zfskit.core
import zfskit.core.zfs
import zfskit.core.zfs.arguments
import zfskit.core.zfs.file_system
import zfskit.core.zfs.output
import zfskit.core.zfs.process
import zfskit.core.zfs.request
import zfskit.core.zfs.snapshot


def _zfs(runner, command, arguments) -> str:
    return zfskit.core.zfs.process.execute(
        runner,
        zfskit.core.zfs.process.Binary.ZFS,
        command,
        arguments,
    )


def create(
    request: "zfskit.core.zfs.request.CreateRequest",
    runner: typing.Optional["zfskit.core.zfs.process.Runner"] = None,
) -> "zfskit.core.zfs.file_system.Dataset":
    _zfs(
        runner,
        zfskit.core.zfs.process.Command.CREATE,
        zfskit.core.zfs.arguments.create_arguments(request),
    )

    return zfskit.core.zfs.file_system.Dataset(request.name, runner)


def clone(
    request: "zfskit.core.zfs.request.CloneRequest",
    runner: typing.Optional["zfskit.core.zfs.process.Runner"] = None,
) -> "zfskit.core.zfs.file_system.Dataset":
    _zfs(
        runner,
        zfskit.core.zfs.process.Command.CLONE,
        zfskit.core.zfs.arguments.clone_arguments(request),
    )

    return zfskit.core.zfs.file_system.Dataset(request.target_name, runner)


# pylint: disable=redefined-builtin
def open(
    name: str,
    runner: typing.Optional["zfskit.core.zfs.process.Runner"] = None,
) -> "zfskit.core.zfs.file_system.Dataset":
    output = _zfs(
        runner,
        zfskit.core.zfs.process.Command.LIST,
        zfskit.core.zfs.arguments.open_arguments(name),
    )

    return zfskit.core.zfs.file_system.Dataset(
        zfskit.core.zfs.output.scalar(output),
        runner,
    )


def exists(
    name: str,
    runner: typing.Optional["zfskit.core.zfs.process.Runner"] = None,
) -> bool:
    try:
        open(name, runner)
        return True
    except zfskit.core.zfs.process.ZfsProcessError:
        return False


def snapshot(
    request: "zfskit.core.zfs.request.SnapshotRequest",
    runner: typing.Optional["zfskit.core.zfs.process.Runner"] = None,
) -> "zfskit.core.zfs.snapshot.Snapshot":
    _zfs(
        runner,
        zfskit.core.zfs.process.Command.SNAPSHOT,
        zfskit.core.zfs.arguments.snapshot_arguments(request),
    )

    return zfskit.core.zfs.snapshot.Snapshot(request.snapshot_name, runner)


# pylint: disable=redefined-builtin
def list(
    request: "zfskit.core.zfs.request.ListRequest",
    runner: typing.Optional["zfskit.core.zfs.process.Runner"] = None,
) -> typing.List[typing.List[str]]:
    return zfskit.core.zfs.output.records(
        _zfs(
            runner,
            zfskit.core.zfs.process.Command.LIST,
            zfskit.core.zfs.arguments.list_arguments(request),
        )
    )
