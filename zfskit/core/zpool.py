"""
Read-only pool queries, delegated to the zpool binary.
"""
import typing

import zfskit
import zfskit.core
import zfskit.core.zfs
import zfskit.core.zfs.arguments
import zfskit.core.zfs.output
import zfskit.core.zfs.process


def _zpool(runner, command, arguments) -> str:
    return zfskit.core.zfs.process.execute(
        runner,
        zfskit.core.zfs.process.Binary.ZPOOL,
        command,
        arguments,
    )


def names(
    runner: typing.Optional["zfskit.core.zfs.process.Runner"] = None,
) -> typing.List[str]:
    records = zfskit.core.zfs.output.records(
        _zpool(
            runner,
            zfskit.core.zfs.process.Command.LIST,
            [zfskit.core.zfs.arguments.MACHINE_READABLE_FLAG, "-o", "name"],
        )
    )

    return [record[0] for record in records]


def get(
    pool: str,
    name: str,
    runner: typing.Optional["zfskit.core.zfs.process.Runner"] = None,
) -> str:
    return zfskit.core.zfs.output.scalar(
        _zpool(
            runner,
            zfskit.core.zfs.process.Command.GET,
            [
                zfskit.core.zfs.arguments.MACHINE_READABLE_FLAG,
                "-o",
                "value",
                name,
                pool,
            ],
        )
    )
