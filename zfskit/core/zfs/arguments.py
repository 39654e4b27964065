"""
Translation of requests into the argument vectors of the zfs subcommands.

The tool reads its arguments positionally, so every flag is immediately
followed by its value and the order of the groups below is fixed.
"""
import typing

import zfskit
import zfskit.core
import zfskit.core.zfs
import zfskit.core.zfs.property
import zfskit.core.zfs.request

MACHINE_READABLE_FLAG = "-Hp"
LIST_TYPE_SEPARATOR = ","


def _property_arguments(
    properties: "zfskit.core.zfs.property.Properties",
) -> typing.List[str]:
    arguments = []

    for token in properties.tokens():
        arguments.extend(["-o", token])

    return arguments


def create_arguments(
    request: "zfskit.core.zfs.request.CreateRequest",
) -> typing.List[str]:
    arguments = []

    if request.recursive:
        arguments.append("-p")

    if request.volume_size is not None:
        if request.sparse:
            arguments.append("-s")

        if request.block_size is not None:
            arguments.extend(["-b", str(request.block_size)])

    arguments.extend(_property_arguments(request.properties))

    if request.volume_size is not None:
        arguments.extend(["-V", request.volume_size])

    arguments.append(request.name)

    return arguments


def clone_arguments(
    request: "zfskit.core.zfs.request.CloneRequest",
) -> typing.List[str]:
    arguments = []

    if request.create_parents:
        arguments.append("-p")

    arguments.extend(_property_arguments(request.properties))
    arguments.extend([request.source_snapshot, request.target_name])

    return arguments


def snapshot_arguments(
    request: "zfskit.core.zfs.request.SnapshotRequest",
) -> typing.List[str]:
    arguments = []

    if request.recursive:
        arguments.append("-r")

    arguments.extend(_property_arguments(request.properties))
    arguments.append(request.snapshot_name)

    return arguments


def list_arguments(
    request: "zfskit.core.zfs.request.ListRequest",
) -> typing.List[str]:
    arguments = []

    if request.recursive:
        arguments.append("-r")

        if request.recursion_depth is not None:
            arguments.extend(["-d", request.recursion_depth])

    arguments.append(MACHINE_READABLE_FLAG)
    arguments.extend(_property_arguments(request.properties))

    if len(request.list_types) > 0:
        arguments.extend(
            [
                "-t",
                LIST_TYPE_SEPARATOR.join(map(str, request.list_types)),
            ]
        )

    if request.root is not None:
        arguments.append(request.root)

    return arguments


def open_arguments(name: str) -> typing.List[str]:
    return ["-Ho", "name", name]


def get_arguments(name: str, property_name: str) -> typing.List[str]:
    return ["-H", "-o", "value", property_name, name]


def set_arguments(name: str, property_name: str, value: str) -> typing.List[str]:
    return [
        "{}{}{}".format(
            property_name,
            zfskit.core.zfs.property.ASSIGNMENT,
            value,
        ),
        name,
    ]


def promote_arguments(name: str) -> typing.List[str]:
    return [name]


def destroy_arguments(name: str) -> typing.List[str]:
    return [name]
