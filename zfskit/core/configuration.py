import copy
import pathlib
import typing

import cerberus
import mergedeep
from ruamel import yaml

import zfskit
import zfskit.core
import zfskit.core.zfs
import zfskit.core.zfs.process

DEFAULT_SEARCH_PATH = [
    "/sbin",
    "/usr/sbin",
    "/usr/local/sbin",
    "/bin",
    "/usr/bin",
]

DEFAULT_CONFIGURATION = {
    "binaries": {
        "zfs": "zfs",
        "zpool": "zpool",
    },
    "search_path": DEFAULT_SEARCH_PATH,
}

_BINARY_SCHEMA = {
    "type": "string",
    "empty": False,
}

SCHEMA = {
    "binaries": {
        "type": "dict",
        "schema": {
            "zfs": _BINARY_SCHEMA,
            "zpool": _BINARY_SCHEMA,
        },
    },
    "search_path": {
        "type": "list",
        "schema": {
            "type": "string",
            "empty": False,
        },
    },
}


class Error(zfskit.core.zfs.Error):
    pass


class InvalidConfigurationError(Error):
    pass


def read(
    data: typing.Optional[typing.Mapping[str, typing.Any]],
) -> typing.Dict[str, typing.Any]:
    if data is None:
        data = {}

    validator = cerberus.Validator(SCHEMA)
    if not validator.validate(dict(data)):
        raise InvalidConfigurationError(validator.errors)

    configuration = copy.deepcopy(DEFAULT_CONFIGURATION)

    # Lists are replaced, not extended.
    return mergedeep.merge(
        configuration,
        validator.document,
        strategy=mergedeep.Strategy.REPLACE,
    )


def load(
    path: typing.Optional[typing.Union[str, pathlib.Path]] = None,
) -> typing.Dict[str, typing.Any]:
    if path is None:
        return read(None)

    path = pathlib.Path(path)

    try:
        data = yaml.YAML(typ="safe").load(path)
    except yaml.YAMLError as error:
        raise InvalidConfigurationError(
            "Configuration {} is not valid YAML: {}".format(path, error)
        ) from error

    if data is not None and not isinstance(data, dict):
        raise InvalidConfigurationError(
            "Configuration {} must be a mapping".format(path)
        )

    return read(data)


def runner(
    configuration: typing.Mapping[str, typing.Any],
) -> "zfskit.core.zfs.process.SubprocessRunner":
    return zfskit.core.zfs.process.SubprocessRunner(
        binaries=configuration["binaries"],
        search_path=configuration["search_path"],
    )
