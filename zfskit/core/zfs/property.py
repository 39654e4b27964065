import collections.abc
import typing

import toolz

import zfskit
import zfskit.core
import zfskit.core.zfs

ASSIGNMENT = "="


class Properties(collections.abc.Mapping):
    """
    Immutable mapping of property names to property values.

    Every modification returns a new instance, so a map handed out once can
    never change behind the back of its holder.
    """

    def __init__(self, data: typing.Optional[typing.Mapping[str, str]] = None):
        super().__init__()

        if data is None:
            data = {}

        self.__data = dict(
            map(lambda x: (str(x[0]), str(x[1])), data.items()),
        )

    def __getitem__(self, key):
        return self.__data[key]

    def __iter__(self):
        return iter(self.__data)

    def __len__(self):
        return len(self.__data)

    def __eq__(self, other):
        if isinstance(other, Properties):
            return self.__data == other.data

        return NotImplemented

    def __hash__(self):
        return hash(frozenset(self.__data.items()))

    def __repr__(self):
        return "Properties({!r})".format(self.__data)

    @property
    def data(self) -> typing.Dict[str, str]:
        return dict(self.__data)

    def set(self, key: typing.Any, value: typing.Any) -> "Properties":
        return Properties(toolz.assoc(self.__data, str(key), str(value)))

    def tokens(self) -> typing.List[str]:
        return [
            "{}{}{}".format(key, ASSIGNMENT, value)
            for key, value in self.__data.items()
        ]


def parse(token: str) -> typing.Tuple[str, str]:
    key, separator, value = token.partition(ASSIGNMENT)

    if len(separator) == 0 or len(key) == 0:
        raise InvalidTokenError(token)

    return (key, value)


class InvalidTokenError(zfskit.core.zfs.Error):
    def __init__(self, token):
        super().__init__(
            "Property {} must be given as name{}value".format(token, ASSIGNMENT)
        )
        self.token = token
