import enum

import zfskit
import zfskit.core
import zfskit.core.zfs


class InvalidListTypeError(zfskit.core.zfs.Error):
    def __init__(self, token):
        super().__init__(
            "{} is not a supported list type must be either: {}".format(
                token,
                ", ".join(map(str, list(ListType)[:-1]))
                + " or "
                + str(list(ListType)[-1]),
            )
        )
        self.token = token


class ListType(enum.Enum):
    FILE_SYSTEM = "filesystem"
    SNAPSHOT = "snapshot"
    VOLUME = "volume"
    BOOKMARK = "bookmark"
    ALL = "all"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value) -> "ListType":
        if isinstance(value, cls):
            return value

        try:
            return cls(value)
        except ValueError as error:
            raise InvalidListTypeError(value) from error
