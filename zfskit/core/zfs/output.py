import typing

import zfskit
import zfskit.core
import zfskit.core.zfs


class UnexpectedOutputError(zfskit.core.zfs.Error):
    def __init__(self, text: str):
        super().__init__("Expected a single value but got: {!r}".format(text))
        self.text = text


def scalar(text: str) -> str:
    value = text.strip()

    if "\n" in value:
        raise UnexpectedOutputError(text)

    return value


def records(text: str) -> typing.List[typing.List[str]]:
    # Fields never contain whitespace in machine-readable output.
    return [line.split() for line in text.splitlines() if line.strip()]
