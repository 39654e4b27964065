SNAPSHOT_SEPARATOR = "@"


class Error(RuntimeError):
    pass


class Handle:
    def __init__(self, name: str, runner=None):
        self.__name = str(name)
        self.__runner = runner

    def __str__(self):
        return self.name

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.name)

    def __eq__(self, other):
        if not isinstance(other, Handle):
            return NotImplemented

        return type(self) is type(other) and self.name == other.name

    def __hash__(self):
        return hash((type(self), self.name))

    @property
    def name(self) -> str:
        return self.__name

    @property
    def _runner(self):
        return self.__runner
