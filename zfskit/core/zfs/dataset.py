import zfskit
import zfskit.core
import zfskit.core.zfs
import zfskit.core.zfs.arguments
import zfskit.core.zfs.output
import zfskit.core.zfs.process


class Handle(zfskit.core.zfs.Handle):
    """
    Operations shared by every kind of dataset, scoped to the handle's name.

    The handle does not know whether the object still exists; after
    ``destroy`` further calls fail in the tool, not here.
    """

    def _zfs(self, command, arguments) -> str:
        return zfskit.core.zfs.process.execute(
            self._runner,
            zfskit.core.zfs.process.Binary.ZFS,
            command,
            arguments,
        )

    def get(self, name: str) -> str:
        return zfskit.core.zfs.output.scalar(
            self._zfs(
                zfskit.core.zfs.process.Command.GET,
                zfskit.core.zfs.arguments.get_arguments(self.name, name),
            )
        )

    def set(self, name: str, value: str):
        self._zfs(
            zfskit.core.zfs.process.Command.SET,
            zfskit.core.zfs.arguments.set_arguments(self.name, name, value),
        )

    def destroy(self):
        self._zfs(
            zfskit.core.zfs.process.Command.DESTROY,
            zfskit.core.zfs.arguments.destroy_arguments(self.name),
        )
