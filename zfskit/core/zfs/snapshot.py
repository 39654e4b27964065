import typing

import zfskit
import zfskit.core
import zfskit.core.zfs
import zfskit.core.zfs.command
import zfskit.core.zfs.dataset
import zfskit.core.zfs.file_system
import zfskit.core.zfs.request


class Snapshot(zfskit.core.zfs.dataset.Handle):
    @property
    def dataset(self) -> "zfskit.core.zfs.file_system.Dataset":
        name, _, _ = self.name.partition(zfskit.core.zfs.SNAPSHOT_SEPARATOR)
        return zfskit.core.zfs.file_system.Dataset(name, self._runner)

    @property
    def suffix(self) -> str:
        _, _, suffix = self.name.partition(zfskit.core.zfs.SNAPSHOT_SEPARATOR)
        return suffix

    def clone(
        self,
        target: str,
        create_parents: bool = False,
        properties: typing.Optional[typing.Mapping[str, str]] = None,
    ) -> "zfskit.core.zfs.file_system.Dataset":
        builder = (
            zfskit.core.zfs.request.CloneRequestBuilder()
            .source_snapshot(self.name)
            .target_name(target)
            .create_parents(create_parents)
        )

        for key, value in (properties or {}).items():
            builder.add_property(key, value)

        return zfskit.core.zfs.command.clone(builder.build(), self._runner)
