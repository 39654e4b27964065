import typing

import zfskit
import zfskit.core
import zfskit.core.zfs
import zfskit.core.zfs.arguments
import zfskit.core.zfs.command
import zfskit.core.zfs.dataset
import zfskit.core.zfs.list_type
import zfskit.core.zfs.process
import zfskit.core.zfs.request
import zfskit.core.zfs.snapshot


class Dataset(zfskit.core.zfs.dataset.Handle):
    def promote(self) -> "Dataset":
        self._zfs(
            zfskit.core.zfs.process.Command.PROMOTE,
            zfskit.core.zfs.arguments.promote_arguments(self.name),
        )

        return Dataset(self.name, self._runner)

    def snapshot(
        self,
        name: str,
        recursive: bool = False,
    ) -> "zfskit.core.zfs.snapshot.Snapshot":
        return zfskit.core.zfs.command.snapshot(
            zfskit.core.zfs.request.SnapshotRequestBuilder()
            .snapshot_name(
                "{}{}{}".format(self.name, zfskit.core.zfs.SNAPSHOT_SEPARATOR, name)
            )
            .recursive(recursive)
            .build(),
            self._runner,
        )

    def list_snapshots(self) -> typing.List["zfskit.core.zfs.snapshot.Snapshot"]:
        records = zfskit.core.zfs.command.list(
            zfskit.core.zfs.request.ListRequestBuilder()
            .root(self.name)
            .recursive()
            .recursion_depth(1)
            .add_list_type(zfskit.core.zfs.list_type.ListType.SNAPSHOT)
            .build(),
            self._runner,
        )

        return [
            zfskit.core.zfs.snapshot.Snapshot(record[0], self._runner)
            for record in records
        ]
