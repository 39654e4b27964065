import pathlib
import tempfile
import unittest

import zfskit
import zfskit.core
import zfskit.core.configuration
import zfskit.core.zfs
import zfskit.core.zfs.process


class TestConfiguration(unittest.TestCase):
    def setUp(self):
        self._directory = tempfile.TemporaryDirectory()
        self.path = pathlib.Path(self._directory.name, "zfskit.yaml")

    def tearDown(self):
        self._directory.cleanup()

    def test_defaults(self):
        configuration = zfskit.core.configuration.load()

        self.assertEqual(
            configuration,
            zfskit.core.configuration.DEFAULT_CONFIGURATION,
        )
        self.assertIsNot(
            configuration["search_path"],
            zfskit.core.configuration.DEFAULT_SEARCH_PATH,
        )

    def test_partial_binaries(self):
        configuration = zfskit.core.configuration.read(
            {"binaries": {"zfs": "/sbin/zfs"}},
        )

        self.assertEqual(
            configuration["binaries"],
            {"zfs": "/sbin/zfs", "zpool": "zpool"},
        )

    def test_search_path_replaced(self):
        configuration = zfskit.core.configuration.read(
            {"search_path": ["/opt/zfs/bin"]},
        )

        self.assertEqual(configuration["search_path"], ["/opt/zfs/bin"])

    def test_unknown_key(self):
        with self.assertRaises(zfskit.core.configuration.InvalidConfigurationError):
            zfskit.core.configuration.read({"environment": {"PATH": "/bin"}})

    def test_invalid_binary(self):
        with self.assertRaises(zfskit.core.configuration.InvalidConfigurationError):
            zfskit.core.configuration.read({"binaries": {"zfs": ""}})

    def test_load_file(self):
        self.path.write_text("binaries:\n  zpool: /usr/local/sbin/zpool\n")

        configuration = zfskit.core.configuration.load(self.path)

        self.assertEqual(
            configuration["binaries"]["zpool"],
            "/usr/local/sbin/zpool",
        )

    def test_load_empty_file(self):
        self.path.write_text("")

        self.assertEqual(
            zfskit.core.configuration.load(self.path),
            zfskit.core.configuration.DEFAULT_CONFIGURATION,
        )

    def test_load_invalid_yaml(self):
        self.path.write_text("binaries: [\n")

        with self.assertRaises(zfskit.core.configuration.InvalidConfigurationError):
            zfskit.core.configuration.load(self.path)

    def test_load_non_mapping(self):
        self.path.write_text("- zfs\n")

        with self.assertRaises(zfskit.core.configuration.InvalidConfigurationError):
            zfskit.core.configuration.load(self.path)

    def test_runner(self):
        runner = zfskit.core.configuration.runner(
            zfskit.core.configuration.read(
                {"binaries": {"zfs": "/sbin/zfs"}, "search_path": ["/sbin"]},
            )
        )

        self.assertIsInstance(runner, zfskit.core.zfs.process.SubprocessRunner)
        self.assertEqual(
            runner.executable(zfskit.core.zfs.process.Binary.ZFS),
            "/sbin/zfs",
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
