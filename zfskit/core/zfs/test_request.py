import unittest

import zfskit
import zfskit.core
import zfskit.core.zfs
import zfskit.core.zfs.list_type
import zfskit.core.zfs.property
import zfskit.core.zfs.request

ListType = zfskit.core.zfs.list_type.ListType
Properties = zfskit.core.zfs.property.Properties


class TestCreateRequestBuilder(unittest.TestCase):
    def setUp(self):
        self.builder = zfskit.core.zfs.request.CreateRequestBuilder()

    def test_defaults(self):
        request = self.builder.name("testds").build()

        self.assertEqual(
            request,
            zfskit.core.zfs.request.CreateRequest(
                name="testds",
                properties=Properties(),
                recursive=False,
                volume_size=None,
                block_size=None,
                sparse=False,
            ),
        )

    def test_name_required(self):
        with self.assertRaises(zfskit.core.zfs.request.UninitializedFieldError) as context:
            self.builder.volume_size("10G").build()

        self.assertEqual(context.exception.field_name, "name")
        self.assertEqual(str(context.exception), "field name must be initialized")

    def test_name_none_is_uninitialized(self):
        with self.assertRaises(zfskit.core.zfs.request.UninitializedFieldError) as context:
            self.builder.name(None).build()

        self.assertEqual(context.exception.field_name, "name")

    def test_name_with_separator(self):
        with self.assertRaises(zfskit.core.zfs.request.ValidationError) as context:
            self.builder.name("pool/ds@snapshot").build()

        self.assertEqual(context.exception.message, "Invalid dataset name")

    def test_block_size_is_coerced(self):
        request = self.builder.name("vol").volume_size("1G").block_size("8192").build()

        self.assertEqual(request.block_size, 8192)

    def test_invalid_block_size(self):
        with self.assertRaises(zfskit.core.zfs.request.ValidationError):
            self.builder.name("vol").volume_size("1G").block_size("big").build()

    def test_add_property_last_write_wins(self):
        request = (
            self.builder.name("testds")
            .add_property("compression", "lz4")
            .add_property("compression", "off")
            .build()
        )

        self.assertEqual(request.properties, Properties({"compression": "off"}))

    def test_builder_is_reusable(self):
        self.builder.name("testds")

        self.assertEqual(self.builder.build(), self.builder.build())

    def test_failed_build_keeps_state(self):
        self.builder.add_property("compression", "lz4").name("bad@name")

        with self.assertRaises(zfskit.core.zfs.request.ValidationError):
            self.builder.build()

        request = self.builder.name("good").build()

        self.assertEqual(request.properties, Properties({"compression": "lz4"}))

    def test_request_not_aliased(self):
        request = self.builder.name("testds").add_property("a", "1").build()
        self.builder.add_property("b", "2")

        self.assertEqual(request.properties, Properties({"a": "1"}))

    def test_builders_do_not_share_properties(self):
        self.builder.add_property("a", "1")
        other = zfskit.core.zfs.request.CreateRequestBuilder().name("other")

        self.assertEqual(other.build().properties, Properties())

    def test_errors_are_builder_errors(self):
        with self.assertRaises(zfskit.core.zfs.request.BuilderError):
            self.builder.build()

        with self.assertRaises(zfskit.core.zfs.Error):
            self.builder.name("a@b").build()


class TestCloneRequestBuilder(unittest.TestCase):
    def setUp(self):
        self.builder = zfskit.core.zfs.request.CloneRequestBuilder()

    def test_build(self):
        request = (
            self.builder.source_snapshot("pool/ds@now")
            .target_name("pool/copy")
            .create_parents()
            .add_property("mountpoint", "/copy")
            .build()
        )

        self.assertEqual(request.source_snapshot, "pool/ds@now")
        self.assertEqual(request.target_name, "pool/copy")
        self.assertTrue(request.create_parents)
        self.assertEqual(request.properties, Properties({"mountpoint": "/copy"}))

    def test_source_required(self):
        with self.assertRaises(zfskit.core.zfs.request.UninitializedFieldError) as context:
            self.builder.target_name("pool/copy").build()

        self.assertEqual(context.exception.field_name, "source_snapshot")

    def test_target_required(self):
        with self.assertRaises(zfskit.core.zfs.request.UninitializedFieldError) as context:
            self.builder.source_snapshot("pool/ds@now").build()

        self.assertEqual(context.exception.field_name, "target_name")

    def test_target_none_is_uninitialized(self):
        with self.assertRaises(zfskit.core.zfs.request.UninitializedFieldError) as context:
            self.builder.source_snapshot("pool/ds@now").target_name(None).build()

        self.assertEqual(context.exception.field_name, "target_name")

    def test_target_with_separator(self):
        with self.assertRaises(zfskit.core.zfs.request.ValidationError) as context:
            self.builder.source_snapshot("pool/ds@now").target_name("pool/copy@x").build()

        self.assertEqual(context.exception.message, "Invalid target name")

    def test_source_without_separator(self):
        with self.assertRaises(zfskit.core.zfs.request.ValidationError) as context:
            self.builder.source_snapshot("pool/ds").target_name("pool/copy").build()

        self.assertEqual(context.exception.message, "Invalid snapshot name")


class TestSnapshotRequestBuilder(unittest.TestCase):
    def setUp(self):
        self.builder = zfskit.core.zfs.request.SnapshotRequestBuilder()

    def test_build(self):
        request = self.builder.snapshot_name("pool/ds@now").recursive().build()

        self.assertEqual(request.snapshot_name, "pool/ds@now")
        self.assertTrue(request.recursive)

    def test_name_required(self):
        with self.assertRaises(zfskit.core.zfs.request.UninitializedFieldError) as context:
            self.builder.recursive().build()

        self.assertEqual(context.exception.field_name, "snapshot_name")

    def test_name_none_is_uninitialized(self):
        with self.assertRaises(zfskit.core.zfs.request.UninitializedFieldError):
            self.builder.snapshot_name(None).build()

    def test_name_without_separator(self):
        with self.assertRaises(zfskit.core.zfs.request.ValidationError):
            self.builder.snapshot_name("pool/ds").build()


class TestListRequestBuilder(unittest.TestCase):
    def setUp(self):
        self.builder = zfskit.core.zfs.request.ListRequestBuilder()

    def test_defaults(self):
        request = self.builder.build()

        self.assertIsNone(request.root)
        self.assertEqual(request.list_types, ())
        self.assertIsNone(request.recursion_depth)
        self.assertFalse(request.recursive)
        self.assertEqual(request.properties, Properties())

    def test_list_types_keep_order(self):
        request = (
            self.builder.add_list_type("volume")
            .add_list_type(ListType.FILE_SYSTEM)
            .add_list_type("snapshot")
            .build()
        )

        self.assertEqual(
            request.list_types,
            (ListType.VOLUME, ListType.FILE_SYSTEM, ListType.SNAPSHOT),
        )

    def test_list_types_replace(self):
        request = (
            self.builder.add_list_type("volume")
            .list_types(["bookmark", "all"])
            .build()
        )

        self.assertEqual(request.list_types, (ListType.BOOKMARK, ListType.ALL))

    def test_invalid_list_type(self):
        with self.assertRaises(zfskit.core.zfs.list_type.InvalidListTypeError):
            self.builder.add_list_type("zvol")

    def test_recursion_depth_is_text(self):
        request = self.builder.recursive().recursion_depth(2).build()

        self.assertEqual(request.recursion_depth, "2")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
