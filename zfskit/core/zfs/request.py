import typing

import cerberus
import toolz

import zfskit
import zfskit.core
import zfskit.core.zfs
import zfskit.core.zfs.list_type
import zfskit.core.zfs.property


class BuilderError(zfskit.core.zfs.Error):
    pass


class UninitializedFieldError(BuilderError):
    def __init__(self, field_name: str):
        super().__init__("field {} must be initialized".format(field_name))
        self.field_name = field_name


class ValidationError(BuilderError):
    def __init__(self, message: str):
        super().__init__("validation error: {}".format(message))
        self.message = message


class _Validator(cerberus.Validator):
    types_mapping = cerberus.Validator.types_mapping.copy()
    types_mapping["properties"] = cerberus.TypeDefinition(
        "properties",
        (zfskit.core.zfs.property.Properties,),
        (),
    )


def _optional(convert):
    return lambda x: None if x is None else convert(x)


def _new_properties(_document):
    return zfskit.core.zfs.property.Properties()


_PROPERTIES_SCHEMA = {
    "type": "properties",
    "default_setter": _new_properties,
}

_FLAG_SCHEMA = {
    "type": "boolean",
    "coerce": bool,
    "default": False,
}

_NAME_SCHEMA = {
    "type": "string",
    "coerce": str,
}

_OPTIONAL_STRING_SCHEMA = {
    "type": "string",
    "coerce": _optional(str),
    "nullable": True,
    "default": None,
}


class CreateRequest(typing.NamedTuple):
    name: str
    properties: zfskit.core.zfs.property.Properties
    recursive: bool = False
    volume_size: typing.Optional[str] = None
    block_size: typing.Optional[int] = None
    sparse: bool = False


class CloneRequest(typing.NamedTuple):
    source_snapshot: str
    target_name: str
    properties: zfskit.core.zfs.property.Properties
    create_parents: bool = False


class SnapshotRequest(typing.NamedTuple):
    snapshot_name: str
    properties: zfskit.core.zfs.property.Properties
    recursive: bool = False


class ListRequest(typing.NamedTuple):
    properties: zfskit.core.zfs.property.Properties
    root: typing.Optional[str] = None
    list_types: typing.Tuple["zfskit.core.zfs.list_type.ListType", ...] = ()
    recursion_depth: typing.Optional[str] = None
    recursive: bool = False


class _Builder:
    _request_type: typing.Type = tuple
    _required: typing.Tuple[str, ...] = ()
    _schema: typing.Dict[str, typing.Any] = {}

    def __init__(self):
        self.__fields: typing.Dict[str, typing.Any] = {}

    def _set(self, key: str, value: typing.Any):
        self.__fields = toolz.assoc(self.__fields, key, value)
        return self

    def _get(self, key: str, default: typing.Any = None) -> typing.Any:
        return self.__fields.get(key, default)

    @property
    def properties(self) -> "zfskit.core.zfs.property.Properties":
        return self._get("properties", zfskit.core.zfs.property.Properties())

    def add_property(self, key: typing.Any, value: typing.Any):
        return self._set("properties", self.properties.set(key, value))

    def build(self):
        for field in self._required:
            if self._get(field) is None:
                raise UninitializedFieldError(field)

        validator = _Validator(self._schema)
        if not validator.validate(dict(self.__fields)):
            raise ValidationError(_format_errors(validator.errors))

        document = validator.document
        self._validate(document)

        return self._request_type(**document)

    def _validate(self, document: typing.Mapping[str, typing.Any]):
        pass


def _format_errors(errors: typing.Mapping[str, typing.Any]) -> str:
    return "; ".join(
        "{}: {}".format(field, ", ".join(map(str, messages)))
        for field, messages in sorted(errors.items())
    )


def _contains_separator(name: str) -> bool:
    return zfskit.core.zfs.SNAPSHOT_SEPARATOR in name


class CreateRequestBuilder(_Builder):
    """
    Collects the options of a dataset or volume creation.

    ``sparse`` and ``block_size`` only apply to volumes and are ignored while
    no ``volume_size`` is given.
    """

    _request_type = CreateRequest
    _required = ("name",)
    _schema = {
        "name": _NAME_SCHEMA,
        "properties": _PROPERTIES_SCHEMA,
        "recursive": _FLAG_SCHEMA,
        "volume_size": _OPTIONAL_STRING_SCHEMA,
        "block_size": {
            "type": "integer",
            "coerce": _optional(int),
            "nullable": True,
            "default": None,
        },
        "sparse": _FLAG_SCHEMA,
    }

    def name(self, value: str):
        return self._set("name", value)

    def recursive(self, value: bool = True):
        return self._set("recursive", value)

    def volume_size(self, value: str):
        return self._set("volume_size", value)

    def block_size(self, value: int):
        return self._set("block_size", value)

    def sparse(self, value: bool = True):
        return self._set("sparse", value)

    def _validate(self, document):
        if _contains_separator(document["name"]):
            raise ValidationError("Invalid dataset name")


class CloneRequestBuilder(_Builder):
    _request_type = CloneRequest
    _required = ("source_snapshot", "target_name")
    _schema = {
        "source_snapshot": _NAME_SCHEMA,
        "target_name": _NAME_SCHEMA,
        "create_parents": _FLAG_SCHEMA,
        "properties": _PROPERTIES_SCHEMA,
    }

    def source_snapshot(self, value: str):
        return self._set("source_snapshot", value)

    def target_name(self, value: str):
        return self._set("target_name", value)

    def create_parents(self, value: bool = True):
        return self._set("create_parents", value)

    def _validate(self, document):
        if _contains_separator(document["target_name"]):
            raise ValidationError("Invalid target name")

        if not _contains_separator(document["source_snapshot"]):
            raise ValidationError("Invalid snapshot name")


class SnapshotRequestBuilder(_Builder):
    _request_type = SnapshotRequest
    _required = ("snapshot_name",)
    _schema = {
        "snapshot_name": _NAME_SCHEMA,
        "recursive": _FLAG_SCHEMA,
        "properties": _PROPERTIES_SCHEMA,
    }

    def snapshot_name(self, value: str):
        return self._set("snapshot_name", value)

    def recursive(self, value: bool = True):
        return self._set("recursive", value)

    def _validate(self, document):
        if not _contains_separator(document["snapshot_name"]):
            raise ValidationError("Invalid snapshot name")


class ListRequestBuilder(_Builder):
    _request_type = ListRequest
    _schema = {
        "root": _OPTIONAL_STRING_SCHEMA,
        "list_types": {
            "type": "list",
            "coerce": tuple,
            "default": (),
        },
        "recursion_depth": _OPTIONAL_STRING_SCHEMA,
        "recursive": _FLAG_SCHEMA,
        "properties": _PROPERTIES_SCHEMA,
    }

    def root(self, value: str):
        return self._set("root", value)

    def list_types(self, values: typing.Iterable[typing.Any]):
        return self._set(
            "list_types",
            tuple(map(zfskit.core.zfs.list_type.ListType.parse, values)),
        )

    def add_list_type(self, value: typing.Any):
        return self._set(
            "list_types",
            (
                *self._get("list_types", ()),
                zfskit.core.zfs.list_type.ListType.parse(value),
            ),
        )

    def recursion_depth(self, value: typing.Any):
        return self._set("recursion_depth", value)

    def recursive(self, value: bool = True):
        return self._set("recursive", value)
