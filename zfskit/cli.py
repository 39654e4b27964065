import functools
import logging
import typing

import click
import rich
import rich.console
import rich.logging
import rich.table
import rich.text

import zfskit
import zfskit.core
import zfskit.core.configuration
import zfskit.core.zfs
import zfskit.core.zfs.command
import zfskit.core.zfs.dataset
import zfskit.core.zfs.file_system
import zfskit.core.zfs.list_type
import zfskit.core.zfs.process
import zfskit.core.zfs.property
import zfskit.core.zfs.request
import zfskit.core.zfs.snapshot
import zfskit.core.zpool

_pass_runner = click.make_pass_decorator(zfskit.core.zfs.process.Runner)


def _handle_errors(function):
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except zfskit.core.zfs.Error as error:
            raise click.ClickException(str(error)) from error

    return wrapper


def _parse_properties(
    _ctx: click.Context,
    _param: click.Parameter,
    values: typing.Tuple[str, ...],
) -> typing.List[typing.Tuple[str, str]]:
    try:
        return [zfskit.core.zfs.property.parse(value) for value in values]
    except zfskit.core.zfs.property.InvalidTokenError as error:
        raise click.BadParameter(str(error)) from error


_property_option = click.option(
    "-o",
    "--property",
    "properties",
    multiple=True,
    callback=_parse_properties,
    metavar="KEY=VALUE",
    help="Property to apply, may be given multiple times.",
)


def _print(value: typing.Any):
    rich.console.Console().print(
        value,
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


@click.option(
    "--configuration",
    "-c",
    "configuration",
    envvar="ZFSKIT_CONFIGURATION",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with binary locations and search path.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    default=False,
    help="Log every invocation of the tools.",
)
@click.group()
@click.pass_context
def main(ctx: click.Context, configuration: typing.Optional[str], verbose: bool):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[rich.logging.RichHandler(show_path=False)],
        )

    if ctx.obj is None:
        try:
            ctx.obj = zfskit.core.configuration.runner(
                zfskit.core.configuration.load(configuration),
            )
        except zfskit.core.zfs.Error as error:
            raise click.ClickException(str(error)) from error


@main.command(name="create", help="Create a dataset or volume.")
@click.option("-p", "--parents", "parents", is_flag=True, default=False)
@click.option("-V", "--volume-size", "volume_size", default=None)
@click.option("-b", "--block-size", "block_size", type=int, default=None)
@click.option("-s", "--sparse", "sparse", is_flag=True, default=False)
@_property_option
@click.argument("name")
@_pass_runner
@_handle_errors
def _create(
    runner: "zfskit.core.zfs.process.Runner",
    parents: bool,
    volume_size: typing.Optional[str],
    block_size: typing.Optional[int],
    sparse: bool,
    properties: typing.List[typing.Tuple[str, str]],
    name: str,
):
    builder = (
        zfskit.core.zfs.request.CreateRequestBuilder()
        .name(name)
        .recursive(parents)
        .sparse(sparse)
    )

    if volume_size is not None:
        builder.volume_size(volume_size)

    if block_size is not None:
        builder.block_size(block_size)

    for key, value in properties:
        builder.add_property(key, value)

    _print(zfskit.core.zfs.command.create(builder.build(), runner).name)


@main.command(name="clone", help="Create a dataset from a snapshot.")
@click.option("-p", "--parents", "parents", is_flag=True, default=False)
@_property_option
@click.argument("snapshot")
@click.argument("target")
@_pass_runner
@_handle_errors
def _clone(
    runner: "zfskit.core.zfs.process.Runner",
    parents: bool,
    properties: typing.List[typing.Tuple[str, str]],
    snapshot: str,
    target: str,
):
    builder = (
        zfskit.core.zfs.request.CloneRequestBuilder()
        .source_snapshot(snapshot)
        .target_name(target)
        .create_parents(parents)
    )

    for key, value in properties:
        builder.add_property(key, value)

    _print(zfskit.core.zfs.command.clone(builder.build(), runner).name)


@main.command(name="snapshot", help="Create a snapshot.")
@click.option("-r", "--recursive", "recursive", is_flag=True, default=False)
@_property_option
@click.argument("name")
@_pass_runner
@_handle_errors
def _snapshot(
    runner: "zfskit.core.zfs.process.Runner",
    recursive: bool,
    properties: typing.List[typing.Tuple[str, str]],
    name: str,
):
    builder = (
        zfskit.core.zfs.request.SnapshotRequestBuilder()
        .snapshot_name(name)
        .recursive(recursive)
    )

    for key, value in properties:
        builder.add_property(key, value)

    _print(zfskit.core.zfs.command.snapshot(builder.build(), runner).name)


@main.command(name="list", help="List datasets.")
@click.option("-r", "--recursive", "recursive", is_flag=True, default=False)
@click.option("-d", "--depth", "depth", default=None)
@click.option(
    "-t",
    "--type",
    "list_types",
    multiple=True,
    type=click.Choice([str(x) for x in zfskit.core.zfs.list_type.ListType]),
)
@_property_option
@click.argument("root", required=False)
@_pass_runner
@_handle_errors
def _list(
    runner: "zfskit.core.zfs.process.Runner",
    recursive: bool,
    depth: typing.Optional[str],
    list_types: typing.Tuple[str, ...],
    properties: typing.List[typing.Tuple[str, str]],
    root: typing.Optional[str],
):
    builder = (
        zfskit.core.zfs.request.ListRequestBuilder()
        .recursive(recursive)
        .list_types(list_types)
    )

    if root is not None:
        builder.root(root)

    if depth is not None:
        builder.recursion_depth(depth)

    for key, value in properties:
        builder.add_property(key, value)

    records = zfskit.core.zfs.command.list(builder.build(), runner)

    table = rich.table.Table(show_header=False)
    for record in records:
        table.add_row(*map(rich.text.Text, record))

    rich.console.Console().print(table)


@main.command(name="get", help="Print the value of a property.")
@click.argument("property_name")
@click.argument("name")
@_pass_runner
@_handle_errors
def _get(
    runner: "zfskit.core.zfs.process.Runner",
    property_name: str,
    name: str,
):
    _print(_open(runner, name).get(property_name))


@main.command(name="set", help="Set a property.")
@click.argument("name")
@click.argument("assignment")
@_pass_runner
@_handle_errors
def _set(
    runner: "zfskit.core.zfs.process.Runner",
    name: str,
    assignment: str,
):
    key, value = zfskit.core.zfs.property.parse(assignment)
    _open(runner, name).set(key, value)


@main.command(name="promote", help="Promote a clone.")
@click.argument("name")
@_pass_runner
@_handle_errors
def _promote(
    runner: "zfskit.core.zfs.process.Runner",
    name: str,
):
    zfskit.core.zfs.file_system.Dataset(name, runner).promote()


@main.command(name="destroy", help="Destroy a dataset, volume or snapshot.")
@click.argument("name")
@_pass_runner
@_handle_errors
def _destroy(
    runner: "zfskit.core.zfs.process.Runner",
    name: str,
):
    _open(runner, name).destroy()


def _open(runner, name: str) -> "zfskit.core.zfs.dataset.Handle":
    if zfskit.core.zfs.SNAPSHOT_SEPARATOR in name:
        return zfskit.core.zfs.snapshot.Snapshot(name, runner)

    return zfskit.core.zfs.file_system.Dataset(name, runner)


@main.group(name="pool")
def _pool():
    pass


@_pool.command(name="list", help="List pool names.")
@_pass_runner
@_handle_errors
def _pool_list(
    runner: "zfskit.core.zfs.process.Runner",
):
    for name in zfskit.core.zpool.names(runner):
        _print(name)


@_pool.command(name="get", help="Print the value of a pool property.")
@click.argument("property_name")
@click.argument("pool")
@_pass_runner
@_handle_errors
def _pool_get(
    runner: "zfskit.core.zfs.process.Runner",
    property_name: str,
    pool: str,
):
    _print(zfskit.core.zpool.get(pool, property_name, runner))


if __name__ == "__main__":
    main()
