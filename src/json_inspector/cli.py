"""Command-line interface for the JSON Inspector."""

import logging
import sys
import click
from .inspector import JSONInspector
from .types import ExportMode, InspectorError, ParseError
from . import __version__


def _fail(error: Exception) -> None:
    click.echo(f"❌ Error: {error}", err=True)
    sys.exit(1)


def _prepare_tree(inspector: JSONInspector, text: str, depth, collapse) -> bool:
    """Load text and apply the requested view state. Returns False for an empty tree."""
    result = inspector.load(text)
    if result.skipped:
        _fail("input is empty")
    if not result.success:
        _fail("; ".join(result.errors))
    if result.row_count == 0:
        return False

    if depth is not None:
        inspector.reveal_to_depth(depth)
    for row_id in collapse:
        inspector.set_expanded(row_id, False)
    return True


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """JSON Inspector - Format JSON and browse it as a collapsible tree."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = JSONInspector()


@main.command(name='format')
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.pass_obj
def format_command(inspector: JSONInspector, input_file):
    """Pretty-print JSON with 2-space indentation."""
    try:
        click.echo(inspector.format(input_file.read()))
    except ParseError as e:
        _fail(e)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.pass_obj
def minify(inspector: JSONInspector, input_file):
    """Remove insignificant whitespace from JSON."""
    try:
        click.echo(inspector.minify(input_file.read()))
    except ParseError as e:
        _fail(e)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.pass_obj
def unescape(inspector: JSONInspector, input_file):
    """Undo one level of string escaping."""
    click.echo(inspector.unescape(input_file.read().rstrip('\n')))


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.pass_obj
def validate(inspector: JSONInspector, input_file):
    """Check that the input is valid JSON."""
    result = inspector.error_handler.validate_input(input_file.read())
    if not result.is_valid:
        for error in result.errors:
            click.echo(f"❌ {error.message} ({error.location})", err=True)
        sys.exit(1)

    click.echo("✅ Valid JSON")
    for warning in result.warnings:
        click.echo(f"⚠️  {warning}")


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--depth', '-d', type=int, help='Show only this many levels')
@click.option('--collapse', '-c', multiple=True, help='Row id to collapse (repeatable)')
@click.pass_obj
def tree(inspector: JSONInspector, input_file, depth, collapse):
    """Print the visible rows of the tree view."""
    try:
        if not _prepare_tree(inspector, input_file.read(), depth, collapse):
            click.echo(inspector.config.empty_message)
            return

        for row in inspector.visible_rows():
            if row.has_children:
                marker = "▼" if inspector.visibility.is_expanded(row.id) else "▶"
            else:
                marker = " "
            click.echo(f"{'  ' * row.level}{marker} {row.key}: {row.display_value}  [{row.id}]")
    except InspectorError as e:
        _fail(e)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--mode', '-m', type=click.Choice([m.value for m in ExportMode]),
              default=ExportMode.ROW.value, help='Export keys and values, keys only or values only')
@click.option('--depth', '-d', type=int, help='Show only this many levels')
@click.option('--collapse', '-c', multiple=True, help='Row id to collapse (repeatable)')
@click.option('--subtree', '-s', 'subtree_id', help='Export the subtree rooted at this row id')
@click.option('--path', '-p', 'key_path', help='Export the subtree at this key path, e.g. users/0')
@click.pass_obj
def export(inspector: JSONInspector, input_file, mode, depth, collapse, subtree_id, key_path):
    """Export rows as tab-aligned text for spreadsheets."""
    if subtree_id and key_path:
        raise click.UsageError("--subtree and --path are mutually exclusive")

    export_mode = ExportMode(mode)
    try:
        if not _prepare_tree(inspector, input_file.read(), depth, collapse):
            click.echo(inspector.config.empty_message, err=True)
            return

        if key_path:
            subtree_id = inspector.tree.find_by_path(key_path.split('/')).id

        if subtree_id:
            result = inspector.export_subtree(subtree_id, export_mode)
        else:
            result = inspector.export_visible(export_mode)
    except InspectorError as e:
        _fail(e)

    if not result.success:
        for error in result.errors:
            click.echo(error, err=True)
        return
    click.echo(result.text, nl=False)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.pass_obj
def table(inspector: JSONInspector, input_file):
    """Print arrays of records and objects as a tab-separated grid."""
    try:
        view = inspector.table(input_file.read())
    except InspectorError as e:
        _fail(e)

    if isinstance(view, str):
        click.echo(view)
    elif view.is_empty:
        click.echo("Empty Array" if isinstance(view.source, list) else "Empty Object")
    else:
        click.echo(view.to_text(), nl=False)


if __name__ == '__main__':
    main()
