import logging

import click

from wktree import DEFAULT_INDENT, DEFAULT_TOLERANCE, WKTError
from wktree.document import Document
from wktree.node import format_number
from wktree.utils import are_equivalent, guess_epsg, validate_wkt


def _load(wkt_file):
    try:
        return Document.parse(wkt_file.read())
    except WKTError as e:
        raise click.ClickException(str(e))


def _float_list(ctx, param, value):
    if value is None:
        return None
    try:
        return [float(v) for v in value.split(',')]
    except ValueError:
        raise click.BadParameter('Expected comma separated numbers')


indent_option = click.option(
    '--indent', envvar='WKTREE_INDENT', default=DEFAULT_INDENT,
    show_default=True, help="Indent width per level when pretty printing")


@click.group()
@click.version_option()
@click.option('--verbose', is_flag=True, help="Enable debug logging")
def main(verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@main.command()
@click.argument('wkt_file', type=click.File('r'))
def validate(wkt_file):
    """Check that a WKT file parses."""
    errors = []
    if not validate_wkt(wkt_file.read(), errors):
        raise click.ClickException(errors[0])
    click.echo("OK")


@main.command('format')
@click.argument('wkt_file', type=click.File('r'))
@click.option('--pretty', is_flag=True, help="One section per line")
@indent_option
def format_(wkt_file, pretty, indent):
    """Re-serialize a WKT file."""
    click.echo(_load(wkt_file).to_string(pretty, indent))


@main.command()
@click.argument('wkt_file', type=click.File('r'))
def info(wkt_file):
    """Summarize the projection, datum and spheroid of a WKT file."""
    doc = _load(wkt_file)
    fields = [
        ('root', doc.root.name),
        ('projection', doc.get_projection_name()),
        ('datum', doc.get_datum_name()),
        ('spheroid', doc.get_spheroid_name()),
    ]
    params = doc.get_spheroid_params()
    if params:
        fields.append(('semi_major_axis', format_number(params[0])))
        fields.append(('inverse_flattening', format_number(params[1])))
    fields.append(('epsg', guess_epsg(doc)))
    for key, value in fields:
        if value is not None:
            click.echo("{}: {}".format(key, value))


@main.command()
@click.argument('wkt_file', type=click.File('r'))
@click.argument('path')
def get(wkt_file, path):
    """Print the section at PATH, e.g. DATUM/SPHEROID."""
    node = _load(wkt_file).find(path)
    if node is None:
        raise click.ClickException("No section found at {}".format(path))
    click.echo(node.to_string())


@main.command('set')
@click.argument('wkt_file', type=click.File('r'))
@click.argument('path')
@click.option('--value', help="New string value for the section")
@click.option('--number', 'number_items', type=(int, float), multiple=True,
              help="Index and new value of a single number. May be "
                   "repeated.")
@click.option('--numbers', callback=_float_list,
              help="Comma separated replacement for all numbers of the "
                   "section. The count must match the existing count.")
@click.option('--pretty', is_flag=True, help="One section per line")
@indent_option
def set_(wkt_file, path, value, number_items, numbers, pretty, indent):
    """Modify the section at PATH and print the result."""
    doc = _load(wkt_file)
    if value is not None and not doc.set_value(path, value):
        raise click.ClickException("No section found at {}".format(path))
    if numbers is not None and not doc.set_numbers(path, numbers):
        raise click.ClickException(
            "Could not replace numbers of {} with {} values".format(
                path, len(numbers)))
    for index, number in number_items:
        if not doc.set_number(path, index, number):
            raise click.ClickException(
                "Could not set number {} of {}".format(index, path))
    click.echo(doc.to_string(pretty, indent))


@main.command()
@click.argument('first', type=click.File('r'))
@click.argument('second', type=click.File('r'))
@click.option('--tolerance', envvar='WKTREE_TOLERANCE', type=float,
              default=DEFAULT_TOLERANCE, show_default=True,
              help="Largest allowed difference between two numbers")
@click.pass_context
def compare(ctx, first, second, tolerance):
    """Compare two WKT files structurally.

    Exits with status 1 when the definitions differ.
    """
    if are_equivalent(_load(first), _load(second), tolerance):
        click.echo("equivalent")
    else:
        click.echo("different")
        ctx.exit(1)


@main.command()
@click.argument('wkt_file', type=click.File('r'))
def epsg(wkt_file):
    """Guess the EPSG code of a geographic CRS from its datum."""
    code = guess_epsg(_load(wkt_file))
    if code is None:
        raise click.ClickException("Could not guess EPSG code")
    click.echo(code)
