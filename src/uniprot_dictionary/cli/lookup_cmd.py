"""Lookup commands: entries by identifier and matches by string."""

import json
import logging

import click

from uniprot_dictionary.config.loader import load_config_with_overrides
from uniprot_dictionary.dictionary import DictionaryUniprot

logger = logging.getLogger(__name__)


def build_dictionary(ctx) -> DictionaryUniprot:
    """Create the dictionary from the CLI context configuration."""
    config = load_config_with_overrides(
        ctx.obj['config_path'],
        ctx.obj['overrides'],
    )
    return DictionaryUniprot(config)


def _paging_options(page, per_page, z_keys):
    options = {}
    if page is not None:
        options['page'] = page
    if per_page is not None:
        options['perPage'] = per_page
    if z_keys:
        options['z'] = list(z_keys)
    return options


def _echo_result(ctx, err, result):
    if err is not None:
        click.echo(click.style(f"Error: {json.dumps(err)}", fg='red'), err=True)
        ctx.exit(1)
    click.echo(json.dumps(result, indent=4))
    logger.debug(f"Returned {len(result['items'])} items")


@click.command('entries')
@click.argument('ids', nargs=-1)
@click.option('--page', type=int, default=None, help='Page number (1-based)')
@click.option('--per-page', type=int, default=None, help='Results per page')
@click.option(
    '--sort',
    type=click.Choice(['id', 'dictID', 'str']),
    default=None,
    help='Sort key for identifier lookups (default: id)'
)
@click.option(
    '--z',
    'z_keys',
    multiple=True,
    help='Auxiliary field to keep (repeatable; default: all)'
)
@click.pass_context
def entries(ctx, ids, page, per_page, sort, z_keys):
    """Fetch UniProt entries by identifier, or list all entries.

    IDS may be entry URIs (https://www.uniprot.org/uniprot/P12345) or bare
    accessions. Without IDS one page of all entries is listed.

    Examples:

        uniprot-dictionary entries P52413 P53142 --sort str

        uniprot-dictionary entries --page 2 --per-page 10
    """
    try:
        dictionary = build_dictionary(ctx)
    except Exception as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        ctx.exit(1)

    options = _paging_options(page, per_page, z_keys)
    if ids:
        options['filter'] = {'id': list(ids)}
    if sort:
        options['sort'] = sort

    dictionary.get_entries(
        options,
        lambda err, result: _echo_result(ctx, err, result),
    )


@click.command('search')
@click.argument('query')
@click.option('--page', type=int, default=None, help='Page number (1-based)')
@click.option('--per-page', type=int, default=None, help='Results per page')
@click.option(
    '--z',
    'z_keys',
    multiple=True,
    help='Auxiliary field to keep (repeatable; default: all)'
)
@click.pass_context
def search(ctx, query, page, per_page, z_keys):
    """Search UniProt entries matching QUERY, best annotated first.

    Examples:

        uniprot-dictionary search melanoma --per-page 5
    """
    try:
        dictionary = build_dictionary(ctx)
    except Exception as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        ctx.exit(1)

    dictionary.get_entry_matches_for_string(
        query,
        _paging_options(page, per_page, z_keys),
        lambda err, result: _echo_result(ctx, err, result),
    )
