"""Main CLI entry point for uniprot-dictionary.

Provides command group with global options and lookup subcommands.
"""

import json
import logging
from pathlib import Path

import click
import structlog

from uniprot_dictionary import __version__
from uniprot_dictionary.cli.lookup_cmd import build_dictionary, entries, search


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# structlog events go through stdlib logging (stderr)
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.processors.KeyValueRenderer(key_order=['event']),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
)


@click.group()
@click.option(
    '--config',
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help='Path to dictionary configuration YAML file (default: built-in defaults)'
)
@click.option(
    '--base-url',
    default=None,
    help='Override the UniProt base URL'
)
@click.option(
    '--log-requests',
    is_flag=True,
    help='Log every UniProt request URL'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Enable verbose logging (DEBUG level)'
)
@click.pass_context
def cli(ctx, config, base_url, log_requests, verbose):
    """uniprot-dictionary: look up UniProt entries through a dictionary interface.

    Fetches entries by identifier and free-text matches from the UniProt
    tabular API, normalized to entry/match records printed as JSON.
    """
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config
    ctx.obj['overrides'] = {}
    if base_url:
        ctx.obj['overrides']['base_url'] = base_url
    if log_requests:
        ctx.obj['overrides']['log'] = True

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.debug("Verbose logging enabled")


@cli.command()
@click.pass_context
def info(ctx):
    """Display dictionary information and configuration summary."""
    click.echo(f"uniprot-dictionary v{__version__}")
    click.echo(f"Config: {ctx.obj['config_path'] or '(defaults)'}")
    click.echo()

    try:
        dictionary = build_dictionary(ctx)
    except Exception as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        ctx.exit(1)

    config = dictionary.config
    click.echo(click.style("Dictionary:", bold=True))
    click.echo(json.dumps(dictionary.dict_infos(), indent=4))
    click.echo()

    click.echo(click.style("Configuration:", bold=True))
    click.echo(f"  Entries URL: {config.entries_url_template}")
    click.echo(f"  Matches URL: {config.matches_url_template}")
    click.echo(f"  Format: {config.format}")
    click.echo(f"  Page Size: {config.per_page_max}")
    click.echo(f"  Curator Ordering: {config.optimized_for_curator}")
    click.echo(f"  Timeout: {config.api.timeout_seconds}s")


# Register commands
cli.add_command(entries)
cli.add_command(search)


if __name__ == '__main__':
    cli()
