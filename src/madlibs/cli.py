"""
Mad Libs command line interface.

Picks a random story template for a genre, asks for a word for every
placeholder and prints the finished story. Also provides commands to
inspect and validate the story catalog.
"""

import logging
import sys
from typing import Optional

import click
from dotenv import load_dotenv

from .config import Settings, configure_logging
from .genres import parse_genre
from .presenter import ConsolePresenter
from .resolver import ResolvedStory, resolve_template
from .templates import make_rng, pick_template
from .utils.errors import MadLibsError, report_error
from .utils.storage import catalog_summary, load_catalog

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def run_game(
    settings: Settings,
    presenter: ConsolePresenter,
    seed: Optional[int] = None
) -> ResolvedStory:
    """
    Play one round: genre prompt, random pick, placeholder prompts, story.

    Args:
        settings: Effective configuration
        presenter: Console used for all input and output
        seed: Optional seed for the random pick

    Returns:
        The resolved story that was printed

    Raises:
        MadLibsError: On any failure; nothing is printed after it
    """
    genre = parse_genre(presenter.ask_genre())
    logger.info(f"Selected genre: {genre.label}")

    catalog = load_catalog(settings.catalog_path)
    template = pick_template(catalog, genre, make_rng(seed))
    presenter.show_pick(template)

    story = resolve_template(template, presenter.ask)
    presenter.show_replacement_pairs(story.replacements)
    presenter.show_story(story.text)
    return story


@click.group(invoke_without_command=True)
@click.option('--log-level', type=str, default=None,
              help='Logging level (default: MADLIBS_LOG_LEVEL or WARNING)')
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """Fill in the blanks of a random story. Runs 'play' when no command is given."""
    settings = Settings.from_env().override(log_level=log_level)
    configure_logging(settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        ctx.invoke(play)


@cli.command()
@click.option('--catalog', 'catalog_path', type=click.Path(dir_okay=False),
              help='Story catalog JSON file (default: the bundled catalog)')
@click.option('--seed', type=int, help='Seed for the random story pick')
@click.option('--show-replacements/--hide-replacements', default=None,
              help='Print each old/new word pair before the story')
@click.pass_obj
def play(settings: Settings, catalog_path: Optional[str], seed: Optional[int],
         show_replacements: Optional[bool]) -> None:
    """
    Play one round of Mad Libs.

    Reads the genre and then one answer per placeholder from standard input.

    Raises:
        SystemExit: Exits with code 1 if the catalog, the genre or the input fails.
    """
    settings = settings.override(catalog_path=catalog_path, show_replacements=show_replacements)
    presenter = ConsolePresenter(show_replacements=settings.show_replacements)
    try:
        run_game(settings, presenter, seed=seed)
    except MadLibsError as e:
        sys.exit(report_error(e))


@cli.command()
@click.option('--catalog', 'catalog_path', type=click.Path(dir_okay=False),
              help='Story catalog JSON file (default: the bundled catalog)')
@click.pass_obj
def genres(settings: Settings, catalog_path: Optional[str]) -> None:
    """List the story genres and how many templates each has."""
    settings = settings.override(catalog_path=catalog_path)
    try:
        catalog = load_catalog(settings.catalog_path)
    except MadLibsError as e:
        sys.exit(report_error(e))

    click.echo(f"\n{'Genre':<12} {'Templates':<10}")
    click.echo("-" * 23)
    for label, count in catalog_summary(catalog).items():
        click.echo(f"{label:<12} {count:<10}")


@cli.command()
@click.option('--catalog', 'catalog_path', type=click.Path(dir_okay=False),
              help='Story catalog JSON file (default: the bundled catalog)')
@click.pass_obj
def validate_catalog(settings: Settings, catalog_path: Optional[str]) -> None:
    """
    Check that the story catalog can be loaded.

    Raises:
        SystemExit: Exits with code 1 if the file is missing or malformed.
    """
    settings = settings.override(catalog_path=catalog_path)
    try:
        catalog = load_catalog(settings.catalog_path)
    except MadLibsError as e:
        sys.exit(report_error(e))

    click.echo(f"✓ Catalog OK: {settings.catalog_path}")
    for label, count in catalog_summary(catalog).items():
        click.echo(f"  {label}: {count} templates")


if __name__ == '__main__':
    cli()
