"""patternbook CLI - design pattern examples."""

import logging
import sys

import click

from .config import load_config
from .workflows import build_html, run_builder_demo, run_journal_demo, write_journal


def _parse_child(value: str) -> tuple[str, str]:
    name, _, text = value.partition("=")
    return name, text


@click.group()
@click.version_option(package_name="patternbook")
def main():
    """patternbook - Object-oriented design pattern examples."""
    pass


@main.command()
@click.argument("entries", nargs=-1, required=True)
@click.option("--title", "-t", default=None, help="Journal title, defaults to config")
@click.option("--output", "-o", "output", default=None,
              help="File to write, defaults to the configured journal file")
def journal(entries: tuple[str, ...], title: str | None, output: str | None):
    """Add entries to a new journal and save it, one entry per line."""
    config = load_config()
    destination = output or config.journal_path

    try:
        j = write_journal(config, list(entries), title=title, destination=output)
    except (OSError, UnicodeEncodeError) as e:
        click.echo(f"Error: could not write journal to {destination}: {e}", err=True)
        sys.exit(1)

    click.echo(f"{j.title}\n")
    for entry in j.entries:
        click.echo(entry)
    click.echo(f"\nSaved to {destination}")


@main.command()
@click.argument("root")
@click.option("--child", "-c", "children", multiple=True,
              help="Child element as NAME=TEXT (repeatable)")
def html(root: str, children: tuple[str, ...]):
    """Build an element tree and print it."""
    click.echo(build_html(root, [_parse_child(c) for c in children]), nl=False)


@main.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def demo(debug: bool):
    """Run the journal and builder demonstrations."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()

    click.echo("=== Single Responsibility: Journal ===")
    try:
        path = run_journal_demo(config)
    except (OSError, UnicodeEncodeError) as e:
        click.echo(f"Error: could not write journal: {e}", err=True)
        sys.exit(1)
    click.echo(f"Saved '{config.journal_title}' to {path}\n")

    click.echo(run_builder_demo())
