#!/usr/bin/env python3
"""
Contributor List Generator CLI

Reads the Git author history of the enclosing repository and prints the
generated Go source for the "about" screen contributor list.

Usage:
    python generate_authors.py [OPTIONS] > gui/authors.go

Examples:
    python generate_authors.py                            # Current repository
    python generate_authors.py --repo-path /path/to/repo  # Specific repository
    python generate_authors.py -v                         # Debug logging on stderr
"""

import functools
import logging
import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from config.settings import configure_logging, settings
from services.author_list.errors import AuthorListError, HistoryUnavailable
from services.author_list.history import fetch_author_history
from services.author_list.main import AuthorListGenerator

logger = logging.getLogger(__name__)

# Stdout carries only the generated source
console = Console(stderr=True)


def display_error_message(error: str, suggestion: str = ""):
    """Display error message with helpful suggestions."""
    error_text = Text()
    error_text.append("❌ ", style="bold red")
    error_text.append("Author list not generated\n\n", style="bold white")
    error_text.append("Error: ", style="red")
    error_text.append(f"{error}\n", style="white")

    if suggestion:
        error_text.append("Suggestion: ", style="yellow")
        error_text.append(suggestion, style="white")

    console.print(Panel(error_text, title="Error", border_style="red"))


@click.command()
@click.option(
    '--repo-path',
    default=lambda: settings.git.repo_path,
    show_default='.',
    help='Path to Git repository (default: current directory)',
    type=click.Path(file_okay=False, dir_okay=True)
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable debug logging on stderr'
)
def generate_authors(repo_path: str, verbose: bool):
    """Print the generated Go contributor list to standard output."""
    configure_logging("DEBUG" if verbose else None)

    generator = AuthorListGenerator(
        fetch_history=functools.partial(fetch_author_history, repo_path)
    )

    try:
        source = generator.generate()
    except HistoryUnavailable as e:
        logger.error(f"History query failed: {e}")
        display_error_message(
            str(e),
            "Run from inside a Git checkout with git on PATH, or pass --repo-path"
        )
        sys.exit(1)
    except AuthorListError as e:
        logger.error(f"Author list generation failed: {e}")
        display_error_message(str(e), "Check the repository history for unexpected author lines")
        sys.exit(1)

    click.echo(source, nl=False)


if __name__ == "__main__":
    generate_authors()
