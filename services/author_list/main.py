"""
Contributor list generator.

Turns the Git author history into the Go source listing every contributor:
- Parses ``name  -  email`` history lines
- Folds name variants into canonical authors (last write wins)
- Sorts and renders the ``authors()`` function of package ``gui``
"""

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from services.author_list.aliases import ALIASES, SEED_AUTHORS
from services.author_list.errors import MalformedHistoryLine
from services.author_list.history import fetch_author_history
from shared.models import ENTRY_DELIMITER, AuthorRecord

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = ",\n        "

SOURCE_TEMPLATE = (
    "package gui\n"
    "\n"
    "func authors() []string {{\n"
    "    return []string{{\n"
    "        {entries}\n"
    "    }}\n"
    "}}\n"
)


def parse_history_line(line: str) -> Optional[AuthorRecord]:
    """
    Parse one history line into a raw author record.

    Blank lines yield ``None``. The line is split on the first delimiter; an
    author without an email leaves the email empty.

    Raises:
        MalformedHistoryLine: the line has no delimiter at all.
    """
    if not line.strip():
        return None

    text = line.rstrip("\r\n")
    if ENTRY_DELIMITER not in text and text.rstrip().endswith(ENTRY_DELIMITER.rstrip()):
        # ``%aE`` was empty and the trailing spaces were trimmed
        text = text.rstrip() + "  "

    name, delimiter, email = text.partition(ENTRY_DELIMITER)
    if not delimiter:
        raise MalformedHistoryLine(line)
    return AuthorRecord(name=name.strip(), email=email.strip())


def parse_history(history: str) -> List[AuthorRecord]:
    """Parse the full history output, skipping blank lines."""
    records = []
    for line in history.splitlines():
        record = parse_history_line(line)
        if record is not None:
            records.append(record)
    return records


def render_authors_source(authors: Sequence[AuthorRecord]) -> str:
    """Render sorted authors as the generated Go source, byte for byte."""
    entries = ENTRY_SEPARATOR.join(author.literal for author in authors) + ",\n"
    return SOURCE_TEMPLATE.format(entries=entries)


class AuthorListGenerator:
    """Builds the contributor list from Git history."""

    def __init__(
        self,
        fetch_history: Optional[Callable[[], str]] = None,
        aliases: Mapping[str, str] = ALIASES,
        seed: Iterable[Tuple[str, str]] = SEED_AUTHORS,
    ):
        self.fetch_history = fetch_history or fetch_author_history
        self.aliases = aliases
        self.seed = tuple(seed)

    def build_author_map(self, records: Iterable[AuthorRecord]) -> Dict[str, str]:
        """Fold records into canonical name -> email, later records overwriting earlier ones."""
        author_map = dict(self.seed)
        for record in records:
            canonical = record.canonical(self.aliases)
            if canonical.name != record.name:
                logger.debug(f"Aliased {record.name!r} to {canonical.name!r}")
            author_map[canonical.name] = canonical.email
        return author_map

    @staticmethod
    def sort_authors(author_map: Mapping[str, str]) -> List[AuthorRecord]:
        authors = [AuthorRecord(name=name, email=email) for name, email in author_map.items()]
        return sorted(authors, key=AuthorRecord.sort_key)

    def generate_from_history(self, history: str) -> str:
        """Render the Go source for already-fetched history text."""
        records = parse_history(history)
        author_map = self.build_author_map(records)
        authors = self.sort_authors(author_map)
        logger.info(
            f"Generated {len(authors)} contributors from {len(records)} history records"
        )
        return render_authors_source(authors)

    def generate(self) -> str:
        """Query history and render the Go source."""
        return self.generate_from_history(self.fetch_history())
