"""
Data model for the gitmoji catalogue.

The catalogue document is a JSON object with a ``gitmojis`` list. Each
record carries at least the four string fields used here; any other
fields (``entity``, ``semver`` ...) are ignored.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Set, Union

from gitmoji_helper.errors import CatalogueError, ParseError


ENTRY_FIELDS = ("code", "emoji", "name", "description")


@dataclass(frozen=True)
class CatalogueEntry:
    """One gitmoji.

    Attributes
    ----------
    code : str
        Textual alias, e.g. ``":sparkles:"``.
    emoji : str
        The unicode glyph, e.g. ``"✨"``.
    name : str
        Stable identifier, unique within a catalogue.
    description : str
        One line explaining when to use it.
    """

    code: str
    emoji: str
    name: str
    description: str

    @property
    def label(self) -> str:
        """Text shown when choosing an entry interactively."""
        return f"{self.emoji} - {self.description}"

    @classmethod
    def from_record(cls, record: Any, index: int) -> "CatalogueEntry":
        if not isinstance(record, dict):
            raise ParseError(f"Catalogue entry #{index} is not an object")
        values = {}
        for field_name in ENTRY_FIELDS:
            value = record.get(field_name)
            if not isinstance(value, str) or not value:
                raise ParseError(
                    f"Catalogue entry #{index} has a missing or invalid '{field_name}'"
                )
            values[field_name] = value
        return cls(**values)


def parse_catalogue(document: Union[str, bytes]) -> List[CatalogueEntry]:
    """Parse a catalogue document into its entries, in document order.

    Raises
    ------
    ParseError
        If the document is not JSON, or an entry is malformed or repeats
        a name.
    CatalogueError
        If the document has no ``gitmojis`` list.
    """
    try:
        data = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(f"Catalogue is not valid JSON: {exc}") from exc

    records = data.get("gitmojis") if isinstance(data, dict) else None
    if not isinstance(records, list):
        raise CatalogueError("Could not find gitmoji list in json.")

    entries: List[CatalogueEntry] = []
    seen: Set[str] = set()
    for index, record in enumerate(records):
        entry = CatalogueEntry.from_record(record, index)
        if entry.name in seen:
            raise ParseError(f"Duplicate gitmoji name '{entry.name}'")
        seen.add(entry.name)
        entries.append(entry)
    return entries
