import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

import yaml

from ..core.config import Config
from ..core.errors import GlossaryError, TermNotFoundError
from ..templating import render


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    term: str
    definition: str

    def to_dict(self) -> Dict[str, str]:
        return {"term": self.term, "definition": self.definition}


class Glossary:
    """Term definitions keyed case-insensitively."""

    def __init__(self, entries: Dict[str, str]):
        self._entries: Dict[str, Entry] = {}
        for term, definition in entries.items():
            key = term.strip().casefold()
            if key in self._entries:
                logger.warning(f"Duplicate glossary term '{term}', keeping the last definition")
            self._entries[key] = Entry(term.strip(), definition.strip())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, term: str) -> bool:
        return term.strip().casefold() in self._entries

    def entries(self) -> List[Entry]:
        return sorted(self._entries.values(), key=lambda e: e.term.casefold())

    def terms(self) -> List[str]:
        return [entry.term for entry in self.entries()]

    def lookup(self, term: str) -> Entry:
        try:
            return self._entries[term.strip().casefold()]
        except KeyError:
            raise TermNotFoundError(term)

    def search(self, query: str) -> List[Entry]:
        needle = query.strip().casefold()
        if not needle:
            return self.entries()
        return [
            entry for entry in self.entries()
            if needle in entry.term.casefold() or needle in entry.definition.casefold()
        ]

    def to_html(self) -> str:
        return render("glossary.html", entries=self.entries())


def load_glossary(path: str | Path) -> Glossary:
    """Parse a YAML mapping of term -> definition.

    Raises:
        GlossaryError: If the file cannot be read or is not a mapping of strings.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise GlossaryError(f"Glossary file not found: {path}")
    except OSError as e:
        raise GlossaryError(f"Glossary file could not be read: {e}")
    except UnicodeDecodeError as e:
        raise GlossaryError(f"Glossary file is not valid UTF-8: {e}")
    except yaml.YAMLError as e:
        raise GlossaryError(f"Glossary file is not valid YAML: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GlossaryError(f"Glossary must be a mapping of term to definition, got {type(data).__name__}")

    for term, definition in data.items():
        if not isinstance(term, str) or not isinstance(definition, str):
            raise GlossaryError(f"Glossary entry {term!r} must map a string term to a string definition")

    glossary = Glossary(data)
    logger.debug(f"Loaded {len(glossary)} glossary terms from {path}")
    return glossary


def get_glossary() -> Glossary:
    return load_glossary(Config.GLOSSARY_PATH)
