"""
The Esperanto morpheme dictionary (vortaro).

The dictionary is built from rows of tab-separated data, indexed by
morpheme. A typical row is:

    divid   VERBO   N   T   N   KF  NLM 1   R

Keys are the morpheme with accents restored, periods removed and in lower
case: the compound 'ĉiu.tag' is found under 'ĉiutag'. Hyphens are kept, so
that abbreviations such as 'n-r.oj' are found under 'n-roj'.

Usage:
    from analizilo.vortaro import get_dictionary

    vortaro = get_dictionary()
    entry = vortaro.get("hund")
"""
import logging
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

from analizilo import config
from analizilo.entry import MorphemeEntry
from analizilo.orthography import x_to_accent

logger = logging.getLogger(__name__)

# Singleton instance
_dictionary_instance: Optional["Dictionary"] = None


def make_key(word: str) -> str:
    """Dictionary key for a morpheme as written in the data file."""
    return x_to_accent(word).replace(".", "").lower()


class Dictionary:
    """
    A read-only map from normalized morpheme to dictionary entry.

    Entries are never modified after loading, so one dictionary can be shared
    by any number of analyses.
    """

    def __init__(self, entries: Optional[Dict[str, MorphemeEntry]] = None, source: Optional[str] = None):
        self._entries: Dict[str, MorphemeEntry] = dict(entries or {})
        self.source = source
        self.skipped_rows = 0

    @classmethod
    def from_text(cls, data: str, source: Optional[str] = None) -> "Dictionary":
        """
        Parse dictionary rows.

        Empty lines and comment lines (starting with '#') are skipped.
        Malformed rows are skipped and logged. Single letters and rows
        flagged X (exclude) are left out.

        Args:
            data: The text of a dictionary file
            source: Where the data came from, for log messages

        Returns:
            A new Dictionary
        """
        dictionary = cls(source=source)
        for line_number, line in enumerate(data.splitlines(), 1):
            if not line or line.startswith("#"):
                continue
            fields = line.split()
            try:
                entry = MorphemeEntry.from_fields(fields)
            except ValueError as e:
                dictionary.skipped_rows += 1
                logger.warning(f"Skipping malformed dictionary row {line_number} ({e}): {line!r}")
                continue
            if entry is not None:
                dictionary._entries[make_key(fields[0])] = entry

        logger.debug(f"Loaded {len(dictionary)} morphemes from {source or 'text'} "
                     f"({dictionary.skipped_rows} rows skipped)")
        return dictionary

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Dictionary":
        """
        Load a dictionary from a UTF-8 file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = f.read()
        return cls.from_text(data, source=str(path))

    def get(self, key: str) -> Optional[MorphemeEntry]:
        """Look up a normalized morpheme. Returns None if it is unknown."""
        return self._entries.get(key)

    def __getitem__(self, key: str) -> MorphemeEntry:
        return self._entries[key]

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def make_dictionary(data: str) -> Dictionary:
    """Build a dictionary from rows of tab-separated data."""
    return Dictionary.from_text(data)


def load_dictionary(path: Optional[Union[str, Path]] = None) -> Dictionary:
    """Load the dictionary file at path, or the configured default."""
    if path is None:
        path = config.dictionary_path()
    logger.info(f"Loading dictionary from {path}")
    return Dictionary.from_file(path)


def get_dictionary() -> Dictionary:
    """
    Get singleton instance of the default dictionary.

    This ensures the dictionary is loaded only once and reused.
    """
    global _dictionary_instance

    if _dictionary_instance is None:
        _dictionary_instance = load_dictionary()

    return _dictionary_instance


def reset_dictionary():
    """Reset singleton (mainly for testing)."""
    global _dictionary_instance
    _dictionary_instance = None
