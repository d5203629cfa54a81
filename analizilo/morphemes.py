"""
The morpheme list, used to analyze the synthesis of compound words.

The list holds copies of dictionary entries rather than references to them,
because the synthesis rules sometimes need to modify an entry: a suffix such
as -et takes on the part of speech of the morpheme before it.

Backtracking never erases a slot. A failed branch leaves stale entries
behind, and the next placement overwrites them. Only slots 0..last_index,
all written on the current path, are ever read.
"""
from typing import List

from analizilo.ending import Ending
from analizilo.entry import MorphemeEntry, PartOfSpeech

MAX_MORPHEMES = 9  # The maximum number of morphemes in a compound word.


class MorphemeList:
    """A fixed-size list of morphemes, plus the grammatical ending of the word."""

    def __init__(self, ending: Ending):
        self.last_index = 0
        self.ending = ending
        self._morphemes: List[MorphemeEntry] = [
            MorphemeEntry.empty() for _ in range(MAX_MORPHEMES)
        ]

    def get(self, index: int) -> MorphemeEntry:
        return self._morphemes[index]

    def get_mut(self, index: int) -> MorphemeEntry:
        """Return the stored copy itself, so that rules can amend it."""
        return self._morphemes[index]

    def put(self, index: int, entry: MorphemeEntry):
        """Store a copy of the entry at index. It becomes the last entry."""
        self.last_index = index
        self._morphemes[index] = entry.copy()

    @property
    def type_of_ending(self) -> PartOfSpeech:
        """Part of speech of the ending, eg. Substantive for 'arb.o'."""
        return self.ending.part_of_speech

    def morphemes(self) -> List[MorphemeEntry]:
        """The morphemes collected so far (slots 0..last_index)."""
        return self._morphemes[:self.last_index + 1]

    def count_separators(self) -> int:
        """
        Count separator vowels. 'last.a.temp.e' has one separator (a).
        Only one is allowed per word.
        """
        return sum(1 for m in self.morphemes() if m.is_separator)

    def display_form(self) -> str:
        """
        Join the collected morphemes and the ending with periods,
        eg. 'for.ig.it.a'.
        """
        words = [m.word for m in self.morphemes()]
        words.append(self.ending.ending)
        return ".".join(words)

    def __len__(self) -> int:
        return self.last_index + 1

    def __repr__(self) -> str:
        return f"MorphemeList({self.display_form()!r})"
