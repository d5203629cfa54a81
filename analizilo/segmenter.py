"""
Division of compound words into morphemes.

The search is depth-first and tries the longest morpheme first. At every
position after the first it tries the whole rest of the word before any
division. The first division which passes every synthesis check is
accepted; no other divisions are explored. This order is how ambiguous
compounds are resolved, so it must not change.
"""
import logging

from analizilo.entry import MorphemeEntry, Synthesis
from analizilo.morphemes import MAX_MORPHEMES, MorphemeList
from analizilo.scan import scan_morphemes
from analizilo.suffix import check_suffix

logger = logging.getLogger(__name__)

MIN_MORPHEME_LENGTH = 2
MIN_SEPARATOR_REST = 3   # a separator needs a morpheme of two letters after it


class Segmenter:
    """
    Divides the stem of one word into dictionary morphemes.

    The segmenter owns the morpheme list for the duration of the search.
    Create one per word; the dictionary may be shared.
    """

    def __init__(self, dictionary, morphemes: MorphemeList):
        self.dictionary = dictionary
        self.morphemes = morphemes

    def segment(self, stem: str) -> bool:
        """Divide the whole stem, starting at the first morpheme."""
        return self.find_morpheme(stem, 0)

    def find_morpheme(self, rest_of_word: str, index: int) -> bool:
        """
        Find a morpheme at the start of rest_of_word, store it at index,
        and divide what remains. Recursive.

        Args:
            rest_of_word: The remainder of the stem to be analyzed
            index: Index of the morpheme in the morpheme list

        Returns:
            True if the rest of the word was divided with valid synthesis
        """
        if index >= MAX_MORPHEMES:
            return False

        # The whole remainder may be a single morpheme.
        if index > 0:
            entry = self.dictionary.get(rest_of_word)
            if entry is not None and entry.synthesis != Synthesis.NO:
                self.morphemes.put(index, entry)
                if self.check_synthesis("", index, last_morpheme=True):
                    return True

        # Divide the rest of the word, longest morpheme first. At least one
        # character is left for what follows.
        length = len(rest_of_word)
        for size in range(length - 1, MIN_MORPHEME_LENGTH - 1, -1):
            entry = self.dictionary.get(rest_of_word[:size])
            if entry is None or entry.synthesis == Synthesis.NO:
                continue
            self.morphemes.put(index, entry)
            if self.check_synthesis(rest_of_word[size:], index, last_morpheme=False):
                return True

        # Sometimes a separator (a grammatical ending) is placed between
        # morphemes to aid pronunciation: 'fingr.o.montr.i' rather than
        # 'fingr.montr.i'. It must be 'o', 'a' or 'e'.
        if index == 0 or length < MIN_SEPARATOR_REST:
            return False

        separator = MorphemeEntry.new_separator(rest_of_word[0])
        if separator is not None:
            self.morphemes.put(index, separator)
            if self.check_synthesis(rest_of_word[1:], index, last_morpheme=False):
                return True

        return False

    def check_synthesis(self, rest_of_word: str, index: int, last_morpheme: bool) -> bool:
        """
        Check the synthesis of the morpheme just placed at index.

        Suffixes are checked immediately. Prefixes, participles and limited
        morphemes are checked by scan_morphemes() once the word has been
        completely divided, because their validity depends on what follows.
        """
        entry = self.morphemes.get(index)
        if entry.synthesis == Synthesis.SUFFIX and not check_suffix(entry.word, index, self.morphemes):
            return False

        if not last_morpheme:
            return self.find_morpheme(rest_of_word, index + 1)

        valid = scan_morphemes(self.morphemes)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Candidate %s: %s", self.morphemes.display_form(),
                         "accepted" if valid else "rejected")
        return valid
