"""
Checks the spelling of an Esperanto word and divides it into morphemes.

    >>> check_word("misdirita", vortaro).word
    'mis.dir.it.a'

Analysis never raises: an unknown or badly formed word is simply not valid,
and is returned undivided.
"""
import logging
from dataclasses import asdict, dataclass

from analizilo.ending import find_ending
from analizilo.logging_config import log_with_context
from analizilo.morphemes import MorphemeList
from analizilo.orthography import (
    is_hyphen,
    is_word_char,
    lower_case,
    remove_hyphens,
    restore_capitals,
    x_to_accent,
)
from analizilo.segmenter import Segmenter
from analizilo.vortaro import get_dictionary

logger = logging.getLogger(__name__)

# Exceptions.
# A few words cause difficulties for the algorithm, especially accusative
# pronouns. The pronoun 'vin' (you, accusative) is also the root of 'vino'
# (wine). The pronoun should divide as 'vi.n' and the beverage as 'vin.o'.
# Dictionary keys must be unique, so these pronouns are left out of the
# dictionary and handled here.
EXCEPTIONS = {
    "ĝin": "ĝi.n",
    "lin": "li.n",
    "min": "mi.n",
    "sin": "si.n",
    "vin": "vi.n",
    "lian": "li.an",
    "cian": "ci.an",
}
EXCEPTION_MAX_LENGTH = 5


@dataclass
class AnalysisResult:
    """
    The result of analyzing one word.

    Attributes:
        word: The word divided into morphemes, eg. 'mis.dir.it.a', with the
            original capitalization restored
        valid: True if the word is a valid (correctly spelled) Esperanto word
    """
    word: str
    valid: bool

    @classmethod
    def new(cls, original: str, analyzed: str, valid: bool) -> "AnalysisResult":
        return cls(word=restore_capitals(original, analyzed), valid=valid)

    def morphemes(self):
        """The morphemes of the divided word, including the ending."""
        return self.word.split(".")

    def to_dict(self) -> dict:
        return asdict(self)


def check_word(original_word: str, dictionary) -> AnalysisResult:
    """
    Test whether a word is correctly spelled, and divide it into morphemes.

    Args:
        original_word: The word to test, accents already resolved
        dictionary: The morpheme dictionary (anything with a get() method)

    Returns:
        AnalysisResult
    """
    # Single letters are OK.
    if len(original_word) == 1:
        return AnalysisResult.new(original_word, original_word, is_word_char(original_word))

    # Abbreviations, such as n-r.oj or s-in.oj. The second character must be a hyphen.
    if len(original_word) > 2 and is_hyphen(original_word[1]):
        word = lower_case(original_word)
        return AnalysisResult.new(original_word, word, dictionary.get(word) is not None)

    original_word = remove_hyphens(original_word)
    word = lower_case(original_word)

    if len(word) < EXCEPTION_MAX_LENGTH and word in EXCEPTIONS:
        return AnalysisResult.new(original_word, EXCEPTIONS[word], True)

    # Words which have no grammatical ending, eg. 'ne', 'dum', 'post'.
    entry = dictionary.get(word)
    if entry is not None and entry.without_ending:
        return AnalysisResult.new(original_word, entry.word, True)

    # Most words have a grammatical ending, eg. elefant-ojn, trov-is.
    ending = find_ending(word)
    if ending is None:
        return AnalysisResult.new(original_word, word, False)

    # Remove the ending and search for the root (elefant, trov).
    stem = word[:len(word) - ending.length]
    entry = dictionary.get(stem)
    if entry is not None and entry.with_ending:
        return AnalysisResult.new(original_word, f"{entry.word}.{ending.ending}", True)

    # Not a simple root. Maybe it's a compound word.
    morphemes = MorphemeList(ending)
    if Segmenter(dictionary, morphemes).segment(stem):
        return AnalysisResult.new(original_word, morphemes.display_form(), True)

    log_with_context("Word not divisible into morphemes",
                     context={"word": word, "stem": stem, "ending": ending.ending})
    return AnalysisResult.new(original_word, word, False)


def analyze_word(word: str, dictionary=None, x_format: bool = True) -> AnalysisResult:
    """
    Convenience wrapper around check_word().

    Args:
        word: The word to analyze. May use the x-system ('cxiutage').
        dictionary: Dictionary to use (default: the shared default dictionary)
        x_format: Convert x-system letters before analysis

    Returns:
        AnalysisResult
    """
    if dictionary is None:
        dictionary = get_dictionary()
    if x_format:
        word = x_to_accent(word)
    return check_word(word, dictionary)
