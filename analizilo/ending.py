"""
The grammatical endings (finaĵoj) of Esperanto words.

An ending is the final inflectional segment of a word: it marks the part of
speech (-o, -a, -e, -i), verb tense or mood (-as, -is, -os, -us, -u), plural
(-j) and accusative (-n).
"""
from dataclasses import dataclass
from typing import Optional

from analizilo.entry import PartOfSpeech


@dataclass(frozen=True)
class Ending:
    """A grammatical ending and the part of speech it gives the whole word."""

    ending: str
    part_of_speech: PartOfSpeech

    @property
    def length(self) -> int:
        return len(self.ending)


SUB_O = Ending("o", PartOfSpeech.SUBSTANTIVE)
SUB_ON = Ending("on", PartOfSpeech.SUBSTANTIVE)
SUB_OJ = Ending("oj", PartOfSpeech.SUBSTANTIVE)
SUB_OJN = Ending("ojn", PartOfSpeech.SUBSTANTIVE)
VERB_AS = Ending("as", PartOfSpeech.VERB)
VERB_IS = Ending("is", PartOfSpeech.VERB)
VERB_OS = Ending("os", PartOfSpeech.VERB)
VERB_US = Ending("us", PartOfSpeech.VERB)
VERB_I = Ending("i", PartOfSpeech.VERB)
VERB_U = Ending("u", PartOfSpeech.VERB)
ADJ_A = Ending("a", PartOfSpeech.ADJECTIVE)
ADJ_AN = Ending("an", PartOfSpeech.ADJECTIVE)
ADJ_AJ = Ending("aj", PartOfSpeech.ADJECTIVE)
ADJ_AJN = Ending("ajn", PartOfSpeech.ADJECTIVE)
ADV_E = Ending("e", PartOfSpeech.ADVERB)
ADV_EN = Ending("en", PartOfSpeech.ADVERB)

# Minimum word lengths. A word must have at least one root character
# before the ending, and two for the longer endings.
MIN_LENGTH = 3
MIN_LENGTH_TWO_LETTERS = 4
MIN_LENGTH_THREE_LETTERS = 5

_VERB_ENDINGS = {"a": VERB_AS, "i": VERB_IS, "o": VERB_OS, "u": VERB_US}
_ACCUSATIVE_ENDINGS = {"o": SUB_ON, "a": ADJ_AN, "e": ADV_EN}
_PLURAL_ACCUSATIVE_ENDINGS = {"o": SUB_OJN, "a": ADJ_AJN}
_PLURAL_ENDINGS = {"o": SUB_OJ, "a": ADJ_AJ}
_SIMPLE_ENDINGS = {"o": SUB_O, "a": ADJ_A, "e": ADV_E, "i": VERB_I, "u": VERB_U}


def find_ending(word: str) -> Optional[Ending]:
    """
    Check whether a word has a valid grammatical ending.

    Args:
        word: Lower case word, with accented letters resolved

    Returns:
        The ending, or None if the word has no valid ending
    """
    length = len(word)
    if length < MIN_LENGTH:
        return None

    last = word[-1]
    if last == "o":
        return SUB_O

    if last == "s":
        if length < MIN_LENGTH_TWO_LETTERS:
            return None
        return _VERB_ENDINGS.get(word[-2])

    if last == "n":
        if length < MIN_LENGTH_TWO_LETTERS:
            return None
        second_last = word[-2]
        if second_last == "j":
            if length < MIN_LENGTH_THREE_LETTERS:
                return None
            return _PLURAL_ACCUSATIVE_ENDINGS.get(word[-3])
        return _ACCUSATIVE_ENDINGS.get(second_last)

    if last == "j":
        if length < MIN_LENGTH_TWO_LETTERS:
            return None
        return _PLURAL_ENDINGS.get(word[-2])

    return _SIMPLE_ENDINGS.get(last)
