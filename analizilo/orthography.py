"""
Helpers for Esperanto's accented letters.

Esperanto text is often typed in the 'x-system', where an x after a letter
stands for the circumflex or breve: 'cx' is 'ĉ', 'ux' is 'ŭ'. The dictionary
file is written this way, and users may type words this way too.
"""

HYPHEN = "-"
SOFT_HYPHEN = "­"

# Letters which can accept a 'hat', and the accented letter for each.
ACCENTED = {
    "c": "ĉ", "g": "ĝ", "s": "ŝ", "u": "ŭ", "j": "ĵ", "h": "ĥ",
    "C": "Ĉ", "G": "Ĝ", "S": "Ŝ", "U": "Ŭ", "J": "Ĵ", "H": "Ĥ",
}


def x_to_accent(word: str) -> str:
    """
    Convert cx to ĉ, sx to ŝ, etc., for an entire string.

    >>> x_to_accent("cxirkaux")
    'ĉirkaŭ'
    """
    result = []
    skip_x = False
    for i, ch in enumerate(word):
        if skip_x:
            skip_x = False
            continue
        if ch in ACCENTED and i < len(word) - 1 and word[i + 1] in ("x", "X"):
            result.append(ACCENTED[ch])
            skip_x = True
        else:
            result.append(ch)
    return "".join(result)


def is_hyphen(ch: str) -> bool:
    """True for the hyphen (U+002D) and the soft hyphen (U+00AD)."""
    return ch == HYPHEN or ch == SOFT_HYPHEN


def is_word_char(ch: str) -> bool:
    """
    True for characters which can be part of a word, such as 'abc' or 'ĉ',
    and False for others, such as punctuation and white space.
    """
    return ("a" <= ch <= "z" or
            "A" <= ch <= "Z" or
            "À" <= ch <= "ʯ" or
            is_hyphen(ch))


def remove_hyphens(word: str) -> str:
    return word.replace(HYPHEN, "").replace(SOFT_HYPHEN, "")


def lower_case(word: str) -> str:
    """
    Convert a word to lower case, one character for one character.

    A few characters become two in lower case ('İ' -> 'i̇'). These are kept
    as they are, so that restore_capitals() can match the result to the
    original character by character.
    """
    result = []
    for ch in word:
        lower = ch.lower()
        result.append(lower if len(lower) == 1 else ch)
    return "".join(result)


def capitalize(word: str) -> str:
    """Capitalize the first letter of a word: kanado -> Kanado."""
    if not word:
        return word
    return word[0].upper() + word[1:]


def restore_capitals(original: str, analyzed: str) -> str:
    """
    Restore the original case of a word after analysis.

    The dictionary has only lower case morphemes, so words are converted to
    lower case for lookups. An analysis of 'RIĈULO' produces 'riĉ.ul.o';
    given both, this returns 'RIĈ.UL.O'. Periods in the analyzed form are
    copied; every other character is taken from the original in order.

    Args:
        original: The word as it was written
        analyzed: Result of analysis, lower case, divided by periods

    Returns:
        The analyzed result with the original case restored
    """
    result = []
    index = 0
    for ch in analyzed:
        if ch == "." or index >= len(original):
            result.append(ch)
        else:
            result.append(original[index])
            index += 1
    return "".join(result)
