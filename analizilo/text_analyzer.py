"""
Analysis of running text.

Text is split into runs of word characters and runs of everything else.
In spell-checking mode the distinct invalid words are collected; in morpheme
mode the text is reproduced with each word divided into morphemes, eg.
'La submara boato' -> 'La sub.mar.a boat.o'.
"""
import logging
from pathlib import Path
from typing import Iterator, Set, Tuple, Union

from tqdm import tqdm

from analizilo.checker import check_word
from analizilo.logging_config import ProgressLogger
from analizilo.orthography import is_word_char, x_to_accent

logger = logging.getLogger(__name__)


def tokenize(text: str) -> Iterator[Tuple[bool, str]]:
    """
    Split text into alternating runs of word and non-word characters.

    Yields:
        (is_word, chunk) pairs, in order. Joining the chunks gives back the text.
    """
    if not text:
        return
    start = 0
    in_word = is_word_char(text[0])
    for i, ch in enumerate(text):
        if is_word_char(ch) != in_word:
            yield in_word, text[start:i]
            start = i
            in_word = not in_word
    yield in_word, text[start:]


def _analyze_token(token: str, dictionary, x_format: bool):
    if x_format:
        token = x_to_accent(token)
    return check_word(token, dictionary)


def divide_text(text: str, dictionary, x_format: bool = False) -> str:
    """Reproduce text with every word divided into morphemes."""
    parts = []
    for is_word, chunk in tokenize(text):
        if is_word:
            parts.append(_analyze_token(chunk, dictionary, x_format).word)
        else:
            parts.append(chunk)
    return "".join(parts)


def find_misspelled(text: str, dictionary, x_format: bool = False) -> Set[str]:
    """Return the distinct words of text which are not valid, as written."""
    misspelled = set()
    for is_word, chunk in tokenize(text):
        if is_word and not _analyze_token(chunk, dictionary, x_format).valid:
            misspelled.add(chunk)
    return misspelled


def analyze_file(path: Union[str, Path], dictionary, morpheme_mode: bool = False,
                 x_format: bool = False, progress: bool = False):
    """
    Analyze the text within a file.

    Args:
        path: Path to a UTF-8 text file
        dictionary: The morpheme dictionary
        morpheme_mode: True to divide the text into morphemes, False to
            collect misspelled words
        x_format: Convert x-system letters in each word before analysis
        progress: Show a progress bar and log progress

    Returns:
        The divided text (str) in morpheme mode, otherwise the set of
        misspelled words

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines(keepends=True)

    logger.info(f"Analyzing {path} ({len(lines)} lines, morpheme mode: {morpheme_mode})")

    progress_log = ProgressLogger(total=len(lines), desc=f"Analyzing {path.name}") if progress else None
    iterator = tqdm(lines, desc=f"Analyzing {path.name}", unit=" lines") if progress else lines

    divided = []
    misspelled: Set[str] = set()
    for line in iterator:
        if morpheme_mode:
            divided.append(divide_text(line, dictionary, x_format))
            invalid = 0
        else:
            bad = find_misspelled(line, dictionary, x_format)
            invalid = len(bad - misspelled)
            misspelled |= bad
        if progress_log:
            progress_log.update(1, invalid=invalid)

    if progress_log:
        progress_log.close()

    if morpheme_mode:
        return "".join(divided)
    logger.info(f"Found {len(misspelled)} misspelled words in {path}")
    return misspelled
