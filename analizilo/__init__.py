# This file makes the 'analizilo' directory a Python package.

from analizilo.checker import AnalysisResult, analyze_word, check_word
from analizilo.ending import Ending, find_ending
from analizilo.entry import MorphemeEntry, PartOfSpeech, Meaning, Synthesis
from analizilo.morphemes import MorphemeList
from analizilo.vortaro import Dictionary, get_dictionary, load_dictionary, make_dictionary

__all__ = [
    'AnalysisResult',
    'analyze_word',
    'check_word',
    'Ending',
    'find_ending',
    'MorphemeEntry',
    'PartOfSpeech',
    'Meaning',
    'Synthesis',
    'MorphemeList',
    'Dictionary',
    'get_dictionary',
    'load_dictionary',
    'make_dictionary',
]
