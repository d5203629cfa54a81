"""
Dictionary entries (vortaraj eroj) for the Esperanto morpheme dictionary.

An entry describes one morpheme: its spelling, its part of speech, the domain
of its meaning, its transitivity, whether it may stand alone or take an
ending, and how it combines with other morphemes (its synthesis class).

Entries loaded into the dictionary are never modified. The morpheme list
holds copies, because some suffix rules rewrite the part of speech, meaning
or transitivity of the morpheme they are checking.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from analizilo.orthography import x_to_accent


class PartOfSpeech(Enum):
    """Part of speech (vortspeco). Also defines a morpheme's role in morphology.

    The value is the code used in the dictionary file. Many synthesis rules
    compare parts of speech by rank (see RANKS below), for example
    "rank <= Adjective" means "substantive, verb or adjective".
    """
    SUBSTANTIVE = "SUBST"
    SUBSTANTIVE_VERB = "SUBSTVERBO"
    VERB = "VERBO"
    ADJECTIVE = "ADJ"
    NUMBER = "NUMERO"
    ADVERB = "ADVERBO"
    PRONOUN = "PRONOMO"
    PRONOUN_ADJECTIVE = "PRONOMADJ"
    PREPOSITION = "PREPOZICIO"
    CONJUNCTION = "KONJUNKCIO"
    SUBJUNCTION = "SUBJUNKCIO"
    INTERJECTION = "INTERJEKCIO"
    PREFIX = "PREFIKSO"
    TECH_PREFIX = "TEHXPREFIKSO"   # hiper-, mega-; not used independently
    SUFFIX = "SUFIKSO"
    ARTICLE = "ARTIKOLO"
    PARTICIPLE = "PARTICIPO"
    ABBREVIATION = "MALLONGIGO"    # UEA, UNESKO
    LETTER = "LITERO"

    @classmethod
    def from_code(cls, code: str) -> "PartOfSpeech":
        """Unknown codes are treated as substantives."""
        try:
            return cls(code)
        except ValueError:
            return cls.SUBSTANTIVE

    @property
    def rank(self) -> int:
        return RANKS[self]

    def at_most(self, other: "PartOfSpeech") -> bool:
        return self.rank <= other.rank

    def above(self, other: "PartOfSpeech") -> bool:
        return self.rank > other.rank

    def is_verbal(self) -> bool:
        return self in (PartOfSpeech.VERB, PartOfSpeech.SUBSTANTIVE_VERB)


# Explicit ranks. The order is load-bearing: the nominal, verbal and
# adjectival classes come first so that range tests select them.
RANKS = {
    PartOfSpeech.SUBSTANTIVE: 0,
    PartOfSpeech.SUBSTANTIVE_VERB: 1,
    PartOfSpeech.VERB: 2,
    PartOfSpeech.ADJECTIVE: 3,
    PartOfSpeech.NUMBER: 4,
    PartOfSpeech.ADVERB: 5,
    PartOfSpeech.PRONOUN: 6,
    PartOfSpeech.PRONOUN_ADJECTIVE: 7,
    PartOfSpeech.PREPOSITION: 8,
    PartOfSpeech.CONJUNCTION: 9,
    PartOfSpeech.SUBJUNCTION: 10,
    PartOfSpeech.INTERJECTION: 11,
    PartOfSpeech.PREFIX: 12,
    PartOfSpeech.TECH_PREFIX: 13,
    PartOfSpeech.SUFFIX: 14,
    PartOfSpeech.ARTICLE: 15,
    PartOfSpeech.PARTICIPLE: 16,
    PartOfSpeech.ABBREVIATION: 17,
    PartOfSpeech.LETTER: 18,
}


class Capitalization(Enum):
    """Capitalization of a dictionary word."""
    MINISCULE = "miniscule"   # butero
    MAJUSCULE = "majuscule"   # Kanado
    ALL_CAPS = "all_caps"     # UEA

    @classmethod
    def of(cls, word: str) -> "Capitalization":
        if not word:
            return cls.MINISCULE
        first = word[0].isupper()
        second = len(word) > 1 and word[1].isupper()
        if first and second:
            return cls.ALL_CAPS
        if first:
            return cls.MAJUSCULE
        return cls.MINISCULE


class Meaning(Enum):
    """
    The domain of a morpheme (signifo). For example 'bizon', 'cerv' and
    'hipopotam' have the meaning MAMULO (mammal).

    Values are the codes used in the dictionary file.
    """
    NEKONATA = "N"   # unknown - most common domain
    LEGOMO = "LEGOMO"
    BOATO = "BOATO"
    KRUSTULO = "KRUSTULO"
    INSULO = "INSULO"
    RELIGIO = "RELIGIO"
    HERBO = "HERBO"
    KOLORO = "KOLORO"
    PLANTO = "PLANTO"
    FESTO = "FESTO"
    LIBRO = "LIBRO"
    LOKO = "LOKO"
    DROGO = "DROGO"
    LAGO = "LAGO"
    PSEUXDOSCIENCO = "PSEUXDOSCI"
    RELIGIA_POSTENO = "RELPOSTENO"
    PROFESIO = "PROFESIO"
    GRAMATIKO = "GRAMATIKO"
    EHXINODERMO = "EHXINODERMO"
    MEDIKAMENTO = "MEDIKAMENTO"
    REGIONO = "REGIONO"
    BIOLOGIO = "BIOLOGIO"
    BIRDO = "BIRDO"
    URBO = "URBO"
    VETURILO = "VETURILO"
    LANDO = "LANDO"
    ETNO = "ETNO"
    KANTO = "KANTO"
    VESTAJXO = "VESTAJXO"
    TITOLO = "TITOLO"
    REGANTO = "REGANTO"
    RIVERO = "RIVERO"
    ARTO = "ARTO"
    ERAO = "ERAO"
    PROVINCO = "PROVINCO"
    MUZIKO = "MUZIKO"
    PERSONO = "PERSONO"
    SXTATO = "SXTATO"
    MAMULO = "MAMULO"
    FISXO = "FISXO"
    MEZURUNUO = "MEZURUNUO"
    FUNGO = "FUNGO"
    KURACARTO = "KURACARTO"
    ARMILO = "ARMILO"
    ALGO = "ALGO"
    KOELENTERO = "KOELENTERO"
    NUKSO = "NUKSO"
    MONTO = "MONTO"
    GEOGRAFIO = "GEOGRAFIO"
    TEHXNOLOGIO = "TEHXNOLOGIO"
    MONATO = "MONATO"
    ARKITEKTURO = "ARKITEKTURO"
    INSULARO = "INSULARO"
    METIO = "METIO"
    ASTRONOMIO = "ASTRONOMIO"
    KREDO = "KREDO"
    MOLUSKO = "MOLUSKO"
    REPTILIO = "REPTILIO"
    TRINKAJXO = "TRINKAJXO"
    ANIMALO = "ANIMALO"
    INSEKTO = "INSEKTO"
    FRUKTO = "FRUKTO"
    ARBUSTO = "ARBUSTO"
    ARAKNIDO = "ARAKNIDO"
    AVIADILO = "AVIADILO"
    SPORTO = "SPORTO"
    ELEMENTO = "ELEMENTO"
    ALOJO = "ALOJO"
    RELIGIA_PERSONO = "RELPERSONO"
    RELIGIA_PROFESIO = "RELPROFESIO"
    KEMIAJXO = "KEMIAJXO"
    FILOZOFIO = "FILOZOFIO"
    SXTOFO = "SXTOFO"
    POSTENO = "POSTENO"
    PARENCO = "PARENCO"
    KONSTRUAJXO = "KONSTRUAJXO"
    CEREALO = "CEREALO"
    DANCO = "DANCO"
    TAGO = "TAGO"
    POEMO = "POEMO"
    SXIPO = "SXIPO"
    LUDILO = "LUDILO"
    POEZIO = "POEZIO"
    CXAMBRO = "CXAMBRO"
    MANGXAJXO = "MANGXAJXO"
    ASTRO = "ASTRO"
    ILO = "ILO"
    MIKROBO = "MIKROBO"
    LUDO = "LUDO"
    DEZERTO = "DEZERTO"
    MITA_BESTO = "MITBESTO"
    DRAMO = "DRAMO"
    VETERO = "VETERO"
    ARBO = "ARBO"
    SCIENCO = "SCIENCO"
    ORNAMAJXO = "ORNAMAJXO"
    VERMO = "VERMO"
    MINERALO = "MINERALO"
    SPICO = "SPICO"
    MASXINO = "MASXINO"
    KONTINENTO = "KONTINENTO"
    PERIODO = "PERIODO"
    LINGVO = "LINGVO"
    MEZURILO = "MEZURILO"
    MARO = "MARO"
    MONTARO = "MONTARO"
    MITA_PERSONO = "MITPERSONO"
    FONETIKO = "FONETIKO"
    MONERO = "MONERO"
    MATEMATIKO = "MATEMATIKO"
    RANGO = "RANGO"
    ANATOMIO = "ANATOMIO"
    STUDO = "STUDO"
    OPTIKO = "OPTIKO"
    AMFIBIO = "AMFIBIO"
    MALSANO = "MALSANO"
    MUZIKILO = "MUZIKILO"
    GEOMETRIO = "GEOMETRIO"

    @classmethod
    def from_code(cls, code: str) -> "Meaning":
        try:
            return cls(code)
        except ValueError:
            return cls.NEKONATA


PERSON_MEANINGS = frozenset({
    Meaning.PERSONO,
    Meaning.PARENCO,
    Meaning.ETNO,
    Meaning.PROFESIO,
    Meaning.RANGO,
    Meaning.REGANTO,
    Meaning.TITOLO,
    Meaning.POSTENO,
    Meaning.RELIGIA_POSTENO,
    Meaning.RELIGIA_PERSONO,
    Meaning.RELIGIA_PROFESIO,
    Meaning.MITA_PERSONO,
})

ANIMAL_MEANINGS = frozenset({
    Meaning.ANIMALO,
    Meaning.MAMULO,
    Meaning.BIRDO,
    Meaning.FISXO,
    Meaning.REPTILIO,
    Meaning.MITA_BESTO,
    Meaning.INSEKTO,
    Meaning.ARAKNIDO,
    Meaning.MOLUSKO,
    Meaning.AMFIBIO,
})


def is_person(meaning: Meaning) -> bool:
    """True if the meaning represents a person (kinship, ethnicity, profession...)."""
    return meaning in PERSON_MEANINGS


def is_animal(meaning: Meaning) -> bool:
    """True if the meaning represents an animal."""
    return meaning in ANIMAL_MEANINGS


class Transitivity(Enum):
    """Transitivity - property of verbs."""
    TRANSITIVE = "T"     # vidis
    INTRANSITIVE = "N"   # dormas
    BOTH = "TN"          # ludas

    @classmethod
    def from_code(cls, code: str) -> "Transitivity":
        if code == "T":
            return cls.TRANSITIVE
        if code == "N":
            return cls.INTRANSITIVE
        return cls.BOTH


class Synthesis(Enum):
    """How a morpheme combines with others (limigo)."""
    SUFFIX = "S"          # acts like a suffix
    PREFIX = "P"          # acts like a prefix
    PARTICIPLE = "PRT"    # acts like a participle ending (-int, -it, etc.)
    LIMITED = "LM"        # limited combinability
    UNLIMITED = "NLM"
    NO = "NO"             # does not combine

    @classmethod
    def from_code(cls, code: str) -> "Synthesis":
        try:
            return cls(code)
        except ValueError:
            return cls.NO


class Flag(Enum):
    """Distinguishes the types of dictionary entries."""
    SIMPLE = "R"       # a simple root, eg. 'muzik'
    COMPOUND = "K"     # a compound word, eg. 'muzik.il'
    EXCLUDE = "X"      # excluded from the dictionary, kept for reference
    SEPARATOR = "-"    # a separator between morphemes, eg. 'fingr.o.montr.i'

    @classmethod
    def from_code(cls, code: str) -> "Flag":
        if code == "R":
            return cls.SIMPLE
        if code == "K":
            return cls.COMPOUND
        return cls.EXCLUDE


# Separator vowels and the part of speech each one carries.
SEPARATORS = {
    "o": PartOfSpeech.SUBSTANTIVE,
    "a": PartOfSpeech.ADJECTIVE,
    "e": PartOfSpeech.ADVERB,
}

FIELD_COUNT = 9
EXCLUDED = "X"   # flag of rows left out of the dictionary


@dataclass
class MorphemeEntry:
    """
    A dictionary entry for one morpheme.

    A typical row of dictionary data is:
        divid   VERBO   N   T   N   KF  NLM 1   R

    The columns are: morpheme, part of speech, meaning, transitivity,
    without-ending (SF = sen finaĵo), with-ending (KF = kun finaĵo),
    synthesis, rarity (0 common .. 4 rare) and flag.
    """
    word: str
    part_of_speech: PartOfSpeech = PartOfSpeech.SUBSTANTIVE
    meaning: Meaning = Meaning.NEKONATA
    transitivity: Transitivity = Transitivity.TRANSITIVE
    without_ending: bool = False
    with_ending: bool = False
    synthesis: Synthesis = Synthesis.NO
    rarity: int = 0
    flag: Flag = Flag.SIMPLE
    capitalization: Capitalization = Capitalization.MINISCULE

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def is_separator(self) -> bool:
        return self.flag == Flag.SEPARATOR

    @classmethod
    def from_fields(cls, fields: List[str]) -> Optional["MorphemeEntry"]:
        """
        Build an entry from the columns of one dictionary row.

        Args:
            fields: At least 9 whitespace-separated columns.

        Returns:
            The entry, or None for single letters and rows flagged X. Rows
            with any other unknown flag are kept, flagged EXCLUDE.

        Raises:
            ValueError: If there are too few fields or the rarity is not a number.
        """
        if len(fields) < FIELD_COUNT:
            raise ValueError(f"Expected {FIELD_COUNT} fields, got {len(fields)}")

        word = x_to_accent(fields[0])
        if len(word) == 1:
            return None
        if fields[8] == EXCLUDED:
            return None
        flag = Flag.from_code(fields[8])

        return cls(
            word=word,
            part_of_speech=PartOfSpeech.from_code(fields[1]),
            meaning=Meaning.from_code(fields[2]),
            transitivity=Transitivity.from_code(fields[3]),
            without_ending=fields[4] == "SF",
            with_ending=fields[5] == "KF",
            synthesis=Synthesis.from_code(fields[6]),
            rarity=int(fields[7]),
            flag=flag,
            capitalization=Capitalization.of(word),
        )

    @classmethod
    def empty(cls) -> "MorphemeEntry":
        """An empty placeholder for an unused slot in the morpheme list."""
        return cls(word="")

    @classmethod
    def new_separator(cls, separator: str) -> Optional["MorphemeEntry"]:
        """
        Create an entry for a separator, that is, a grammatical ending placed
        between morphemes to aid pronunciation. In 'fingr.o.montr.i' the 'o'
        is a separator. A valid separator is 'o', 'a' or 'e'.
        """
        pos = SEPARATORS.get(separator)
        if pos is None:
            return None
        return cls(
            word=separator,
            part_of_speech=pos,
            transitivity=Transitivity.INTRANSITIVE,
            rarity=4,
            flag=Flag.SEPARATOR,
        )

    def copy(self) -> "MorphemeEntry":
        return dataclasses.replace(self)
