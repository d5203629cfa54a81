"""
Synthesis rules for suffixes.

A compound word such as 'frenez-ul-ej-(o)' consists of three morphemes
(excluding the grammatical ending). Whether a suffix (-ul, -ej) is valid
depends on the morphemes which come before it, so suffixes are checked the
moment they are placed in the morpheme list.

Some rules modify the suffix's own entry in the morpheme list. For example,
-estr turns whatever it is attached to into a person, so that a following
-in ('urb.estr.in.o') sees a person before it.

Every rule takes the index of the suffix and the morpheme list, and returns
True if the synthesis is valid.
"""
from typing import Callable, Dict

from analizilo.entry import Meaning, PartOfSpeech, Transitivity, is_animal, is_person
from analizilo.morphemes import MorphemeList

POS = PartOfSpeech


def check_acx(index: int, morphemes: MorphemeList) -> bool:
    """
    -aĉ: bad quality, unpleasant, ugly (hund-aĉ-o, kri-aĉ-is, laŭt-aĉ-a).

    As the first morpheme (aĉ-ul-o) it is treated as an adjective. Otherwise
    it follows a substantive, verb, adjective or participle, and does not
    change the character of the word: if 'kri-as' is intransitive, so is
    'kri-aĉ-as'. The previous morpheme's part of speech, meaning and
    transitivity are transferred to the aĉ entry.
    """
    current = morphemes.get_mut(index)
    if index == 0:
        current.part_of_speech = POS.ADJECTIVE
        return True

    previous = morphemes.get(index - 1)
    pos = previous.part_of_speech
    # substantive, verb or adjective
    if pos.at_most(POS.ADJECTIVE) or pos == POS.PARTICIPLE:
        current.part_of_speech = pos
        current.meaning = previous.meaning
        current.transitivity = previous.transitivity
        return True
    return False


def check_ad(index: int, morphemes: MorphemeList) -> bool:
    """
    -ad: continuous or repeated action (martel-ad-o, kur-ad-is).

    Attached to substantives and verbs. The suffix becomes a verb with the
    transitivity of the morpheme it follows.
    """
    if index == 0:
        return False
    previous = morphemes.get(index - 1)
    # substantive, substantive-verb or verb
    if previous.part_of_speech.at_most(POS.VERB):
        current = morphemes.get_mut(index)
        current.part_of_speech = POS.VERB
        current.transitivity = previous.transitivity
        return True
    return False


def check_ajx(index: int, morphemes: MorphemeList) -> bool:
    """-aĵ: a concrete thing (blank-aĵ-o, krom-aĵ-o, perd-it-aĵ-o, bov-aĵ-o)."""
    if index == 0:
        return True
    previous = morphemes.get(index - 1)
    pos = previous.part_of_speech
    if pos.at_most(POS.ADJECTIVE):
        return True
    if pos in (POS.PREPOSITION, POS.PARTICIPLE):
        return True
    return is_animal(previous.meaning)


def check_an(index: int, morphemes: MorphemeList) -> bool:
    """-an: member of a group. Attached to substantives which are not persons."""
    if index == 0:
        return True
    previous = morphemes.get(index - 1)
    # substantive or substantive-verb
    if previous.part_of_speech.at_most(POS.SUBSTANTIVE_VERB):
        return not is_person(previous.meaning)
    return False


def check_ar(index: int, morphemes: MorphemeList) -> bool:
    """-ar: a group (hom-ar-o, aŭskult-ant-ar-o)."""
    if index == 0:
        return True
    pos = morphemes.get(index - 1).part_of_speech
    return pos.at_most(POS.SUBSTANTIVE_VERB) or pos == POS.PARTICIPLE


def check_ebl(index: int, morphemes: MorphemeList) -> bool:
    """-ebl: capable of being verb-ed. Attached to transitive verbs."""
    if index == 0:
        return True
    previous = morphemes.get(index - 1)
    return (previous.part_of_speech.is_verbal() and
            previous.transitivity == Transitivity.TRANSITIVE)


def check_ec(index: int, morphemes: MorphemeList) -> bool:
    """-ec: quality or state (alt-ec-o). The suffix becomes a substantive."""
    if index == 0:
        return False
    pos = morphemes.get(index - 1).part_of_speech
    if (pos.at_most(POS.SUBSTANTIVE_VERB) or
            pos in (POS.ADJECTIVE, POS.NUMBER, POS.PARTICIPLE)):
        morphemes.get_mut(index).part_of_speech = POS.SUBSTANTIVE
        return True
    return False


def check_eg_et(index: int, morphemes: MorphemeList) -> bool:
    """
    -eg and -et augment or diminish a word (laŭt-eg-a, ruĝ-et-a, hund-et-o).
    They keep the part of speech, meaning and transitivity of the previous
    morpheme, so these are transferred.
    """
    if index == 0:
        return False
    previous = morphemes.get(index - 1)
    pos = previous.part_of_speech
    # substantive, verb or adjective
    if pos.at_most(POS.ADJECTIVE):
        current = morphemes.get_mut(index)
        current.part_of_speech = pos
        current.meaning = previous.meaning
        current.transitivity = previous.transitivity
        return True
    return False


def check_ej(index: int, morphemes: MorphemeList) -> bool:
    """-ej: a place (manĝ-ej-o). Not attached to something which is already a place."""
    if index == 0:
        return False
    previous = morphemes.get(index - 1)
    if previous.part_of_speech.at_most(POS.ADJECTIVE):
        return previous.meaning != Meaning.LOKO
    return False


def check_em(index: int, morphemes: MorphemeList) -> bool:
    """-em: tendency (dorm-em-a)."""
    if index == 0:
        return False
    return morphemes.get(index - 1).part_of_speech.at_most(POS.ADJECTIVE)


def check_end_ind(index: int, morphemes: MorphemeList) -> bool:
    """
    -ind: worthy to be verb-ed (vid-ind-a).
    -end: required to be verb-ed (pag-end-a).
    Normally attached to transitive verbs only.
    """
    if index == 0:
        return False
    return morphemes.get(index - 1).transitivity == Transitivity.TRANSITIVE


def check_er(index: int, morphemes: MorphemeList) -> bool:
    """-er: one part of a whole (mon-er-o, a coin)."""
    if index == 0:
        return False
    previous = morphemes.get(index - 1)
    if previous.word == "sup":   # 'sup.er' is a mistake for 'super'
        return False
    return previous.part_of_speech.at_most(POS.SUBSTANTIVE_VERB)


def check_ik_ing_ism(index: int, morphemes: MorphemeList) -> bool:
    """
    -ik: a science or art (komput-ik-o).
    -ing: a holder (kandel-ing-o).
    -ism: a doctrine or custom (alkohol-ism-o).
    Normally attached to substantives.
    """
    if index == 0:
        return False
    return morphemes.get(index - 1).part_of_speech.at_most(POS.SUBSTANTIVE_VERB)


def check_estr(index: int, morphemes: MorphemeList) -> bool:
    """
    -estr: a leader (urb-estr-o, a mayor). Attached to substantives.
    The suffix becomes a substantive meaning 'person'.
    """
    if index > 0:
        pos = morphemes.get(index - 1).part_of_speech
        if not pos.at_most(POS.SUBSTANTIVE_VERB):
            return False
    current = morphemes.get_mut(index)
    current.part_of_speech = POS.SUBSTANTIVE
    current.meaning = Meaning.PERSONO
    return True


def check_id(index: int, morphemes: MorphemeList) -> bool:
    """-id: offspring of (kat-id-o, a kitten)."""
    if index == 0:
        return True
    meaning = morphemes.get(index - 1).meaning
    return meaning == Meaning.ETNO or is_animal(meaning)


def check_ig_igx(index: int, morphemes: MorphemeList) -> bool:
    """
    -ig: causative (star-ig-is, made to stand).
    -iĝ: change of state (griz-iĝ-is, became grey).
    """
    if index == 0:
        return False
    pos = morphemes.get(index - 1).part_of_speech
    # anything from substantive to adverb
    return pos.at_most(POS.ADVERB) or pos in (POS.PREPOSITION, POS.PREFIX)


def check_il(index: int, morphemes: MorphemeList) -> bool:
    """-il: a tool (ŝraŭb-il-o, a screwdriver)."""
    if index == 0:
        return True
    previous = morphemes.get(index - 1)
    return previous.part_of_speech.is_verbal() and previous.meaning != Meaning.ILO


def check_in(index: int, morphemes: MorphemeList) -> bool:
    """-in: female (patr-in-o, mother)."""
    if index == 0:
        return True
    meaning = morphemes.get(index - 1).meaning
    return is_person(meaning) or is_animal(meaning)


def check_ist(index: int, morphemes: MorphemeList) -> bool:
    """-ist: a professional or supporter of a doctrine (Esperant-ist-o)."""
    if index == 0:
        return False
    previous = morphemes.get(index - 1)
    return previous.part_of_speech.at_most(POS.VERB) and not is_person(previous.meaning)


def check_obl_on_op(index: int, morphemes: MorphemeList) -> bool:
    """-obl, -on, -op are attached to numbers (du-obl-e, du-on-o, du-op-o)."""
    if index == 0:
        return False
    return morphemes.get(index - 1).part_of_speech == POS.NUMBER


def check_uj(index: int, morphemes: MorphemeList) -> bool:
    """-uj: a container, fruit tree or country (cindr-uj-o, pom-uj-o, Angl-uj-o)."""
    if index == 0:
        return False
    previous = morphemes.get(index - 1)
    return (previous.part_of_speech.at_most(POS.SUBSTANTIVE_VERB) and
            previous.meaning != Meaning.ARBO)


def check_ul(index: int, morphemes: MorphemeList) -> bool:
    """
    -ul: a person (povr-ul-o). It may follow a participle ending
    ('frap.it.ul.o'), although this may be redundant.
    """
    if index == 0:
        return True
    previous = morphemes.get(index - 1)
    pos = previous.part_of_speech
    if pos == POS.PARTICIPLE:
        return True
    if pos.at_most(POS.ADJECTIVE) and not is_person(previous.meaning):
        return True
    return pos == POS.PREPOSITION


SUFFIX_RULES: Dict[str, Callable[[int, MorphemeList], bool]] = {
    "aĉ": check_acx,
    "ad": check_ad,
    "aĵ": check_ajx,
    "an": check_an,
    "ar": check_ar,
    "ebl": check_ebl,
    "ec": check_ec,
    "eg": check_eg_et,
    "et": check_eg_et,
    "ej": check_ej,
    "em": check_em,
    "end": check_end_ind,
    "ind": check_end_ind,
    "er": check_er,
    "ik": check_ik_ing_ism,
    "ing": check_ik_ing_ism,
    "ism": check_ik_ing_ism,
    "estr": check_estr,
    "id": check_id,
    "ig": check_ig_igx,
    "iĝ": check_ig_igx,
    "il": check_il,
    "in": check_in,
    "ist": check_ist,
    "obl": check_obl_on_op,
    "on": check_obl_on_op,
    "op": check_obl_on_op,
    "uj": check_uj,
    "ul": check_ul,
}


def check_suffix(suffix: str, index: int, morphemes: MorphemeList) -> bool:
    """
    Check the synthesis of a suffix.

    Args:
        suffix: The suffix as a string, eg. 'ul'
        index: Index of the suffix in the morpheme list
        morphemes: The morpheme list

    Returns:
        True for valid synthesis. Unknown suffixes are never valid.
    """
    rule = SUFFIX_RULES.get(suffix)
    if rule is None:
        return False
    return rule(index, morphemes)
