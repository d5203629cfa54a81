"""
Synthesis rules for prefixes, participle endings, morphemes with limited
combinability, and separators. Suffixes are checked in analizilo.suffix.

A compound word such as 'mis-kompren-it-(a)' is scanned once it has been
completely divided into morphemes, because whether a prefix (mis-) is valid
depends on the morphemes which come after it, and whether a participle
ending (-it) is valid depends on the morpheme before it.

None of the rules here modify the morpheme list.
"""
from typing import Callable, Dict, Iterator

from analizilo.entry import (
    Meaning,
    MorphemeEntry,
    PartOfSpeech,
    Synthesis,
    Transitivity,
    is_animal,
    is_person,
)
from analizilo.morphemes import MorphemeList

POS = PartOfSpeech

# Participle endings may be followed only by these suffixes (perd.it.aĵ.o).
AFTER_PARTICIPLE = frozenset({"aĵ", "ul", "in", "ec", "ar"})
# Prepositions which may take a participle ending (antaŭ.it.a).
BEFORE_PARTICIPLE = frozenset({"antaŭ", "anstataŭ", "ĉirkaŭ", "kontraŭ", "super"})
# After sen-, a word which has no verb must end with one of these (sen.hom.ej.o).
SEN_FINAL_SUFFIXES = frozenset({"ul", "aĵ", "ej"})


def _following(index: int, morphemes: MorphemeList) -> Iterator[MorphemeEntry]:
    """The morphemes after index, in order."""
    for n in range(index + 1, morphemes.last_index + 1):
        yield morphemes.get(n)


def _has_follower(index: int, morphemes: MorphemeList) -> bool:
    return morphemes.last_index > index


# -----------------------------------------------------------------------------
# --- Prefixes
# -----------------------------------------------------------------------------

def check_prepositional_prefix(index: int, morphemes: MorphemeList) -> bool:
    """
    Prepositions used as prefixes (PIV 373).
    Eg. 'kun-ir-is' (went together), 'antaŭ-dir-is' (said before).
    """
    ending = morphemes.type_of_ending
    if _has_follower(index, morphemes) and ending in (POS.ADJECTIVE, POS.ADVERB):
        return True
    return any(m.part_of_speech.is_verbal() for m in _following(index, morphemes))


def check_adverbial_prefix(index: int, morphemes: MorphemeList) -> bool:
    """
    Adverbial prefixes modify a verb root.
    Eg. 'for-ir-is' (went away), 'mis-dir-is' (misspoke).
    """
    if _has_follower(index, morphemes) and morphemes.type_of_ending == POS.VERB:
        return True
    return any(m.part_of_speech.is_verbal() for m in _following(index, morphemes))


def check_first(index: int, morphemes: MorphemeList) -> bool:
    """A long prefix, such as 'antaŭ' or 'inter', is valid as the first morpheme."""
    return index == 0


def check_bo(index: int, morphemes: MorphemeList) -> bool:
    """bo-: in-law (bo-patr-o, father-in-law)."""
    if index != 0 or not _has_follower(index, morphemes):
        return False
    return morphemes.get(index + 1).meaning == Meaning.PARENCO


def check_cis(index: int, morphemes: MorphemeList) -> bool:
    """cis-: on the near side. Rare; used for mountains and rivers (cis-alp-a)."""
    if index != 0 or not _has_follower(index, morphemes):
        return False
    return morphemes.get(index + 1).meaning in (Meaning.RIVERO, Meaning.MONTO, Meaning.MONTARO)


def check_cxi(index: int, morphemes: MorphemeList) -> bool:
    """ĉi-: this here (ĉi-vesper-e). Valid only for adjectives and adverbs."""
    return index == 0 and morphemes.type_of_ending in (POS.ADJECTIVE, POS.ADVERB)


def check_eks(index: int, morphemes: MorphemeList) -> bool:
    """eks-: ex- (eks-prezident-o). Valid only for people."""
    if index != 0:
        return False
    return any(is_person(m.meaning) for m in _following(index, morphemes))


def check_ge(index: int, morphemes: MorphemeList) -> bool:
    """ge-: both sexes (ge-student-oj, ge-frat-oj). Valid for people and animals."""
    if index != 0:
        return False
    return any(is_person(m.meaning) or is_animal(m.meaning)
               for m in _following(index, morphemes))


def check_kun(index: int, morphemes: MorphemeList) -> bool:
    """kun-: together with (kun-ir-is, went together)."""
    if index != 0:
        return False
    if check_prepositional_prefix(index, morphemes):
        return True
    return any(m.part_of_speech == POS.SUBSTANTIVE for m in _following(index, morphemes))


def check_mal(index: int, morphemes: MorphemeList) -> bool:
    """mal-: the opposite (mal-feliĉ-a, mal-kompren-as)."""
    if index != 0:
        return False
    ending = morphemes.type_of_ending
    if _has_follower(index, morphemes) and ending in (POS.VERB, POS.ADJECTIVE, POS.ADVERB):
        return True
    return any(m.part_of_speech in (POS.VERB, POS.SUBSTANTIVE_VERB, POS.ADJECTIVE)
               for m in _following(index, morphemes))


def check_ne(index: int, morphemes: MorphemeList) -> bool:
    """ne-: not (ne-far-ebl-a, ne-taŭg-ul-o)."""
    if index != 0:
        return False
    ending = morphemes.type_of_ending
    if _has_follower(index, morphemes) and ending in (POS.ADJECTIVE, POS.ADVERB):
        return True
    for m in _following(index, morphemes):
        if m.part_of_speech in (POS.ADJECTIVE, POS.PARTICIPLE):
            return True
        if m.word in ("ad", "ec"):   # ne.uz.ad.o, ne.far.ad.o
            return True
    return False


def check_po(index: int, morphemes: MorphemeList) -> bool:
    """po-: apiece, at a rate of (po-pec-e)."""
    if index != 0:
        return False
    return _has_follower(index, morphemes) and morphemes.type_of_ending == POS.ADVERB


def check_pra(index: int, morphemes: MorphemeList) -> bool:
    """pra-: primordial, great- (pra-ul-o, pra-nep-o, pra-hom-o)."""
    if index != 0:
        return False
    last = morphemes.last_index
    if last - index > 0:
        if morphemes.get(index + 1).part_of_speech in (POS.SUBSTANTIVE, POS.SUBSTANTIVE_VERB):
            return True
    if last - index > 1:
        if morphemes.get(index + 2).part_of_speech == POS.PARTICIPLE:
            return True
    return False


def check_pseuxdo(index: int, morphemes: MorphemeList) -> bool:
    """pseŭdo-: false (pseŭdo-scienc-o)."""
    if index != 0 or not _has_follower(index, morphemes):
        return False
    return morphemes.get(index + 1).part_of_speech in (
        POS.SUBSTANTIVE, POS.SUBSTANTIVE_VERB, POS.ADJECTIVE)


def check_sen(index: int, morphemes: MorphemeList) -> bool:
    """sen-: without (sen-interes-a, sen-hom-ej-o)."""
    if index != 0:
        return False
    if check_prepositional_prefix(index, morphemes):
        return True
    return morphemes.get(morphemes.last_index).word in SEN_FINAL_SUFFIXES


def check_sin(index: int, morphemes: MorphemeList) -> bool:
    """sin-: self. Reflexive, so only for transitive verbs (sin-kritik-em-a)."""
    if index != 0:
        return False
    return any(m.transitivity == Transitivity.TRANSITIVE for m in _following(index, morphemes))


def check_sub_super_sur(index: int, morphemes: MorphemeList) -> bool:
    """sub- (under), super- (above), sur- (on): sub-mar-a, sur-tabl-e."""
    if check_prepositional_prefix(index, morphemes):
        return True
    ending = morphemes.type_of_ending
    return (_has_follower(index, morphemes) and
            ending in (POS.SUBSTANTIVE, POS.SUBSTANTIVE_VERB))


PREFIX_RULES: Dict[str, Callable[[int, MorphemeList], bool]] = {
    "al": check_prepositional_prefix,
    "anstataŭ": check_first,
    "antaŭ": check_first,
    "apud": check_prepositional_prefix,
    "bo": check_bo,
    "cis": check_cis,
    "ĉe": check_prepositional_prefix,
    "ĉi": check_cxi,
    "ĉirkaŭ": check_first,
    "de": check_prepositional_prefix,
    "dis": check_adverbial_prefix,
    "dum": check_prepositional_prefix,
    "ek": check_adverbial_prefix,
    "eks": check_eks,
    "ekster": check_first,
    "el": check_prepositional_prefix,
    "en": check_prepositional_prefix,
    "for": check_adverbial_prefix,
    "ge": check_ge,
    "ĝis": check_prepositional_prefix,
    "inter": check_first,
    "kontraŭ": check_first,
    "krom": check_first,
    "kun": check_kun,
    "laŭ": check_prepositional_prefix,
    "mal": check_mal,
    "mis": check_adverbial_prefix,
    "ne": check_ne,
    "per": check_prepositional_prefix,
    "pli": check_adverbial_prefix,
    "po": check_po,
    "por": check_prepositional_prefix,
    "post": check_prepositional_prefix,
    "pra": check_pra,
    "preter": check_prepositional_prefix,
    "pri": check_prepositional_prefix,
    "pro": check_prepositional_prefix,
    "pseŭdo": check_pseuxdo,
    "re": check_adverbial_prefix,
    "retro": check_first,
    "sen": check_sen,
    "sin": check_sin,
    "sub": check_sub_super_sur,
    "super": check_sub_super_sur,
    "sur": check_sub_super_sur,
    "tra": check_prepositional_prefix,
    "trans": check_prepositional_prefix,
}


def check_prefix(prefix: str, index: int, morphemes: MorphemeList) -> bool:
    """
    Check the synthesis of a prefix.

    Technical prefixes such as 'hiper' and 'mega' are valid only at the
    front of a word. Other prefixes are checked by their own rule.

    Args:
        prefix: The prefix as a string
        index: Index of the prefix in the morpheme list
        morphemes: The morpheme list

    Returns:
        True for valid synthesis, False otherwise
    """
    if morphemes.get(index).part_of_speech == POS.TECH_PREFIX:
        return index == 0
    rule = PREFIX_RULES.get(prefix)
    if rule is None:
        return False
    return rule(index, morphemes)


# -----------------------------------------------------------------------------
# --- Participles, limited morphemes and separators
# -----------------------------------------------------------------------------

def check_participle(index: int, morphemes: MorphemeList) -> bool:
    """
    Check participle endings, eg. 'naĝ-ant-a' (swimming), 'forges-it-a' (forgotten).

    Passive endings (-at, -it, -ot) attach only to transitive verbs. A
    participle is not necessarily the last morpheme: 'forges.it.aĵ.o'.
    """
    if index == 0:
        return False

    participle = morphemes.get(index)
    previous = morphemes.get(index - 1)

    if previous.part_of_speech.is_verbal():
        if len(participle.word) == 2 and previous.transitivity != Transitivity.TRANSITIVE:
            return False
        if _has_follower(index, morphemes):
            return morphemes.get(index + 1).word in AFTER_PARTICIPLE
        return True

    return previous.word in BEFORE_PARTICIPLE


def _limited_neighbours(index: int, morphemes: MorphemeList,
                        allowed_before, allowed_after) -> bool:
    """Check the words on either side of a limited morpheme against allow-lists."""
    if index > 0 and morphemes.get(index - 1).word not in allowed_before:
        return False
    if _has_follower(index, morphemes) and morphemes.get(index + 1).word not in allowed_after:
        return False
    return True


LIMITED_KINSHIP = (frozenset({"bo", "ge", "pra"}), frozenset({"in"}))
LIMITED_ANIMAL = (frozenset({"vir"}), frozenset({"in", "id", "aĵ", "ov"}))
LIMITED_ETHNIC = (frozenset({"ge"}), frozenset({"in", "id", "land", "stil"}))


def check_limited_synthesis(index: int, morphemes: MorphemeList) -> bool:
    """
    Check a morpheme with limited combinability.

    Short morphemes cause problems for the analysis, so many have limited
    combinability:
    - a limited verb combines only with a prefix before it and a suffix or
      participle ending after it;
    - a limited kinship morpheme (patr, frat) only with bo-, ge-, pra-, -in;
    - a limited animal morpheme only with vir-, -in, -id, -aĵ, -ov;
    - a limited ethnicity morpheme only with ge-, -in, -id, -land, -stil.
    """
    entry = morphemes.get(index)

    if entry.part_of_speech.is_verbal():
        if index > 0 and morphemes.get(index - 1).synthesis != Synthesis.PREFIX:
            return False
        if _has_follower(index, morphemes):
            if morphemes.get(index + 1).synthesis not in (Synthesis.SUFFIX, Synthesis.PARTICIPLE):
                return False
        return True

    if entry.meaning == Meaning.PARENCO:
        return _limited_neighbours(index, morphemes, *LIMITED_KINSHIP)
    if is_animal(entry.meaning):
        return _limited_neighbours(index, morphemes, *LIMITED_ANIMAL)
    if entry.meaning == Meaning.ETNO:
        return _limited_neighbours(index, morphemes, *LIMITED_ETHNIC)
    return True


def valid_separator(index: int, morphemes: MorphemeList) -> bool:
    """
    Check a separator between morphemes (nask-o-tag-o, du-a-foj-e).

    'blu.a.ĉiel.o' is an error: an adjective separator does not join to a
    substantive word.
    """
    if index == 0:
        return False
    pos = morphemes.get(index).part_of_speech
    previous_pos = morphemes.get(index - 1).part_of_speech

    if pos == POS.SUBSTANTIVE:
        # only after a substantive, verb or adjective
        return not previous_pos.above(POS.ADJECTIVE)
    if pos in (POS.ADJECTIVE, POS.ADVERB):
        if morphemes.type_of_ending not in (POS.ADJECTIVE, POS.ADVERB):
            return False
        # only after a nominal, verbal, adjectival, numeral or adverbial morpheme
        return not previous_pos.above(POS.ADVERB)
    return True


def scan_morphemes(morphemes: MorphemeList) -> bool:
    """
    Scan the morpheme list to check prefixes, participles, limited morphemes
    and separators, after the word has been completely divided.

    Args:
        morphemes: The complete morpheme list

    Returns:
        True if every morpheme passes, False otherwise
    """
    if morphemes.count_separators() > 1:   # Only allow one.
        return False

    last = morphemes.last_index
    for index in range(last + 1):
        entry = morphemes.get(index)

        if entry.is_separator and not valid_separator(index, morphemes):
            return False

        if entry.synthesis == Synthesis.PREFIX:
            if index == last:   # A prefix can't be the last morpheme.
                return False
            if not check_prefix(entry.word, index, morphemes):
                return False
        elif entry.synthesis == Synthesis.PARTICIPLE:
            if not check_participle(index, morphemes):
                return False
        elif entry.synthesis == Synthesis.LIMITED:
            if not check_limited_synthesis(index, morphemes):
                return False

    return True
