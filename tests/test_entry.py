"""
Tests for dictionary entries and their field codes.
"""
import unittest

from analizilo.entry import (
    Capitalization,
    Flag,
    Meaning,
    MorphemeEntry,
    PartOfSpeech,
    Synthesis,
    Transitivity,
    is_animal,
    is_person,
)


class TestPartOfSpeech(unittest.TestCase):

    def test_codes(self):
        self.assertEqual(PartOfSpeech.from_code("VERBO"), PartOfSpeech.VERB)
        self.assertEqual(PartOfSpeech.from_code("TEHXPREFIKSO"), PartOfSpeech.TECH_PREFIX)
        self.assertEqual(PartOfSpeech.from_code("MALLONGIGO"), PartOfSpeech.ABBREVIATION)

    def test_unknown_code_is_substantive(self):
        self.assertEqual(PartOfSpeech.from_code("???"), PartOfSpeech.SUBSTANTIVE)

    def test_rank_order(self):
        """Substantive, verb and adjective rank lowest; letter highest."""
        self.assertEqual(PartOfSpeech.SUBSTANTIVE.rank, 0)
        self.assertEqual(PartOfSpeech.ADJECTIVE.rank, 3)
        self.assertEqual(PartOfSpeech.LETTER.rank, 18)
        self.assertTrue(PartOfSpeech.VERB.at_most(PartOfSpeech.ADJECTIVE))
        self.assertFalse(PartOfSpeech.NUMBER.at_most(PartOfSpeech.ADJECTIVE))
        self.assertTrue(PartOfSpeech.PREPOSITION.above(PartOfSpeech.ADVERB))

    def test_is_verbal(self):
        self.assertTrue(PartOfSpeech.VERB.is_verbal())
        self.assertTrue(PartOfSpeech.SUBSTANTIVE_VERB.is_verbal())
        self.assertFalse(PartOfSpeech.SUBSTANTIVE.is_verbal())


class TestCodes(unittest.TestCase):

    def test_meaning_codes(self):
        self.assertEqual(Meaning.from_code("PARENCO"), Meaning.PARENCO)
        self.assertEqual(Meaning.from_code("PSEUXDOSCI"), Meaning.PSEUXDOSCIENCO)
        self.assertEqual(Meaning.from_code("MITBESTO"), Meaning.MITA_BESTO)
        self.assertEqual(Meaning.from_code("N"), Meaning.NEKONATA)
        self.assertEqual(Meaning.from_code("NENIO"), Meaning.NEKONATA)

    def test_person_and_animal_meanings(self):
        self.assertTrue(is_person(Meaning.PARENCO))
        self.assertTrue(is_person(Meaning.ETNO))
        self.assertTrue(is_person(Meaning.MITA_PERSONO))
        self.assertFalse(is_person(Meaning.MAMULO))
        self.assertTrue(is_animal(Meaning.MAMULO))
        self.assertTrue(is_animal(Meaning.MITA_BESTO))
        self.assertFalse(is_animal(Meaning.URBO))

    def test_transitivity_codes(self):
        self.assertEqual(Transitivity.from_code("T"), Transitivity.TRANSITIVE)
        self.assertEqual(Transitivity.from_code("N"), Transitivity.INTRANSITIVE)
        self.assertEqual(Transitivity.from_code("TN"), Transitivity.BOTH)
        self.assertEqual(Transitivity.from_code("?"), Transitivity.BOTH)

    def test_synthesis_codes(self):
        self.assertEqual(Synthesis.from_code("S"), Synthesis.SUFFIX)
        self.assertEqual(Synthesis.from_code("P"), Synthesis.PREFIX)
        self.assertEqual(Synthesis.from_code("PRT"), Synthesis.PARTICIPLE)
        self.assertEqual(Synthesis.from_code("LM"), Synthesis.LIMITED)
        self.assertEqual(Synthesis.from_code("NLM"), Synthesis.UNLIMITED)
        self.assertEqual(Synthesis.from_code("xyz"), Synthesis.NO)

    def test_flag_codes(self):
        self.assertEqual(Flag.from_code("R"), Flag.SIMPLE)
        self.assertEqual(Flag.from_code("K"), Flag.COMPOUND)
        self.assertEqual(Flag.from_code("X"), Flag.EXCLUDE)
        self.assertEqual(Flag.from_code("?"), Flag.EXCLUDE)

    def test_capitalization(self):
        self.assertEqual(Capitalization.of("butero"), Capitalization.MINISCULE)
        self.assertEqual(Capitalization.of("Kanado"), Capitalization.MAJUSCULE)
        self.assertEqual(Capitalization.of("UEA"), Capitalization.ALL_CAPS)


class TestMorphemeEntry(unittest.TestCase):

    def test_from_fields(self):
        """Tests parsing a typical dictionary row."""
        entry = MorphemeEntry.from_fields("divid VERBO N T N KF NLM 1 R".split())
        self.assertEqual(entry.word, "divid")
        self.assertEqual(entry.part_of_speech, PartOfSpeech.VERB)
        self.assertEqual(entry.meaning, Meaning.NEKONATA)
        self.assertEqual(entry.transitivity, Transitivity.TRANSITIVE)
        self.assertFalse(entry.without_ending)
        self.assertTrue(entry.with_ending)
        self.assertEqual(entry.synthesis, Synthesis.UNLIMITED)
        self.assertEqual(entry.rarity, 1)
        self.assertEqual(entry.flag, Flag.SIMPLE)
        self.assertEqual(entry.length, 5)

    def test_from_fields_restores_accents(self):
        entry = MorphemeEntry.from_fields("cxiu.tag ADVERBO TAGO N N KF NLM 1 K".split())
        self.assertEqual(entry.word, "ĉiu.tag")
        self.assertEqual(entry.flag, Flag.COMPOUND)

    def test_without_ending(self):
        entry = MorphemeEntry.from_fields("dum PREPOZICIO N N SF N P 0 R".split())
        self.assertTrue(entry.without_ending)
        self.assertFalse(entry.with_ending)

    def test_single_letters_and_excluded_rows_are_skipped(self):
        self.assertIsNone(MorphemeEntry.from_fields("b LITERO N N SF N NO 0 R".split()))
        self.assertIsNone(MorphemeEntry.from_fields("laut ADJ N N N KF NLM 0 X".split()))

    def test_unknown_flag_is_kept_as_excluded(self):
        entry = MorphemeEntry.from_fields("hund SUBST ANIMALO N N KF NLM 0 Q".split())
        self.assertIsNotNone(entry)
        self.assertEqual(entry.flag, Flag.EXCLUDE)

    def test_too_few_fields(self):
        with self.assertRaises(ValueError):
            MorphemeEntry.from_fields("hund SUBST ANIMALO".split())

    def test_bad_rarity(self):
        with self.assertRaises(ValueError):
            MorphemeEntry.from_fields("hund SUBST ANIMALO N N KF NLM ofta R".split())

    def test_new_separator(self):
        separator = MorphemeEntry.new_separator("a")
        self.assertEqual(separator.word, "a")
        self.assertEqual(separator.part_of_speech, PartOfSpeech.ADJECTIVE)
        self.assertEqual(separator.transitivity, Transitivity.INTRANSITIVE)
        self.assertEqual(separator.rarity, 4)
        self.assertTrue(separator.is_separator)
        self.assertEqual(MorphemeEntry.new_separator("o").part_of_speech, PartOfSpeech.SUBSTANTIVE)
        self.assertEqual(MorphemeEntry.new_separator("e").part_of_speech, PartOfSpeech.ADVERB)
        self.assertIsNone(MorphemeEntry.new_separator("i"))

    def test_copy_is_independent(self):
        entry = MorphemeEntry.from_fields("et SUFIKSO N N N KF S 0 R".split())
        copy = entry.copy()
        copy.part_of_speech = PartOfSpeech.VERB
        self.assertEqual(entry.part_of_speech, PartOfSpeech.SUFFIX)

    def test_empty(self):
        entry = MorphemeEntry.empty()
        self.assertEqual(entry.word, "")
        self.assertFalse(entry.is_separator)


if __name__ == '__main__':
    unittest.main()
